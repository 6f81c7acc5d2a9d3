"""
Shared usage table for the concurrent scan
"""

import threading
from typing import Dict, Iterable, List

from models.schemas import Key


class UsageTable:
    """Key name -> "seen at least once", safe to share between worker threads

    Flags only ever go from False to True. Duplicate names coming from
    different definition files share one entry.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._used: Dict[str, bool] = {name: False for name in names}
        self.lock = threading.Lock()

    @classmethod
    def from_keys(cls, keys: Iterable[Key]) -> "UsageTable":
        return cls(key.name for key in keys)

    def unused_names(self) -> List[str]:
        """Snapshot of the names not seen yet"""
        with self.lock:
            return [name for name, used in self._used.items() if not used]

    def mark_used(self, names: Iterable[str]) -> int:
        """Flags names as used, returns how many flipped. Unknown names are ignored."""
        flipped = 0
        with self.lock:
            for name in names:
                if self._used.get(name) is False:
                    self._used[name] = True
                    flipped += 1
        return flipped

    def is_used(self, name: str) -> bool:
        with self.lock:
            return self._used.get(name, False)

    @property
    def used_count(self) -> int:
        with self.lock:
            return sum(1 for used in self._used.values() if used)

    def __len__(self) -> int:
        return len(self._used)

    def __contains__(self, name: str) -> bool:
        return name in self._used
