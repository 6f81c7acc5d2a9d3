"""
Usage scan: searches eligible source files for the collected key names

One producer (the directory walk) feeds a queue of paths, a fixed pool of
worker threads drains it. The usage table lock is taken only to snapshot the
remaining candidates and to flag matches, never while a file is being read.
"""

import fnmatch
import os
import queue
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

import structlog

from config.settings import Settings, settings as default_settings
from core.exceptions import ConfigurationError
from core.tree import walk_tree
from core.usage_table import UsageTable
from core.validators import validate_worker_count
from models.schemas import Key

logger = structlog.get_logger(__name__)

# One per worker, closes the queue
_END_OF_WORK = object()


@dataclass
class ScanStats:
    """Per-phase counters, summed over all workers"""
    scanned: int = 0
    unreadable: int = 0
    short_circuited: int = 0

    def merge(self, other: "ScanStats") -> None:
        self.scanned += other.scanned
        self.unreadable += other.unreadable
        self.short_circuited += other.short_circuited

    @property
    def total(self) -> int:
        return self.scanned + self.unreadable + self.short_circuited


def is_eligible_source(filename: str, settings: Settings) -> bool:
    """True for tracked extensions, except the excluded generated file"""
    _, ext = os.path.splitext(filename)
    if ext not in settings.source_extensions:
        return False
    return not fnmatch.fnmatchcase(filename, settings.excluded_filename)


def iter_source_files(root: str, settings: Optional[Settings] = None) -> Iterator[str]:
    """Yields every eligible source file under root"""
    settings = settings or default_settings
    for dirpath, _, filenames in walk_tree(root):
        for filename in filenames:
            if is_eligible_source(filename, settings):
                yield os.path.join(dirpath, filename)


def read_source(path: str) -> str:
    """Whole file content; undecodable bytes become U+FFFD"""
    with open(path, 'rb') as f:
        return f.read().decode('utf-8', errors='replace')


def find_keys_in_text(text: str, candidates: Iterable[str]) -> List[str]:
    """Candidates occurring as a literal, case-sensitive substring of text"""
    return [name for name in candidates if name in text]


def _scan_worker(work: "queue.Queue", table: UsageTable) -> ScanStats:
    stats = ScanStats()
    while True:
        path = work.get()
        try:
            if path is _END_OF_WORK:
                return stats

            candidates = table.unused_names()
            if not candidates:
                stats.short_circuited += 1
                continue

            try:
                text = read_source(path)
            except OSError as e:
                logger.warning("source_file_unreadable", path=path, error=str(e))
                stats.unreadable += 1
                continue

            found = find_keys_in_text(text, candidates)
            if found:
                table.mark_used(found)
            stats.scanned += 1
        finally:
            work.task_done()


def scan_usage(
    root: str,
    keys: Iterable[Key],
    settings: Optional[Settings] = None,
    workers: Optional[int] = None,
) -> UsageTable:
    """
    Flags every key name found in at least one eligible source file

    Args:
        root: Project root to walk
        keys: Collected keys; duplicate names share one flag
        settings: Scan settings, defaults to the global instance
        workers: Pool size, defaults to settings.resolved_workers()

    Returns:
        The final usage table

    Raises:
        ConfigurationError: workers is lower than 1
        TraversalError: the tree could not be walked
    """
    settings = settings or default_settings
    if workers is None:
        workers = settings.resolved_workers()
    is_valid, message = validate_worker_count(workers)
    if not is_valid:
        raise ConfigurationError(message)

    table = UsageTable.from_keys(keys)
    work: "queue.Queue" = queue.Queue()
    enqueued = 0
    stats = ScanStats()

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="keyaudit-scan") as executor:
        futures = [executor.submit(_scan_worker, work, table) for _ in range(workers)]
        try:
            for path in iter_source_files(root, settings):
                work.put(path)
                enqueued += 1
        finally:
            # Workers still drain what was queued, even if the walk failed
            for _ in range(workers):
                work.put(_END_OF_WORK)

        for future in futures:
            stats.merge(future.result())

    logger.info(
        "usage_scan_finished",
        root=root,
        workers=workers,
        files=enqueued,
        scanned=stats.scanned,
        unreadable=stats.unreadable,
        short_circuited=stats.short_circuited,
        keys=len(table),
        used=table.used_count,
    )
    return table
