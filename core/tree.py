"""
Directory walking shared by the collection and scan phases
"""

import os
from typing import Iterator, List, Tuple

from core.exceptions import TraversalError


def _raise_traversal_error(error: OSError) -> None:
    raise TraversalError(f"Cannot read directory {error.filename}: {error.strerror or error}") from error


def walk_tree(root: str) -> Iterator[Tuple[str, List[str], List[str]]]:
    """os.walk that fails loudly

    Any directory that cannot be listed, the root included, raises
    TraversalError instead of being silently dropped.
    """
    yield from os.walk(root, onerror=_raise_traversal_error)
