import os
from typing import Iterable, Tuple

def validate_root_path(path: str) -> Tuple[bool, str]:
    """Validates the root directory to scan"""
    if not path or len(path.strip()) == 0:
        return False, "Root path cannot be empty"

    if not os.path.exists(path):
        return False, f"Root path does not exist: {path}"

    if not os.path.isdir(path):
        return False, f"Root path is not a directory: {path}"

    return True, "Valid root path"

def validate_worker_count(workers: int) -> Tuple[bool, str]:
    """Validates the size of the scanner worker pool"""
    if workers < 1:
        return False, f"Worker count must be at least 1, got {workers}"

    return True, "Valid worker count"

def validate_extensions(extensions: Iterable[str]) -> Tuple[bool, str]:
    """Validates the source file extensions, each one like '.ts'"""
    extensions = list(extensions)
    if not extensions:
        return False, "At least one source extension is required"

    for ext in extensions:
        if not ext.startswith('.') or len(ext) < 2:
            return False, f"Invalid source extension: {ext!r}"

    return True, "Valid extensions"
