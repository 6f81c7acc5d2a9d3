"""
Key collection: finds translation definition files and extracts their keys
"""

import json
import os
from pathlib import Path
from typing import Iterator, List, Optional

import structlog

from config.settings import Settings, settings as default_settings
from core.exceptions import DefinitionFileError
from core.tree import walk_tree
from models.schemas import Key

logger = structlog.get_logger(__name__)


def iter_definition_files(root: str, settings: Optional[Settings] = None) -> Iterator[str]:
    """Yields the definition file path of every marker directory under root"""
    settings = settings or default_settings
    relpath = Path(settings.definition_relpath)

    for dirpath, _, _ in walk_tree(root):
        if os.path.basename(os.path.normpath(dirpath)) != settings.marker_dir_name:
            continue
        candidate = os.path.join(dirpath, *relpath.parts)
        if os.path.isfile(candidate):
            yield candidate


def parse_definition_file(path: str, plural_marker: str) -> List[Key]:
    """
    Parses one definition file into Key records

    Only top-level field names matter, values are ignored. Fields whose name
    contains the plural marker are derived forms of a base key and skipped.

    Raises:
        DefinitionFileError: the file is unreadable, not JSON, or not an object
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise DefinitionFileError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DefinitionFileError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise DefinitionFileError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    return [
        Key(name=name, file_path=path)
        for name in data
        if plural_marker not in name
    ]


def collect_keys(root: str, settings: Optional[Settings] = None) -> List[Key]:
    """
    Collects every translation key defined under root

    Order follows the directory walk. A broken definition file is logged and
    skipped; a directory that cannot be listed raises TraversalError.
    """
    settings = settings or default_settings
    keys: List[Key] = []

    for path in iter_definition_files(root, settings):
        try:
            file_keys = parse_definition_file(path, settings.plural_marker)
        except DefinitionFileError as e:
            logger.warning("definition_file_skipped", path=path, error=str(e))
            continue
        logger.debug("definition_file_loaded", path=path, keys=len(file_keys))
        keys.extend(file_keys)

    logger.info("keys_collected", root=root, keys=len(keys))
    return keys
