import json
from pathlib import Path

import pytest

from config.settings import Settings
from core.audit_logging import setup_logging


@pytest.fixture(autouse=True)
def _debug_logging():
    setup_logging("DEBUG", json_logs=False)
    yield


@pytest.fixture
def audit_settings():
    return Settings(_env_file=None)


class ProjectTree:
    """Builds a throwaway project with translator folders and sources"""

    def __init__(self, root: Path):
        self.root = root

    def definitions(self, package: str, keys: dict, raw: str = None) -> Path:
        path = self.root / package / "translator" / "master" / "translation.en.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(keys), encoding="utf-8")
        return path

    def source(self, relpath: str, content: str) -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "project"
    root.mkdir()
    return ProjectTree(root)
