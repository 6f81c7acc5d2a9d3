import logging

import pytest

import config.settings as settings_module
from config.settings import Settings
from core.audit_logging import setup_logging
from core.validators import validate_extensions, validate_root_path, validate_worker_count


def test_defaults(audit_settings):
    assert audit_settings.marker_dir_name == "translator"
    assert audit_settings.definition_relpath == "master/translation.en.json"
    assert audit_settings.plural_marker == "_plural"
    assert audit_settings.source_extensions == [".ts", ".tsx"]
    assert audit_settings.excluded_filename == "translationImports.ts"
    assert audit_settings.all_keys_filename == "all_keys.json"
    assert audit_settings.unused_keys_filename == "unused_keys.json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KEYAUDIT_MARKER_DIR_NAME", "i18n")
    monkeypatch.setenv("KEYAUDIT_SOURCE_EXTENSIONS", '[".js"]')
    monkeypatch.setenv("KEYAUDIT_WORKERS", "3")

    settings = Settings(_env_file=None)

    assert settings.marker_dir_name == "i18n"
    assert settings.source_extensions == [".js"]
    assert settings.resolved_workers() == 3


def test_auto_workers_uses_cpu_count(monkeypatch, audit_settings):
    monkeypatch.setattr(settings_module.psutil, "cpu_count", lambda: 6)
    assert audit_settings.resolved_workers() == 6

    monkeypatch.setattr(settings_module.psutil, "cpu_count", lambda: None)
    assert audit_settings.resolved_workers() == 1


def test_negative_workers_rejected():
    with pytest.raises(ValueError):
        Settings(_env_file=None, workers=-1)


def test_validate_root_path(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x", encoding="utf-8")

    assert validate_root_path(str(tmp_path))[0] is True
    assert validate_root_path("")[0] is False
    assert validate_root_path(str(tmp_path / "missing"))[0] is False
    assert validate_root_path(str(file_path))[0] is False


def test_validate_worker_count():
    assert validate_worker_count(1) == (True, "Valid worker count")
    assert validate_worker_count(0)[0] is False


def test_validate_extensions():
    assert validate_extensions([".ts"])[0] is True
    assert validate_extensions([])[0] is False
    assert validate_extensions(["ts"])[0] is False
    assert validate_extensions(["."])[0] is False


def test_unknown_log_level_falls_back_with_warning(caplog):
    setup_logging("FOO")

    assert logging.getLogger().level == logging.WARNING
    assert "unknown_log_level" in caplog.text
