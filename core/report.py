"""
Report output: all_keys.json, unused_keys.json and the summary line
"""

import json
import os
import tempfile
from typing import Dict, List, Optional

import structlog

from config.settings import Settings, settings as default_settings
from core.exceptions import ReportWriteError
from core.usage_table import UsageTable
from models.schemas import AuditReport, Key

logger = structlog.get_logger(__name__)


def build_report(keys: List[Key], table: UsageTable) -> AuditReport:
    """Keeps every key record; unused ones are those whose name never matched"""
    unused = [key for key in keys if not table.is_used(key.name)]
    return AuditReport(all_keys=list(keys), unused_keys=unused)


def serialize_keys(keys: List[Key]) -> str:
    return json.dumps([key.to_report_entry() for key in keys], ensure_ascii=False, indent="\t") + "\n"


def _report_file_mode() -> int:
    """Mode a plain open() would give a new file under the current umask"""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_json_atomic(path: str, content: str) -> None:
    """
    Writes content to path through a temporary sibling and os.replace

    Either the whole file lands or path is left untouched.

    Raises:
        ReportWriteError: the file could not be written
    """
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".keyaudit-", suffix=".tmp", dir=directory)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.chmod(tmp_path, _report_file_mode())
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as e:
        raise ReportWriteError(f"Cannot write {path}: {e}") from e
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)


def write_report(
    report: AuditReport,
    output_dir: str = ".",
    settings: Optional[Settings] = None,
) -> Dict[str, bool]:
    """
    Writes both output files, each one independently of the other

    Returns:
        dict: output path -> whether it was written
    """
    settings = settings or default_settings
    outputs = [
        (os.path.join(output_dir, settings.all_keys_filename), report.all_keys),
        (os.path.join(output_dir, settings.unused_keys_filename), report.unused_keys),
    ]

    results: Dict[str, bool] = {}
    for path, keys in outputs:
        try:
            write_json_atomic(path, serialize_keys(keys))
        except (ReportWriteError, TypeError, ValueError) as e:
            logger.error("report_write_failed", path=path, error=str(e))
            results[path] = False
            continue
        logger.info("report_written", path=path, entries=len(keys))
        results[path] = True
    return results


def format_summary(report: AuditReport) -> str:
    return f"Total keys: {report.total}, unused keys: {report.unused}"
