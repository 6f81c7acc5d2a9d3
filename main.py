#!/usr/bin/env python3
"""
keyaudit: reports translation keys never referenced in source files.

Walks ROOT for <marker>/master/translation.en.json definition files, then
searches every .ts/.tsx file (except the generated translationImports.ts)
for each key name as a plain substring.

Outputs, written to --output-dir (default: current directory):
- all_keys.json: every collected key with its definition file
- unused_keys.json: keys whose name appears in no source file

Exit codes: 0 on completion, 1 when the tree cannot be walked,
2 on usage errors.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

import structlog

from config.settings import Settings, settings as default_settings
from core.audit_logging import LOG_LEVELS, setup_logging
from core.collector import collect_keys
from core.exceptions import ConfigurationError, TraversalError
from core.report import build_report, format_summary, write_report
from core.scanner import scan_usage
from core.validators import validate_extensions, validate_root_path, validate_worker_count
from core.version import get_full_version_info, get_version
from models.schemas import AuditReport

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_TRAVERSAL_ERROR = 1
EXIT_USAGE_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="keyaudit", description="Find translation keys that no source file references")
    ap.add_argument("root", help="Project root to scan")
    ap.add_argument("--workers", type=int, default=None, help="Scanner threads (default: one per CPU)")
    ap.add_argument("--output-dir", default=".", help="Where to write the JSON reports (default: cwd)")
    ap.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Log level (default: WARNING)")
    ap.add_argument("--json-logs", action="store_true", default=None, help="Emit log lines as JSON")
    ap.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return ap.parse_args(argv)


def run_audit(
    root: str,
    output_dir: str = ".",
    settings: Optional[Settings] = None,
    workers: Optional[int] = None,
) -> AuditReport:
    """
    Collects keys, scans for usages and writes both reports

    Raises:
        TraversalError: the tree could not be walked; nothing is written
        ConfigurationError: invalid worker count
    """
    settings = settings or default_settings
    keys = collect_keys(root, settings)
    table = scan_usage(root, keys, settings, workers=workers)
    report = build_report(keys, table)
    write_report(report, output_dir, settings)
    return report


def _validate(args: argparse.Namespace, settings: Settings) -> None:
    checks = [validate_root_path(args.root), validate_extensions(settings.source_extensions)]
    if args.workers is not None:
        checks.append(validate_worker_count(args.workers))
    for is_valid, message in checks:
        if not is_valid:
            raise ConfigurationError(message)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = default_settings
    setup_logging(args.log_level, args.json_logs)
    logger.debug("audit_started", root=args.root, **get_full_version_info())

    try:
        _validate(args, settings)
        report = run_audit(args.root, args.output_dir, settings, workers=args.workers)
    except ConfigurationError as e:
        logger.error("invalid_configuration", error=str(e))
        return EXIT_USAGE_ERROR
    except TraversalError as e:
        logger.error("traversal_failed", error=str(e))
        return EXIT_TRAVERSAL_ERROR

    print(format_summary(report))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
