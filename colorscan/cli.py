from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table

from . import __version__
from .console import RichLogger
from .input_sources import THEME_DEFINITION_FILES, build_exclude_set, parse_exclude_list
from .report import DEFAULT_FORMAT, DEFAULT_OUTPUTS, RENDERERS, ReportWriteError, render, write_report
from .results import ColorReport
from .scanner import DEFAULT_MAX_FILE_MB, ScanConfig, Scanner

DEFAULT_ROOT = "app"


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="colorscan",
        description="Find hardcoded colors (hex, rgb/rgba, hsl/hsla, named) in a source tree.",
    )
    ap.add_argument(
        "root",
        nargs="?",
        default=DEFAULT_ROOT,
        help=f"Directory to scan (default: {DEFAULT_ROOT}).",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument(
        "--format",
        default=DEFAULT_FORMAT,
        help="Report format: text or json (default: text).",
    )
    ap.add_argument(
        "--output",
        default=None,
        help="Report file (default: color-report.txt, or color-report.json for json).",
    )
    ap.add_argument(
        "--exclude",
        default="",
        help="Comma-separated directory or file names to skip, added to the defaults.",
    )
    ap.add_argument(
        "--theme-file",
        action="append",
        default=[],
        help="Additional theme-definition file to skip (repeatable).",
    )
    ap.add_argument(
        "--max-file-mb",
        type=int,
        default=DEFAULT_MAX_FILE_MB,
        help=f"Skip files larger than this many MB (default: {DEFAULT_MAX_FILE_MB}).",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose debug logs")
    return ap


def _resolve_format(raw: str, logger: RichLogger) -> str:
    value = (raw or "").strip().lower()
    if value in RENDERERS:
        return value
    logger.warn(f"Invalid format '{raw}', using '{DEFAULT_FORMAT}'.")
    return DEFAULT_FORMAT


def _print_summary_table(report: ColorReport, console: Console) -> None:
    table = Table(title="Color Types", header_style="bold")
    table.add_column("Type", style="cyan")
    table.add_column("Count", justify="right")
    for category, count in report.color_types().items():
        table.add_row(category, str(count))
    console.print(table)


def run_scan(args: argparse.Namespace, logger: RichLogger) -> int:
    fmt = _resolve_format(args.format, logger)
    output = Path(args.output) if args.output else Path(DEFAULT_OUTPUTS[fmt])
    excludes = build_exclude_set(parse_exclude_list(args.exclude))
    theme_files: List[str] = list(THEME_DEFINITION_FILES) + list(args.theme_file)
    config = ScanConfig(
        excludes=excludes,
        theme_files=tuple(theme_files),
        max_file_mb=args.max_file_mb,
    )

    logger.echo("Searching for hardcoded colors...")
    logger.info(f"Scan root: {args.root}")
    logger.debug(f"Excluding: {', '.join(sorted(excludes))}")

    scanner = Scanner(config, logger)
    try:
        result = scanner.scan_tree(Path(args.root))
    except (FileNotFoundError, NotADirectoryError) as exc:
        logger.error(f"Cannot scan {args.root}: not a directory ({exc})")
        return 2

    report = ColorReport(result.findings)
    stats = result.stats
    logger.debug(
        f"Scanned {stats['files_scanned']} file(s), skipped {stats['files_skipped']}, "
        f"failed {stats['files_failed']}"
    )
    if logger.verbose and report.total_colors:
        _print_summary_table(report, logger.console)

    try:
        write_report(output, render(report, fmt))
    except ReportWriteError as exc:
        logger.error(str(exc))
        return 1

    logger.echo(f"Found {report.total_colors} hardcoded colors in {report.total_files} files.")
    logger.echo(f"Report saved to {output}")
    logger.done(f"Report written to: {output}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logger = RichLogger(verbose=args.verbose)
    return run_scan(args, logger)
