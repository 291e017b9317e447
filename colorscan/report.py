from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, List

from .results import ColorReport

DEFAULT_FORMAT = "text"
DEFAULT_OUTPUTS = {
    "text": "color-report.txt",
    "json": "color-report.json",
}


class ReportWriteError(OSError):
    pass


def render_text(report: ColorReport) -> str:
    lines: List[str] = ["", "Hardcoded Color Report", "=====================", ""]

    grouped = report.by_file()
    for file_path in report.files_by_count():
        lines.append(f"{file_path} ({len(grouped[file_path])} colors):")
        lines.append("-" * (len(file_path) + 10))
        for finding in report.sorted_findings(file_path):
            lines.append(f"  Line {finding.line_number}: {finding.color_value} ({finding.category})")
            lines.append(f"    {finding.line_context}")
            lines.append("")
        lines.append("")

    lines.extend(
        [
            "Summary",
            "-------",
            f"Total hardcoded colors found: {report.total_colors}",
            f"Files with hardcoded colors: {report.total_files}",
            "",
            "Color types:",
        ]
    )
    for category, count in report.color_types().items():
        lines.append(f"  {category}: {count}")

    return "\n".join(lines) + "\n"


def render_json(report: ColorReport) -> str:
    files = [
        {
            "file": file_path,
            "count": len(findings),
            "colors": [f.to_dict() for f in findings],
        }
        for file_path, findings in report.by_file().items()
    ]
    payload = {"summary": report.summary(), "files": files}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


RENDERERS: Dict[str, Callable[[ColorReport], str]] = {
    "text": render_text,
    "json": render_json,
}


def render(report: ColorReport, fmt: str) -> str:
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(f"Unsupported report format: {fmt}") from None
    return renderer(report)


def write_report(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` through a temporary sibling file.

    Either the complete report replaces ``path`` or ``path`` is left untouched.
    """
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as handle:
            handle.write(content)
        tmp_path.replace(path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ReportWriteError(f"Failed to write report {path}: {e}") from e
