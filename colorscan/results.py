from __future__ import annotations

from typing import Dict, Iterable, List

from .models import ColorFinding


class ColorReport:
    """Read-only view over the findings of one completed scan."""

    def __init__(self, findings: Iterable[ColorFinding]):
        self.findings: tuple[ColorFinding, ...] = tuple(findings)

    @property
    def total_colors(self) -> int:
        return len(self.findings)

    @property
    def total_files(self) -> int:
        return len({f.file_path for f in self.findings})

    def color_types(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for finding in self.findings:
            counts[finding.category] = counts.get(finding.category, 0) + 1
        return counts

    def by_file(self) -> Dict[str, List[ColorFinding]]:
        grouped: Dict[str, List[ColorFinding]] = {}
        for finding in self.findings:
            grouped.setdefault(finding.file_path, []).append(finding)
        return grouped

    def files_by_count(self) -> List[str]:
        grouped = self.by_file()
        return sorted(grouped, key=lambda path: len(grouped[path]), reverse=True)

    def sorted_findings(self, file_path: str) -> List[ColorFinding]:
        return sorted(
            (f for f in self.findings if f.file_path == file_path),
            key=lambda f: f.line_number,
        )

    def summary(self) -> Dict[str, object]:
        return {
            "totalColors": self.total_colors,
            "totalFiles": self.total_files,
            "colorTypes": self.color_types(),
        }
