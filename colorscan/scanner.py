from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from .classifier import classify_line
from .console import RichLogger
from .input_sources import (
    DEFAULT_EXCLUDES,
    THEME_DEFINITION_FILES,
    is_eligible,
    iter_source_files,
    read_source_text,
)
from .models import ColorFinding

DEFAULT_MAX_FILE_MB = 25


@dataclass(frozen=True)
class ScanConfig:
    excludes: frozenset[str] = frozenset(DEFAULT_EXCLUDES)
    theme_files: Tuple[str, ...] = THEME_DEFINITION_FILES
    max_file_mb: int = DEFAULT_MAX_FILE_MB


@dataclass
class ScanResult:
    root: str
    findings: List[ColorFinding] = field(default_factory=list)
    stats: Dict[str, int] = field(
        default_factory=lambda: {
            "files_seen": 0,
            "files_scanned": 0,
            "files_skipped": 0,
            "files_failed": 0,
            "lines": 0,
        }
    )


def classify_text(text: str, source: str) -> List[ColorFinding]:
    findings: List[ColorFinding] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        findings.extend(classify_line(line.rstrip("\r"), source, line_no))
    return findings


class Scanner:
    def __init__(self, config: ScanConfig, logger: RichLogger):
        self.config = config
        self.logger = logger
        self.max_file_bytes = max(1, config.max_file_mb) * 1024 * 1024

    def is_eligible(self, path: Path, root: Path | None = None) -> bool:
        return is_eligible(path, root, self.config.excludes, self.config.theme_files)

    def scan_file(self, path: Path, findings: List[ColorFinding]) -> Dict[str, int]:
        """Classify every line of ``path`` and append the findings to ``findings``.

        Read failures are logged and reported through the ``failed`` counter;
        they never propagate.
        """
        stats = {"lines": 0, "findings": 0, "skipped": 0, "failed": 0}
        source = str(path)

        try:
            size = path.stat().st_size
            if size > self.max_file_bytes:
                self.logger.warn(f"Skipping too-large file ({size} bytes): {source}")
                stats["skipped"] += 1
                return stats
            text = read_source_text(path)
        except (OSError, UnicodeError) as e:
            self.logger.error(f"Error processing file {source}: {e}")
            stats["failed"] += 1
            return stats

        found = classify_text(text, source)
        stats["lines"] = text.count("\n") + 1
        stats["findings"] = len(found)
        findings.extend(found)
        if found:
            self.logger.debug(f"Hit {source}: {len(found)} color(s)")
        return stats

    def scan_tree(self, root: Path) -> ScanResult:
        result = ScanResult(root=str(root))
        stats = result.stats

        for path in iter_source_files(root, self.config.excludes, self.logger):
            stats["files_seen"] += 1
            if not self.is_eligible(path, root):
                stats["files_skipped"] += 1
                continue
            file_stats = self.scan_file(path, result.findings)
            stats["lines"] += file_stats["lines"]
            stats["files_skipped"] += file_stats["skipped"]
            stats["files_failed"] += file_stats["failed"]
            if not (file_stats["skipped"] or file_stats["failed"]):
                stats["files_scanned"] += 1

        return result
