from __future__ import annotations

from colorscan.models import ColorFinding
from colorscan.results import ColorReport


def _finding(path: str, line: int, value: str = "#fff", category: str = "hex") -> ColorFinding:
    return ColorFinding(path, line, value, f"x = '{value}'", category)


def _report() -> ColorReport:
    return ColorReport(
        [
            _finding("a.js", 9),
            _finding("b.js", 5, "red", "named"),
            _finding("a.js", 2, "rgb(1, 2, 3)", "rgb"),
            _finding("c.js", 1),
            _finding("b.js", 1),
            _finding("c.js", 3, "1px solid red", "embedded-string"),
        ]
    )


def test_totals():
    report = _report()
    assert report.total_colors == 6
    assert report.total_files == 3


def test_color_types_in_first_seen_order():
    assert list(_report().color_types().items()) == [
        ("hex", 3),
        ("named", 1),
        ("rgb", 1),
        ("embedded-string", 1),
    ]


def test_by_file_keeps_discovery_order():
    grouped = _report().by_file()
    assert list(grouped) == ["a.js", "b.js", "c.js"]
    assert [f.line_number for f in grouped["a.js"]] == [9, 2]


def test_files_by_count_is_stable_for_ties():
    report = ColorReport([_finding("a.js", 1), _finding("b.js", 1), _finding("b.js", 2), _finding("c.js", 1)])
    assert report.files_by_count() == ["b.js", "a.js", "c.js"]


def test_sorted_findings_by_line():
    assert [f.line_number for f in _report().sorted_findings("a.js")] == [2, 9]


def test_empty_report():
    report = ColorReport([])
    assert report.summary() == {"totalColors": 0, "totalFiles": 0, "colorTypes": {}}
    assert report.files_by_count() == []
