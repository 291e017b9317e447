from __future__ import annotations

from colorscan.classifier import classify_line, is_suppressed_quoted_value


def _pairs(findings):
    return [(f.category, f.color_value) for f in findings]


def test_named_property_yields_single_named_finding():
    assert _pairs(classify_line("  color: 'red',", "a.js", 3)) == [("named", "red")]


def test_unknown_name_falls_back_to_unknown():
    assert _pairs(classify_line("  color: 'redish',", "a.js", 1)) == [("unknown", "redish")]
    assert _pairs(classify_line("  backgroundColor: 'skyBlue',", "a.js", 1)) == [("unknown", "skyBlue")]


def test_embedded_string():
    assert _pairs(classify_line("const x = '1px solid red'", "a.js", 1)) == [
        ("embedded-string", "1px solid red")
    ]


def test_theme_reference_yields_nothing():
    assert classify_line("const x = colors.primary", "a.js", 1) == []
    assert classify_line("const y = theme.secondary", "a.js", 1) == []


def test_embedded_string_with_theme_reference_is_suppressed():
    assert classify_line("const x = 'theme.red'", "a.js", 1) == []
    assert classify_line("const x = 'colors.white 1px'", "a.js", 1) == []


def test_quoted_property_suppression():
    assert _pairs(classify_line("color: '#fff'", "a.js", 1)) == [("hex", "#fff")]
    assert _pairs(classify_line("color: 'rgb(1, 2, 3)'", "a.js", 1)) == [("rgb", "rgb(1, 2, 3)")]
    assert classify_line("color: 'theme.primary'", "a.js", 1) == []
    assert classify_line('backgroundColor: "colors.primary"', "a.js", 1) == []


def test_is_suppressed_quoted_value():
    assert is_suppressed_quoted_value("white")
    assert is_suppressed_quoted_value("#abc")
    assert is_suppressed_quoted_value("hsl(0, 0%, 0%)")
    assert is_suppressed_quoted_value("x.colors.y")
    assert not is_suppressed_quoted_value("redish")


def test_several_literals_on_one_line_are_all_reported():
    line = "const g = [#000, rgb(1, 2, 3), rgba(1, 2, 3, 0.5), hsl(1, 2%, 3%), hsla(1, 2%, 3%, 1)]"
    assert [f.category for f in classify_line(line, "a.js", 1)] == ["hex", "rgb", "rgba", "hsl", "hsla"]


def test_overlapping_categories_are_tolerated():
    findings = classify_line("const s = '0 2px 4px rgba(0, 0, 0, 0.5)';", "a.js", 1)
    assert _pairs(findings) == [
        ("rgba", "rgba(0, 0, 0, 0.5)"),
        ("embedded-string", "0 2px 4px rgba(0, 0, 0, 0.5)"),
    ]

    findings = classify_line("borderColor: '1px solid red'", "a.js", 1)
    assert _pairs(findings) == [
        ("embedded-string", "1px solid red"),
        ("unknown", "1px solid red"),
    ]


def test_finding_carries_location_and_trimmed_context():
    finding = classify_line("    color: 'red',   ", "src/a.js", 7)[0]
    assert finding.file_path == "src/a.js"
    assert finding.line_number == 7
    assert finding.line_context == "color: 'red',"


def test_plain_code_yields_nothing():
    assert classify_line("import React from 'react';", "a.js", 1) == []
    assert classify_line("", "a.js", 1) == []


def test_quoted_property_value_stops_at_closing_quote():
    findings = classify_line("color: '', borderColor: '1px solid red'", "a.js", 1)
    assert _pairs(findings) == [
        ("embedded-string", "1px solid red"),
        ("unknown", "1px solid red"),
    ]
