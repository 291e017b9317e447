from __future__ import annotations

from typing import List

from .color_names import COLOR_NAME_SET
from .models import EMBEDDED_STRING, NAMED, UNKNOWN, ColorFinding
from .patterns import LITERAL_PREFIXES, THEME_REFERENCE_MARKERS
from .recognizers import (
    LITERAL_RECOGNIZERS,
    recognize_embedded_string,
    recognize_named_property,
    recognize_quoted_property,
)


def references_theme(value: str) -> bool:
    return any(marker in value for marker in THEME_REFERENCE_MARKERS)


def is_suppressed_quoted_value(value: str) -> bool:
    if value in COLOR_NAME_SET:
        return True
    if value.startswith(LITERAL_PREFIXES):
        return True
    return references_theme(value)


def classify_line(line: str, file_path: str, line_number: int) -> List[ColorFinding]:
    """Return every color finding on one line of source text.

    The same span may be reported under more than one category, e.g. a
    ``rgba(...)`` token inside ``'0 2px 4px rgba(0, 0, 0, 0.5)'`` is both an
    ``rgba`` and an ``embedded-string`` finding.
    """
    context = line.strip()
    findings: List[ColorFinding] = []

    def emit(value: str, category: str) -> None:
        findings.append(ColorFinding(file_path, line_number, value, context, category))

    for category, recognize in LITERAL_RECOGNIZERS.items():
        for match in recognize(line):
            emit(match.value, category)

    for match in recognize_named_property(line):
        emit(match.value, NAMED)

    for match in recognize_embedded_string(line):
        if references_theme(match.value):
            continue
        emit(match.value, EMBEDDED_STRING)

    for match in recognize_quoted_property(line):
        if is_suppressed_quoted_value(match.value):
            continue
        emit(match.value, UNKNOWN)

    return findings
