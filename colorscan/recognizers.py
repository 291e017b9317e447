from __future__ import annotations

import re
from typing import Callable, Dict, List

from .models import HEX, HSL, HSLA, RGB, RGBA, RecognizerMatch
from .patterns import (
    COLOR_TOKEN_RX,
    HEX_RX,
    HSL_RX,
    HSLA_RX,
    NAMED_PROPERTY_RX,
    QUOTED_PROPERTY_RX,
    QUOTED_STRING_RX,
    RGB_RX,
    RGBA_RX,
)

Recognizer = Callable[[str], List[RecognizerMatch]]


def _token_matches(rx: re.Pattern[str], line: str) -> List[RecognizerMatch]:
    return [RecognizerMatch(m.start(), m.end(), m.group(0)) for m in rx.finditer(line)]


def recognize_hex(line: str) -> List[RecognizerMatch]:
    return _token_matches(HEX_RX, line)


def recognize_rgb(line: str) -> List[RecognizerMatch]:
    return _token_matches(RGB_RX, line)


def recognize_rgba(line: str) -> List[RecognizerMatch]:
    return _token_matches(RGBA_RX, line)


def recognize_hsl(line: str) -> List[RecognizerMatch]:
    return _token_matches(HSL_RX, line)


def recognize_hsla(line: str) -> List[RecognizerMatch]:
    return _token_matches(HSLA_RX, line)


def recognize_named_property(line: str) -> List[RecognizerMatch]:
    """Match ``color: 'red'`` style pairs whose value is exactly a CSS color name."""
    return [
        RecognizerMatch(m.start(), m.end(), m.group("value"))
        for m in NAMED_PROPERTY_RX.finditer(line)
    ]


def recognize_quoted_property(line: str) -> List[RecognizerMatch]:
    """Match any quoted value bound to a color property."""
    return [
        RecognizerMatch(m.start(), m.end(), m.group("value"))
        for m in QUOTED_PROPERTY_RX.finditer(line)
    ]


def is_color_token(text: str) -> bool:
    return COLOR_TOKEN_RX.fullmatch(text) is not None


def contains_color_token(text: str) -> bool:
    return COLOR_TOKEN_RX.search(text) is not None


def recognize_embedded_string(line: str) -> List[RecognizerMatch]:
    """Match quoted strings that mention a color among other text.

    ``'1px solid red'`` matches; ``'red'`` and ``'#fff'`` do not, since those are
    bare tokens already covered by the notation recognizers.
    """
    matches: List[RecognizerMatch] = []
    for m in QUOTED_STRING_RX.finditer(line):
        content = m.group("single") if m.group("single") is not None else m.group("double")
        if not content or is_color_token(content):
            continue
        if contains_color_token(content):
            matches.append(RecognizerMatch(m.start(), m.end(), content))
    return matches


LITERAL_RECOGNIZERS: Dict[str, Recognizer] = {
    HEX: recognize_hex,
    RGB: recognize_rgb,
    RGBA: recognize_rgba,
    HSL: recognize_hsl,
    HSLA: recognize_hsla,
}
