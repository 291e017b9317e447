from __future__ import annotations

import re

from .color_names import COLOR_PROPERTIES, CSS_COLOR_NAMES

INT = r"[0-9]+"
ALPHA = r"[0-9.]+"
SEP = r"\s*,\s*"

HEX_PATTERN = r"#(?:[0-9A-Fa-f]{8}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{4}|[0-9A-Fa-f]{3})\b"
RGB_PATTERN = rf"\brgb\(\s*{INT}{SEP}{INT}{SEP}{INT}\s*\)"
RGBA_PATTERN = rf"\brgba\(\s*{INT}{SEP}{INT}{SEP}{INT}{SEP}{ALPHA}\s*\)"
HSL_PATTERN = rf"\bhsl\(\s*{INT}{SEP}{INT}%{SEP}{INT}%\s*\)"
HSLA_PATTERN = rf"\bhsla\(\s*{INT}{SEP}{INT}%{SEP}{INT}%{SEP}{ALPHA}\s*\)"

# Longest names first so alternation never settles on a prefix ("blue" vs "blueviolet").
COLOR_NAME_ALTERNATION = "|".join(sorted(CSS_COLOR_NAMES, key=len, reverse=True))
PROPERTY_ALTERNATION = "|".join(COLOR_PROPERTIES)
PROPERTY_PREFIX = rf"\b(?P<prop>{PROPERTY_ALTERNATION})\s*:\s*"

HEX_RX = re.compile(HEX_PATTERN)
RGB_RX = re.compile(RGB_PATTERN)
RGBA_RX = re.compile(RGBA_PATTERN)
HSL_RX = re.compile(HSL_PATTERN)
HSLA_RX = re.compile(HSLA_PATTERN)

NAMED_PROPERTY_RX = re.compile(
    rf"{PROPERTY_PREFIX}(?P<quote>['\"])(?P<value>{COLOR_NAME_ALTERNATION})(?P=quote)"
)
QUOTED_PROPERTY_RX = re.compile(
    rf"{PROPERTY_PREFIX}(?P<quote>['\"])(?P<value>(?:(?!(?P=quote)).)+)(?P=quote)"
)

QUOTED_STRING_RX = re.compile(
    r"'(?P<single>(?:[^'\\\n]|\\.)*)'|\"(?P<double>(?:[^\"\\\n]|\\.)*)\""
)

# Any literal color notation, used to look inside free-text strings.
COLOR_TOKEN_PATTERN = (
    rf"{HEX_PATTERN}|{RGBA_PATTERN}|{RGB_PATTERN}|{HSLA_PATTERN}|{HSL_PATTERN}"
    rf"|\b(?:{COLOR_NAME_ALTERNATION})\b"
)
COLOR_TOKEN_RX = re.compile(COLOR_TOKEN_PATTERN)

THEME_REFERENCE_MARKERS = ("colors.", "theme.")
LITERAL_PREFIXES = ("#", "rgb", "hsl")
