from __future__ import annotations

from dataclasses import dataclass

HEX = "hex"
RGB = "rgb"
RGBA = "rgba"
HSL = "hsl"
HSLA = "hsla"
NAMED = "named"
EMBEDDED_STRING = "embedded-string"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class RecognizerMatch:
    start: int
    end: int
    value: str


@dataclass(frozen=True)
class ColorFinding:
    file_path: str
    line_number: int
    color_value: str
    line_context: str
    category: str

    def to_dict(self) -> dict[str, object]:
        return {
            "file": self.file_path,
            "line": self.line_number,
            "color": self.color_value,
            "context": self.line_context,
            "type": self.category,
        }
