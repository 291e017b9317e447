from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath
from typing import Iterable, Iterator, Sequence

from .console import RichLogger

TEXT_FILE_EXTENSIONS = {
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".css",
    ".scss",
    ".json",
    ".md",
    ".html",
}

DEFAULT_EXCLUDES = (
    "node_modules",
    ".git",
    "build",
    "ios",
    "android",
    "assets",
)

# Where the palette itself is declared; scanning them would only flag the tokens.
THEME_DEFINITION_FILES = (
    "app/theme/colors.ts",
    "app/theme/colorsDark.ts",
)


def detect_text_encoding(sample: bytes) -> str:
    if sample.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    if sample.startswith(b"\xff\xfe") or sample.startswith(b"\xfe\xff"):
        return "utf-16"
    return "utf-8"


def parse_exclude_list(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def build_exclude_set(extra: Iterable[str] = ()) -> frozenset[str]:
    return frozenset(DEFAULT_EXCLUDES) | frozenset(extra)


def is_text_file(path: PurePath) -> bool:
    return path.suffix.lower() in TEXT_FILE_EXTENSIONS


def is_theme_file(path: PurePath, theme_files: Sequence[str] = THEME_DEFINITION_FILES) -> bool:
    posix = path.as_posix()
    for theme in theme_files:
        theme = PurePosixPath(theme.replace("\\", "/")).as_posix().lstrip("/")
        if posix == theme or posix.endswith("/" + theme):
            return True
    return False


def _relative_parts(path: PurePath, root: PurePath | None) -> tuple[str, ...]:
    if root is not None:
        try:
            return path.relative_to(root).parts
        except ValueError:
            pass
    return path.parts


def is_excluded(path: PurePath, root: PurePath | None, excludes: Iterable[str]) -> bool:
    excluded = set(excludes)
    return any(part in excluded for part in _relative_parts(path, root))


def is_eligible(
    path: PurePath,
    root: PurePath | None = None,
    excludes: Iterable[str] = DEFAULT_EXCLUDES,
    theme_files: Sequence[str] = THEME_DEFINITION_FILES,
) -> bool:
    """Decide whether a file should be scanned at all.

    The extension must be on the text allow-list, the file must not be a theme
    definition, and no path segment below ``root`` (including the file name) may
    be in ``excludes``.
    """
    if not is_text_file(path):
        return False
    if is_theme_file(path, theme_files):
        return False
    return not is_excluded(path, root, excludes)


@dataclass(frozen=True)
class SourceEntry:
    name: str
    path: Path
    is_directory: bool


def list_entries(directory: Path) -> list[SourceEntry]:
    entries: list[SourceEntry] = []
    with os.scandir(directory) as it:
        for entry in it:
            is_dir = entry.is_dir(follow_symlinks=False)
            entries.append(SourceEntry(name=entry.name, path=Path(entry.path), is_directory=is_dir))
    entries.sort(key=lambda e: e.name)
    return entries


def _walk(directory: Path, excluded: set[str], logger: RichLogger) -> Iterator[Path]:
    try:
        entries = list_entries(directory)
    except OSError as e:
        logger.warn(f"Skipping unreadable directory: {directory} ({e})")
        return
    for entry in entries:
        if entry.is_directory:
            if entry.name in excluded:
                logger.debug(f"Skipping excluded directory: {entry.path}")
                continue
            yield from _walk(entry.path, excluded, logger)
        elif entry.path.is_file():
            yield entry.path


def iter_source_files(root: Path, excludes: Iterable[str], logger: RichLogger) -> Iterator[Path]:
    """Iterate every regular file below ``root`` in sorted depth-first order.

    Directories named in ``excludes`` are not descended into. Eligibility of the
    yielded files is left to the caller.
    """
    if not root.exists():
        raise FileNotFoundError(str(root))
    if not root.is_dir():
        raise NotADirectoryError(str(root))

    return _walk(root, set(excludes), logger)


def read_source_text(path: Path) -> str:
    with open(path, "rb") as bf:
        data = bf.read()
    return data.decode(detect_text_encoding(data[:4]), errors="replace")
