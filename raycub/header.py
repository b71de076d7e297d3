"""Parsing of the six directives that open a ``.cub`` map file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .textutil import atoi, split_words

_TEXTURE_KEYS = (("SO", "south"), ("NO", "north"), ("EA", "east"), ("WE", "west"))
_COLOR_KEYS = (("F", "floor"), ("C", "ceiling"))
_ALL_KEYS = tuple(key for key, _ in _TEXTURE_KEYS + _COLOR_KEYS)
_PREFIXES = tuple(f"{key} " for key in _ALL_KEYS)
_DIGITS = frozenset("0123456789")


class MapError(ValueError):
    """Raised when a map file is malformed."""


@dataclass(frozen=True)
class Header:
    """Texture paths and colours declared at the top of a map.

    ``end`` is the index of the line holding the last of the six
    directives.
    """

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    end: int


def texture_path(line: str) -> str | None:
    """Return what follows the directive word and its spaces.

    Gives None when nothing follows.
    """
    _, sep, rest = line.partition(" ")
    if not sep:
        return None
    rest = rest.lstrip(" ")
    return rest or None


def _is_digits(word: str) -> bool:
    return all(char in _DIGITS for char in word)


def parse_rgb(text: str | None) -> int:
    """Turn ``R,G,B`` with components in 0..255 into 0xRRGGBB."""
    if text is None:
        raise MapError("color must not be empty")
    parts = split_words(text, ",")
    if len(parts) < 3 or not all(0 <= atoi(part) <= 255 for part in parts[:3]):
        raise MapError("colors not enough")
    if text.count(",") != 2:
        raise MapError("colors missing or too many")
    if not all(_is_digits(part) for part in parts):
        raise MapError("colors must be digits")
    red, green, blue = (atoi(part) for part in parts)
    return (red << 16) + (green << 8) + blue


def is_directive_line(line: str) -> bool:
    """Tell whether a line may stand among the directives.

    Directive lines and lines made only of newlines qualify.
    """
    return line.startswith(_PREFIXES) or not line.strip("\n")


def parse_header(lines: Sequence[str]) -> Header:
    """Read the six directives from the non-empty lines of a map file.

    Every line is scanned, so a directive repeated anywhere is an error,
    and only directive lines may come before the sixth directive.
    """
    found: dict[str, object] = {}
    end: int | None = None
    for index, line in enumerate(lines):
        for key, field in _TEXTURE_KEYS:
            if field not in found and line.startswith(f"{key} "):
                path = texture_path(line)
                if path is None:
                    raise MapError(f"{key} texture path must not be empty")
                found[field] = path
            elif field in found and line.startswith(key):
                raise MapError(f"{key} appears more than once in map")
        for key, field in _COLOR_KEYS:
            if field not in found and line.startswith(f"{key} "):
                found[field] = parse_rgb(texture_path(line))
            elif field in found and line.startswith(key):
                raise MapError(f"{key} appears more than once in map")
        if end is None and len(found) == 6:
            end = index
    if end is None:
        raise MapError("map does not have all six directives")
    if not all(is_directive_line(line) for line in lines[:end]):
        raise MapError("direction partition error")
    return Header(
        north=str(found["north"]),
        south=str(found["south"]),
        west=str(found["west"]),
        east=str(found["east"]),
        floor=int(found["floor"]),  # type: ignore[arg-type]
        ceiling=int(found["ceiling"]),  # type: ignore[arg-type]
        end=end,
    )


def directives_end(lines: Iterable[str]) -> int:
    """Return the index of the raw line where the sixth directive appears.

    Lines may keep their newlines and blank lines count; repeats are
    ignored.
    """
    seen: set[str] = set()
    for index, line in enumerate(lines):
        for key in _ALL_KEYS:
            if key not in seen and line.startswith(f"{key} "):
                seen.add(key)
        if len(seen) == 6:
            return index
    raise MapError("map does not have all six directives")