"""Reading of XPM images into 32-bit pixel buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Sequence

from .colors import lookup_color
from .textutil import atoi

TRANSPARENT = 0xFF000000

_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_QUOTED = re.compile(r'"([^"]*)"')
_WORD_SEP = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: row-major 0xAARRGGBB pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _words(line: str) -> list[str]:
    return [word for word in _WORD_SEP.split(line) if word]


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _find_outside_quotes(text: str, token: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside string literals.

    Comment text is replaced by spaces, so the length is kept.
    """
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_to_rgb(name: str, extra: str | None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#hex`` values are read as hexadecimal.  Otherwise the name, joined
    with the following word if there is one, is looked up among the named
    colours; ``none`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if extra is not None:
        name = f"{name} {extra}"[:63]
    color = lookup_color(name)
    return 0 if color is None else color


def parse_xpm_lines(lines: Sequence[str]) -> XpmImage:
    """Decode an image from the strings of an XPM array, in order."""
    rows = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("XPM data ends too early") from None

    header = _words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("XPM header values must be non-zero")
    if min(width, height, ncolors, cpp) < 0:
        raise XpmError("XPM header values must be positive")

    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = _words(line[cpp:])
        if "c" not in words:
            raise XpmError(f"colour line without a 'c' key: {line!r}")
        index = words.index("c") + 1
        if index >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        extra = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], extra)
        key = line[:cpp]
        if last_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for x in range(width):
            col = _to_int32(palette.get(line[cpp * x:cpp * (x + 1)], 0))
            pixels.append(TRANSPARENT if col == -1 else col & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_xpm(data.decode("latin-1"))