"""Loading and validation of ``.cub`` map files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence

from .header import MapError, directives_end, parse_header
from .textutil import split_words

PLAYER_CHARS = frozenset("NSEW")
GRID_CHARS = PLAYER_CHARS | frozenset("01 ")


@dataclass(frozen=True)
class CubMap:
    """A validated map: textures, colours, the grid and the player start."""

    north: str
    south: str
    west: str
    east: str
    floor: int
    ceiling: int
    grid: tuple[str, ...]
    pos_x: int
    pos_y: int
    pov: str

    @property
    def height(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)


def check_name(name: str | PathLike[str]) -> str:
    """Ensure the map file name ends in ``.cub``; return it as a string."""
    text = str(name)
    if not text.endswith(".cub"):
        raise MapError("map file must be .cub")
    return text


def validate_grid(grid: Iterable[str]) -> tuple[str, ...]:
    """Check that the grid holds only walls, floor, spaces and players."""
    rows = tuple(grid)
    for row in rows:
        bad = set(row) - GRID_CHARS
        if bad:
            raise MapError(f"unexpected characters in map: {''.join(sorted(bad))!r}")
    return rows


def find_player(grid: Sequence[str]) -> tuple[int, int, str]:
    """Return ``(x, y, pov)`` of the single player start in the grid."""
    starts = [
        (x, y, char)
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char in PLAYER_CHARS
    ]
    if len(starts) != 1:
        raise MapError(f"map needs exactly one player, found {len(starts)}")
    return starts[0]


def flood_check(grid: Sequence[str], y: int, x: int) -> frozenset[tuple[int, int]]:
    """Check that the area reachable from ``(y, x)`` is closed by walls.

    Returns the ``(y, x)`` cells reached.  Reaching a space or leaving the
    grid raises MapError.
    """
    reached: set[tuple[int, int]] = set()
    pending = [(y, x)]
    while pending:
        cy, cx = pending.pop()
        if cy < 0 or cx < 0 or cy >= len(grid) or cx >= len(grid[cy]) or grid[cy][cx] == " ":
            raise MapError("Wrong map: area is not closed by walls")
        if grid[cy][cx] == "1" or (cy, cx) in reached:
            continue
        reached.add((cy, cx))
        pending.extend(((cy, cx - 1), (cy - 1, cx), (cy, cx + 1), (cy + 1, cx)))
    return frozenset(reached)


def _raw_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    raw = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        raw.append(pieces[-1])
    return raw


def _grid_start(lines: Sequence[str], end: int) -> int:
    start = end + 1
    if start >= len(lines):
        raise MapError("map has nothing after the directives")
    return next(
        (index for index, line in enumerate(lines[start:], start) if line.strip(" ")),
        len(lines),
    )


def _check_raw_grid(raw: Sequence[str]) -> None:
    start = directives_end(raw) + 1
    if start >= len(raw):
        raise MapError("map has nothing after the directives")
    first = next(
        (index for index, line in enumerate(raw[start:], start) if line.lstrip(" ") != "\n"),
        len(raw),
    )
    if any(line.startswith("\n") for line in raw[first:]):
        raise MapError("empty line inside the map")


def parse_map(text: str) -> CubMap:
    """Parse and validate the full text of a map file."""
    if not text:
        raise MapError("map file is empty")
    lines = split_words(text, "\n")
    header = parse_header(lines[: text.count("\n")])
    start = _grid_start(lines, header.end)
    _check_raw_grid(_raw_lines(text))
    grid = validate_grid(lines[start:])
    x, y, pov = find_player(grid)
    flood_check(grid, y, x)
    return CubMap(
        north=header.north,
        south=header.south,
        west=header.west,
        east=header.east,
        floor=header.floor,
        ceiling=header.ceiling,
        grid=grid,
        pos_x=x,
        pos_y=y,
        pov=pov,
    )


def load_map(path: str | PathLike[str]) -> CubMap:
    """Read and validate a ``.cub`` map file."""
    name = check_name(path)
    try:
        with open(name, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map file: {exc}") from exc
    return parse_map(data.decode("latin-1"))