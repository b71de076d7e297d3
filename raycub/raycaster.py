"""Player movement and textured ray casting over a map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, MutableSequence, Sequence

from .xpm import XpmImage

WIDTH = 800
HEIGHT = 600
TEX_WIDTH = 64
TEX_HEIGHT = 64
MOVE_SPEED = 0.08
ROT_SPEED = 0.04
NO_HIT_DISTANCE = 1e30

# Direction and camera plane for each starting view.
_SPAWN = {
    "S": (0.0, 1.0, -0.66, 0.0),
    "N": (0.0, -1.0, 0.66, 0.0),
    "W": (-1.0, 0.0, 0.0, -0.66),
    "E": (1.0, 0.0, 0.0, 0.66),
}


@dataclass
class Controls:
    """Which movement and turning keys are held down."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    left: bool = False
    right: bool = False


def _cell(grid: Sequence[str], y: int, x: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return " "


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    posx: float
    posy: float
    dirx: float
    diry: float
    planex: float
    planey: float
    speed: float = MOVE_SPEED
    rspeed: float = ROT_SPEED

    def _try_step(self, grid: Sequence[str], dx: float, dy: float) -> None:
        if _cell(grid, int(self.posy), int(self.posx + dx)) != "1":
            self.posx += dx
        if _cell(grid, int(self.posy + dy), int(self.posx)) != "1":
            self.posy += dy

    def move(self, grid: Sequence[str], controls: Controls) -> None:
        """Walk according to the held keys, refusing to enter walls."""
        if controls.w:
            self._try_step(grid, self.dirx * self.speed, self.diry * self.speed)
        if controls.s:
            self._try_step(grid, -self.dirx * self.speed, -self.diry * self.speed)
        if controls.a:
            self._try_step(grid, -self.planex * self.speed, -self.planey * self.speed)
        if controls.d:
            self._try_step(grid, self.planex * self.speed, self.planey * self.speed)

    def _turn(self, angle: float) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dirx, self.diry = (
            self.dirx * cos_a - self.diry * sin_a,
            self.dirx * sin_a + self.diry * cos_a,
        )
        self.planex, self.planey = (
            self.planex * cos_a - self.planey * sin_a,
            self.planex * sin_a + self.planey * cos_a,
        )

    def rotate(self, controls: Controls) -> None:
        """Turn the view according to the held arrow keys."""
        if controls.right:
            self._turn(self.rspeed)
        if controls.left:
            self._turn(-self.rspeed)


def spawn_player(pov: str, x: int, y: int) -> Player:
    """Place a player in the middle of cell ``(x, y)`` facing ``pov``."""
    try:
        dirx, diry, planex, planey = _SPAWN[pov]
    except KeyError:
        raise ValueError(f"unknown player direction: {pov!r}") from None
    return Player(x + 0.5, y + 0.5, dirx, diry, planex, planey)


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray met a wall, and how to draw it."""

    side: int
    raydirx: float
    raydiry: float
    perpwalldist: float
    lineh: int
    drawstart: int
    drawend: int
    texx: int
    step: float
    texpos: float

    @property
    def face(self) -> str:
        """Name of the texture the hit wall shows."""
        if self.side == 1:
            return "north" if self.raydiry < 0 else "south"
        return "west" if self.raydirx < 0 else "east"


def _delta(raydir: float) -> float:
    return NO_HIT_DISTANCE if raydir == 0 else abs(1 / raydir)


def cast_ray(player: Player, grid: Sequence[str], x: int) -> RayHit:
    """Cast the ray of screen column ``x`` and describe the wall it hits."""
    camerax = 2 * x / WIDTH - 1
    raydirx = player.dirx + player.planex * camerax
    raydiry = player.diry + player.planey * camerax
    mapx, mapy = int(player.posx), int(player.posy)
    deltax, deltay = _delta(raydirx), _delta(raydiry)

    if raydirx < 0:
        stepx, sidex = -1, (player.posx - mapx) * deltax
    else:
        stepx, sidex = 1, (mapx + 1.0 - player.posx) * deltax
    if raydiry < 0:
        stepy, sidey = -1, (player.posy - mapy) * deltay
    else:
        stepy, sidey = 1, (mapy + 1.0 - player.posy) * deltay

    while True:
        if sidex < sidey:
            sidex += deltax
            mapx += stepx
            side = 0
        else:
            sidey += deltay
            mapy += stepy
            side = 1
        if not (0 <= mapy < len(grid) and 0 <= mapx < len(grid[mapy])):
            break
        if grid[mapy][mapx] == "1":
            break

    if side == 0:
        perp = sidex - deltax
        wallx = player.posy + perp * raydiry
    else:
        perp = sidey - deltay
        wallx = player.posx + perp * raydirx
    perp = max(perp, 1e-9)
    lineh = int(HEIGHT / perp)
    drawstart = max(-(lineh // 2) + HEIGHT // 2, 0)
    drawend = min(lineh // 2 + HEIGHT // 2, HEIGHT - 1)
    wallx -= int(wallx)
    texx = int(wallx * TEX_WIDTH)
    if side == 0 and raydirx < 0:
        texx = TEX_WIDTH - texx - 1
    if side == 1 and raydiry > 0:
        texx = TEX_WIDTH - texx - 1
    if lineh:
        step = TEX_HEIGHT / lineh
        texpos = (drawstart - HEIGHT // 2 + lineh // 2) * step
    else:
        step, texpos = 0.0, 0.0
    return RayHit(side, raydirx, raydiry, perp, lineh, drawstart, drawend, texx, step, texpos)


def render_column(
    frame: MutableSequence[int],
    hit: RayHit,
    x: int,
    textures: Mapping[str, XpmImage],
    floor: int,
    ceiling: int,
) -> None:
    """Paint column ``x`` of a row-major WIDTH x HEIGHT frame in place."""
    pixels = textures[hit.face].pixels
    texx = min(max(hit.texx, 0), TEX_WIDTH - 1)
    texpos = hit.texpos
    for y in range(HEIGHT):
        index = y * WIDTH + x
        if y < hit.drawstart:
            frame[index] = ceiling
        elif y > hit.drawend:
            frame[index] = floor
        else:
            texy = min(max(int(texpos), 0), TEX_HEIGHT - 1)
            frame[index] = pixels[TEX_HEIGHT * texy + texx]
            texpos += hit.step


def render_frame(
    player: Player,
    grid: Sequence[str],
    textures: Mapping[str, XpmImage],
    floor: int,
    ceiling: int,
) -> list[int]:
    """Render a whole view as a row-major list of WIDTH x HEIGHT pixels."""
    frame = [0] * (WIDTH * HEIGHT)
    for x in range(WIDTH):
        render_column(frame, cast_ray(player, grid, x), x, textures, floor, ceiling)
    return frame