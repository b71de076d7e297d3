"""The game window: loads a map, then walks and renders it with pygame."""

from __future__ import annotations

import os
import sys
from array import array
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .header import MapError  # noqa: E402
from .mapfile import CubMap, load_map  # noqa: E402
from .raycaster import (  # noqa: E402
    HEIGHT,
    TEX_HEIGHT,
    TEX_WIDTH,
    WIDTH,
    Controls,
    render_frame,
    spawn_player,
)
from .xpm import XpmError, XpmImage, load_xpm  # noqa: E402

TITLE = "cub3D"

_KEY_CONTROLS = {
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_RIGHT: "right",
    pygame.K_LEFT: "left",
}


def key_to_control(key: int) -> str | None:
    """Return the name of the control a pygame key drives, or None."""
    return _KEY_CONTROLS.get(key)


def load_textures(cub_map: CubMap) -> dict[str, XpmImage]:
    """Load the four wall textures named by the map, keyed by face."""
    paths = {
        "north": cub_map.north,
        "south": cub_map.south,
        "west": cub_map.west,
        "east": cub_map.east,
    }
    textures: dict[str, XpmImage] = {}
    for face, path in paths.items():
        try:
            image = load_xpm(path)
        except (OSError, XpmError) as exc:
            raise MapError(f"file not opened: {path}: {exc}") from exc
        if image.width < TEX_WIDTH or image.height < TEX_HEIGHT:
            raise MapError(
                f"file cannot read: {path} must be at least {TEX_WIDTH}x{TEX_HEIGHT}"
            )
        textures[face] = image
    return textures


def _frame_bytes(frame: Sequence[int]) -> bytes:
    data = array("I", (pixel & 0xFFFFFF | 0xFF000000 for pixel in frame))
    if sys.byteorder == "little":
        data.byteswap()
    return data.tobytes()


def run(cub_map: CubMap) -> str:
    """Open the window and play until it is closed; return the exit message."""
    textures = load_textures(cub_map)
    player = spawn_player(cub_map.pov, cub_map.pos_x, cub_map.pos_y)
    controls = Controls()
    grid = cub_map.grid
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return "exit successful"
                if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        return "EXIT complete"
                    name = key_to_control(event.key)
                    if name is not None:
                        setattr(controls, name, event.type == pygame.KEYDOWN)
            player.move(grid, controls)
            player.rotate(controls)
            frame = render_frame(player, grid, textures, cub_map.floor, cub_map.ceiling)
            surface = pygame.image.frombuffer(_frame_bytes(frame), (WIDTH, HEIGHT), "ARGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file given as the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Arguments Error")
        return 1
    try:
        cub_map = load_map(args[0])
        message = run(cub_map)
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    except pygame.error as exc:
        print(f"Error\n{exc}")
        return 1
    print(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())