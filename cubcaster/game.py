"""Game state, key handling, frame rendering and the command entry point."""

from __future__ import annotations

import enum
import math
import sys
from collections.abc import Sequence

import numpy as np

from .draw import Textures, draw_ceiling, draw_floor, draw_wall
from .errors import CUB3D_USAGE, Cub3dError, report_error
from .image import Image, load_texture
from .mapfile import Grid, check_map_filename, parse_map
from .player import Direction, Player, init_player
from .raycaster import cast_ray

WINDOW_TITLE = "Cub3D"
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 720

NORTH_TEXTURE = "textures/north_wall.xpm"
SOUTH_TEXTURE = "textures/south_wall.xpm"
EAST_TEXTURE = "textures/east_wall.xpm"
WEST_TEXTURE = "textures/west_wall.xpm"


class Key(enum.Enum):
    """Keys the game reacts to."""

    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    W = "w"
    S = "s"
    A = "a"
    D = "d"


def _to_rgb_array(pixels: np.ndarray) -> np.ndarray:
    channels = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    )
    return channels.astype(np.uint8).transpose(1, 0, 2)


def _wall_height(half_height: int, distance: float, screen_height: int) -> int:
    if distance <= 0:
        return screen_height
    return math.floor(half_height / distance)


class Game:
    """The map, the player, the wall textures and the frame being drawn."""

    def __init__(
        self,
        grid: Grid,
        player: Player,
        textures: Textures,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> None:
        self.grid = grid
        self.player = player
        self.textures = textures
        self.image = Image(width, height)
        self.ray_step = player.fov / width
        self.re_render = True
        self.running = True

    def handle_key(self, key: Key) -> None:
        """React to a key press; every press asks for a new frame."""
        self.re_render = True
        if key is Key.ESCAPE:
            self.running = False
        elif key is Key.RIGHT:
            self.player.turn(Direction.RIGHT)
        elif key is Key.LEFT:
            self.player.turn(Direction.LEFT)
        elif key is Key.W:
            self.player.move_forward_backward(self.grid, Direction.FORWARD)
        elif key is Key.S:
            self.player.move_forward_backward(self.grid, Direction.BACKWARD)
        elif key is Key.A:
            self.player.move_right_left(self.grid, Direction.LEFT)
        elif key is Key.D:
            self.player.move_right_left(self.grid, Direction.RIGHT)

    def render_frame(self) -> bool:
        """Redraw the frame if one is pending; return whether it was drawn."""
        if not self.re_render:
            return False
        half_height = self.image.height // 2
        ray_angle = self.player.angle - self.player.half_fov
        for x in range(self.image.width):
            ray = cast_ray(ray_angle, self.player.x, self.player.y, self.grid)
            distance = ray.distance * math.cos(ray_angle - self.player.angle)
            wall_height = _wall_height(half_height, distance, self.image.height)
            draw_ceiling(self.image, x, wall_height)
            draw_wall(self.image, self.textures, x, wall_height, ray)
            draw_floor(self.image, x, wall_height)
            ray_angle += self.ray_step
        self.re_render = False
        return True

    def run(self) -> None:
        """Open the window and run the event loop until it is closed."""
        import pygame

        keymap = {
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_w: Key.W,
            pygame.K_s: Key.S,
            pygame.K_a: Key.A,
            pygame.K_d: Key.D,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.image.width, self.image.height))
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.key.set_repeat(200, 20)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        key = keymap.get(event.key)
                        if key is None:
                            self.re_render = True
                        else:
                            self.handle_key(key)
                if self.running and self.render_frame():
                    surface = pygame.surfarray.make_surface(_to_rgb_array(self.image.pixels))
                    screen.blit(surface, (0, 0))
                    pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def setup(argv: Sequence[str]) -> Game:
    """Build a game from the command-line arguments (without the program name)."""
    if len(argv) != 1:
        raise Cub3dError(CUB3D_USAGE)
    map_name = check_map_filename(argv[0])
    grid = parse_map(map_name)
    player = init_player(grid)
    textures = Textures(
        north=load_texture(NORTH_TEXTURE),
        south=load_texture(SOUTH_TEXTURE),
        east=load_texture(EAST_TEXTURE),
        west=load_texture(WEST_TEXTURE),
    )
    return Game(grid, player, textures)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        game = setup(args)
        game.run()
    except Cub3dError as exc:
        return report_error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())