"""
Arcade front end for the asteroid dodging game.

Install:
    pip install arcade

Play:
    python -m game.asteroids.arcade_host --max-obstacles 15 --spawn-interval 2
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Callable, List, Optional

import arcade

from .config import GAME_CONFIG, GameConfig, InvalidConfiguration, OnGameOver
from .engine import AsteroidsGame, create_game
from .scores import JsonScoreStore
from .surface import BORDER_COLOUR, SHADOW_COLOUR, STAR_COLOUR, TEXT_COLOUR, Colour

logger = logging.getLogger(__name__)


class ArcadeScheduler:
    """Scheduler backed by arcade's (pyglet's) clock"""

    def now(self) -> float:
        return time.perf_counter()

    def schedule_once(self, delay: float, fn: Callable[[], None]):
        # pyglet unschedules by function identity, so each call gets its own wrapper
        def _callback(delta_time: float):
            fn()

        arcade.schedule_once(_callback, delay)
        return _callback

    def cancel(self, handle) -> None:
        if handle is not None:
            arcade.unschedule(handle)


class ArcadeSurface:
    """
    Buffers one frame of draw calls and replays them in ``on_draw``.
    Game coordinates have y pointing down; arcade's point up.
    """

    def __init__(self, window: arcade.Window):
        self.window = window
        self._commands: List[Callable[[], None]] = []

    def width(self) -> float:
        return self.window.width

    def height(self) -> float:
        return self.window.height

    def _flip(self, y: float) -> float:
        return self.window.height - y

    def clear(self, colour: Colour = (0, 0, 0)):
        w, h = self.width(), self.height()
        self._commands = [lambda: arcade.draw_lrbt_rectangle_filled(0, w, 0, h, colour)]

    def draw_rect_filled(self, x, y, w, h, colour):
        top = self._flip(y)
        self._commands.append(
            lambda: arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, colour)
        )

    def draw_rect_filled_with_shadow(self, x, y, w, h, colour,
                                     shadow_colour=SHADOW_COLOUR, shadow_blur=20):
        # No blur in arcade: a translucent offset copy stands in for the shadow
        offset = shadow_blur / 4
        shadow = (*shadow_colour[:3], 96)
        top = self._flip(y + offset)
        self._commands.append(
            lambda: arcade.draw_lrbt_rectangle_filled(x + offset, x + w + offset, top - h, top, shadow)
        )
        self.draw_rect_filled(x, y, w, h, colour)

    def draw_rect_filled_with_shadow_and_border(self, x, y, w, h, colour,
                                                shadow_colour=SHADOW_COLOUR, shadow_blur=20,
                                                border_colour=BORDER_COLOUR, border_width=1):
        self.draw_rect_filled_with_shadow(x, y, w, h, border_colour, shadow_colour, shadow_blur)
        self.draw_rect_filled(x + border_width, y + border_width,
                              w - 2 * border_width, h - 2 * border_width, colour)

    def draw_line(self, x1, y1, x2, y2, colour=STAR_COLOUR, width=1):
        fy1, fy2 = self._flip(y1), self._flip(y2)
        self._commands.append(lambda: arcade.draw_line(x1, fy1, x2, fy2, colour, width))

    def draw_text(self, text, x, y, size, colour=TEXT_COLOUR, align="left"):
        fy = self._flip(y)
        self._commands.append(
            lambda: arcade.draw_text(text, x, fy, colour, size * 0.75,
                                     anchor_x=align, anchor_y="center")
        )

    def flush(self):
        for command in self._commands:
            command()


MOVE_KEYS = {
    arcade.key.A: "left", arcade.key.LEFT: "left",
    arcade.key.W: "up", arcade.key.UP: "up",
    arcade.key.D: "right", arcade.key.RIGHT: "right",
    arcade.key.S: "down", arcade.key.DOWN: "down",
}


class AsteroidsWindow(arcade.Window):
    """Window that owns the game and forwards keyboard input to it"""

    def __init__(self, config: GameConfig, seed: Optional[int] = None, game: Optional[AsteroidsGame] = None):
        super().__init__(int(config.width), int(config.height), "Asteroids", resizable=True)
        self.surface = ArcadeSurface(self)
        if game is None:
            game = create_game(
                ArcadeScheduler(),
                surface=self.surface,
                score_store=JsonScoreStore(config.best_time_path),
                config=config,
                seed=seed,
            )
        self.game = game

    def on_draw(self):
        self.clear()
        self.surface.flush()

    def on_resize(self, width: int, height: int):
        # The game reads its viewport from the surface, which follows the window
        super().on_resize(width, height)
        logger.debug("Window resized to %dx%d", width, height)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in MOVE_KEYS:
            setattr(self.game.controls, MOVE_KEYS[symbol], True)
        elif symbol in (arcade.key.PLUS, arcade.key.EQUAL, arcade.key.NUM_ADD):
            self.game.set_max_obstacles(self.game.max_obstacles + 1)
        elif symbol in (arcade.key.MINUS, arcade.key.NUM_SUBTRACT):
            if self.game.max_obstacles > 1:
                self.game.set_max_obstacles(self.game.max_obstacles - 1)
        elif symbol in (arcade.key.RETURN, arcade.key.ENTER, arcade.key.SPACE):
            self.game.start()
        elif symbol == arcade.key.P:
            if self.game.running:
                self.game.stop()
            else:
                self.game.start()
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in MOVE_KEYS:
            setattr(self.game.controls, MOVE_KEYS[symbol], False)

    def on_deactivate(self):
        # Key-up events are lost while unfocused
        self.game.controls.release_all()

    def close(self):
        self.game.stop()
        super().close()


def run_game(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Dodge the asteroids for as long as you can")
    parser.add_argument("--width", type=int, default=GAME_CONFIG["width"])
    parser.add_argument("--height", type=int, default=GAME_CONFIG["height"])
    parser.add_argument("--max-obstacles", type=int, default=GAME_CONFIG["max_obstacles"],
                        help="Maximum number of asteroids alive at once")
    parser.add_argument("--spawn-interval", type=float, default=GAME_CONFIG["spawn_interval"],
                        help="Seconds between asteroid spawns")
    parser.add_argument("--halt", action="store_true",
                        help="Stop on game over instead of restarting (Enter/Space restarts)")
    parser.add_argument("--best-time-path", type=str, default=GAME_CONFIG["best_time_path"])
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = GameConfig.from_dict({
            **GAME_CONFIG,
            "width": args.width,
            "height": args.height,
            "max_obstacles": args.max_obstacles,
            "spawn_interval": args.spawn_interval,
            "on_game_over": OnGameOver.HALT if args.halt else OnGameOver.RESTART,
            "best_time_path": args.best_time_path,
        })
    except InvalidConfiguration as e:
        parser.error(str(e))

    window = AsteroidsWindow(config, seed=args.seed)
    window.game.start()
    print("Arrows/WASD to move, +/- change asteroid count, P pauses, Esc quits.")
    arcade.run()


if __name__ == "__main__":
    run_game()
