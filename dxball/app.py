"""The brick-breaking game wired to a window, a timer and background music."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys

from dxball.canvas import Window
from dxball.game import Game, GameConfig
from dxball.timers import TimerRegistry

__all__ = ["BallApp", "render", "play_music", "main"]

_BALL_RADIUS = 10
_SCORE_COLOR = (252, 1, 45)
_GAME_OVER_COLOR = (255, 255, 255)
_WARNINGS = {0: "chance1.bmp", 1: "chance2.bmp", 2: "chance3.bmp"}


def render(canvas, game):
    """Draw the whole scene for the current game state."""
    canvas.clear()
    canvas.show_image(0, 0, "background1.bmp")
    canvas.filled_circle(game.ball_x, game.ball_y, _BALL_RADIUS)
    canvas.show_image(game.bar_x, game.bar_y + game.config.bar_draw_offset, "bar.bmp")

    for brick in game.bricks:
        if brick.alive:
            canvas.show_image(brick.x, brick.y, brick.image)

    if game.chance_warn and game.chance_count in _WARNINGS:
        canvas.show_image(150, 250, _WARNINGS[game.chance_count])
        if game.chance_count == 0:
            canvas.show_image(410, 3, "chance.bmp")

    # Remaining lives shown as icons along the bottom edge.
    if game.chance_count == 0:
        canvas.show_image(305, 3, "chance.bmp")
    if game.chance_count in (0, 1):
        canvas.show_image(200, 3, "chance.bmp")

    score = game.score_text()
    if not game.game_on:
        canvas.show_image(0, 0, "gameover.bmp")
        canvas.set_color(*_GAME_OVER_COLOR)
        canvas.text(800, 660, score)
    if game.game_on or game.config.always_show_score:
        canvas.set_color(*_SCORE_COLOR)
        canvas.text(820, 10, score)

    canvas.show_image(0, game.menu_y, "menu.bmp")
    canvas.show_image(game.about_x, 0, "about.bmp")


def play_music(path):
    """Open a music file with the system's default player; return whether it started."""
    path = str(path)
    try:
        if sys.platform.startswith("win"):
            os.startfile(path)
        else:
            opener = "open" if sys.platform == "darwin" else "xdg-open"
            subprocess.Popen(
                [opener, path],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
    except OSError:
        return False
    return True


class BallApp:
    """Connects a game to the window's drawing and input callbacks."""

    def __init__(self, game):
        self.game = game

    def draw(self, canvas):
        self.game.update_frame()
        render(canvas, self.game)

    def mouse(self, button, state, mx, my):
        self.game.on_mouse(button, state, mx, my)

    def keyboard(self, key):
        self.game.on_key(key)

    def special_keyboard(self, key):
        self.game.on_special_key(key)


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="dxball", description="Break the wall of bricks.")
    parser.add_argument("--debug", action="store_true", help="use the debug build's settings")
    parser.add_argument("--no-music", action="store_true", help="do not start the music")
    return parser.parse_args(argv)


def main(argv=None):
    """Start the game; image and music files are looked up in the working directory."""
    args = _parse_args(argv)
    config = GameConfig.debug() if args.debug else GameConfig.classic()
    game = Game(config)
    timers = TimerRegistry()
    timers.set_timer(config.timer_ms, game.tick)
    if not args.no_music:
        play_music(config.music)
    window = Window(config.width, config.height, config.title)
    window.run(BallApp(game), timers)
    return 0


if __name__ == "__main__":
    sys.exit(main())