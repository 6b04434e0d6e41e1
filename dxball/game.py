"""Game state and rules for the brick-breaking game."""

from __future__ import annotations

from dataclasses import dataclass, field

from dxball.events import ButtonState, MouseButton, SpecialKey

__all__ = ["Brick", "GameConfig", "Game", "BRICK_WIDTH", "BRICK_ROWS", "BRICK_COLUMNS"]

BRICK_WIDTH = 100
BRICK_COLUMNS = 9
# (bottom edge, image, points) for each row, top row first.
BRICK_ROWS = (
    (670, "1.bmp", 50),
    (640, "1.bmp", 50),
    (610, "2.bmp", 100),
    (580, "2.bmp", 100),
    (550, "1.bmp", 50),
    (520, "1.bmp", 50),
)

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 700

_BALL_START_X = 450
_BAR_START_X = 350
_BAR_START_Y = 10
_BAR_STEP = 100
_BAR_MAX_X = 700
_BALL_DX = 20
_BALL_DY = 21
_WALL_LEFT = 19
_WALL_RIGHT = 881
_CEILING = 680
_DROP_LINE = 45
_LIVES = 3
_SLIDE_STEP = 100
_MENU_OPEN_Y = 695


@dataclass
class Brick:
    """One brick of the wall; ``row`` and ``column`` count from 1."""

    row: int
    column: int
    x: int
    y: int
    image: str
    points: int
    alive: bool = True
    right_inclusive: bool = True

    def _hit_by(self, ball_x, ball_y):
        if not self.alive or ball_y <= self.y or ball_x < self.x:
            return False
        right = self.x + BRICK_WIDTH
        return ball_x <= right if self.right_inclusive else ball_x < right


@dataclass(frozen=True)
class GameConfig:
    """Tunable values that differ between the two builds of the game."""

    ball_start_y: int = 60
    bar_draw_offset: int = 20
    paddle_top: int = 61
    paddle_width: int = 210
    timer_ms: int = 0
    always_show_score: bool = False
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    title: str = "DX-BALL"
    music: str = "song.mp3"

    @classmethod
    def classic(cls):
        """Settings of the release build."""
        return cls()

    @classmethod
    def debug(cls):
        """Settings of the debug build."""
        return cls(
            ball_start_y=62,
            bar_draw_offset=22,
            paddle_top=70,
            paddle_width=200,
            timer_ms=1,
            always_show_score=True,
        )


def _build_wall():
    bricks = []
    for row, (y, image, points) in enumerate(BRICK_ROWS, start=1):
        for column in range(1, BRICK_COLUMNS + 1):
            bricks.append(
                Brick(
                    row=row,
                    column=column,
                    x=(column - 1) * BRICK_WIDTH,
                    y=y,
                    image=image,
                    points=points,
                    # The brick in row 2, column 5 excludes its right edge.
                    right_inclusive=not (row == 2 and column == 5),
                )
            )
    return bricks


@dataclass
class Game:
    """Complete state of one game, advanced by timer ticks and frame updates."""

    config: GameConfig = field(default_factory=GameConfig.classic)

    def __init__(self, config=None):
        self.config = config if config is not None else GameConfig.classic()
        self.ball_x = _BALL_START_X
        self.ball_y = self.config.ball_start_y
        self.dx = _BALL_DX
        self.dy = _BALL_DY
        self.bar_x = _BAR_START_X
        self.bar_y = _BAR_START_Y
        self.game_on = True
        self.paused = True
        self.score = 0
        self.chance_count = 0
        self.chance = True
        self.chance_warn = True
        self.menu = True
        self.menu_y = 0
        self.about = False
        self.about_x = SCREEN_WIDTH
        self.bricks = _build_wall()
        self._score_text = ""

    def tick(self):
        """Move the ball one step and resolve collisions; return whether it moved."""
        if self.paused or not self.game_on:
            return False

        self.ball_x += self.dx
        self.ball_y += self.dy

        if self.ball_x > _WALL_RIGHT or self.ball_x < _WALL_LEFT:
            self.dx = -self.dx
        if self.ball_y > _CEILING:
            self.dy = -self.dy

        for brick in self.bricks:
            if brick._hit_by(self.ball_x, self.ball_y):
                self.dy = -self.dy
                brick.alive = False
                self.score += brick.points

        if (
            self.ball_y < self.config.paddle_top
            and self.bar_x <= self.ball_x <= self.bar_x + self.config.paddle_width
        ):
            self.dy = -self.dy

        if self.all_cleared():
            self.game_on = False

        self._score_text = str(self.score)
        return True

    def update_frame(self):
        """Per-frame bookkeeping: lost balls, game over and sliding panels."""
        if self.chance and self.ball_y < _DROP_LINE:
            self.chance_warn = True
            self.chance = False
            self.chance_count += 1
            self.bar_x = _BAR_START_X
            self.bar_y = _BAR_START_Y
            self.ball_x = _BALL_START_X
            self.ball_y = self.config.ball_start_y
            self.paused = True

        if self.chance_count == _LIVES:
            self.game_on = False

        if not self.menu and self.menu_y < SCREEN_HEIGHT:
            self.menu_y += _SLIDE_STEP

        if self.about:
            self.about_x = max(self.about_x - _SLIDE_STEP, 0)
        elif self.about_x < SCREEN_WIDTH:
            self.about_x += _SLIDE_STEP

    def on_mouse(self, button, state, mx, my):
        """Handle a mouse click in bottom-left-origin coordinates."""
        if button != MouseButton.LEFT or state != ButtonState.DOWN:
            return

        in_menu_column = 770 < mx < 900
        if in_menu_column and 520 < my < 650:
            self.menu = False

        if self.menu:
            if in_menu_column and 180 < my < 310:
                raise SystemExit(0)
            if in_menu_column and 350 < my < 450:
                self.about = True
            if 0 < mx < 70 and 660 < my < 700:
                self.about = False

        if self.menu_y > _MENU_OPEN_Y:
            self.paused = False
            self.chance = True
            self.chance_warn = False

    def on_key(self, key):
        """'q' pauses the ball, 'r' resumes it."""
        if key == "q":
            self.paused = True
        elif key == "r":
            self.paused = False

    def on_special_key(self, key):
        """End quits; the arrow keys move the bar while the game is on."""
        if key == SpecialKey.END:
            raise SystemExit(0)
        if not self.game_on:
            return
        if key == SpecialKey.LEFT:
            self.bar_x = max(self.bar_x - _BAR_STEP, 0)
        elif key == SpecialKey.RIGHT:
            self.bar_x = min(self.bar_x + _BAR_STEP, _BAR_MAX_X)

    def all_cleared(self):
        """True when no brick is left standing."""
        return not any(brick.alive for brick in self.bricks)

    def score_text(self):
        """The score as last shown; empty until the ball first moves."""
        return self._score_text