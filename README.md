# dxball

A small brick-breaker arcade game. A ball bounces around a 900 × 700 playfield.
You steer a paddle along the bottom edge to keep the ball in play and knock out
six rows of nine bricks. Each brick in the two middle rows is worth 100 points.
Each brick in the other rows is worth 50.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window and reads the keyboard and mouse.
To run the tests, install the `test` extra (`pip install .[test]`) and run
`pytest`.

## Playing

```
dxball
```

Options:

| Option | Effect |
| --- | --- |
| `--debug` | use the alternative settings from `GameConfig.debug()` |
| `--no-music` | do not open `song.mp3` |

The game loads its pictures from the current directory:
`background1.bmp`, `bar.bmp`, `1.bmp`, `2.bmp`, `menu.bmp`, `about.bmp`,
`gameover.bmp`, `chance.bmp`, `chance1.bmp`, `chance2.bmp` and `chance3.bmp`.
Unless `--no-music` is given, `song.mp3` is handed to the system's default
opener (`os.startfile` on Windows, `open` on macOS, `xdg-open` elsewhere).

Controls:

| Input | Action |
| --- | --- |
| Click the *play* area of the menu | slide the menu away |
| Left-click anywhere once the menu is gone | launch or relaunch the ball |
| Click *about* on the menu | show the about page |
| Click the top-left corner of the about page | hide it again |
| Click *exit* on the menu | quit |
| Left / Right arrow | move the paddle 100 pixels |
| `q` | pause |
| `r` | resume |
| End | quit |

Closing the window also quits.

You have three chances. If the ball drops below the paddle, you lose one, the
ball and paddle return to the centre and the ball waits for a click. The game
ends when all three chances are gone or every brick is cleared. Your score then
stays on the game-over screen.

## What is not included

The package contains no pictures and no music. Without the image files listed
above in the working directory, `dxball` stops with a pygame error when it
first tries to draw one. There is no high-score table and no saved state; each
run starts a fresh game.

## Using the pieces

The rules live in `dxball.game` and do not need a display:

```python
from dxball.game import Game, GameConfig

game = Game(GameConfig.classic())
game.paused = False    # the ball starts paused, as it does behind the menu
game.tick()            # advance the ball by one timer step
game.update_frame()    # apply per-frame rules (lost chances, sliding panels)
print(game.score_text(), game.all_cleared())
```

`Game.on_mouse`, `Game.on_key` and `Game.on_special_key` take the same input
the window passes on. Clicking *exit* or pressing End raises `SystemExit`.

`GameConfig.debug()` gives a variant with a different paddle hit zone: it
reaches higher, to y = 70 instead of 61, and is narrower, 200 pixels instead
of 210. It also places the ball and bar slightly higher and always shows the
score in the corner.

`dxball.timers.TimerRegistry` runs pausable periodic callbacks, up to ten of
them. Adding an eleventh raises `TimerLimitError`. Intervals shorter than
10 ms are raised to 10 ms.

`dxball.canvas.Canvas` offers simple drawing calls with the origin at the
bottom left: points, lines, polygons, rectangles, circles, ellipses, text,
images and pixel reads. `circle_points`, `ellipse_points`, `rectangle_corners`
and `scale_color` are the geometry and colour helpers behind it.
`dxball.canvas.Window` runs the event loop. It passes keys and mouse clicks to
an application object and draws it each frame. `dxball.app.BallApp` connects a
`Game` to that loop, and `dxball.app.render` draws one frame of the game.