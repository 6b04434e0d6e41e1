import pytest

from dxball.events import ButtonState, MouseButton, SpecialKey
from dxball.game import Brick, Game, GameConfig


def _brick(game, row, column):
    return next(b for b in game.bricks if b.row == row and b.column == column)


def _only(game, *keep):
    for brick in game.bricks:
        brick.alive = (brick.row, brick.column) in keep


def _click(game, mx, my):
    game.on_mouse(MouseButton.LEFT, ButtonState.DOWN, mx, my)


def test_initial_state():
    game = Game()
    assert len(game.bricks) == 54
    assert all(b.alive for b in game.bricks)
    assert (game.ball_x, game.ball_y) == (450, 60)
    assert game.bar_x == 350
    assert game.paused
    assert game.score_text() == ""
    assert not game.all_cleared()


def test_wall_layout_from_source():
    game = Game()
    assert {b.y for b in game.bricks} == {670, 640, 610, 580, 550, 520}
    assert _brick(game, 3, 1).image == "2.bmp"
    assert _brick(game, 1, 1).image == "1.bmp"
    assert _brick(game, 4, 9).points == 100
    assert _brick(game, 6, 9).points == 50
    assert not _brick(game, 2, 5).right_inclusive


def test_tick_does_nothing_while_paused():
    game = Game()
    assert game.tick() is False
    assert (game.ball_x, game.ball_y) == (450, 60)


def test_resume_key_lets_ball_move():
    game = Game()
    dx, dy = game.dx, game.dy
    game.on_key("r")
    assert game.tick() is True
    assert game.ball_x == 450 + dx
    assert game.ball_y == 60 + dy
    game.on_key("q")
    assert game.paused


def test_arrow_keys_clamp_bar():
    game = Game()
    for _ in range(10):
        game.on_special_key(SpecialKey.LEFT)
    assert game.bar_x == 0
    for _ in range(10):
        game.on_special_key(SpecialKey.RIGHT)
    assert game.bar_x == 700


def test_arrow_keys_ignored_after_game_over():
    game = Game()
    game.game_on = False
    game.on_special_key(SpecialKey.LEFT)
    assert game.bar_x == 350


def test_end_key_quits():
    with pytest.raises(SystemExit):
        Game().on_special_key(SpecialKey.END)


def test_paddle_bounces_ball():
    game = Game()
    game.paused = False
    game.ball_x = game.bar_x + 10
    game.ball_y = 50
    game.dx = 0
    game.dy = -21
    game.tick()
    assert game.dy == 21


def test_brick_hit_scores_and_bounces():
    game = Game()
    game.paused = False
    game.ball_x, game.ball_y = 30, 510
    game.tick()
    assert not _brick(game, 6, 1).alive
    assert game.dy == -21
    assert game.score == 50
    assert game.score_text() == "50"
    assert sum(b.alive for b in game.bricks) == len(game.bricks) - 1


def test_right_edge_exclusive_for_one_brick():
    game = Game()
    _only(game, (2, 4), (2, 5), (2, 6))
    game.paused = False
    game.ball_x, game.ball_y = 480, 630
    game.tick()
    assert _brick(game, 2, 5).alive
    assert not _brick(game, 2, 6).alive


def test_clearing_wall_ends_game():
    game = Game()
    _only(game, (6, 1))
    game.paused = False
    game.ball_x, game.ball_y = 30, 510
    game.tick()
    assert game.all_cleared()
    assert not game.game_on
    assert game.tick() is False


def test_lost_ball_costs_a_life_and_resets():
    game = Game()
    game.paused = False
    game.ball_x, game.ball_y, game.bar_x = 100, 40, 0
    game.update_frame()
    assert game.chance_count == 1
    assert (game.ball_x, game.ball_y, game.bar_x) == (450, 60, 350)
    assert game.paused
    assert not game.chance
    assert game.chance_warn
    assert game.game_on


def test_three_lost_balls_end_game():
    game = Game()
    for _ in range(3):
        game.chance = True
        game.ball_y = 40
        game.update_frame()
    assert not game.game_on


def test_menu_slides_and_click_starts_play():
    game = Game()
    _click(game, 800, 600)
    assert not game.menu
    for _ in range(20):
        game.update_frame()
    assert game.menu_y == 700
    assert game.paused
    _click(game, 10, 10)
    assert not game.paused
    assert game.chance
    assert not game.chance_warn


def test_quit_button_only_while_menu_shown():
    game = Game()
    with pytest.raises(SystemExit):
        _click(game, 800, 200)
    _click(game, 800, 600)
    _click(game, 800, 200)
    assert not game.menu


def test_about_panel_opens_and_closes():
    game = Game()
    _click(game, 800, 400)
    assert game.about
    for _ in range(20):
        game.update_frame()
    assert game.about_x == 0
    _click(game, 30, 680)
    assert not game.about
    for _ in range(20):
        game.update_frame()
    assert game.about_x == 900


def test_right_button_ignored():
    game = Game()
    game.on_mouse(MouseButton.RIGHT, ButtonState.DOWN, 800, 600)
    assert game.menu


def test_debug_config():
    config = GameConfig.debug()
    game = Game(config)
    assert game.ball_y == 62
    assert config.paddle_width == 200
    assert config.always_show_score
    assert not GameConfig.classic().always_show_score


def test_brick_is_mutable_record():
    brick = Brick(row=1, column=1, x=0, y=670, image="1.bmp", points=50)
    brick.alive = False
    assert brick.alive is False