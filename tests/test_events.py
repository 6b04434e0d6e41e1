import pytest

from dxball.events import ButtonState, MouseButton, SpecialKey, flip_y


def test_flip_y_top_edge_becomes_screen_height():
    assert flip_y(700, 0) == 700


def test_flip_y_bottom_edge_becomes_zero():
    assert flip_y(700, 700) == 0


@pytest.mark.parametrize("y", [0, 1, 45, 350, 699, 700])
def test_flip_y_is_its_own_inverse(y):
    assert flip_y(700, flip_y(700, y)) == y


def test_special_key_lookup_by_code():
    assert SpecialKey(107) is SpecialKey.END
    assert SpecialKey(100) is SpecialKey.LEFT
    assert SpecialKey(102) is SpecialKey.RIGHT


def test_unknown_special_key_code_is_rejected():
    with pytest.raises(ValueError):
        SpecialKey(99)


def test_mouse_button_and_state_lookup():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(2) is MouseButton.RIGHT
    assert ButtonState(0) is ButtonState.DOWN