import pytest

from meshview.interaction import (
    MouseZone,
    handle_rect,
    hover_message,
    mouse_zone,
    press_message,
    wheel_direction,
)


def test_mouse_zone_corners_and_center():
    w, h = 400, 300
    assert mouse_zone(0, 0, w, h) is MouseZone.TOP_LEFT
    assert mouse_zone(w - 1, 0, w, h) is MouseZone.TOP_RIGHT
    assert mouse_zone(0, h - 1, w, h) is MouseZone.BOTTOM_LEFT
    assert mouse_zone(w - 1, h - 1, w, h) is MouseZone.BOTTOM_RIGHT
    assert mouse_zone(w // 2, h // 2, w, h) is MouseZone.CENTER


def test_mouse_zone_edges():
    w, h = 400, 300
    assert mouse_zone(w // 2, 0, w, h) is MouseZone.TOP
    assert mouse_zone(w // 2, h - 1, w, h) is MouseZone.BOTTOM
    assert mouse_zone(0, h // 2, w, h) is MouseZone.LEFT
    assert mouse_zone(w - 1, h // 2, w, h) is MouseZone.RIGHT


def test_mouse_zone_covers_all_nine():
    w, h = 200, 200
    zones = {mouse_zone(x, y, w, h) for x in range(0, w, 5) for y in range(0, h, 5)}
    assert zones == set(MouseZone) - {MouseZone.OUTSIDE}


def test_hover_messages_from_source():
    assert hover_message(MouseZone.TOP_LEFT) == "HOME"
    assert hover_message(MouseZone.TOP_RIGHT) == "Invert Normals"
    assert hover_message(MouseZone.CENTER) == "Rotate Object With Respect To Center"
    assert hover_message(MouseZone.RIGHT) == "Translate Object Along Viewing Direction"
    assert hover_message(MouseZone.BOTTOM_LEFT) == "Stop Animation"
    assert hover_message(MouseZone.BOTTOM_RIGHT) == "Resume Animation"
    assert hover_message(MouseZone.TOP) == ""
    assert hover_message(-1) == ""
    assert hover_message(42) == ""


def test_press_message_left_button():
    assert press_message(MouseZone.TOP, True, False) == "Rotating Light Source"
    assert press_message(MouseZone.LEFT, True, False) == "Rotating Object"
    assert press_message(MouseZone.CENTER, True, False) == "Rotating Object"
    assert press_message(MouseZone.RIGHT, True, False) == "Zooming"
    assert press_message(MouseZone.BOTTOM, True, False) == "Rotating Object"
    assert press_message(MouseZone.TOP_LEFT, True, False) == ""


def test_press_message_right_button():
    assert press_message(MouseZone.LEFT, False, True) == "Translating Object"
    assert press_message(MouseZone.BOTTOM, False, True) == "Translating Object"
    assert press_message(MouseZone.CENTER, False, True) == "Rotating Light Source"
    assert press_message(MouseZone.RIGHT, False, True) == ""


def test_press_message_zone4_disabled_leaves_status():
    assert press_message(MouseZone.CENTER, True, False, False) is None
    assert press_message(MouseZone.TOP, True, False, False) is None
    assert press_message(MouseZone.CENTER, False, True, False) is None
    assert press_message(MouseZone.RIGHT, True, False, False) == "Zooming"


def test_press_message_left_wins_and_no_button():
    assert press_message(MouseZone.LEFT, True, True) == "Rotating Object"
    assert press_message(MouseZone.LEFT, False, False) is None


def test_handle_rect_center_and_outside_are_none():
    assert handle_rect(MouseZone.CENTER, 400, 400) is None
    assert handle_rect(MouseZone.OUTSIDE, 400, 400) is None


@pytest.mark.parametrize("zone", [z for z in MouseZone if z not in (MouseZone.CENTER, MouseZone.OUTSIDE)])
def test_handle_rect_inside_unit_square(zone):
    rect = handle_rect(zone, 400, 300)
    hx0, hy0, hx1, hy1 = rect
    for v in rect:
        assert 0.0 <= v <= 1.0
    assert hx0 < hx1
    assert hy0 > hy1


def test_handle_rects_tile_the_view():
    w, h = 400, 300
    tl = handle_rect(MouseZone.TOP_LEFT, w, h)
    top = handle_rect(MouseZone.TOP, w, h)
    tr = handle_rect(MouseZone.TOP_RIGHT, w, h)
    left = handle_rect(MouseZone.LEFT, w, h)
    bl = handle_rect(MouseZone.BOTTOM_LEFT, w, h)
    assert tl[2] == top[0]
    assert top[2] == tr[0]
    assert tl[3] == left[1]
    assert left[3] == bl[1]
    assert tl[0] == 0.0 and tl[1] == 1.0
    assert tr[2] == 1.0
    assert bl[3] == 0.0


def test_handle_rect_rejects_empty_viewport():
    with pytest.raises(ValueError):
        handle_rect(MouseZone.TOP, 0, 100)


def test_wheel_direction_pixels():
    assert wheel_direction(5, 0) == 1
    assert wheel_direction(-3, 0) == -1
    assert wheel_direction(4, -120) == 1


def test_wheel_direction_angles():
    assert wheel_direction(0, 120) == 1
    assert wheel_direction(0, -120) == -1
    assert wheel_direction(0, 0) == 0
    assert wheel_direction(0, 8) == 0
    assert wheel_direction(0, -8) == 0
    assert wheel_direction(0, 240) == 1
    assert wheel_direction(0, -240) == -1