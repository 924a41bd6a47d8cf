from geometry import Geometry, Margins
from hook import Hook
from screen import ScreenManager
from theme import Theme
from widget import TextBox

import pytest


def make_manager(**theme):
    screens = ScreenManager(Hook(), Theme(theme))
    screens.add_screen(0, 0, 1000, 800)
    return screens


def test_margins():
    screens = make_manager()
    bar = screens.create_bar()
    bar.margins = 3
    assert bar.margins == Margins(3, 3, 3, 3)
    bar.margins = {"top": 10}
    assert bar.margins == dict(top=10, right=3, bottom=3, left=3)
    bar.set_margin("left", 0)
    assert bar.margins.left == 0
    # the getter hands out a copy
    bar.margins.right = 100
    assert bar.margins.right == 3
    with pytest.raises(ValueError):
        bar.set_margin("middle", 1)


def test_setters_broadcast_changes():
    screens = make_manager()
    bar = screens.create_bar()
    seen = []

    @screens.hook("property::visible")
    def on_visible(event, bar, value):
        seen.append((event, bar, value))

    screens.update_all()
    bar.visible = False
    assert seen == [("property::visible", bar, False)]
    assert screens.screens[0].dirty
    # no change, no signal
    bar.visible = False
    assert len(seen) == 1


def test_invalid_values():
    screens = make_manager()
    bar = screens.create_bar()
    with pytest.raises(ValueError):
        bar.position = "diagonal"
    with pytest.raises(ValueError):
        bar.align = "middle"
    bar.align = "center"
    assert bar.align == "centered"


def test_position_change_moves_bar_last():
    screens = make_manager()
    b1 = screens.create_bar(height=20)
    b2 = screens.create_bar(height=30)
    b1.position = "top"
    assert screens.screens[0].bars == [b1, b2]
    b1.position = "bottom"
    b1.position = "top"
    assert screens.screens[0].bars == [b2, b1]
    screens.update_all()
    assert b2.geometry.y == 0
    assert b1.geometry.y == 30


def test_orientation_change_resets_thickness():
    screens = make_manager()
    bar = screens.create_bar(height=40)
    bar.position = "left"
    assert bar.width == 17
    bar.width = 50
    bar.position = "right"
    assert bar.width == 50
    bar.position = "bottom"
    assert bar.height == 17
    screens.update_all()
    assert bar.geometry == Geometry(0, 800 - 17, 1000, 17)


def test_move_to_other_screen():
    screens = make_manager()
    first = screens.screens[0]
    second = screens.add_screen(1000, 0, 1000, 800)
    stay = screens.create_bar(height=20)
    bar = screens.create_bar(height=20)
    bar.screen = second
    assert first.bars == [stay]
    assert second.bars == [bar]
    screens.update_all()
    assert stay.geometry == Geometry(0, 0, 1000, 20)
    assert bar.geometry == Geometry(1000, 0, 1000, 20)


def test_remove():
    screens = make_manager()
    bar = screens.create_bar()
    removed = []
    screens.hook.register("bar_removed", lambda ev, b, s: removed.append((b, s)))
    bar.remove()
    assert removed == [(bar, screens.screens[0])]
    assert bar.screen is None
    assert not bar.visible
    assert screens.bars == []


def test_widgets():
    screens = make_manager()
    bar = screens.create_bar()
    redraws = []
    screens.hook.register("bar::redraw", lambda ev, b: redraws.append(b))
    net = bar.add_widget(TextBox("offline"))
    bar.add_widget(TextBox(""))
    bar.add_widget(TextBox(markup="<b>12:00</b>"))
    assert bar.text() == "offline | 12:00"
    del redraws[:]
    net.set_text("wifi")
    assert redraws == [bar]
    net.set_text("wifi")
    assert redraws == [bar]
