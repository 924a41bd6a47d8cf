from geometry import Geometry, Margins
from placement import anchor, check_align, gen_placement, strut_partial, \
    workarea
from screen import Screen

import pytest


AREA = Geometry(0, 0, 1000, 800)


class FakeBar:
    def __init__(self, position, geometry, visible=True, restrict_workarea=True):
        self.position = position
        self.geometry = geometry
        self.visible = visible
        self.restrict_workarea = restrict_workarea


def test_anchor():
    assert anchor("top", "left") == "start"
    assert anchor("top", "top") == "start"
    assert anchor("top", "right") == "end"
    assert anchor("top", "bottom") == "end"
    assert anchor("left", "top") == "start"
    assert anchor("left", "left") == "start"
    assert anchor("right", "bottom") == "end"
    assert anchor("right", "right") == "end"
    assert anchor("bottom", "centered") == "centered"
    assert anchor("bottom", "end") == "end"
    with pytest.raises(ValueError):
        anchor("middle", "left")


def test_check_align():
    assert check_align("center") == "centered"
    assert check_align("left") == "left"
    with pytest.raises(ValueError):
        check_align("middle")


def test_top_bar_corners():
    margins = Margins(top=5, left=10, right=30)
    place = gen_placement("top", "centered", False)
    assert place(AREA, 200, 20, margins) == Geometry(390, 5, 200, 20)
    place = gen_placement("top", "left", False)
    assert place(AREA, 200, 20, margins) == Geometry(10, 5, 200, 20)
    place = gen_placement("top", "right", False)
    assert place(AREA, 200, 20, margins) == Geometry(770, 5, 200, 20)


def test_bottom_bar_stretched():
    place = gen_placement("bottom", "centered", True)
    geom = place(AREA, 0, 20, Margins(bottom=4, left=10, right=30))
    assert geom == Geometry(10, 776, 960, 20)


def test_vertical_bars():
    margins = Margins(top=20, bottom=10, right=2)
    place = gen_placement("right", "centered", True)
    assert place(AREA, 40, 0, margins) == Geometry(958, 20, 40, 770)
    place = gen_placement("left", "bottom", False)
    assert place(AREA, 40, 100, margins) == Geometry(0, 690, 40, 100)


def test_placement_on_second_monitor():
    area = Geometry(1920, 0, 1280, 1024)
    place = gen_placement("top", "centered", True)
    assert place(area, 0, 18, Margins()) == Geometry(1920, 0, 1280, 18)


def test_maximize_never_negative():
    place = gen_placement("top", "centered", True)
    geom = place(Geometry(0, 0, 100, 100), 0, 10, Margins(left=80, right=80))
    assert geom.width == 0


def test_workarea():
    screen = Screen(0, 0, 0, 1000, 800)
    screen.bars = [
        FakeBar("top", Geometry(0, 0, 1000, 20)),
        FakeBar("left", Geometry(0, 20, 40, 780)),
        FakeBar("bottom", Geometry(0, 770, 1000, 30), visible=False),
        FakeBar("right", Geometry(900, 20, 100, 780), restrict_workarea=False),
    ]
    assert workarea(screen) == Geometry(40, 20, 960, 780)


def test_workarea_of_stacked_bars():
    screen = Screen(0, 0, 0, 1000, 800)
    screen.bars = [
        FakeBar("top", Geometry(0, 0, 1000, 20)),
        FakeBar("top", Geometry(0, 22, 1000, 20)),
    ]
    assert workarea(screen) == Geometry(0, 42, 1000, 758)


def test_strut_partial():
    bar = FakeBar("top", Geometry(0, 0, 1000, 20))
    assert strut_partial(bar, 1000, 800) == [0, 0, 20, 0, 0, 0, 0, 0, 0, 999, 0, 0]
    bar = FakeBar("bottom", Geometry(0, 780, 1000, 20))
    assert strut_partial(bar, 1000, 800) == [0, 0, 0, 20, 0, 0, 0, 0, 0, 0, 0, 999]
    bar = FakeBar("right", Geometry(960, 0, 40, 800))
    assert strut_partial(bar, 1000, 800) == [0, 40, 0, 0, 0, 0, 0, 799, 0, 0, 0, 0]
    bar.visible = False
    assert strut_partial(bar, 1000, 800) == [0] * 12
