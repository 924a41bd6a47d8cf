"""
Margin reconciliation for bars sharing screen edges.

Bars on the same edge of the same screen stack: the effective margin of a
bar on its own edge is its configured margin plus the extents of all
visible bars placed on that edge before it. The extent of a bar is its
thickness plus its margins on that edge and the opposite one.
"""

from defs import OPPOSITE_MARGIN, HORIZONTAL, VERTICAL
from placement import gen_placement


def thickness_attr(position):
    return "height" if position in HORIZONTAL else "width"


def get_margin(bar, bars, position, auto_stop=False):
    """ Total extent of the visible bars on `position`. With `auto_stop`
        only bars preceding `bar` in placement order are counted.
    """
    size_attr = thickness_attr(position)
    total = 0
    for other in bars:
        if auto_stop and other is bar:
            break
        if other.position == position and other.screen is bar.screen \
                and other.visible:
            total += getattr(other, size_attr)
            margins = other.margins
            total += margins[position] + margins[OPPOSITE_MARGIN[position]]
    return total


def get_margins(bar, bars, favor_vertical=False):
    position = bar.position
    margins = bar.margins.copy()
    margins[position] += get_margin(bar, bars, position, auto_stop=True)

    # bars on the perpendicular edges own the corners
    if position in VERTICAL and not favor_vertical:
        margins.top = get_margin(bar, bars, "top")
        margins.bottom = get_margin(bar, bars, "bottom")
    elif position in HORIZONTAL and favor_vertical:
        margins.left = get_margin(bar, bars, "left")
        margins.right = get_margin(bar, bars, "right")
    return margins


def reconcile(bar, bars, area, favor_vertical=False):
    """ Geometry of `bar` inside `area` and the margins it was placed with. """
    margins = get_margins(bar, bars, favor_vertical)
    place = gen_placement(bar.position, bar.align, bar.stretch)
    return place(area, bar.width, bar.height, margins), margins

