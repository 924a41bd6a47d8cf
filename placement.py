"""
Placement of bars along screen edges.

A placement is the composition of an anchor (which corner or which edge
centre the bar sticks to) and, for stretched bars, maximization along the
edge. Coordinates are absolute, margins push the bar away from the
corresponding side of the area.
"""

from defs import EDGES, HORIZONTAL, ALIGN_MAP
from geometry import Geometry, Margins

import logging
log = logging.getLogger("sbar.placement")


def check_position(position):
    if position not in EDGES:
        raise ValueError(
            "Invalid bar position %r, you may only use "
            "'top', 'bottom', 'left' and 'right'" % (position,))
    return position


def check_align(align):
    if align == "center":
        log.warning("align 'center' is deprecated, use 'centered'")
        align = "centered"
    if align not in ALIGN_MAP and align not in ("start", "end"):
        raise ValueError("Invalid bar alignment %r" % (align,))
    return align


def anchor(position, align):
    """ Where along its edge a bar sticks: 'start', 'end' or 'centered'. """
    check_position(position)
    if align in ("centered", "center"):
        return "centered"
    if align in ("start", "end"):
        return align
    if position in HORIZONTAL:
        start, end = "left", "right"
    else:
        start, end = "top", "bottom"
    if align == start or ALIGN_MAP.get(align) == start:
        return "start"
    if align == end or ALIGN_MAP.get(align) == end:
        return "end"
    raise ValueError("Invalid bar alignment %r" % (align,))


def _along(start, length, size, lead, trail, where):
    if where == "start":
        return start + lead
    if where == "end":
        return start + length - size - trail
    return start + lead + (length - lead - trail - size) // 2


def gen_placement(position, align, stretch):
    """ Returns place(area, width, height, margins) -> Geometry. """
    check_position(position)
    where = anchor(position, align)

    def place(area, width, height, margins):
        m = Margins.coerce(margins)
        if position in HORIZONTAL:
            if position == "top":
                y = area.y + m.top
            else:
                y = area.y + area.height - height - m.bottom
            if stretch:  # maximize_horizontally
                x = area.x + m.left
                width = max(0, area.width - m.left - m.right)
            else:
                x = _along(area.x, area.width, width, m.left, m.right, where)
        else:
            if position == "left":
                x = area.x + m.left
            else:
                x = area.x + area.width - width - m.right
            if stretch:  # maximize_vertically
                y = area.y + m.top
                height = max(0, area.height - m.top - m.bottom)
            else:
                y = _along(area.y, area.height, height, m.top, m.bottom, where)
        return Geometry(x, y, width, height)

    return place


def struts(bar, screen):
    """ Space a bar reserves on each edge of its screen. """
    result = dict.fromkeys(EDGES, 0)
    geom = bar.geometry
    if not (bar.visible and bar.restrict_workarea and geom):
        return result
    pos = bar.position
    if pos == "top":
        result[pos] = geom.y + geom.height - screen.y
    elif pos == "bottom":
        result[pos] = screen.y + screen.height - geom.y
    elif pos == "left":
        result[pos] = geom.x + geom.width - screen.x
    else:
        result[pos] = screen.x + screen.width - geom.x
    result[pos] = max(0, result[pos])
    return result


def workarea(screen):
    """ Screen geometry minus what its bars reserve. """
    reserved = dict.fromkeys(EDGES, 0)
    for bar in screen.bars:
        for edge, size in struts(bar, screen).items():
            reserved[edge] = max(reserved[edge], size)
    return Geometry(
        screen.x + reserved["left"],
        screen.y + reserved["top"],
        max(0, screen.width - reserved["left"] - reserved["right"]),
        max(0, screen.height - reserved["top"] - reserved["bottom"]),
    )


def strut_partial(bar, root_width, root_height):
    """ Value for _NET_WM_STRUT_PARTIAL:
        left right top bottom
        left_start_y left_end_y right_start_y right_end_y
        top_start_x top_end_x bottom_start_x bottom_end_x
    """
    strut = [0] * 12
    geom = bar.geometry
    if not (bar.visible and bar.restrict_workarea and geom):
        return strut
    x, y, w, h = geom
    pos = bar.position
    if pos == "left":
        strut[0] = x + w
        strut[4:6] = [y, y + h - 1]
    elif pos == "right":
        strut[1] = root_width - x
        strut[6:8] = [y, y + h - 1]
    elif pos == "top":
        strut[2] = y + h
        strut[8:10] = [x, x + w - 1]
    else:
        strut[3] = root_height - y
        strut[10:12] = [x, x + w - 1]
    return [max(0, v) for v in strut]

