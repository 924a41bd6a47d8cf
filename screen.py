from bar import Bar
from defs import VERTICAL, BAR_THEME_PROPS
from geometry import Geometry
from placement import check_position, workarea
from reconciler import reconcile

import logging
import math
import re


class Screen:
    """ A display area. Owns its bars in placement order. """

    def __init__(self, index, x, y, width, height, name=None):
        self.index = index
        self.name = name or str(index)
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bars = []
        self.workarea = self.geometry
        self.dirty = True

    @property
    def geometry(self):
        return Geometry(self.x, self.y, self.width, self.height)

    def contains(self, x, y):
        return (self.x <= x < self.x + self.width and
                self.y <= y < self.y + self.height)

    def __repr__(self):
        return "Screen(%s, %sx%s+%s+%s)" % (
            self.name, self.width, self.height, self.x, self.y)


def parse_percent(value, total):
    """ "50%" of total, rounded up. Numeric strings become ints, numbers
        are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    m = re.match(r"^\s*(\d+)(%?)\s*$", value)
    if not m:
        raise ValueError("Invalid bar length %r" % value)
    if m.group(2):
        return math.ceil(total * int(m.group(1)) / 100)
    return int(m.group(1))


class ScreenManager:
    """ Screens, their bars and the layout of those bars. """

    def __init__(self, hook, theme, loop=None):
        self.hook = hook
        self.theme = theme
        self.loop = loop
        self.screens = []
        self._scheduled = set()
        self.log = logging.getLogger("sbar.screens")

    @property
    def favor_vertical(self):
        return bool(self.theme.get("wibar_favor_vertical", False))

    # SCREENS

    def add_screen(self, x, y, width, height, name=None):
        index = max((s.index for s in self.screens), default=-1) + 1
        screen = Screen(index, x, y, width, height, name=name)
        self.screens.append(screen)
        self.log.info("new screen %s", screen)
        self.hook.fire("screen_added", screen)
        self.invalidate(screen)
        return screen

    def resize_screen(self, screen, x, y, width, height):
        if (screen.x, screen.y, screen.width, screen.height) == (x, y, width, height):
            return
        screen.x, screen.y, screen.width, screen.height = x, y, width, height
        self.log.info("screen changed: %s", screen)
        self.invalidate(screen)

    def remove_screen(self, screen):
        """ Drops the screen with all the bars attached to it. """
        for bar in list(screen.bars):
            bar.remove()
        if screen in self.screens:
            self.screens.remove(screen)
        self._scheduled.discard(screen)
        self.log.info("screen removed: %s", screen)
        self.hook.fire("screen_removed", screen)

    def get_screen(self, screen=None):
        if isinstance(screen, Screen):
            return screen
        if not self.screens:
            raise ValueError("no screens")
        return self.screens[screen or 0]

    @property
    def bars(self):
        return [bar for screen in self.screens for bar in screen.bars]

    # BARS

    def create_bar(self, screen=None, **args):
        """ Attach a new bar to a screen (the first one by default). """
        screen = self.get_screen(screen)
        theme = self.theme
        position = check_position(args.pop("position", "top"))
        has_to_stretch = True

        if position in VERTICAL:
            thickness, length = "width", "height"
            total = screen.height
        else:
            thickness, length = "height", "width"
            total = screen.width

        if args.get(thickness) is None:
            args[thickness] = theme.get("wibar_%s" % thickness)
        if args[thickness] is None:
            args[thickness] = \
                math.ceil(theme.get_font_height(args.get("font")) * 1.5)
        if args.get(length) is not None:
            has_to_stretch = False
            args[length] = parse_percent(args[length], total)
        else:
            args[length] = 0

        for prop in BAR_THEME_PROPS:
            if args.get(prop) is None and theme.get("wibar_%s" % prop) is not None:
                args[prop] = theme.get("wibar_%s" % prop)
        if args.get("stretch") is None:
            args["stretch"] = has_to_stretch
        if args.get("align") is None:
            args["align"] = "centered"
        # drop explicit Nones so that Bar defaults apply
        args = {k: v for k, v in args.items() if v is not None}

        bar = Bar(self, screen, position=position, **args)
        screen.bars.append(bar)
        self.log.info("new bar %s", bar)
        self.hook.fire("bar_added", bar)
        self.invalidate(screen)
        return bar

    # LAYOUT

    def invalidate(self, screen):
        """ Mark screen layout as stale. With an event loop the update runs
            once on the next iteration, no matter how many changes happened.
        """
        screen.dirty = True
        if self.loop is None or screen in self._scheduled:
            return
        self._scheduled.add(screen)
        self.loop.call_soon(self._scheduled_update, screen)

    def _scheduled_update(self, screen):
        self._scheduled.discard(screen)
        if screen in self.screens and screen.dirty:
            self.update_layout(screen)

    def update_layout(self, screen):
        """ Place every bar of the screen and recompute its workarea. """
        area = screen.geometry
        favor_vertical = self.favor_vertical
        for bar in screen.bars:
            bar.geometry, bar.applied_margins = \
                reconcile(bar, screen.bars, area, favor_vertical)
            self.log.debug("%s -> %s (margins %s)",
                           bar, bar.geometry, bar.applied_margins)
        screen.workarea = workarea(screen)
        screen.dirty = False
        self.hook.fire("layout_changed", screen)

    def update_all(self):
        for screen in self.screens:
            if screen.dirty:
                self.update_layout(screen)
