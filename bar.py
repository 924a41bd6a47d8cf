from defs import HORIZONTAL
from geometry import Margins
from placement import check_position, check_align

import logging
import math


class Bar:
    """ A strip attached to one edge of a screen.

        Setters only record the new value and tell the screen manager the
        layout of the screen is stale. Positions are recomputed by
        ScreenManager.update_layout().
    """

    def __init__(self, manager, screen, position="top", align="centered",
                 stretch=True, margins=None, width=0, height=0,
                 visible=True, ontop=False, restrict_workarea=True,
                 type="dock", font=None, bg=None, fg=None, opacity=1.0):
        self.manager = manager
        self._screen = screen
        self._position = check_position(position)
        self._align = check_align(align)
        self._stretch = bool(stretch)
        self._margins = Margins.coerce(margins)
        self._width = width
        self._height = height
        self._visible = visible
        self._ontop = ontop
        self._restrict_workarea = restrict_workarea
        self.type = type
        self.font = font
        self.bg = bg
        self.fg = fg
        self.opacity = opacity
        self.widgets = []
        # filled by the layout pass
        self.geometry = None
        self.applied_margins = None
        self.log = logging.getLogger("sbar.bar").getChild(position)

    def _changed(self, prop, value):
        self.manager.hook.fire("property::%s" % prop, self, value)
        if self._screen is not None:
            self.manager.invalidate(self._screen)

    # POSITION

    @property
    def position(self):
        return self._position

    @position.setter
    def position(self, position):
        check_position(position)
        if position == self._position:
            return
        old = self._position
        if self._screen is not None:
            # the bar is now the last one attached to the new edge
            bars = self._screen.bars
            bars.remove(self)
            bars.append(self)
        if old in HORIZONTAL and position not in HORIZONTAL:
            self._width = self._default_thickness()
        elif old not in HORIZONTAL and position in HORIZONTAL:
            self._height = self._default_thickness()
        self._position = position
        self.log = logging.getLogger("sbar.bar").getChild(position)
        self.log.debug("moved from %s to %s", old, position)
        self._changed("position", position)

    def _default_thickness(self):
        return math.ceil(self.manager.theme.get_font_height(self.font) * 1.5)

    # SIMPLE LAYOUT PROPERTIES

    @property
    def align(self):
        return self._align

    @align.setter
    def align(self, value):
        self._align = check_align(value)
        self._changed("align", self._align)

    @property
    def stretch(self):
        return self._stretch

    @stretch.setter
    def stretch(self, value):
        self._stretch = bool(value)
        self._changed("stretch", self._stretch)

    @property
    def visible(self):
        return self._visible

    @visible.setter
    def visible(self, value):
        value = bool(value)
        if value == self._visible:
            return
        self._visible = value
        self._changed("visible", value)

    @property
    def ontop(self):
        return self._ontop

    @ontop.setter
    def ontop(self, value):
        self._ontop = bool(value)
        self._changed("ontop", self._ontop)

    @property
    def restrict_workarea(self):
        return self._restrict_workarea

    @restrict_workarea.setter
    def restrict_workarea(self, value):
        self._restrict_workarea = bool(value)
        self._changed("restrict_workarea", self._restrict_workarea)

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._width = value
        self._changed("width", value)

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, value):
        self._height = value
        self._changed("height", value)

    # MARGINS

    @property
    def margins(self):
        """ Configured margins. A copy: assign to change them. """
        return self._margins.copy()

    @margins.setter
    def margins(self, value):
        self._margins = Margins.coerce(value, base=self._margins)
        self._changed("margins", self._margins.copy())

    def set_margin(self, side, value):
        self.margins = {side: value}

    # SCREEN

    @property
    def screen(self):
        return self._screen

    @screen.setter
    def screen(self, screen):
        old = self._screen
        if screen is old:
            return
        if old is not None:
            old.bars.remove(self)
            self.manager.invalidate(old)
        if screen is not None:
            screen.bars.append(self)
        self._screen = screen
        self._changed("screen", screen)

    def remove(self):
        """ Detach from the screen. The bar is not reusable afterwards. """
        self._visible = False
        screen = self._screen
        if screen is not None:
            if self in screen.bars:
                screen.bars.remove(self)
            self.manager.invalidate(screen)
        self._screen = None
        self.log.info("removed %s", self)
        self.manager.hook.fire("bar_removed", self, screen)

    # WIDGETS

    def add_widget(self, widget):
        widget.bar = self
        self.widgets.append(widget)
        self.redraw()
        return widget

    def text(self):
        sep = self.manager.theme.get("separator", " ")
        return sep.join(w.text for w in self.widgets if w.text)

    def redraw(self):
        self.manager.hook.fire("bar::redraw", self)

    def __repr__(self):
        return "Bar(%s, %sx%s, screen=%s)" % (
            self._position, self._width, self._height,
            getattr(self._screen, "index", None))
