from defs import PROPERTYMAP, WINDOW_TYPES, BAR_STATES, OPAQUE
from placement import strut_partial
from xcffib.xproto import GC
from xcffib import xproto

import logging


class MaskMap:
    """
        A general utility class that encapsulates the way the mask/value idiom
        works in xpyb. It understands a special attribute _maskvalue on
        objects, which will be used instead of the object value if present.
        This lets us passin a Font object, rather than Font.fid, for example.
    """

    def __init__(self, obj):
        self.mmap = []
        for i in dir(obj):
            if not i.startswith("_"):
                self.mmap.append((getattr(obj, i), i.lower()))
        self.mmap.sort()

    def __call__(self, **kwargs):
        """
            kwargs: keys should be in the mmap name set

            Returns a (mask, values) tuple.
        """
        mask = 0
        values = []
        for m, s in self.mmap:
            if s in kwargs:
                val = kwargs.get(s)
                if val is not None:
                    mask |= m
                    values.append(getattr(val, "_maskvalue", val))
                del kwargs[s]
        if kwargs:
            raise ValueError("Unknown mask names: %s" % list(kwargs.keys()))
        return mask, values

GCMasks = MaskMap(GC)


def parse_color(color, default=0):
    """ "#rrggbb" -> pixel value of a true color visual. """
    if not color:
        return default
    color = color.lstrip("#")
    if len(color) == 3:
        color = "".join(c * 2 for c in color)
    try:
        return int(color[:6], 16)
    except ValueError:
        return default


class Window:
    """ An X window we own. """
    mapped = False
    name = "<no name>"

    def __init__(self, wm, wid, name=None, mapped=False):
        self.wid = wid
        self.wm = wm
        self._conn = self.wm._conn
        self.mapped = mapped
        if name:
            self.name = name
        self.log = logging.getLogger("sbar.window").getChild(str(wid))

    def show(self):
        if self.mapped:
            return
        self._conn.core.MapWindow(self.wid)
        self.mapped = True

    def hide(self):
        if not self.mapped:
            return
        self._conn.core.UnmapWindow(self.wid)
        self.mapped = False

    def rise(self):
        """ Put window on top of others. """
        return self.stackmode(xproto.StackMode.Above)

    def stackmode(self, mode):
        self._conn.core.ConfigureWindow(self.wid,
                                        xproto.ConfigWindow.StackMode,
                                        [mode])

    def destroy(self):
        self._conn.core.DestroyWindow(self.wid)
        self.mapped = False

    def set_geometry(self, x=None, y=None, width=None, height=None):
        mask = 0
        values = []
        if x is not None:
            mask |= xproto.ConfigWindow.X
            values.append(x)
        if y is not None:
            mask |= xproto.ConfigWindow.Y
            values.append(y)
        # X does not accept empty windows
        if width is not None:
            mask |= xproto.ConfigWindow.Width
            values.append(max(width, 1))
        if height is not None:
            mask |= xproto.ConfigWindow.Height
            values.append(max(height, 1))
        self._conn.core.ConfigureWindow(self.wid, mask, values)

    def set_prop(self, name, value, type=None, format=None):
        """
            name: String Atom name
            type: String Atom name
            format: 8, 16, 32
        """
        if name in PROPERTYMAP:
            if type or format:
                raise ValueError(
                    "Over-riding default type or format for property."
                )
            type, format = PROPERTYMAP[name]
        else:
            if None in (type, format):
                raise ValueError(
                    "Must specify type and format for unknown property."
                )

        if isinstance(value, str):
            # xcffib will pack the bytes, but we should encode them properly
            value = value.encode()
        elif isinstance(value, int):
            value = [value]

        self._conn.core.ChangeProperty(
            xproto.PropMode.Replace,
            self.wid,
            self.wm.atoms[name],
            self.wm.atoms[type],
            format,  # Format - 8, 16, 32
            len(value),
            value
        )

    def __repr__(self):
        name = self.name
        if len(name) > 20:
            name = name[:17] + '...'
        return "Window(%s, \"%s\")" % (self.wid, name)


class BarWindow(Window):
    """ Dock window showing the text of a bar. """

    def __init__(self, wm, wid, bar):
        super().__init__(wm, wid, name="bar %s" % bar.position)
        self.bar = bar
        self.gc = None
        self.font = None

    def setup(self):
        """ Tell the running window manager what we are. """
        atoms = self.wm.atoms
        self.set_prop("_NET_WM_NAME", "sbar")
        self.set_prop("WM_NAME", "sbar")
        self.set_prop("WM_CLASS", "sbar\0sbar\0")
        self.set_prop("_NET_WM_WINDOW_TYPE",
                      [atoms[WINDOW_TYPES.get(self.bar.type, WINDOW_TYPES["dock"])]])
        self.set_prop("_NET_WM_STATE", [atoms[s] for s in BAR_STATES])
        self.set_prop("_NET_WM_DESKTOP", 0xffffffff)
        if self.bar.opacity is not None and self.bar.opacity < 1:
            self.set_prop("_NET_WM_WINDOW_OPACITY",
                          int(OPAQUE * max(0.0, self.bar.opacity)))

        self.font = self._conn.generate_id()
        name = self.wm.theme.get("core_font", "fixed")
        self._conn.core.OpenFont(self.font, len(name), name)
        self.gc = self._conn.generate_id()
        mask, values = GCMasks(
            foreground=parse_color(self.bar.fg or self.wm.theme.get("fg"), 0xffffff),
            background=parse_color(self.bar.bg or self.wm.theme.get("bg"), 0),
            font=self.font,
        )
        self._conn.core.CreateGC(self.gc, self.wid, mask, values)

    def apply(self, screen):
        """ Mirror the last layout pass of the bar. """
        bar = self.bar
        if not bar.visible or not bar.geometry:
            self.hide()
            return
        self.set_geometry(*bar.geometry)
        root = self.wm.root_geometry
        self.set_prop("_NET_WM_STRUT_PARTIAL",
                      strut_partial(bar, root.width, root.height))
        self.show()
        if bar.ontop:
            self.rise()
        self.draw()

    def draw(self):
        if not self.mapped or self.gc is None or not self.bar.geometry:
            return
        self._conn.core.ClearArea(False, self.wid, 0, 0, 0, 0)
        text = self.bar.text().encode("latin-1", errors="replace")[:255]
        if not text:
            return
        height = self.bar.geometry.height
        # core fonts: baseline roughly 3/4 down the bar
        baseline = max(1, height * 3 // 4)
        self._conn.core.ImageText8(len(text), self.wid, self.gc, 4,
                                   baseline, text)

    def destroy(self):
        if self.gc is not None:
            self._conn.core.FreeGC(self.gc)
            self._conn.core.CloseFont(self.font)
            self.gc = None
        super().destroy()

