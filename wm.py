from defs import XCB_CONN_ERRORS
from geometry import Geometry
from hook import Hook
from screen import ScreenManager
from window import Window, BarWindow, parse_color

from xcffib.xproto import WindowError, AccessError, DrawableError
from xcffib.xproto import CW, WindowClass, EventMask
import xcffib.randr
import xcffib.xproto
import xcffib

import traceback
import asyncio
import logging
import signal
import sys
import os
log = logging.getLogger("sbar.wm")


def prepare_loop(loop, stop):
    """ Install SIGINT/SIGTERM and exception handlers on the event loop. """
    loop.add_signal_handler(signal.SIGINT, stop)
    loop.add_signal_handler(signal.SIGTERM, stop)
    loop.set_exception_handler(
        lambda loop, ctx: log.error("Got an exception in %s: %s", loop, ctx))
    return loop


class Xrandr:
    """ Represents screens as seen by xrandr. """

    def __init__(self, root, conn):
        self.root = root
        self._conn = conn(xcffib.randr.key)

    def select_input(self):
        self._conn.SelectInput(self.root.wid,
                               xcffib.randr.NotifyMask.ScreenChange)

    def screens(self):
        """ [(name, x, y, width, height)] of the active CRTCs. """
        result = []
        resources = self._conn.GetScreenResources(self.root.wid).reply()
        for crtc in resources.crtcs:
            info = self._conn.GetCrtcInfo(crtc, xcffib.CurrentTime).reply()
            # disabled outputs report an empty CRTC
            if info.width and info.height:
                result.append((str(crtc), info.x, info.y,
                               info.width, info.height))
        return result


# TODO: stolen from qtile. Probably, we want to re-factor it.
class AtomCache:

    def __init__(self, conn):
        self.conn = conn
        self.atoms = {}

    def insert(self, name):
        c = self.conn.core.InternAtom(False, len(name), name)
        self.atoms[name] = c.reply().atom

    def __getitem__(self, key):
        if key not in self.atoms:
            self.insert(key)
        return self.atoms[key]


class WM:
    """
        Keeps bar windows in sync with the layout computed by the
        screen manager. It is a regular X client: it does not manage other
        windows, it only docks its own bars along the screen edges.
    """
    root = None   # type: Window
    atoms = None  # type: AtomCache

    def __init__(self, theme, display=None, loop=None):
        self.log = log
        self.theme = theme
        self.hook = Hook()
        self.bar_windows = {}  # mapping between bar and its BarWindow

        if not display:
            display = os.environ.get("DISPLAY")

        try:
            self._conn = xcffib.connect(display=display)
        except xcffib.ConnectionException:
            sys.exit("cannot connect to %s" % display)

        self.atoms = AtomCache(self._conn)
        xcb_setup = self._conn.get_setup()
        xcb_screens = [i for i in xcb_setup.roots]
        self.xcb_default_screen = xcb_screens[self._conn.pref_screen]
        root_wid = self.xcb_default_screen.root
        self.root = Window(self, root_wid, name="root", mapped=True)

        # SETUP EVENT LOOP
        if not loop:
            loop = asyncio.new_event_loop()
        self._eventloop = loop
        self.screens = ScreenManager(self.hook, theme, loop=loop)

        # NOW IT'S TIME TO GET PHYSICAL SCREEN CONFIGURATION
        self.xrandr = Xrandr(root=self.root, conn=self._conn)
        self.xrandr.select_input()
        self.scan_screens()

        # children of the bridges are reaped by asyncio itself
        prepare_loop(self._eventloop, self.stop)
        fd = self._conn.get_file_descriptor()
        self._eventloop.add_reader(fd, self._xpoll)

        self.register_hooks()
        self.flush()

    def register_hooks(self):
        # BARS
        self.hook.register("bar_added", self.on_bar_added)
        self.hook.register("bar_removed", self.on_bar_removed)
        self.hook.register("layout_changed", self.on_layout_changed)
        self.hook.register("bar::redraw", self.on_bar_redraw)
        # X EVENTS
        self.hook.register("Expose", self.on_expose)
        self.hook.register("ScreenChangeNotify", self.on_screen_change)

    @property
    def root_geometry(self):
        geom = self._conn.core.GetGeometry(self.root.wid).reply()
        return Geometry(0, 0, geom.width, geom.height)

    # SCREENS

    def scan_screens(self):
        """ Sync screens with xrandr: add new, resize known, drop gone. """
        try:
            detected = self.xrandr.screens()
        except Exception as err:
            self.log.error("xrandr failed: %s", err)
            detected = []
        if not detected:
            root = self.root_geometry
            detected = [("default", 0, 0, root.width, root.height)]

        known = {screen.name: screen for screen in self.screens.screens}
        for name, x, y, width, height in detected:
            if name in known:
                self.screens.resize_screen(known.pop(name), x, y, width, height)
            else:
                self.screens.add_screen(x, y, width, height, name=name)
        for screen in known.values():
            self.screens.remove_screen(screen)

    def on_screen_change(self, evname, xcb_event):
        self.log.info("screen configuration changed")
        self.scan_screens()

    # BAR WINDOWS

    def create_window(self, x, y, width, height, bg=None):
        wid = self._conn.generate_id()
        self._conn.core.CreateWindow(
            self.xcb_default_screen.root_depth,
            wid,
            self.xcb_default_screen.root,
            x, y, max(width, 1), max(height, 1), 0,
            WindowClass.InputOutput,
            self.xcb_default_screen.root_visual,
            CW.BackPixel | CW.EventMask,
            [
                parse_color(bg, self.xcb_default_screen.black_pixel),
                EventMask.StructureNotify | EventMask.Exposure
            ]
        )
        return wid

    def on_bar_added(self, evname, bar):
        wid = self.create_window(0, 0, bar.width, bar.height,
                                 bg=bar.bg or self.theme.get("bg"))
        window = BarWindow(self, wid, bar)
        window.setup()
        self.bar_windows[bar] = window
        self.log.debug("%s got %s", bar, window)

    def on_bar_removed(self, evname, bar, screen):
        window = self.bar_windows.pop(bar, None)
        if window:
            window.destroy()
            self.flush()

    def on_layout_changed(self, evname, screen):
        for bar in screen.bars:
            window = self.bar_windows.get(bar)
            if window:
                window.apply(screen)
        self.flush()

    def on_bar_redraw(self, evname, bar):
        window = self.bar_windows.get(bar)
        if window:
            window.draw()
            self.flush()

    def on_expose(self, evname, xcb_event):
        for window in self.bar_windows.values():
            if window.wid == xcb_event.window:
                window.draw()
        self.flush()

    # LIFE CYCLE

    def flush(self):
        """ Force pending X request to be sent.
            By default XCB aggressevly buffers for performance reasons. """
        return self._conn.flush()

    def xsync(self):
        """ Flush XCB queue and wait till it is processed by X server. """
        # The idea here is that pushing an innocuous request through the queue
        # and waiting for a response "syncs" the connection, since requests are
        # serviced in order.
        self._conn.core.GetInputFocus().reply()

    def stop(self, xserver_dead=False):
        """ Remove bars and quit. """
        self.hook.fire("on_exit")
        try:
            if not xserver_dead:
                for window in self.bar_windows.values():
                    window.destroy()
                self.xsync()
        except Exception as err:
            self.log.error("error on stop: %s", err)
        self.log.debug("stopping event loop")
        self._eventloop.stop()

    def loop(self):
        """ Run until stop(). """
        self.screens.update_all()
        try:
            self._eventloop.run_forever()
        finally:
            self._conn.disconnect()

    def _xpoll(self):
        """ Fetch incomming events (if any) and call hooks. """
        while True:
            try:
                xcb_event = self._conn.poll_for_event()
                if not xcb_event:
                    break
                evname = xcb_event.__class__.__name__
                if evname.endswith("Event"):
                    evname = evname[:-5]
                self.log.debug("got %s %s", evname, xcb_event)
                self.hook.fire(evname, xcb_event)
            except (WindowError, AccessError, DrawableError):
                self.log.debug("(minor exception)")
            except Exception:
                self.log.error(traceback.format_exc())
                error_code = self._conn.has_error()
                if error_code:
                    error_string = XCB_CONN_ERRORS[error_code]
                    self.log.critical("Shutting down due to X connection error %s (%s)",
                                      error_string, error_code)
                    self.stop(xserver_dead=True)
                    break
        self.flush()  # xcb often doesn't flush implicitly
