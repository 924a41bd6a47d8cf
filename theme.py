import os.path
import runpy
import math
import re
import os
import logging
log = logging.getLogger("sbar.theme")


DEFAULT_PATH = "~/.config/sbar/theme.py"

DEFAULTS = {
    "font": "sans 8",
    "dpi": 96,
    "icon_dir": "~/.config/sbar/icons",
    "separator": " | ",
    "bg": "#222222",
    "fg": "#ffffff",
    "wibar_favor_vertical": False,
    # bridges
    "player": "ncspot",
    "network_interval": 5,
    "disk_path": "/",
    "disk_interval": 60,
}


class Theme:
    """ Look and feel settings. A theme file is a plain python module,
        every public module-level name becomes a theme key.
    """

    def __init__(self, values=None, path=None):
        self.values = dict(DEFAULTS)
        self.values.update(values or {})
        self.path = path

    @classmethod
    def load(cls, path=None):
        path = path or os.environ.get("SBAR_THEME") or DEFAULT_PATH
        path = os.path.expanduser(path)
        if not os.path.exists(path):
            log.info("no theme at %s, using defaults", path)
            return cls()
        try:
            namespace = runpy.run_path(path)
        except Exception as err:
            log.warning("failed to load theme %s: %s", path, err)
            return cls()
        values = {k: v for k, v in namespace.items()
                  if not k.startswith("_") and not callable(v)}
        log.info("loaded theme %s", path)
        return cls(values, path=path)

    def get(self, key, default=None):
        return self.values.get(key, default)

    def __getitem__(self, key):
        return self.values[key]

    def __contains__(self, key):
        return key in self.values

    @property
    def icon_dir(self):
        return os.path.expanduser(self.values["icon_dir"])

    def get_font_height(self, font=None):
        """ Pixel height of a font description like "Terminus 10". """
        font = font or self.values["font"]
        m = re.search(r"(\d+(?:\.\d+)?)(px)?\s*$", str(font))
        if not m:
            log.warning("cannot find font size in %r", font)
            size, px = 8, False
        else:
            size, px = float(m.group(1)), bool(m.group(2))
        if px:
            return math.ceil(size)
        return math.ceil(size * self.values["dpi"] / 72)
