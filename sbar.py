#!/usr/bin/env python3
"""
Status bars docked along X screen edges.

Bars on the same edge stack without overlapping, the text on them is fed
by small scripts that poll external tools and broadcast what they found.

Many pieces of X handling code are based on qtile.
"""

from theme import Theme
from wm import WM
import rc

import os.path
import runpy
import logging
import os

log = logging.getLogger("sbar.main")

RC_PATH = "~/.config/sbar/rc.py"


def main():
    logging.basicConfig(
        level=os.environ.get("SBAR_LOGLEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    theme = Theme.load()
    wm = WM(theme)

    path = os.path.expanduser(os.environ.get("SBAR_RC") or RC_PATH)
    if os.path.exists(path):
        log.info("running %s", path)
        runpy.run_path(path, init_globals=dict(
            wm=wm, screens=wm.screens, hook=wm.hook, theme=theme))
    else:
        rc.setup(wm.screens, wm.hook, theme)
        rc.start_bridges(wm.hook, theme, wm._eventloop)

    # DO NOT PUT ANY CONFIGURATION BELOW THIS LINE
    # because wm.loop is blocking.
    wm.loop()


if __name__ == '__main__':
    main()
