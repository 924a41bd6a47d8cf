"""
Default configuration: a top bar on every screen showing network, player
and free disk space. Copy to ~/.config/sbar/rc.py to customize; the script
is executed with `wm`, `screens`, `hook` and `theme` in its globals.

The mpd volume, shuffle and spotify bridges are not started here; a user rc
can add them next to the defaults:

    from rc import setup, start_bridges
    from widget import TextBox
    import bridges

    loop = wm.screens.loop
    bar = setup(screens, hook, theme)[0]
    volume = bar.add_widget(TextBox("N/A", name="volume"))
    volume.watch(hook, "signal::player_volume", lambda v: "vol %s%%" % v)
    start_bridges(hook, theme, loop)
    bridges.start_all(bridges.player_volume(hook, loop) +
                      bridges.player_options(hook, loop) +
                      bridges.spotify(hook, loop))
"""

from widget import TextBox
import bridges

import logging
log = logging.getLogger("sbar.rc")

TB = 1000 ** 4


def fmt_network(status, ssid):
    if not status:
        return "<span foreground='#888888'>offline</span>"
    return "net: %s" % escape(ssid)


def fmt_player(artist, title):
    return "<b>%s</b> - %s" % (escape(artist), escape(title))


def fmt_disk(used, total):
    return "%.1f TB free" % ((total - used) / TB)


def escape(text):
    return (text.replace("&", "&amp;").replace("<", "&lt;")
            .replace(">", "&gt;"))


def setup(screens, hook, theme):
    bars = []
    for screen in screens.screens:
        bar = screens.create_bar(screen=screen, position="top")
        net = bar.add_widget(TextBox("N/A", name="network"))
        net.watch(hook, "signal::network", fmt_network)
        player = bar.add_widget(TextBox("N/A", name="player"))
        player.watch(hook, "signal::player", fmt_player)
        disk = bar.add_widget(TextBox("free disk space", name="disk"))
        disk.watch(hook, "signal::disk", fmt_disk)
        bars.append(bar)
    log.info("created %s bars", len(bars))
    return bars


def start_bridges(hook, theme, loop):
    name = theme.get("player")
    return bridges.start_all(
        bridges.network(hook, loop, interval=theme.get("network_interval")) +
        bridges.player(hook, loop, name=name) +
        bridges.disk(hook, loop, path=theme.get("disk_path"),
                     interval=theme.get("disk_interval"))
    )
