"""
Bridges between external tools and the hook.

Each bridge runs a CLI tool, parses its text output and fires a named
signal with positional arguments:

  signal::network         status (bool), ssid (str)
  signal::player          artist (str), title (str)
  signal::player_volume   value (int 0..100 or None)
  signal::player_options  random (bool)
  signal::spotify         artist (str), title (str), status (str)
  signal::disk            used (bytes or None), total (bytes or None)

A failing tool is "no data": the parsers substitute placeholders.
"""

from utils import read_output, kill_matching
from widget import PLACEHOLDER

import asyncio
import logging
import re
import shlex
log = logging.getLogger("sbar.bridges")


# PARSERS

def parse_network(stdout):
    ssid = stdout.strip()
    return bool(ssid), ssid


def parse_player(stdout):
    artist = re.match(r"ARTIST@(.*)@TITLE", stdout)
    title = re.search(r"@TITLE@(.*)@STATUS", stdout)
    artist = artist.group(1) if artist else ""
    title = title.group(1) if title else ""
    return artist or PLACEHOLDER, title or PLACEHOLDER


def parse_volume(stdout):
    m = re.search(r"volume:\s*(\d+)%", stdout)
    return (int(m.group(1)) if m else None),


def parse_shuffle(stdout):
    return stdout.strip()[:2] == "On",


def parse_spotify(line):
    m = re.search(r"xesam:artist(.*?),? xesam:title(.*?),? mpris:length(.*)",
                  line)
    if not m:
        return PLACEHOLDER, PLACEHOLDER, "stopped"
    artist, title, status = m.groups()
    return (artist or PLACEHOLDER, title or PLACEHOLDER,
            status.strip().lower() or "stopped")


def parse_df(stdout):
    """ `df -B1 --output=used,size`: header line, then "used size". """
    for line in reversed(stdout.strip().splitlines()):
        fields = line.split()
        if len(fields) == 2 and all(f.isdigit() for f in fields):
            return int(fields[0]), int(fields[1])
    return None, None


# RUNNERS

class Watch:
    """ Runs `cmd` and fires `event` with parse(stdout). Every `interval`
        seconds if there is one, otherwise on refresh().
    """

    def __init__(self, hook, event, cmd, parse, interval=None, loop=None):
        self.hook = hook
        self.event = event
        self.cmd = cmd
        self.parse = parse
        self.interval = interval
        self.loop = loop
        self._task = None
        self._pending = set()  # refresh() tasks still running

    async def poll(self):
        stdout = await read_output(self.cmd)
        args = self.parse(stdout)
        self.hook.fire(self.event, *args)
        return args

    async def _run(self):
        while True:
            await self.poll()
            await asyncio.sleep(self.interval)

    def refresh(self):
        task = self.loop.create_task(self.poll())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def start(self):
        log.debug("starting %s", self)
        if self.interval:
            self._task = self.loop.create_task(self._run())
        else:
            self._task = self.refresh()
        return self

    def stop(self):
        if self._task:
            self._task.cancel()
            self._task = None
        for task in list(self._pending):
            task.cancel()

    def __repr__(self):
        return "Watch(%s, %r, every %ss)" % (self.event, self.cmd, self.interval)


class Follow:
    """ Long running command, on_line(line) is called for every line it
        prints. Earlier copies of it (matched by `kill_pattern`) are killed
        first.
    """

    def __init__(self, cmd, on_line, kill_pattern=None, loop=None):
        self.cmd = cmd
        self.on_line = on_line
        self.kill_pattern = kill_pattern
        self.loop = loop
        self.proc = None
        self._task = None

    async def _run(self):
        if self.kill_pattern:
            await kill_matching(self.kill_pattern)
        try:
            self.proc = await asyncio.create_subprocess_shell(
                self.cmd, stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL)
        except OSError as err:
            log.warning("failed to exec %s: %s", self.cmd, err)
            return
        async for line in self.proc.stdout:
            self.on_line(line.decode(errors="replace").rstrip("\n"))
        await self.proc.wait()
        log.info("%s exited with %s", self.cmd, self.proc.returncode)

    def start(self):
        log.debug("starting %s", self)
        self._task = self.loop.create_task(self._run())
        return self

    def stop(self):
        if self.proc and self.proc.returncode is None:
            self.proc.terminate()
        if self._task:
            self._task.cancel()
            self._task = None

    def __repr__(self):
        return "Follow(%r)" % self.cmd


# BRIDGES

def network(hook, loop, interval=5):
    return [Watch(hook, "signal::network", "iwgetid -r", parse_network,
                  interval=interval, loop=loop)]


def player(hook, loop, name="ncspot"):
    info = Watch(
        hook, "signal::player",
        "playerctl -p %s metadata -f "
        "'ARTIST@{{artist}}@TITLE@{{title}}@STATUS@{{status}}'" % name,
        parse_player, loop=loop)
    follow = "playerctl -p %s -F metadata title" % name
    return [info, Follow(follow, lambda line: info.refresh(),
                         kill_pattern=follow, loop=loop)]


def player_volume(hook, loop):
    volume = Watch(hook, "signal::player_volume", "mpc volume",
                   parse_volume, loop=loop)
    # the mixer event is printed twice for every volume update
    follow = "mpc idleloop mixer | sed -u '1~2d'"
    return [volume, Follow(follow, lambda line: volume.refresh(),
                           kill_pattern="mpc idleloop mixer", loop=loop)]


def player_options(hook, loop, name="ncspot"):
    options = Watch(hook, "signal::player_options",
                    "playerctl -p %s shuffle" % name, parse_shuffle, loop=loop)
    follow = "playerctl -p %s status" % name
    return [options, Follow(follow, lambda line: options.refresh(),
                            kill_pattern=follow, loop=loop)]


def spotify(hook, loop, name="ncspot"):
    follow = ("playerctl -p %s metadata --format 'xesam:artist{{artist}}, "
              "xesam:title{{title}}, mpris:length{{status}}' --follow" % name)

    def on_line(line):
        hook.fire("signal::spotify", *parse_spotify(line))
    return [Follow(follow, on_line,
                   kill_pattern="playerctl -p %s metadata" % name, loop=loop)]


def disk(hook, loop, path="/", interval=60):
    cmd = "df -B1 --output=used,size %s" % shlex.quote(path)
    return [Watch(hook, "signal::disk", cmd, parse_df,
                  interval=interval, loop=loop)]


def start_all(bridges):
    for bridge in bridges:
        bridge.start()
    return bridges
