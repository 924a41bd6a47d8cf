from subprocess import DEVNULL
import asyncio
import os
import logging
log = logging.getLogger("sbar.utils")


async def read_output(cmd):
    """ Run a shell command, return its stdout.
        A missing tool or non-zero exit status gives an empty string.
    """
    try:
        proc = await asyncio.create_subprocess_shell(
            cmd, stdout=asyncio.subprocess.PIPE, stderr=DEVNULL,
            preexec_fn=os.setpgrp)
        stdout, _ = await proc.communicate()
    except OSError as err:
        log.warning("failed to exec %s: %s", cmd, err)
        return ""
    if proc.returncode != 0:
        log.debug("%s exited with %s", cmd, proc.returncode)
        return ""
    return stdout.decode(errors="replace")


async def kill_matching(pattern):
    """ Kill processes with `pattern` in their command line. Best effort. """
    try:
        proc = await asyncio.create_subprocess_exec(
            "pkill", "-f", pattern, stdout=DEVNULL, stderr=DEVNULL)
        await proc.wait()
    except OSError as err:
        log.debug("cannot kill %r: %s", pattern, err)
