from hook import Hook

import logging


def test_fire_passes_event_and_args():
    hook = Hook()
    calls = []
    hook.register("signal::network", lambda *args: calls.append(("a",) + args))
    hook.register("signal::network", lambda *args: calls.append(("b",) + args))
    hook.fire("signal::network", True, "home")
    assert calls == [("a", "signal::network", True, "home"),
                     ("b", "signal::network", True, "home")]


def test_decorator():
    hook = Hook()
    calls = []

    @hook("evt")
    def handler(event, value):
        calls.append(value)

    assert hook.has_hook("evt")
    hook.fire("evt", 42)
    assert calls == [42]


def test_failing_handler_does_not_stop_others(caplog):
    hook = Hook()
    calls = []

    def broken(event):
        raise RuntimeError("boom")

    hook.register("evt", broken)
    hook.register("evt", lambda event: calls.append(event))
    with caplog.at_level(logging.ERROR, logger="sbar.hook"):
        hook.fire("evt")
    assert calls == ["evt"]
    assert "boom" in caplog.text


def test_unregister():
    hook = Hook()
    calls = []
    hook.register("evt", calls.append)
    hook.register("evt", calls.append)
    hook.unregister("evt", calls.append)
    assert hook.has_hook("evt")
    hook.unregister("evt", calls.append)
    assert not hook.has_hook("evt")
    hook.fire("evt")
    assert calls == []


def test_suppress():
    hook = Hook()
    calls = []
    hook.register("evt", calls.append)
    with hook.suppress("evt"):
        hook.fire("evt")
    hook.fire("evt")
    assert calls == ["evt"]


def test_no_handlers():
    Hook().fire("nobody::listens", 1, 2)
