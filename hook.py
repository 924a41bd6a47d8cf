from collections import defaultdict
import traceback
import logging


class Hook:
    """ Named broadcast signals. Handlers get the event name followed by
        the positional arguments of the signal.
    """

    def __init__(self):
        self.cb_map = defaultdict(list)
        self.log = logging.getLogger("sbar.hook")
        self.suppressed = set()

    def decor(self, event):
        def wrap(cb):
            self.register(event, cb)
            return cb
        return wrap
    __call__ = decor

    def register(self, event, cb):
        self.cb_map[event].append(cb)

    def unregister(self, event, cb):
        handlers = self.cb_map.get(event, [])
        if cb in handlers:
            handlers.remove(cb)
        if not handlers:
            self.cb_map.pop(event, None)

    def has_hook(self, event):
        return event in self.cb_map

    def suppress(self, event):
        hook = self

        class Context:

            def __enter__(self):
                hook.log.debug("suppressing %s", event)
                hook.suppressed.add(event)

            def __exit__(self, *args):
                hook.log.debug("un-suppressing %s", event)
                if event in hook.suppressed:
                    hook.suppressed.remove(event)
                else:
                    hook.log.info("uhm, event is not suppressed: %s", event)
        return Context()

    def fire(self, event, *args, **kwargs):
        if event not in self.cb_map:
            self.log.debug("no handler for %s", event)
            return

        if event in self.suppressed:
            self.log.debug("event suppressed: %s %s %s", event, args, kwargs)
            return

        # handlers may (un)register while we are iterating
        for handler in list(self.cb_map[event]):
            try:
                handler(event, *args, **kwargs)
            except Exception:
                self.log.error("error on event %s in %s:\n%s",
                               event, handler, traceback.format_exc())
