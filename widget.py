from xml.etree import ElementTree
import html
import re
import logging
log = logging.getLogger("sbar.widget")


# tags understood by pango markup
MARKUP_TAGS = {"markup", "span", "b", "big", "i", "s", "sub", "sup",
               "small", "tt", "u"}

PLACEHOLDER = "N/A"


def parse_markup(markup):
    """ Returns plain text of the markup or raises ValueError. """
    try:
        root = ElementTree.fromstring("<markup>%s</markup>" % markup)
    except ElementTree.ParseError as err:
        raise ValueError(str(err))
    for element in root.iter():
        if element.tag not in MARKUP_TAGS:
            raise ValueError("Unknown tag '%s'" % element.tag)
    return "".join(root.itertext())


def strip_markup(markup):
    return html.unescape(re.sub(r"<[^>]*>", "", markup))


class TextBox:
    """ Text shown on a bar. """

    def __init__(self, text="", markup=None, name=None):
        self.name = name
        self.bar = None
        self.markup = None
        self.text = ""
        if markup is not None:
            self.set_markup(markup)
        else:
            self.set_text(text)

    def _redraw(self):
        if self.bar is not None:
            self.bar.redraw()

    def set_text(self, text):
        text = str(text)
        if self.markup is None and self.text == text:
            return
        self.markup = None
        self.text = text
        self._redraw()

    def set_markup_silently(self, markup):
        if self.markup == markup:
            return True, None
        try:
            text = parse_markup(markup)
        except ValueError as err:
            return False, str(err)
        self.markup = markup
        self.text = text
        self._redraw()
        return True, None

    def set_markup(self, markup):
        ok, message = self.set_markup_silently(markup)
        if not ok:
            log.warning("Error parsing markup: %s\nFailed with string: '%s'",
                        message, markup)
            self.set_text(strip_markup(markup))
        return ok

    def watch(self, hook, event, fmt, placeholder=PLACEHOLDER):
        """ Show fmt(*args) every time `event` is fired. """
        def update(event, *args):
            if any(arg is None for arg in args):
                self.set_text(placeholder)
                return
            try:
                markup = fmt(*args)
            except Exception as err:
                log.warning("cannot format %s%s: %s", event, args, err)
                self.set_text(placeholder)
                return
            self.set_markup(markup)
        hook.register(event, update)
        return update

    def __repr__(self):
        return "TextBox(%r)" % (self.name or self.text)
