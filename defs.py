"""
Just some definitions and commonly used mappings.
"""

# screen edges a bar can be attached to
EDGES = ("top", "bottom", "left", "right")
HORIZONTAL = ("top", "bottom")
VERTICAL = ("left", "right")

OPPOSITE_MARGIN = {
    "top": "bottom",
    "bottom": "top",
    "left": "right",
    "right": "left",
}

# alignment names are interchangeable between horizontal and vertical bars
ALIGN_MAP = {
    "top": "left",
    "left": "top",
    "bottom": "right",
    "right": "bottom",
    "centered": "centered",
}

# theme keys that can provide defaults for new bars (as "wibar_<name>")
BAR_THEME_PROPS = [
    "ontop", "type", "stretch", "margins", "align",
    "font", "bg", "fg", "opacity",
]

WINDOW_TYPES = {
    "dock": '_NET_WM_WINDOW_TYPE_DOCK',
    "toolbar": '_NET_WM_WINDOW_TYPE_TOOLBAR',
    "utility": '_NET_WM_WINDOW_TYPE_UTILITY',
    "normal": '_NET_WM_WINDOW_TYPE_NORMAL',
}


PROPERTYMAP = {
    # ewmh properties
    "_NET_WM_NAME": ("UTF8_STRING", 8),
    "_NET_WM_PID": ("CARDINAL", 32),
    "_NET_WORKAREA": ("CARDINAL", 32),
    "_NET_WM_DESKTOP": ("CARDINAL", 32),
    "_NET_WM_STRUT": ("CARDINAL", 32),
    "_NET_WM_STRUT_PARTIAL": ("CARDINAL", 32),
    "_NET_WM_WINDOW_OPACITY": ("CARDINAL", 32),
    "_NET_WM_WINDOW_TYPE": ("ATOM", 32),
    "_NET_WM_STATE": ("ATOM", 32),
    # ICCCM
    "WM_NAME": ("STRING", 8),
    "WM_CLASS": ("STRING", 8),
}


XCB_CONN_ERRORS = {
    1: 'XCB_CONN_ERROR',
    2: 'XCB_CONN_CLOSED_EXT_NOTSUPPORTED',
    3: 'XCB_CONN_CLOSED_MEM_INSUFFICIENT',
    4: 'XCB_CONN_CLOSED_REQ_LEN_EXCEED',
    5: 'XCB_CONN_CLOSED_PARSE_ERR',
    6: 'XCB_CONN_CLOSED_INVALID_SCREEN',
    7: 'XCB_CONN_CLOSED_FDPASSING_FAILED',
}

# "sticky" so that bars stay on every desktop of the running WM
BAR_STATES = [
    '_NET_WM_STATE_STICKY',
    '_NET_WM_STATE_SKIP_TASKBAR',
]

# opacity in _NET_WM_WINDOW_OPACITY is scaled to 32 bits
OPAQUE = 0xffffffff
