from collections import namedtuple
from numbers import Number

from defs import EDGES


Geometry = namedtuple("Geometry", "x y width height")


class Margins:
    """ Reserved space on the four sides of something. """

    __slots__ = EDGES

    def __init__(self, top=0, right=0, bottom=0, left=0):
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    @classmethod
    def coerce(cls, value, base=None):
        """ Build margins from a number (all sides), a mapping (only the
            named sides are replaced in `base`) or None (copy of `base`).
        """
        result = base.copy() if base is not None else cls()
        if value is None:
            return result
        if isinstance(value, Margins):
            return value.copy()
        if isinstance(value, Number):
            for side in EDGES:
                result[side] = value
            return result
        for side, v in dict(value).items():
            result[side] = v
        return result

    def copy(self):
        return Margins(self.top, self.right, self.bottom, self.left)

    def __getitem__(self, side):
        if side not in EDGES:
            raise ValueError("unknown margin side %r" % (side,))
        return getattr(self, side)

    def __setitem__(self, side, value):
        if side not in EDGES:
            raise ValueError("unknown margin side %r" % (side,))
        setattr(self, side, value)

    def as_dict(self):
        return {side: self[side] for side in EDGES}

    def __eq__(self, other):
        if isinstance(other, dict):
            other = Margins.coerce(other)
        if not isinstance(other, Margins):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return "Margins(top={top}, right={right}, bottom={bottom}, left={left})" \
            .format(**self.as_dict())
