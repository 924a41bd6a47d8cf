from geometry import Margins

import pytest


def test_coerce():
    assert Margins.coerce(None) == Margins()
    assert Margins.coerce(4) == Margins(4, 4, 4, 4)
    base = Margins(top=1, right=2, bottom=3, left=4)
    assert Margins.coerce({"left": 0}, base) == Margins(1, 2, 3, 0)
    assert Margins.coerce(None, base) == base
    assert Margins.coerce(None, base) is not base
    with pytest.raises(ValueError):
        Margins.coerce({"middle": 1})


def test_access():
    m = Margins(top=5)
    assert m["top"] == m.top == 5
    m["left"] = 3
    assert m.as_dict() == dict(top=5, right=0, bottom=0, left=3)
    assert m == dict(top=5, left=3)
    with pytest.raises(ValueError):
        m["diagonal"]
