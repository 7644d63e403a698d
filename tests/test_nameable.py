import dataclasses

import pytest

from ymcommon.nameable import Nameable, PermaNameable


def test_nameable_initial_name():
    assert Nameable("alpha").name == "alpha"


def test_nameable_rename():
    n = Nameable("alpha")
    n.name = "beta"
    assert n.name == "beta"


def test_perma_nameable_initial_name():
    assert PermaNameable("gamma").name == "gamma"


def test_perma_nameable_cannot_rename():
    p = PermaNameable("gamma")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.name = "delta"
    assert p.name == "gamma"


def test_subclass_keeps_name():
    @dataclasses.dataclass
    class Column(Nameable):
        width: int = 0

    base = Nameable("col")
    c = Column("col", 3)
    assert (c.name, c.width) == (base.name, 3)
    c.name = "renamed"
    assert c.name == "renamed"