# tests/unit/test_states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from flowspec.core.errors import UnknownStateError
from flowspec.core.specification import Specification


def test_state_basics(linear_spec):
    a = linear_spec.states["a"]
    assert a.name == "a"
    assert str(a) == "a"
    assert a.spec is linear_spec
    assert a.meta == {}
    assert a.on_entry is None
    assert a.on_exit is None
    assert a.handler is None


def test_compare_follows_declaration_order(linear_spec):
    a, b, c = (linear_spec.states[n] for n in "abc")
    assert a.compare(b) == -1
    assert c.compare(a) == 1
    assert b.compare(b) == 0
    assert a < b < c
    assert c >= b
    assert a <= a


def test_compare_accepts_names(linear_spec):
    b = linear_spec.states["b"]
    assert b > "a"
    assert b < "c"
    assert b.compare("b") == 0


def test_compare_unknown_state_raises(linear_spec):
    with pytest.raises(UnknownStateError):
        linear_spec.states["a"].compare("zzz")
    with pytest.raises(ValueError):
        linear_spec.states["a"] < "zzz"


def test_positions_follow_declaration_order(linear_spec):
    assert [linear_spec.position(n) for n in "abc"] == [0, 1, 2]
    with pytest.raises(UnknownStateError):
        linear_spec.position("zzz")


def test_positions_reindexed_after_redeclaration():
    def declare(w):
        w.state("a")
        w.state("b")
        w.state("c")
        w.state("a")

    spec = Specification(declare)
    assert spec.state_names() == ["b", "c", "a"]
    assert list(spec.states) == spec.state_names()
    assert [spec.position(n) for n in ("b", "c", "a")] == [0, 1, 2]


def test_compare_uses_redeclared_position():
    def declare(w):
        w.state("a")
        w.state("b")
        w.state("a")

    spec = Specification(declare)
    assert spec.states["a"] > spec.states["b"]


def test_equality_with_names_and_states(linear_spec):
    a = linear_spec.states["a"]
    assert a == "a"
    assert a != "b"
    assert a == linear_spec.states["a"]
    assert a != linear_spec.states["b"]
    assert a != 1
    assert hash(a) == hash("a")


def test_equality_never_raises_for_unknown_names(linear_spec):
    assert (linear_spec.states["a"] == "zzz") is False


def test_states_of_different_specs_differ(linear_spec):
    other = Specification(lambda w: w.state("a"))
    assert linear_spec.states["a"] != other.states["a"]


def test_events_list_one_entry_per_name():
    def declare(w):
        with w.state("pending") as pending:
            pending.event("finish", transitions_to="done", meta={"display_name": "Wrap up"})
            pending.event("finish", transitions_to="failed")
            pending.event("send_back", transitions_to="draft")
        w.state("done")

    pending = Specification(declare).states["pending"]
    assert list(pending.events_list()) == [
        {"display_name": "Wrap up", "event": "finish"},
        {"display_name": "Send back", "event": "send_back"},
    ]


def test_events_list_is_restartable(linear_spec):
    entries = linear_spec.states["a"].events_list()
    assert list(entries) == list(entries)
    assert len(entries) == 1
    assert list(linear_spec.states["c"].events_list()) == []
