# tests/unit/test_adapters.py
"""
Adapter tests - or_raise, ok_or_raise, ensure, into_exn, collect_all
"""

from __future__ import annotations

import inspect

import pytest

from exntree import Exn, SourceError, collect_all, ensure, into_exn, ok_or_raise, or_raise
from trees import Error


def _line_above() -> int:
    return inspect.currentframe().f_back.f_lineno - 1


# ---- or_raise ----

def test_or_raise_wraps_a_plain_failure():
    with pytest.raises(Exn) as info:
        with or_raise(lambda: Error("could not parse")):
            int("nope")

    exn = info.value
    assert isinstance(exn.error, Error)
    assert str(exn) == "could not parse"
    (child,) = exn.frame.children
    assert isinstance(child.error, ValueError)
    assert child.location == exn.location


def test_or_raise_location_is_the_with_statement():
    with pytest.raises(Exn) as info:
        with or_raise(lambda: Error("wrapped")):
            raise KeyError("k")
    line = _line_above() - 1

    assert info.value.location.line == line


def test_or_raise_keeps_an_existing_tree():
    inner = Exn(Error("inner"))

    with pytest.raises(Exn) as info:
        with or_raise(lambda: Error("outer")):
            raise inner

    assert info.value.frame.children == (inner.frame,)


def test_or_raise_suppresses_native_context():
    with pytest.raises(Exn) as info:
        with or_raise(lambda: Error("outer")):
            raise ValueError("inner")

    assert info.value.__suppress_context__
    assert info.value.__cause__ is None


def test_or_raise_lets_other_exceptions_through():
    with pytest.raises(KeyError):
        with or_raise(lambda: Error("never built"), catch=(ValueError,)):
            raise KeyError("k")


def test_or_raise_factory_runs_only_on_failure():
    calls = []

    def make_error() -> Error:
        calls.append(1)
        return Error("failed")

    with or_raise(make_error):
        value = 1 + 1

    assert value == 2
    assert calls == []


def test_or_raise_as_decorator():
    @or_raise(lambda: Error("load failed"))
    def load():
        raise OSError("disk")

    with pytest.raises(Exn) as info:
        load()

    assert str(info.value) == "load failed"
    assert str(info.value.frame.children[0]) == "disk"


# ---- ok_or_raise / ensure ----

def test_ok_or_raise_passes_values_through():
    assert ok_or_raise(0, lambda: Error("missing")) == 0
    assert ok_or_raise("", lambda: Error("missing")) == ""


def test_ok_or_raise_raises_on_none():
    with pytest.raises(Exn) as info:
        ok_or_raise({}.get("key"), lambda: Error("key missing"))
    line = _line_above()

    assert str(info.value) == "key missing"
    assert info.value.location.line == line


def test_ensure_with_instance_and_factory():
    ensure(True, Error("unused"))

    with pytest.raises(Exn) as info:
        ensure(1 > 2, Error("1 is not greater than 2"))
    assert str(info.value) == "1 is not greater than 2"

    with pytest.raises(Exn) as info:
        ensure([], lambda: Error("empty"))
    assert isinstance(info.value.error, Error)


def test_ensure_factory_is_lazy():
    def explode() -> Error:
        raise AssertionError("factory must not run")

    ensure("non-empty", explode)


# ---- into_exn ----

def test_into_exn_upgrades_and_passes_through():
    exn = Exn(Error("already"))
    assert into_exn(exn) is exn

    error = Error("plain")
    error.__cause__ = OSError("io")
    upgraded = into_exn(error)
    line = _line_above()

    assert upgraded.error is error
    assert upgraded.location.line == line
    assert isinstance(upgraded.frame.children[0].error, SourceError)


# ---- collect_all ----

def test_collect_all_keeps_going_after_failures():
    result = collect_all(lambda x: 10 // x, [1, 0, 2, 0])

    assert result.values == [10, 5]
    assert len(result.failures) == 2
    assert not result.ok
    assert all(isinstance(f.error, ZeroDivisionError) for f in result.failures)


def test_collect_all_feeds_raise_all():
    def check(name: str) -> str:
        if name.startswith("bad"):
            raise Exn(Error(f"{name} rejected"))
        return name

    values, failures = collect_all(check, ["good", "bad1", "bad2"])
    merged = Exn.raise_all(failures, Error("2 inputs rejected"))

    assert values == ["good"]
    assert [str(child) for child in merged.frame.children] == ["bad1 rejected", "bad2 rejected"]
    assert merged.frame.children[0] is failures[0].frame


def test_collect_all_success_is_ok():
    result = collect_all(str.upper, ["a", "b"])

    assert result.ok
    assert result.values == ["A", "B"]


def test_collect_all_only_catches_requested_types():
    def fail(_):
        raise KeyError("k")

    with pytest.raises(KeyError):
        collect_all(fail, [1], catch=(ValueError,))
