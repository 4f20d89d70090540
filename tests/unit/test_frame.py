# tests/unit/test_frame.py
"""
Frame and source-chain importer tests

The importer turns an error's native cause chain into a single-child chain
of SourceError frames holding the text of each link.
"""

from __future__ import annotations

import pytest

from exntree import Exn, Frame, Location, SourceError
from exntree.config import ExnTreeConfig, ImportConfig, set_config
from exntree.core import import_source_chain
from trees import Error


def chained(*messages: str) -> Error:
    """Error(messages[0]) caused by Error(messages[1]) caused by ..."""
    errors = [Error(m) for m in messages]
    for outer, inner in zip(errors, errors[1:]):
        outer.__cause__ = inner
    return errors[0]


def walk_single_chain(frame: Frame) -> list[Frame]:
    chain = []
    while frame.children:
        assert len(frame.children) == 1
        frame = frame.children[0]
        chain.append(frame)
    return chain


def test_importer_builds_one_frame_per_link():
    exn = Exn(chained("top", "middle", "bottom", "root cause"))

    chain = walk_single_chain(exn.frame)
    assert [str(frame) for frame in chain] == ["middle", "bottom", "root cause"]
    assert all(isinstance(frame.error, SourceError) for frame in chain)
    assert all(frame.location == exn.location for frame in chain)


def test_importer_keeps_text_not_type():
    error = Error("top")
    error.__cause__ = KeyError("missing")

    child = Exn(error).frame.children[0]

    assert isinstance(child.error, SourceError)
    assert str(child) == str(KeyError("missing"))


def test_importer_follows_context_like_traceback():
    try:
        try:
            raise ValueError("first")
        except ValueError:
            raise RuntimeError("during handling")
    except RuntimeError as e:
        exn = Exn(e)

    assert [str(frame) for frame in walk_single_chain(exn.frame)] == ["first"]


def test_importer_respects_suppressed_context():
    try:
        try:
            raise ValueError("first")
        except ValueError:
            raise RuntimeError("replacement") from None
    except RuntimeError as e:
        exn = Exn(e)

    assert exn.frame.children == ()


def test_importer_can_ignore_implicit_context():
    error = RuntimeError("outer")
    error.__context__ = ValueError("implicit")

    assert import_source_chain(error, Location("x.py", 1), follow_context=False) == []

    set_config(ExnTreeConfig(importer=ImportConfig(follow_context=False)))
    assert Exn(error).frame.children == ()


def test_explicit_cause_is_followed_even_without_context():
    set_config(ExnTreeConfig(importer=ImportConfig(follow_context=False)))

    exn = Exn(chained("outer", "explicit"))

    assert [str(frame) for frame in walk_single_chain(exn.frame)] == ["explicit"]


def test_importer_stops_on_cycles():
    a = Error("a")
    b = Error("b")
    a.__cause__ = b
    b.__cause__ = a

    exn = Exn(a)

    assert [str(frame) for frame in walk_single_chain(exn.frame)] == ["b"]


def test_importer_handles_deep_chains():
    depth = 3000
    error = chained(*[f"link {i}" for i in range(depth)])

    exn = Exn(error)

    assert len(walk_single_chain(exn.frame)) == depth - 1
    assert exn.render_tree().count("\n") == depth - 1


def test_unprintable_links_do_not_break_import():
    class Unprintable(Exception):
        def __str__(self):
            raise RuntimeError("no")

    error = Error("top")
    error.__cause__ = Unprintable()

    child = Exn(error).frame.children[0]
    assert str(child) == "<unprintable Unprintable object>"


def test_source_error_display_and_repr():
    error = SourceError("disk full")

    assert str(error) == "disk full"
    assert repr(error) == "'disk full'"


def test_frame_requires_an_exception():
    with pytest.raises(TypeError):
        Frame("oops", Location("x.py", 1))


def test_children_are_read_only():
    exn = Exn(chained("outer", "inner"))

    children = exn.frame.children
    assert isinstance(children, tuple)
    with pytest.raises(AttributeError):
        exn.frame.error = Error("replaced")


def test_consume_splits_error_and_children():
    exn = Exn(Error("leaf")).raise_(Error("root"))

    error, children = exn.frame.consume()

    assert error is exn.error
    assert children == list(exn.frame.children)


def test_to_dict_is_structural():
    exn = Exn(Error("leaf")).raise_(Error("root"))

    data = exn.frame.to_dict()

    assert data["type"] == "Error"
    assert data["message"] == "root"
    assert data["location"]["line"] == exn.location.line
    assert data["children"][0]["message"] == "leaf"
    assert data["children"][0]["children"] == []


def test_format_specs_on_frame(messages_only):
    exn = Exn(Error("leaf")).raise_(Error("root"))
    frame = exn.frame

    assert f"{frame}" == "root"
    assert f"{frame:?}" == "root"
    assert f"{frame:frame}" == "root"
    assert f"{frame:tree}" == "root\n└─ leaf"
    assert f"{frame:#?}" == repr(frame)
    with pytest.raises(TypeError):
        format(frame, "bogus")


def test_structural_repr_lists_fields():
    location = Location("mod.py", 3, 7)
    frame = Frame(Error("leaf"), location)

    assert repr(frame) == "Frame(error=Error('leaf'), location=Location(file='mod.py', line=3, column=7), children=[])"


def test_structural_repr_handles_deep_chains():
    depth = 3000
    exn = Exn(chained(*[f"link {i}" for i in range(depth)]))

    text = repr(exn)

    assert text.count("Frame(") == depth
    assert text.endswith("children=[])" + "])" * (depth - 1) + ")")
    assert format(exn, "#?") == text
    assert format(exn.frame, "#") == repr(exn.frame)


def test_to_dict_handles_deep_chains():
    depth = 3000
    exn = Exn(chained(*[f"link {i}" for i in range(depth)]))

    data = exn.frame.to_dict()

    messages = []
    while True:
        messages.append(data["message"])
        if not data["children"]:
            break
        (data,) = data["children"]
    assert messages[0] == "link 0"
    assert messages[-1] == f"link {depth - 1}"
    assert len(messages) == depth


def test_to_dict_keeps_sibling_order():
    exn = Exn.raise_all([Exn(Error("a")), Exn(Error("b")), Exn(Error("c"))], Error("root"))

    data = exn.frame.to_dict()

    assert [child["message"] for child in data["children"]] == ["a", "b", "c"]


def test_structural_repr_of_siblings():
    location = Location("mod.py", 1, 1)
    frame = Frame(Error("root"), location, [Frame(Error("a"), location), Frame(Error("b"), location)])

    assert repr(frame) == (
        "Frame(error=Error('root'), location=Location(file='mod.py', line=1, column=1), children=["
        "Frame(error=Error('a'), location=Location(file='mod.py', line=1, column=1), children=[]), "
        "Frame(error=Error('b'), location=Location(file='mod.py', line=1, column=1), children=[])])"
    )
