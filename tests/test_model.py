import pytest

from wikikit.model import (
    ErrorSeverity,
    LocatedString,
    Namespace,
    PageInfo,
    ParseError,
    SourcePosition,
    SourceRange,
)


def test_source_position_defaults():
    pos = SourcePosition()
    assert (pos.line, pos.column, pos.offset) == (1, 1, 0)


def test_source_position_ordering_is_lexicographic():
    a = SourcePosition(line=1, column=9, offset=8)
    b = SourcePosition(line=2, column=1, offset=9)
    c = SourcePosition(line=2, column=3, offset=11)
    assert sorted([c, a, b]) == [a, b, c]
    assert a < b < c


def test_source_position_equality():
    assert SourcePosition(2, 3, 4) == SourcePosition(line=2, column=3, offset=4)
    assert not (SourcePosition(2, 3, 4) == SourcePosition(2, 3, 5))


def test_source_range_length_matches_slice():
    text = "hello world"
    rng = SourceRange(SourcePosition(offset=6), SourcePosition(offset=11))
    assert rng.length() == len(text[6:11])


def test_source_range_is_empty():
    pos = SourcePosition(offset=5)
    assert SourceRange(pos, pos).is_empty()
    assert not SourceRange(pos, SourcePosition(offset=6)).is_empty()
    assert SourceRange().is_empty()


def test_source_range_contains_is_half_open():
    begin = SourcePosition(offset=2)
    end = SourcePosition(offset=5)
    rng = SourceRange(begin, end)
    assert rng.contains(begin)
    assert rng.contains(SourcePosition(offset=4))
    assert not rng.contains(end)
    assert not rng.contains(SourcePosition(offset=1))


def test_parse_error_default_severity():
    err = ParseError("oops")
    assert err.severity is ErrorSeverity.ERROR
    assert err.context == ""


def test_parse_error_format_with_location():
    err = ParseError(
        "bad token",
        SourceRange(SourcePosition(line=3, column=7, offset=20), SourcePosition(3, 9, 22)),
    )
    assert err.format() == "Error: bad token at line 3, column 7"


def test_parse_error_format_without_location():
    err = ParseError(
        "minor",
        SourceRange(SourcePosition(line=0, column=0), SourcePosition(line=0, column=0)),
        ErrorSeverity.WARNING,
    )
    assert err.format() == "Warning: " + "minor"


def test_parse_error_format_with_context():
    err = ParseError("broken", severity=ErrorSeverity.FATAL, context="{{foo")
    formatted = err.format()
    assert formatted.startswith("Fatal: broken")
    assert formatted.endswith("\n  Context: {{foo")


def test_page_info_redirect():
    assert not PageInfo().is_redirect()
    page = PageInfo(title="Old", redirect_target="New")
    assert page.is_redirect()
    assert page.redirect_target == "New"


def test_page_info_defaults():
    page = PageInfo()
    assert (page.id, page.title, page.namespace_id, page.revision_id) == (0, "", 0, 0)


def test_namespace_flags_default_false():
    ns = Namespace(id=0, name="", canonical_name="")
    assert (ns.is_content, ns.is_talk, ns.allow_subpages) == (False, False, False)


@pytest.mark.parametrize("text", ["", "a", "hello"])
def test_located_string_length_and_emptiness(text):
    located = LocatedString(text)
    assert len(located) == len(text)
    assert located.is_empty() == (text == "")