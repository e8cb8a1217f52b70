import pytest

from tagtree.errors import NestingTooDeepError, ParseError, ParseFailure, StrictModeError


@pytest.mark.ci
def test_parse_error_str_with_location():
    error = ParseError("eof-in-tag", line=1, column=5)
    assert error.message == "eof-in-tag"
    assert str(error) == "(1,5): eof-in-tag"

    error = ParseError("eof-in-tag", line=2, column=1, message="end of input inside <a> tag")
    assert str(error) == "(2,1): eof-in-tag - end of input inside <a> tag"


@pytest.mark.ci
def test_parse_error_str_without_location():
    assert str(ParseError("eof-in-tag")) == "eof-in-tag"
    assert str(ParseError("eof-in-tag", message="oops")) == "eof-in-tag - oops"


@pytest.mark.ci
def test_parse_error_equality_ignores_message():
    e1 = ParseError("end-tag-mismatch", line=1, column=5, message="one")
    e2 = ParseError("end-tag-mismatch", line=1, column=5, message="two")
    e3 = ParseError("duplicate-attribute", line=1, column=5)
    assert e1 == e2
    assert e1 != e3


@pytest.mark.ci
def test_failures_carry_error():
    error = ParseError("nesting-too-deep", line=3, column=2)
    for cls in (StrictModeError, NestingTooDeepError):
        failure = cls(error)
        assert isinstance(failure, ParseFailure)
        assert failure.error is error
        assert str(failure) == "(3,2): nesting-too-deep"
