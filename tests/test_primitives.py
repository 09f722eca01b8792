"""Tests for the primitive parsers and the result types."""

from inkcomb import (
    Failure,
    ParseError,
    Span,
    Success,
    any_char,
    match_literal,
    pred,
)


class TestMatchLiteral:
    def test_match(self) -> None:
        result = match_literal("abra")("abrakadabra")
        assert result == Success(Span("abrakadabra", 4), None)
        assert result.remainder == "kadabra"
        assert result.value is None

    def test_no_match(self) -> None:
        result = match_literal("abra")("abc")
        assert not result
        assert isinstance(result, Failure)
        assert result.input == "abc"

    def test_input_shorter_than_literal(self) -> None:
        assert match_literal("abra")("ab") == Failure(Span("ab"))

    def test_empty_input(self) -> None:
        assert match_literal("a")("") == Failure(Span(""))

    def test_mid_source_span(self) -> None:
        span = Span("xxabra", 2)
        result = match_literal("abra")(span)
        assert result.remainder == Span("xxabra", 6)


class TestAnyChar:
    def test_takes_one_character(self) -> None:
        result = any_char("xyz")
        assert result.value == "x"
        assert result.remainder == "yz"

    def test_multibyte_character(self) -> None:
        result = any_char("€uro")
        assert result.value == "€"
        assert result.remainder == "uro"

    def test_empty_input(self) -> None:
        assert any_char("") == Failure(Span(""))


class TestPred:
    def test_accepted(self) -> None:
        result = pred(any_char, lambda char: char == "o")("omg")
        assert result == Success(Span("omg", 1), "o")

    def test_rejected_returns_original_input(self) -> None:
        result = pred(any_char, lambda char: char == "o")("lol")
        assert result == Failure(Span("lol"))

    def test_inner_failure(self) -> None:
        assert pred(any_char, str.isdigit)("") == Failure(Span(""))

    def test_rejected_after_consuming(self) -> None:
        parser = pred(match_literal("ab"), lambda value: False)
        assert parser("abc").input == "abc"


class TestResults:
    def test_truthiness(self) -> None:
        assert Success(Span(""), None)
        assert not Failure(Span(""))

    def test_success_unpacks(self) -> None:
        remainder, value = Success(Span("ab", 1), "a")
        assert remainder == "b"
        assert value == "a"

    def test_failure_error(self) -> None:
        error = Failure(Span("abc", 1)).error()
        assert isinstance(error, ParseError)
        assert error.input == "bc"
        assert str(error) == "No match."
