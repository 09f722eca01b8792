"""
The implementations of the main classes, the primitive parsers and the combinators.
"""

from __future__ import annotations
from typing import overload, Any, Literal, TypeVar, Generic, Final, Callable, Protocol, Union

from collections.abc import Iterator
import logging


logger = logging.getLogger(__name__)

_T = TypeVar("_T")
_T1 = TypeVar("_T1")
_T2 = TypeVar("_T2")
_R = TypeVar("_R")
_CT = TypeVar("_CT", covariant=True)
_DataCovT = TypeVar("_DataCovT", covariant=True)



class Span:
    """
    An immutable view over the text that's being parsed.

    Holds the whole source string and the position where the unconsumed part starts. Advancing returns a new `Span`, the source string itself is never sliced while matching.

    Compares equal to a `str` if the unconsumed part is equal to it:
    ```
    Span("abrakadabra", 4) == "kadabra"     # True
    ```
    """
    __slots__ = ("src", "pos")

    def __init__(self, src: str, pos: int = 0) -> None:
        if not 0 <= pos <= len(src):
            raise ValueError(f"Position {pos} is out of range for a source of length {len(src)}.")
        self.src: Final[str] = src
        """The string that's being parsed."""
        self.pos: Final[int] = pos
        """The position of the first unconsumed character."""

    def __len__(self) -> int:
        """The amount of characters left."""
        return len(self.src) - self.pos

    def __bool__(self) -> bool:
        """Whether there are any characters left."""
        return self.pos < len(self.src)

    def has_chars(self, amount: int) -> bool:
        """Whether there are at least that many characters left."""
        return self.pos+amount <= len(self.src)

    def peek(self, amount: int) -> str | None:
        """
        Retrieves the specified amount of characters.

        If there aren't enough characters, returns `None`.
        """
        if not self.has_chars(amount):
            return None
        return self.src[self.pos:self.pos+amount]

    def startswith(self, value: str) -> bool:
        """Whether the unconsumed part starts with the given string."""
        return self.src.startswith(value, self.pos)

    def advance(self, amount: int) -> Span:
        """Returns a span that starts `amount` characters later."""
        return Span(self.src, self.pos+amount)

    def goto(self, pos: int) -> Span:
        """Returns a span over the same source that starts at the given position."""
        return Span(self.src, pos)

    def consumed_since(self, earlier: Span) -> str:
        """The text between an earlier span's position and this one's."""
        return self.src[earlier.pos:self.pos]

    def rest(self) -> str:
        """The unconsumed part as a string."""
        return self.src[self.pos:]

    def __str__(self) -> str:
        return self.rest()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.rest() == other
        elif isinstance(other, Span):
            return self.pos == other.pos and self.src == other.src
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.rest())

    def __repr__(self) -> str:
        rest = self.rest()
        if len(rest) > 20:
            rest = rest[:20] + "..."
        return f"<Span {self.pos} {rest!r}>"

Input = Union[str, Span]
"""Anything a parser can be called with."""

def as_span(input: Input) -> Span:
    """Wraps a `str` into a `Span` starting at 0. Spans are returned as-is."""
    if isinstance(input, Span):
        return input
    elif isinstance(input, str):
        return Span(input)
    else:
        raise TypeError(f"Expected a str or Span, got {type(input).__name__}.")



class ParseError(Exception):
    """
    The exception that's raised when a whole parse fails.

    Parsers never raise it themselves, they return a `Failure`. Use `Failure.error()` or `run()` to get one.
    """

    def __init__(self, input: Span, msg: str | None = None) -> None:
        """
        `input`: The span the failing parser was left at.
        `msg`: The reason for the error.
        """
        super().__init__("No match." if msg is None else msg)
        self.input: Final[Span] = input

class RepetitionError(ValueError):
    """
    Raised when a repeated parser succeeds without consuming anything.

    That's a bug in the grammar, as the repetition would never end.
    """

class Success(Generic[_DataCovT]):
    """
    Returned from a parser when it matched.

    ```
    r = parser(text)
    if r:
        remainder, value = r    # `r` is a `Success` object
    else:
        ...                     # `r` is a `Failure` object
    ```
    """
    __slots__ = ("remainder", "value")

    def __init__(self, remainder: Span, value: _DataCovT) -> None:
        self.remainder: Final[Span] = remainder
        """The unconsumed part of the input."""
        self.value: Final[_DataCovT] = value

    def __bool__(self) -> Literal[True]:
        return True

    def __iter__(self) -> Iterator[Any]:
        yield self.remainder
        yield self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self.remainder == other.remainder and self.value == other.value
        return NotImplemented

    def __repr__(self) -> str:
        return f"<Success {self.value!r} {self.remainder!r}>"

class Failure:
    """
    Returned from a parser when it didn't match.

    Holds the input that the parser was called with, unchanged. (Except for `pair()`, see there.)
    """
    __slots__ = ("input",)

    def __init__(self, input: Span) -> None:
        self.input: Final[Span] = input

    def error(self) -> ParseError:
        """Converts this to a ParseError."""
        return ParseError(self.input)

    def __bool__(self) -> Literal[False]:
        return False

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self.input == other.input
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.input)

    def __repr__(self) -> str:
        return f"<Failure {self.input!r}>"

ParseResult = Union[Success[_T], Failure]
"""When used for typing: `ParseResult[ValueType]`"""

class Parser(Protocol[_CT]):
    """
    A protocol for parsers.

    Any callable that takes a `str` or `Span` and returns a `Success` or a `Failure` is a parser. There's no base class to inherit from.

    Defining parsers:
    ```
    def digit(input: Input) -> ParseResult[str]:
        span = as_span(input)
        if (char := span.peek(1)) is not None and char.isdigit():
            return Success(span.advance(1), char)
        return Failure(span)
    ```
    """
    def __call__(self, input: Input, /) -> ParseResult[_CT]: ...



def match_literal(expected: str) -> Parser[None]:
    """
    Parser factory.

    Matches the given string. Case sensitive.
    """
    def inner(input: Input) -> ParseResult[None]:
        span = as_span(input)
        if span.startswith(expected):
            return Success(span.advance(len(expected)), None)
        return Failure(span)
    return inner

def any_char(input: Input) -> ParseResult[str]:
    """A pre-defined parser (not a factory). Matches any single character and returns it."""
    span = as_span(input)
    if (char := span.peek(1)) is not None:
        return Success(span.advance(1), char)
    return Failure(span)

def pred(parser: Parser[_T], predicate: Callable[[_T], bool]) -> Parser[_T]:
    """
    Parser factory.

    Succeeds if the parser succeeds and its value satisfies the predicate. Otherwise fails with the original input.
    """
    def inner(input: Input) -> ParseResult[_T]:
        span = as_span(input)
        result = parser(span)
        if isinstance(result, Success) and predicate(result.value):
            return result
        return Failure(span)
    return inner


def pair(parser1: Parser[_T1], parser2: Parser[_T2]) -> Parser[tuple[_T1, _T2]]:
    """
    Parser factory.

    Matches both parsers in sequence. The value is a tuple of both values.

    Doesn't backtrack: if `parser2` fails, the failure holds the position `parser1` left off at, not the original input.
    """
    def inner(input: Input) -> ParseResult[tuple[_T1, _T2]]:
        result1 = parser1(input)
        if not isinstance(result1, Success):
            return result1
        result2 = parser2(result1.remainder)
        if not isinstance(result2, Success):
            return result2
        return Success(result2.remainder, (result1.value, result2.value))
    return inner

def map(parser: Parser[_T], function: Callable[[_T], _R]) -> Parser[_R]:
    """
    Parser factory.

    Transforms the value of the parser. `function` must not fail; use `pred()` for checks.
    """
    def inner(input: Input) -> ParseResult[_R]:
        result = parser(input)
        if not isinstance(result, Success):
            return result
        return Success(result.remainder, function(result.value))
    return inner

def left(parser1: Parser[_T1], parser2: Parser[_T2]) -> Parser[_T1]:
    """Parser factory. Same as `pair()`, but keeps only the first value."""
    return map(pair(parser1, parser2), lambda values: values[0])

def right(parser1: Parser[_T1], parser2: Parser[_T2]) -> Parser[_T2]:
    """Parser factory. Same as `pair()`, but keeps only the second value."""
    return map(pair(parser1, parser2), lambda values: values[1])


def _collect(parser: Parser[_T], span: Span) -> tuple[Span, list[_T]]:
    values: list[_T] = []
    while isinstance(result := parser(span), Success):
        if len(result.remainder) >= len(span):
            logger.debug("Repeated parser %r matched nothing at position %d.", parser, span.pos)
            raise RepetitionError(f"Repeated parser {parser!r} succeeded without consuming any input.")
        values.append(result.value)
        span = result.remainder
    return span, values

def one_or_more(parser: Parser[_T]) -> Parser[list[_T]]:
    """
    Parser factory.

    Repeatedly matches the given parser until it fails. Succeeds if at least one iteration matches.

    The parser must consume something whenever it succeeds, otherwise `RepetitionError` is raised.
    """
    def inner(input: Input) -> ParseResult[list[_T]]:
        span = as_span(input)
        remainder, values = _collect(parser, span)
        if not values:
            return Failure(span)
        return Success(remainder, values)
    return inner

def zero_or_more(parser: Parser[_T]) -> Parser[list[_T]]:
    """
    Parser factory.

    Repeatedly matches the given parser until it fails. Never fails.

    The parser must consume something whenever it succeeds, otherwise `RepetitionError` is raised.
    """
    def inner(input: Input) -> ParseResult[list[_T]]:
        remainder, values = _collect(parser, as_span(input))
        return Success(remainder, values)
    return inner


def either(parser1: Parser[_T1], parser2: Parser[_T2]) -> Parser[_T1 | _T2]:
    """
    Parser factory.

    Attempts the first parser, then the second one on the same input. If neither matches, fails.
    """
    def inner(input: Input) -> ParseResult[_T1 | _T2]:
        span = as_span(input)
        if result := parser1(span):
            return result
        return parser2(span)
    return inner

def optional(parser: Parser[_T]) -> Parser[_T | None]:
    """
    Parser factory.

    Returns the parser's result if it matches, otherwise succeeds with `None` without consuming anything.
    """
    def inner(input: Input) -> ParseResult[_T | None]:
        span = as_span(input)
        if result := parser(span):
            return result
        return Success(span, None)
    return inner


@overload
def run(parser: Parser[_T], text: str, *, partial: Literal[False] = ...) -> _T: ...
@overload
def run(parser: Parser[_T], text: str, *, partial: Literal[True]) -> tuple[_T, Span]: ...

def run(parser: Parser[_T], text: str, *, partial: bool = False) -> _T | tuple[_T, Span]:
    """
    Runs the parser on the text and returns its value.

    Raises a `ParseError` if the parser fails, or if it doesn't consume the whole text.

    `partial`: Allows unconsumed text. Returns a `(value, remainder)` tuple instead.
    """
    result = parser(Span(text))
    if not isinstance(result, Success):
        logger.debug("Parser %r failed at position %d.", parser, result.input.pos)
        raise result.error()
    if partial:
        return result.value, result.remainder
    if result.remainder:
        logger.debug("Parser %r stopped at position %d.", parser, result.remainder.pos)
        raise ParseError(result.remainder, "Unconsumed input remains.")
    return result.value
