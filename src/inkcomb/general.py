"""
General purpose parsers built from the primitives and combinators. Can also be used as examples.
"""

from __future__ import annotations

import inkcomb.const as const
from inkcomb.main import (
    Input,
    Parser,
    ParseResult,
    Success,
    Failure,
    as_span,
    match_literal,
    any_char,
    pred,
    map,
    left,
    right,
    zero_or_more,
    one_or_more,
)

def the_letter_a(input: Input) -> ParseResult[None]:
    """Matches a single lowercase `a`."""
    span = as_span(input)
    if span.peek(1) == "a":
        return Success(span.advance(1), None)
    return Failure(span)

# identifier

def identifier(input: Input) -> ParseResult[str]:
    """
    An alphabetic character, followed by any number of alphanumeric characters or hyphens.

    Returns the matched string.
    """
    span = as_span(input)
    src = span.src
    if not (span and src[span.pos].isalpha()):
        return Failure(span)
    pos = span.pos + 1
    while pos < len(src) and (src[pos].isalnum() or src[pos] in const.IDENTIFIER_EXTRA):
        pos += 1
    end = span.goto(pos)
    return Success(end, end.consumed_since(span))

# whitespace

def whitespace_char() -> Parser[str]:
    return pred(any_char, str.isspace)

def space0() -> Parser[list[str]]:
    """Zero or more whitespace characters."""
    return zero_or_more(whitespace_char())

def space1() -> Parser[list[str]]:
    """One or more whitespace characters."""
    return one_or_more(whitespace_char())

# quoted string

def quoted_string(*, quote: str = const.DOUBLE_QUOTE) -> Parser[str]:
    """
    Matches a string between two `quote` characters. No escapes.

    The value is the string without the quotes.
    """
    if len(quote) != 1:
        raise ValueError("The quote must be a single character.")
    return map(
        right(
            match_literal(quote),
            left(
                zero_or_more(pred(any_char, lambda char: char != quote)),
                match_literal(quote),
            ),
        ),
        "".join,
    )
