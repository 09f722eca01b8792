"""
Small parser combinator library.

A parser is any callable that takes a `str` (or a `Span`) and returns either a `Success` or a `Failure`. Combinators take parsers and return new parsers.

See the objects for more explanations.

See the `inkcomb.general` module for general purpose parsers you can use as examples.

Defining parsers:
```
def digit(input: Input) -> ParseResult[str]:
    span = as_span(input)
    if (char := span.peek(1)) is not None and char.isdigit():
        return Success(span.advance(1), char)
    return Failure(span)

number = map(one_or_more(digit), "".join)
tag = right(match_literal("<"), left(general.identifier, match_literal(">")))
```

Using parsers:
```
result = tag("<br>rest")
if result:
    remainder, value = result   # `result` is a `Success` object
else:
    ...                         # `result` is a `Failure` object, `result.input` is where it failed

value = run(number, "1234")     # raises `ParseError` on failure
```
"""

import inkcomb.const as const
import inkcomb.main
from inkcomb.main import (
    Span,
    Input,
    as_span,
    ParseError,
    RepetitionError,
    Success,
    Failure,
    ParseResult,
    Parser,
    match_literal,
    any_char,
    pred,
    pair,
    map,
    left,
    right,
    one_or_more,
    zero_or_more,
    either,
    optional,
    run,
)
from inkcomb.element import Element
import inkcomb.general as general
