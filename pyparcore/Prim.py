from typing import Callable

from .Parser import ParseResult, Parser
from .Stream import Stream
from .Types import NULL, Err, Nothing, Ok, Result, err, ok
from .Union import union

END_OF_INPUT = "End of Input"
INVALID_STATE = "Invalid State"


def _check(stream: Stream, cursor: int) -> Result[str, str]:
    """Fetch the character at `cursor`, failing when there is none."""
    if cursor > len(stream):
        return err(END_OF_INPUT)
    found = stream.get(cursor)
    if isinstance(found, Nothing):
        return err(INVALID_STATE)
    return ok(found.value)


def _single(test: Callable[[str], bool], reject: Callable[[str], str]) -> Parser[str]:
    """Consume one character accepted by `test`; `reject` builds the failure message."""
    def parse(stream: Stream, cursor: int) -> ParseResult:
        checked = _check(stream, cursor)
        if isinstance(checked, Err):
            return checked
        c = checked.value
        if test(c):
            return ok(union(c, cursor + 1))
        return err(reject(c))
    return Parser(parse)


def empty() -> Parser:
    """Always succeeds with Null, consuming nothing."""
    return Parser(lambda stream, cursor: ok(union(NULL, cursor)))


def eol() -> Parser:
    """Succeeds with Null only at the end of input."""
    def parse(stream: Stream, cursor: int) -> ParseResult:
        checked = _check(stream, cursor)
        if isinstance(checked, Ok):
            return err(f"Expected end of input, found '{checked.value}'")
        if checked.error == END_OF_INPUT:
            return ok(union(NULL, cursor))
        return checked
    return Parser(parse)


def _member_test(charset: str) -> Callable[[str], bool]:
    """Membership test for `charset`; 'x-y' with x <= y is an inclusive range."""
    singles = set()
    spans = []
    i = 0
    while i < len(charset):
        if i + 2 < len(charset) and charset[i + 1] == '-' and charset[i] <= charset[i + 2]:
            spans.append((charset[i], charset[i + 2]))
            i += 3
        else:
            singles.add(charset[i])
            i += 1

    def test(c: str) -> bool:
        if c in singles:
            return True
        for lo, hi in spans:
            if lo <= c <= hi:
                return True
        return False
    return test


def char(charset: str) -> Parser[str]:
    """
    Parses one character from `charset`.

    Every character stands for itself except 'x-y' with x <= y, which
    covers the inclusive range, so 'a-z0-9_' works. A '-' that does not
    form such a range ('+-*/', 'z-a', leading or trailing) is literal.
    Brackets, '^' and backslashes carry no special meaning.
    """
    if not charset:
        raise ValueError("char() needs a non-empty charset")
    return _single(
        _member_test(charset),
        lambda c: f"Expected one of the chars '{charset}', found '{c}'",
    )


def any_char() -> Parser[str]:
    """Parses any character."""
    return _single(lambda _: True, lambda c: f"'{c}' is not valid")


def lit(literal: str) -> Parser[str]:
    """Parses the exact string `literal`, comparing one character at a time."""
    def parse(stream: Stream, cursor: int) -> ParseResult:
        for offset, expected in enumerate(literal):
            checked = _check(stream, cursor + offset)
            if isinstance(checked, Err):
                return err(f"{checked.error} while matching '{literal}'")
            found = checked.value
            if found != expected:
                return err(f"Expected '{expected}' but found '{found}' while matching '{literal}'")
        return ok(union(literal, cursor + len(literal)))
    return Parser(parse)


def is_a(predicate: Callable[[str], bool]) -> Parser[str]:
    """Parses one character for which `predicate` returns True."""
    return _single(predicate, lambda c: f"'{c}' is not valid")


# Exported under the short name as well
any = any_char
