import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .Stream import Stream
from .Types import NULL, Err, Null, Ok, Result, err, ok
from .Union import Union, union

logger = logging.getLogger(__name__)

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

ParseResult = Result[Union, str]
# Ok(Union(value, next_cursor)) on success, Err(message) on failure

ParseFn = Callable[[Stream, int], ParseResult]


@dataclass(frozen=True)
class Range:
    """Bounds for repetition, measured in characters consumed."""
    min: int
    max: float = math.inf

    def __post_init__(self):
        if self.min < 0:
            raise ValueError(f"Range minimum must be non-negative, got {self.min}")
        if self.max <= self.min:
            raise ValueError(f"Range maximum ({self.max}) must be greater than minimum ({self.min})")


class Parser(Generic[T]):
    """A parser wrapping a function from (stream, cursor) to a ParseResult."""
    def __init__(self, parse_fn: ParseFn):
        self.parse_fn = parse_fn

    def __call__(self, stream: Stream, cursor: int) -> ParseResult:
        return self.parse_fn(stream, cursor)

    def parse(self, text: str) -> ParseResult:
        """Run the parser over the whole of `text`, starting at cursor 1."""
        result = self(Stream(text), 1)
        if isinstance(result, Ok):
            logger.debug("Parsed input of %d chars, result %r", len(text), result.value)
        else:
            logger.debug("Parse failed: %s", result.error)
        return result

    def optional(self) -> 'Parser[Any]':
        """Succeed with Null without consuming input when the parser fails."""
        def parse(stream: Stream, cursor: int) -> ParseResult:
            result = self(stream, cursor)
            if isinstance(result, Err):
                return ok(union(NULL, cursor))
            return result
        return Parser(parse)

    def discard(self) -> 'Parser[Null]':
        """Match as usual but replace the captured value with Null."""
        def parse(stream: Stream, cursor: int) -> ParseResult:
            result = self(stream, cursor)
            if isinstance(result, Err):
                return result
            _, next_cursor = result.value
            return ok(union(NULL, next_cursor))
        return Parser(parse)

    def range(self, bounds: Range) -> 'Parser[str]':
        """
        Greedy bounded repetition.

        Matched fragments are concatenated into a string. Repetition stops
        at the first failure, at a zero-width match, or when another match
        would consume more than `bounds.max` characters. Fails only when
        fewer than `bounds.min` characters were consumed.
        """
        def parse(stream: Stream, cursor: int) -> ParseResult:
            buffer = []
            position = cursor
            while position - cursor < bounds.max:
                result = self(stream, position)
                if isinstance(result, Err):
                    break
                value, next_position = result.value
                # No progress; repeating would loop forever
                if next_position <= position:
                    break
                if next_position - cursor > bounds.max:
                    break
                if not isinstance(value, Null):
                    buffer.append(value if isinstance(value, str) else str(value))
                position = next_position

            matched = position - cursor
            if matched < bounds.min:
                return err(f"Expected at least {bounds.min} characters, matched {matched}")
            return ok(union(''.join(buffer), position))
        return Parser(parse)

    def label(self, text: str) -> 'Parser[T]':
        """Prefix failures with a human-readable name for what was expected."""
        def parse(stream: Stream, cursor: int) -> ParseResult:
            result = self(stream, cursor)
            if isinstance(result, Err):
                return err(f"Expected {text}: {result.error}")
            return result
        return Parser(parse)

    def map(self, fn: Callable[[T], U]) -> 'Parser[U]':
        """Transform the success value, keeping the cursor."""
        def parse(stream: Stream, cursor: int) -> ParseResult:
            result = self(stream, cursor)
            if isinstance(result, Err):
                return result
            value, next_cursor = result.value
            return ok(union(fn(value), next_cursor))
        return Parser(parse)

    def trace(self, name: str) -> 'Parser[T]':
        """Log entry and outcome of every invocation at DEBUG level."""
        def parse(stream: Stream, cursor: int) -> ParseResult:
            logger.debug("%s: enter at cursor %d", name, cursor)
            result = self(stream, cursor)
            if isinstance(result, Ok):
                value, next_cursor = result.value
                logger.debug("%s: matched %r, next cursor %d", name, value, next_cursor)
            else:
                logger.debug("%s: failed at cursor %d: %s", name, cursor, result.error)
            return result
        return Parser(parse)
