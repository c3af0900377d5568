"""
Parses dotted version strings such as "1.22.3-rc1".

The core has no sequencing combinator, so the pieces are chained by
threading the cursor by hand: each step runs a parser at the cursor the
previous step returned.
"""
from pyparcore import Err, Range, Stream, char, eol, lit

number = char("0-9").range(Range(1, 6)).map(int).label("version number")
dot = lit(".").discard()
suffix = char("a-z0-9").range(Range(1)).label("pre-release tag")
dash = lit("-").discard()


def parse_version(text: str):
    stream = Stream(text)
    cursor = 1
    parts = []

    for i in range(3):
        if i:
            res = dot(stream, cursor)
            if isinstance(res, Err):
                return res
            _, cursor = res.value
        res = number(stream, cursor)
        if isinstance(res, Err):
            return res
        value, cursor = res.value
        parts.append(value)

    tag = None
    res = dash.optional()(stream, cursor)
    _, next_cursor = res.value
    if next_cursor > cursor:
        res = suffix(stream, next_cursor)
        if isinstance(res, Err):
            return res
        tag, cursor = res.value

    res = eol()(stream, cursor)
    if isinstance(res, Err):
        return res
    return (tuple(parts), tag)


if __name__ == "__main__":
    for text in ["1.22.3", "0.1.0-rc1", "1.2", "1.2.3.4"]:
        print(f"{text!r}: {parse_version(text)}")
