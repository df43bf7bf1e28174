"""Opening fence matcher (UNO: single function)."""

from collections.abc import Collection

from ._indent import CODE_INDENT, measure_indent
from .FenceLine import FenceLine

MIN_FENCE_COUNT = 3


def match_opening_fence(line: str, fence_chars: Collection[str]) -> FenceLine | None:
    """Match an opening fence line.

    The fence is indented by fewer than four columns and made of at least three
    identical fence characters. A backtick fence cannot carry a backtick in its
    info string.

    Args:
        line: Document line without its line terminator
        fence_chars: Accepted fence characters

    Returns:
        FenceLine, or None when the line does not open a fenced block
    """
    indent, start = measure_indent(line)
    if indent >= CODE_INDENT or start >= len(line):
        return None

    char = line[start]
    if char not in fence_chars:
        return None

    end = start
    while end < len(line) and line[end] == char:
        end += 1
    count = end - start
    if count < MIN_FENCE_COUNT:
        return None

    info = line[end:]
    if char == "`" and "`" in info:
        return None

    return FenceLine(char=char, count=count, indent=indent, info=info.strip())
