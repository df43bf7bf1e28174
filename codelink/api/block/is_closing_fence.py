"""Closing fence matcher (UNO: single function)."""

from ._indent import CODE_INDENT, measure_indent


def is_closing_fence(line: str, fence_char: str, fence_count: int) -> bool:
    """Return True when ``line`` closes a fence of ``fence_count`` ``fence_char`` characters.

    The line holds at least ``fence_count`` fence characters followed solely by
    optional whitespace, and is not indented as code (four columns or more).
    """
    indent, start = measure_indent(line)
    if indent >= CODE_INDENT:
        return False

    end = start
    while end < len(line) and line[end] == fence_char:
        end += 1

    count = end - start
    return count > 0 and count >= fence_count and not line[end:].strip()
