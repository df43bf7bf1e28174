"""Line splitting on markdown line endings only."""

import re

LINE_ENDING_PATTERN = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\r\\n``, ``\\r`` and ``\\n``.

    Unlike ``str.splitlines`` this keeps form feeds, ``\\x85``, ``\\u2028`` and
    the other Unicode separators inside their line. A final line ending does
    not produce a trailing empty line.
    """
    lines = LINE_ENDING_PATTERN.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines
