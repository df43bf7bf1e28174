"""Region extraction (UNO: single function)."""

import re

# "#region Name" / "#endregion", optionally behind a line comment ("// #region Name")
REGION_START_PATTERN = re.compile(r"^\s*(?://\s*)?#region(?:\s+(?P<name>.*?))?\s*$")
REGION_END_PATTERN = re.compile(r"^\s*(?://\s*)?#endregion\b")


def extract_region(lines: list[str], name: str) -> list[str] | None:
    """Extract the lines of a named region.

    Markers nest; the lines strictly between ``#region <name>`` and its matching
    ``#endregion`` are returned verbatim, including any nested markers.

    Args:
        lines: Source file lines
        name: Region name

    Returns:
        Lines of the first region named ``name`` to be terminated, or None when no
        terminated region of that name exists
    """
    open_regions: list[tuple[str, int]] = []
    for index, line in enumerate(lines):
        start = REGION_START_PATTERN.match(line)
        if start:
            open_regions.append(((start.group("name") or "").strip(), index))
            continue
        if REGION_END_PATTERN.match(line) and open_regions:
            region_name, start_index = open_regions.pop()
            if region_name == name:
                return lines[start_index + 1 : index]
    return None
