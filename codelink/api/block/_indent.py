"""Indentation helpers shared by fence matching and content collection."""

TAB_SIZE = 4
CODE_INDENT = 4


def measure_indent(line: str) -> tuple[int, int]:
    """Return (columns, characters) of leading whitespace; tabs advance to the next tab stop."""
    column = 0
    for index, ch in enumerate(line):
        if ch == " ":
            column += 1
        elif ch == "\t":
            column += TAB_SIZE - column % TAB_SIZE
        else:
            return column, index
    return column, len(line)


def strip_indent(line: str, columns: int) -> str:
    """Remove up to ``columns`` columns of leading whitespace from ``line``."""
    column = 0
    index = 0
    while index < len(line) and column < columns:
        ch = line[index]
        if ch == " ":
            column += 1
        elif ch == "\t":
            width = TAB_SIZE - column % TAB_SIZE
            if column + width > columns:
                # Partially consumed tab keeps its remaining columns
                return " " * (column + width - columns) + line[index + 1 :]
            column += width
        else:
            break
        index += 1
    return line[index:]
