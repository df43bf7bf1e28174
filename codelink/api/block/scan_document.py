"""Reference host driver scanning a whole document for code-link blocks."""

from ..config.CodeLinkConfig import FENCE_CHARACTERS
from ..files.split_lines import split_lines
from .BlockState import BlockState
from .CodeLinkBlock import CodeLinkBlock
from .CodeLinkBlockParser import CodeLinkBlockParser
from .FenceLine import FenceLine
from .is_closing_fence import is_closing_fence
from .match_opening_fence import match_opening_fence


def scan_document(text: str, parser: CodeLinkBlockParser) -> list[CodeLinkBlock]:
    """Collect the code-link blocks of a markdown document.

    Fenced blocks of other kinds are skipped up to their closing fence, so
    their bodies are never offered to the parser. A block left open at the end
    of the document is closed there.

    Args:
        text: Markdown document
        parser: Recognizer offered every candidate line

    Returns:
        Closed blocks in document order
    """
    blocks: list[CodeLinkBlock] = []
    current: CodeLinkBlock | None = None
    foreign: FenceLine | None = None
    line_number = 0

    for line_number, line in enumerate(split_lines(text), start=1):
        if current is not None:
            if parser.try_continue(current, line, line_number) is BlockState.BREAK_DISCARD:
                current = None
            continue

        if foreign is not None:
            if is_closing_fence(line, foreign.char, foreign.count):
                foreign = None
            continue

        fence = match_opening_fence(line, FENCE_CHARACTERS)
        if fence is None:
            continue

        block = parser.open_block(fence, line_number)
        if block is None:
            foreign = fence
            continue

        blocks.append(block)
        current = block

    if current is not None:
        current.close(line_number)

    return blocks
