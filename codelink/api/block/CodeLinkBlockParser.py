"""Fenced code-link block recognizer."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..config.CodeLinkConfig import CodeLinkConfig
from ..files.DirectoryAccessor import DirectoryAccessor
from ..options.parse_info_string import parse_info_string
from ._indent import strip_indent
from ._resolve_content import _resolve_content
from ._validate_options import _validate_options
from .BlockState import BlockState
from .CodeLinkBlock import CODE_LINK_KIND, CodeLinkBlock
from .FenceLine import FenceLine
from .is_closing_fence import is_closing_fence
from .match_opening_fence import match_opening_fence


class CodeLinkBlockParser:
    """Recognizes code-link blocks for a line-by-line host driver.

    The driver offers candidate lines to ``try_open`` (or an already matched
    fence to ``open_block``) and feeds every following line of an open block to
    ``try_continue`` until it answers ``BlockState.BREAK_DISCARD``.

    Malformed info strings, missing files and regions, and project/package
    conflicts end up as diagnostics on the block. Declining a line of another
    kind has no side effects.
    """

    def __init__(self, directory_accessor: DirectoryAccessor, config: CodeLinkConfig | None = None):
        if directory_accessor is None:
            raise ValueError("directory_accessor is required")
        self._accessor = directory_accessor
        self._config = config if config is not None else CodeLinkConfig()
        self._fence_chars = frozenset(self._config.fence_chars)
        self._logger = get_logger("block.CodeLinkBlockParser")
        self._discovered_project: Path | None = None
        self._project_discovered = False

    @property
    def accessor(self) -> DirectoryAccessor:
        return self._accessor

    @property
    def config(self) -> CodeLinkConfig:
        return self._config

    @property
    def fence_chars(self) -> frozenset[str]:
        return self._fence_chars

    def _discover_project(self) -> Path | None:
        """Find the project file under the accessor root once per parser."""
        if not self._project_discovered:
            self._discovered_project = self._accessor.find_project_file(self._config.project_glob)
            self._project_discovered = True
            self._logger.debug(f"Discovered project file: {self._discovered_project}")
        return self._discovered_project

    def try_open(self, line: str, line_number: int = 0) -> CodeLinkBlock | None:
        """Open a block when ``line`` is an opening fence of a code-link block."""
        fence = match_opening_fence(line, self._fence_chars)
        if fence is None:
            return None
        return self.open_block(fence, line_number)

    def open_block(self, fence: FenceLine, line_number: int = 0) -> CodeLinkBlock | None:
        """Open a block from a matched fence, or decline when the keyword is not ours."""
        if fence.char not in self._fence_chars:
            return None

        parsed = parse_info_string(fence.info, self._config.keyword)
        if not parsed.is_match:
            return None

        options = parsed.options
        block = CodeLinkBlock(
            fence_char=fence.char,
            fence_count=fence.count,
            indent=fence.indent,
            line_number=line_number,
            info=fence.info,
            source_file=options.source_file,
            region=options.region,
            session=options.session,
        )
        for error in parsed.errors:
            block.add_diagnostic(error)

        _validate_options(block, parsed, self._accessor, self._discover_project)

        if block.source_file is not None and _resolve_content(block, self._accessor):
            self._logger.debug(
                f"Resolved {len(block.lines)} lines from {block.source_file} for block at line {line_number}"
            )

        if block.diagnostics:
            self._logger.debug(f"Block at line {line_number} has {len(block.diagnostics)} diagnostics")
        return block

    def try_continue(self, block: CodeLinkBlock, line: str, line_number: int | None = None) -> BlockState:
        """Decide what to do with the next line of an open block."""
        if getattr(block, "kind", None) != CODE_LINK_KIND:
            raise ValueError("try_continue requires a code-link block")

        if block.closed:
            return BlockState.BREAK_DISCARD

        if is_closing_fence(line, block.fence_char, block.fence_count):
            block.close(line_number)
            self._logger.debug(f"Closed block opened at line {block.line_number}")
            return BlockState.BREAK_DISCARD

        if block.has_linked_content:
            return BlockState.CONTINUE_DISCARD

        block.append_line(strip_indent(line, block.indent))
        return BlockState.CONTINUE
