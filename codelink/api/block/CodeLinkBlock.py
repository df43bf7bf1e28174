"""Code-link block model."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

CODE_LINK_KIND = "code-link"


@dataclass
class CodeLinkBlock:
    """A fenced code-link block.

    ``kind`` is the capability tag checked by the recognizer. While open, the
    block accumulates lines and diagnostics; ``close`` freezes both into tuples
    and any later mutation raises ``RuntimeError``.
    """

    fence_char: str
    fence_count: int
    indent: int = 0
    line_number: int = 0
    info: str = ""
    kind: str = field(default=CODE_LINK_KIND, init=False)

    source_file: str | None = None
    region: str | None = None
    session: str | None = None
    package: str | None = None
    project_file: Path | None = None

    lines: Sequence[str] = field(default_factory=list)
    diagnostics: Sequence[str] = field(default_factory=list)
    has_linked_content: bool = False
    closed: bool = False
    end_line_number: int | None = None

    def _ensure_open(self) -> None:
        if self.closed:
            raise RuntimeError(f"Code-link block at line {self.line_number} is closed")

    def add_diagnostic(self, message: str) -> None:
        self._ensure_open()
        self.diagnostics.append(message)  # type: ignore[attr-defined]

    def append_line(self, line: str) -> None:
        self._ensure_open()
        self.lines.append(line)  # type: ignore[attr-defined]

    def set_linked_content(self, lines: Iterable[str]) -> None:
        """Replace the block content with lines resolved from the source file."""
        self._ensure_open()
        self.lines = list(lines)
        self.has_linked_content = any(line.strip() for line in self.lines)

    def close(self, end_line_number: int | None = None) -> None:
        if self.closed:
            return
        self.lines = tuple(self.lines)
        self.diagnostics = tuple(self.diagnostics)
        self.end_line_number = end_line_number
        self.closed = True

    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for command output."""
        return {
            "line_number": self.line_number,
            "end_line_number": self.end_line_number,
            "info": self.info,
            "source_file": self.source_file,
            "region": self.region,
            "session": self.session,
            "package": self.package,
            "project_file": str(self.project_file) if self.project_file else None,
            "linked": self.has_linked_content,
            "lines": list(self.lines),
            "diagnostics": list(self.diagnostics),
        }
