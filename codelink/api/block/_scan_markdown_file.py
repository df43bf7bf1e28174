"""Load configuration, read a markdown file and scan it for code-link blocks."""

from pathlib import Path

from ...utils.configure_logging import configure_logging
from ..config.CodeLinkConfig import CodeLinkConfig
from ..files.FileSystemDirectoryAccessor import FileSystemDirectoryAccessor
from .CodeLinkBlock import CodeLinkBlock
from .CodeLinkBlockParser import CodeLinkBlockParser
from .scan_document import scan_document


def _scan_markdown_file(
    path: str,
    root: str | None = None,
    config_path: str | None = None,
) -> tuple[Path, list[CodeLinkBlock]]:
    """Scan a markdown file; linked paths resolve against ``root`` or the file's directory.

    Raises:
        ValueError: If the configuration is invalid or the file cannot be read
    """
    config = CodeLinkConfig.load(Path(config_path).expanduser() if config_path else None)
    configure_logging(level=config.log.level)

    document = Path(path).expanduser().resolve()
    if not document.is_file():
        raise ValueError(f"File not found: {path}")
    try:
        text = document.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"Cannot read file: {exc}") from exc

    accessor = FileSystemDirectoryAccessor(Path(root) if root else document.parent)
    parser = CodeLinkBlockParser(accessor, config)
    return document, scan_document(text, parser)
