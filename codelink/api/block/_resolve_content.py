"""Linked content resolution for code-link blocks."""

from ..files.DirectoryAccessor import DirectoryAccessor
from .CodeLinkBlock import CodeLinkBlock


def _resolve_content(block: CodeLinkBlock, accessor: DirectoryAccessor) -> bool:
    """Replace the content of ``block`` with its source file or region.

    Returns:
        True when content was resolved; failures are recorded as diagnostics
    """
    source_file = block.source_file
    if source_file is None:
        return False

    if not accessor.file_exists(source_file):
        block.add_diagnostic(f"File not found: {source_file}")
        return False

    try:
        lines = accessor.resolve(source_file, block.region)
    except (OSError, UnicodeDecodeError) as exc:
        block.add_diagnostic(f"Cannot read file {source_file}: {exc}")
        return False

    if lines is None:
        full_path = accessor.get_fully_qualified_path(source_file)
        block.add_diagnostic(f'Region "{block.region}" not found in file {full_path}')
        return False

    block.set_linked_content(lines)
    return True
