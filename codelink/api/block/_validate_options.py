"""Cross-option validation for code-link blocks."""

from collections.abc import Callable
from pathlib import Path

from ..files.DirectoryAccessor import DirectoryAccessor
from ..options.InfoStringResult import InfoStringResult
from ..options.parse_info_string import PACKAGE_FLAG, PROJECT_FLAG
from .CodeLinkBlock import CodeLinkBlock

BOTH_PROJECT_AND_PACKAGE = "Can't specify both --project and --package"


def _validate_options(
    block: CodeLinkBlock,
    parsed: InfoStringResult,
    accessor: DirectoryAccessor,
    discover_project: Callable[[], Path | None],
) -> None:
    """Resolve the package or project identity of ``block`` and record conflicts.

    Supplying both ``--project`` and ``--package`` is a conflict even when one
    of them lacks a value; the package stays the identity when it parsed.
    Without either flag, ``discover_project`` supplies the project file.
    """
    options = parsed.options
    if PROJECT_FLAG in parsed.supplied_flags and PACKAGE_FLAG in parsed.supplied_flags:
        block.package = options.package
        block.add_diagnostic(BOTH_PROJECT_AND_PACKAGE)
        return

    if options.package is not None:
        block.package = options.package
        return

    if options.project is not None:
        if not accessor.file_exists(options.project):
            block.add_diagnostic(f"Project file not found: {options.project}")
            return
        block.project_file = accessor.get_fully_qualified_path(options.project)
        return

    if PROJECT_FLAG in parsed.supplied_flags or PACKAGE_FLAG in parsed.supplied_flags:
        # The missing value is already a grammar error
        return

    block.project_file = discover_project()
    if block.project_file is None and options.source_file is not None:
        block.add_diagnostic(f"No project file could be found at path {accessor.get_fully_qualified_path('.')}")
