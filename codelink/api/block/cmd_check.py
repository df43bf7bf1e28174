"""Block check API command."""

from collections.abc import Iterator

from .._output_schemas.block import BlockCheckOutput
from ..StageResult import StageResult
from ._scan_markdown_file import _scan_markdown_file


def cmd_check(path: str, root: str | None = None, config_path: str | None = None) -> StageResult:
    """Find code-link blocks in a markdown file and report their diagnostics.

    Args:
        path: Markdown file
        root: Directory linked source files resolve against (default: the file's directory)
        config_path: Optional configuration file

    Returns:
        StageResult; success is False when any block carries diagnostics
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Scanning for code-link blocks...")
        try:
            document, blocks = _scan_markdown_file(path, root, config_path)
        except ValueError as e:
            result_obj.output = BlockCheckOutput(
                errors=[str(e)],
                path=path,
                block_count=0,
                diagnostic_count=0,
                blocks=[],
            ).model_dump(mode="python")
            result_obj.result = f"Error scanning file: {e}"
            result_obj.success = False
            return

        yield (0.8, "Collecting diagnostics...")
        diagnostic_count = sum(len(block.diagnostics) for block in blocks)
        result_obj.output = BlockCheckOutput(
            path=str(document),
            block_count=len(blocks),
            diagnostic_count=diagnostic_count,
            blocks=[block.to_dict() for block in blocks],
        ).model_dump(mode="python")

        if diagnostic_count:
            result_obj.result = f"Found {diagnostic_count} diagnostics in {len(blocks)} code-link blocks"
            result_obj.success = False
        else:
            result_obj.result = f"Found {len(blocks)} code-link blocks in {document.name}"
            result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Checking code-link blocks in {path}...", progress_callback=do_work)
