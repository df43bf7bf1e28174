"""Block show API command."""

from collections.abc import Iterator

from .._output_schemas.block import BlockShowOutput
from ..StageResult import StageResult
from ._scan_markdown_file import _scan_markdown_file


def cmd_show(
    path: str,
    index: int | None = None,
    root: str | None = None,
    config_path: str | None = None,
) -> StageResult:
    """Show the content of the code-link blocks in a markdown file.

    Args:
        path: Markdown file
        index: Zero-based block index; all blocks when None
        root: Directory linked source files resolve against (default: the file's directory)
        config_path: Optional configuration file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Scanning for code-link blocks...")
        try:
            document, blocks = _scan_markdown_file(path, root, config_path)
            if index is not None and not 0 <= index < len(blocks):
                raise ValueError(f"Block index {index} out of range ({len(blocks)} blocks)")
        except ValueError as e:
            result_obj.output = BlockShowOutput(errors=[str(e)], path=path, blocks=[]).model_dump(mode="python")
            result_obj.result = f"Error showing blocks: {e}"
            result_obj.success = False
            return

        selected = blocks if index is None else [blocks[index]]
        result_obj.output = BlockShowOutput(
            warnings=[d for block in selected for d in block.diagnostics],
            path=str(document),
            blocks=[
                {
                    "line_number": block.line_number,
                    "source_file": block.source_file,
                    "region": block.region,
                    "session": block.session,
                    "content": block.content,
                }
                for block in selected
            ],
        ).model_dump(mode="python")
        result_obj.result = f"Showing {len(selected)} code-link blocks from {document.name}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Reading code-link blocks in {path}...", progress_callback=do_work)
