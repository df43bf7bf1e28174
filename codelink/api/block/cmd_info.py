"""Block info API command."""

from collections.abc import Iterator

from .._output_schemas.block import BlockInfoOutput
from ..config.CodeLinkConfig import CodeLinkConfig
from ..options.parse_info_string import parse_info_string
from ..StageResult import StageResult


def cmd_info(info: str, keyword: str | None = None) -> StageResult:
    """Parse a single info string and report its options and grammar errors."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Parsing info string...")
        active_keyword = keyword or CodeLinkConfig().keyword
        parsed = parse_info_string(info, active_keyword)

        result_obj.output = BlockInfoOutput(
            info=info,
            keyword=active_keyword,
            is_match=parsed.is_match,
            options=parsed.options.to_dict(),
            diagnostics=parsed.errors,
        ).model_dump(mode="python")

        if not parsed.is_match:
            result_obj.result = f"Not a {active_keyword} code-link block"
            result_obj.success = False
        elif parsed.errors:
            result_obj.result = f"Parsed with {len(parsed.errors)} grammar errors"
            result_obj.success = False
        else:
            result_obj.result = "Parsed info string"
            result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Parsing info string...", progress_callback=do_work)
