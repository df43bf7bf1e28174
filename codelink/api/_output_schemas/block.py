"""Output schemas for block commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BlockCheckOutput(BaseOutputSchema):
    """Output schema for block check command.

    Output structure:
    - errors: list[str] - failures reading the configuration or document
    - warnings: list[str] - unused, always empty
    - path: str - document path
    - block_count: int - number of code-link blocks found
    - diagnostic_count: int - total diagnostics over all blocks
    - blocks: list[dict] - one entry per block with options, lines and diagnostics
    """

    path: str = Field(..., description="Document path")
    block_count: int = Field(..., description="Number of code-link blocks found")
    diagnostic_count: int = Field(..., description="Total diagnostics over all blocks")
    blocks: list[dict[str, Any]] = Field(..., description="Code-link blocks in document order")


class BlockShowOutput(BaseOutputSchema):
    """Output schema for block show command."""

    path: str = Field(..., description="Document path")
    blocks: list[dict[str, Any]] = Field(..., description="Selected blocks with their content")


class BlockInfoOutput(BaseOutputSchema):
    """Output schema for block info command."""

    info: str = Field(..., description="Info string that was parsed")
    keyword: str = Field(..., description="Keyword naming code-link blocks")
    is_match: bool = Field(..., description="Whether the info string opens a code-link block")
    options: dict[str, Any] = Field(..., description="Parsed link options")
    diagnostics: list[str] = Field(..., description="Grammar errors in detection order")


register_output_schema("block", "check", BlockCheckOutput)
register_output_schema("block", "show", BlockShowOutput)
register_output_schema("block", "info", BlockInfoOutput)
