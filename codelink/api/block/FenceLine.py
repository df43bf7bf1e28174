"""Opening fence model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FenceLine:
    """An opening fence line split into its parts."""

    char: str
    count: int
    indent: int
    info: str
