"""Info-string token (UNO: single model)."""

from dataclasses import dataclass

from .TokenKind import TokenKind


@dataclass(frozen=True)
class OptionToken:
    """A tagged token of the info string."""

    kind: TokenKind
    text: str
