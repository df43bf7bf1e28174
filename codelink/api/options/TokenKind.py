"""Token kinds of the info-string grammar."""

from enum import Enum


class TokenKind(Enum):
    """Tag carried by every info-string token."""

    FLAG = "flag"
    VALUE = "value"
    POSITIONAL = "positional"
