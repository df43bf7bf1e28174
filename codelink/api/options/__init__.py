"""Info-string option grammar."""

from .InfoStringResult import InfoStringResult
from .LinkOptions import LinkOptions
from .OptionToken import OptionToken
from .parse_info_string import VALUED_FLAGS, parse_info_string
from .parse_relative_file_path import parse_relative_file_path
from .tokenize_info_string import tokenize_info_string
from .TokenKind import TokenKind

__all__ = [
    "VALUED_FLAGS",
    "InfoStringResult",
    "LinkOptions",
    "OptionToken",
    "TokenKind",
    "parse_info_string",
    "parse_relative_file_path",
    "tokenize_info_string",
]
