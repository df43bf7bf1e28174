"""Fenced code-link block recognizer."""

from .BlockState import BlockState
from .CodeLinkBlock import CODE_LINK_KIND, CodeLinkBlock
from .CodeLinkBlockParser import CodeLinkBlockParser
from .FenceLine import FenceLine
from .is_closing_fence import is_closing_fence
from .match_opening_fence import match_opening_fence
from .scan_document import scan_document

__all__ = [
    "CODE_LINK_KIND",
    "BlockState",
    "CodeLinkBlock",
    "CodeLinkBlockParser",
    "FenceLine",
    "is_closing_fence",
    "match_opening_fence",
    "scan_document",
]
