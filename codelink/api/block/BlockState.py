"""Continuation decision returned to the host driver."""

from enum import Enum


class BlockState(Enum):
    """Outcome of offering a line to an open block."""

    CONTINUE = "continue"
    CONTINUE_DISCARD = "continue_discard"
    BREAK_DISCARD = "break_discard"
