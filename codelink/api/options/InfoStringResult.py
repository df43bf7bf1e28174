"""Info-string parse result (UNO: single model)."""

from dataclasses import dataclass, field

from .LinkOptions import LinkOptions


@dataclass
class InfoStringResult:
    """Outcome of parsing one info string.

    ``is_match`` is False when the leading keyword does not name a code-link
    block; in that case ``options`` is empty and ``errors`` is always empty.
    ``supplied_flags`` holds every known flag that appeared, with or without a
    usable value.
    """

    is_match: bool
    options: LinkOptions = field(default_factory=LinkOptions)
    errors: list[str] = field(default_factory=list)
    supplied_flags: set[str] = field(default_factory=set)
