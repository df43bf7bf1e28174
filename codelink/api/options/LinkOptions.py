"""Link options model (UNO: single model)."""

from dataclasses import asdict, dataclass


@dataclass
class LinkOptions:
    """Options carried by the info string of a code-link block.

    ``project`` is only set when ``--project`` was given explicitly.
    """

    source_file: str | None = None
    region: str | None = None
    session: str | None = None
    project: str | None = None
    package: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)
