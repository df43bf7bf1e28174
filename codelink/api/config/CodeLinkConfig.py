"""Top-level codelink configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...utils.get_home_dir import get_home_dir
from .LogConfig import LogConfig

FENCE_CHARACTERS = ("`", "~")


class CodeLinkConfig(BaseModel):
    """Configuration for the code-link block recognizer."""

    model_config = ConfigDict(extra="forbid")

    keyword: str = Field("csharp", min_length=1, description="Leading info-string keyword of code-link blocks")
    fence_chars: list[str] = Field(default_factory=lambda: ["`"], min_length=1, description="Opening fence characters")
    project_glob: str = Field("*.csproj", min_length=1, description="Glob used to discover the project file")
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("keyword")
    @classmethod
    def _validate_keyword(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("keyword must be a single word")
        return v

    @field_validator("fence_chars")
    @classmethod
    def _validate_fence_chars(cls, v: list[str]) -> list[str]:
        for ch in v:
            if ch not in FENCE_CHARACTERS:
                raise ValueError(f"Unsupported fence character: {ch!r}")
        return v

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on CODELINK_HOME or default to ~/.codelink."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "CodeLinkConfig":
        """Load and validate config from file.

        An explicit path must exist. When no path is given the default location is
        used, and a missing default file yields the default configuration.

        Raises:
            ValueError: If an explicit config file is not found, holds invalid JSON or fails validation
        """
        if path is None:
            path = cls.get_config_path()
            if not path.exists():
                return cls()
        elif not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
