"""Config API module."""

from .CodeLinkConfig import CodeLinkConfig
from .LogConfig import LogConfig

__all__ = ["CodeLinkConfig", "LogConfig"]
