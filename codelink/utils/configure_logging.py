import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str | None = None) -> None:
    """Configure unified codelink logging.

    The file handler is installed once; a given level is applied on every call.

    Args:
        home: Path to the codelink home directory. If None, derived from environment.
        level: Level name for the ``codelink`` logger (default INFO on first configuration).
    """
    global _CONFIGURED
    root_logger = logging.getLogger("codelink")
    if level is not None:
        root_logger.setLevel(level)
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "codelink.log"

    if level is None:
        root_logger.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def is_configured() -> bool:
    return _CONFIGURED
