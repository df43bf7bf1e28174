"""Abstract directory accessor."""

from abc import ABC, abstractmethod
from pathlib import Path

from .extract_region import extract_region
from .split_lines import split_lines


class DirectoryAccessor(ABC):
    """Read-only access to files relative to a root directory.

    Paths are relative to ``root``. Implementations never raise for missing
    files from ``file_exists``; ``read_text`` may raise ``FileNotFoundError``.
    """

    @property
    @abstractmethod
    def root(self) -> Path:
        """Fully qualified root directory."""

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return True when ``path`` names an existing file."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read the text of ``path``."""

    @abstractmethod
    def get_fully_qualified_path(self, path: str) -> Path:
        """Resolve ``path`` against the root."""

    @abstractmethod
    def find_files(self, pattern: str) -> list[str]:
        """Return relative paths of files matching a glob pattern, recursively, sorted."""

    def find_project_file(self, pattern: str) -> Path | None:
        """Return the fully qualified path of the first project file found, if any."""
        matches = self.find_files(pattern)
        if not matches:
            return None
        return self.get_fully_qualified_path(matches[0])

    def resolve(self, path: str, region: str | None = None) -> list[str] | None:
        """Return the lines of a file, or of a region within it.

        Returns:
            Ordered lines, or None when the file or the region does not exist
        """
        if not self.file_exists(path):
            return None
        lines = split_lines(self.read_text(path))
        if region is None:
            return lines
        return extract_region(lines, region)
