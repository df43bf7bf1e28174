"""In-memory directory accessor."""

import posixpath
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath

from .DirectoryAccessor import DirectoryAccessor


def _normalize(path: str) -> str:
    return posixpath.normpath(path.replace("\\", "/"))


class InMemoryDirectoryAccessor(DirectoryAccessor):
    """Directory accessor over a mapping of relative paths to file text.

    ``./a.cs``, ``a.cs`` and ``.\\a.cs`` name the same file.
    """

    def __init__(self, files: dict[str, str] | None = None, root: Path | str = "/"):
        self._root = Path(root)
        self._files = {_normalize(k): v for k, v in (files or {}).items()}

    @property
    def root(self) -> Path:
        return self._root

    def add_file(self, path: str, text: str) -> None:
        self._files[_normalize(path)] = text

    def get_fully_qualified_path(self, path: str) -> Path:
        normalized = _normalize(path)
        return self._root if normalized == "." else self._root / normalized

    def file_exists(self, path: str) -> bool:
        return _normalize(path) in self._files

    def read_text(self, path: str) -> str:
        normalized = _normalize(path)
        if normalized not in self._files:
            raise FileNotFoundError(path)
        return self._files[normalized]

    def find_files(self, pattern: str) -> list[str]:
        return sorted(p for p in self._files if fnmatch(PurePosixPath(p).name, pattern))
