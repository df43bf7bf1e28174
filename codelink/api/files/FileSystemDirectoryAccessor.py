"""File system backed directory accessor."""

from pathlib import Path

from .DirectoryAccessor import DirectoryAccessor


class FileSystemDirectoryAccessor(DirectoryAccessor):
    """Directory accessor reading UTF-8 files below a root directory."""

    def __init__(self, root: Path | str):
        self._root = Path(root).expanduser().resolve()

    @property
    def root(self) -> Path:
        return self._root

    def get_fully_qualified_path(self, path: str) -> Path:
        return (self._root / path.replace("\\", "/")).resolve()

    def file_exists(self, path: str) -> bool:
        return self.get_fully_qualified_path(path).is_file()

    def read_text(self, path: str) -> str:
        return self.get_fully_qualified_path(path).read_text(encoding="utf-8")

    def find_files(self, pattern: str) -> list[str]:
        return sorted(p.relative_to(self._root).as_posix() for p in self._root.rglob(pattern) if p.is_file())
