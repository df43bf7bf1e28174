"""File accessors used to resolve linked source files."""

from .DirectoryAccessor import DirectoryAccessor
from .extract_region import extract_region
from .FileSystemDirectoryAccessor import FileSystemDirectoryAccessor
from .InMemoryDirectoryAccessor import InMemoryDirectoryAccessor
from .split_lines import split_lines

__all__ = [
    "DirectoryAccessor",
    "FileSystemDirectoryAccessor",
    "InMemoryDirectoryAccessor",
    "extract_region",
    "split_lines",
]
