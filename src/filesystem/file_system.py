"""File access used when uploading local photos."""
from abc import ABC, abstractmethod
from pathlib import Path, PurePath
from typing import Dict, Optional


class FileSystem(ABC):
    """Reads whole files by path."""

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Return all bytes of the file at path."""

    def file_name(self, path: str) -> str:
        """Return the base name of path."""
        return PurePath(path).name


class LocalFileSystem(FileSystem):
    """Reads from the real disk."""

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()


class InMemoryFileSystem(FileSystem):
    """Dict-backed file system for tests and dry runs."""

    def __init__(self, files: Optional[Dict[str, bytes]] = None):
        self.files = dict(files or {})
        self.reads = []

    def add_file(self, path: str, content: bytes) -> None:
        self.files[path] = content

    def read_bytes(self, path: str) -> bytes:
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(f"No such file: '{path}'")
        return self.files[path]
