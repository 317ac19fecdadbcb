"""File managers that track index files, and the pack that carries one to an index."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileManager(ABC):
    """Manages the files of an index, acting as a client of some storage."""

    @abstractmethod
    def load_file(self, filename: str) -> bool:
        """Bring *filename* to the local disk; return whether it worked."""

    @abstractmethod
    def add_file(self, filename: str) -> bool:
        """Put *filename* under management; return whether it worked."""

    @abstractmethod
    def is_existed(self, filename: str) -> bool | None:
        """Return whether *filename* exists, or ``None`` on error."""

    @abstractmethod
    def remove_file(self, filename: str) -> bool:
        """Drop *filename* from management; return whether it worked."""


class LocalFileManager(FileManager):
    """Placeholder manager that only remembers names; it never touches the disk."""

    def __init__(self) -> None:
        self._files: set[str] = set()
        self._loaded: set[str] = set()

    def load_file(self, filename: str) -> bool:
        """Note *filename* as loaded; the file is already local, so this always succeeds."""
        self._loaded.add(filename)
        return True

    def add_file(self, filename: str) -> bool:
        self._files.add(filename)
        return True

    def is_existed(self, filename: str) -> bool | None:
        return filename in self._files

    def remove_file(self, filename: str) -> bool:
        self._files.discard(filename)
        self._loaded.discard(filename)
        return True


class Pack:
    """Carries a ``FileManager`` to an index being created."""

    __slots__ = ("_package",)

    def __init__(self, package: FileManager | None = None) -> None:
        if package is not None and not isinstance(package, FileManager):
            raise TypeError("Pack only supports a FileManager")
        self._package = package

    @property
    def package(self) -> FileManager | None:
        return self._package