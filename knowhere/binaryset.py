"""Named binary blobs making up a serialized index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class Binary:
    """One serialized blob."""

    data: bytes = b""

    def __len__(self) -> int:
        return len(self.data)

    @property
    def size(self) -> int:
        return len(self.data)


def copy_binary(binary: Binary) -> bytearray:
    """Return a fresh, independent copy of the blob's bytes."""
    return bytearray(binary.data)


@dataclass
class BinarySet:
    """A mapping from names to ``Binary`` blobs."""

    binaries: dict[str, Binary] = field(default_factory=dict)

    def get_by_name(self, name: str) -> Binary | None:
        """Return the blob stored under *name*, or ``None``."""
        return self.binaries.get(name)

    def get_by_names(self, names: Iterable[str]) -> Binary | None:
        """Return the blob of the first name in *names* that is present."""
        return next((self.binaries[n] for n in names if n in self.binaries), None)

    def append(self, name: str, data: Binary | bytes | bytearray | memoryview) -> None:
        """Store *data* under *name*, replacing any earlier blob."""
        self.binaries[name] = data if isinstance(data, Binary) else Binary(bytes(data))

    def erase(self, name: str) -> Binary | None:
        """Remove and return the blob under *name*, or ``None`` if absent."""
        return self.binaries.pop(name, None)

    def clear(self) -> None:
        self.binaries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self.binaries

    def __len__(self) -> int:
        return len(self.binaries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.binaries))