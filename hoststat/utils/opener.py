"""
Resource openers.

Samplers never touch the filesystem directly; they ask an Opener for a
text stream so tests can substitute captured kernel output.
"""

from pathlib import Path
from typing import Protocol, TextIO

from ..const import DEFAULT_HOST_ROOT


class Opener(Protocol):
    """Opens a named resource for line-oriented reading."""

    def open(self, path: str) -> TextIO:
        """
        Open a resource.

        Returns:
            Text stream usable as a context manager and iterable by line

        Raises:
            OSError: If the resource cannot be opened
        """
        ...


class FileOpener:
    """
    Opener for files on the local host.

    Args:
        root: Directory the absolute resource paths are resolved against.
            Set it to the host's root mount when running in a container,
            e.g. "/host".
    """

    def __init__(self, root: str | Path = DEFAULT_HOST_ROOT):
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return self.root / path.lstrip("/")

    def open(self, path: str) -> TextIO:
        return open(self.resolve(path), encoding="utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"FileOpener(root={str(self.root)!r})"
