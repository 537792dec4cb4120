"""Fixed-directory executable lookup."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from cmdnotify.config import DEFAULT_BINDIR


class BinaryResolver:
    """Resolves bare program names against an ordered list of directories.

    ``PATH`` is never consulted. The first directory holding the name wins;
    when none does, the path under the first directory is returned so
    callers can report where they looked.
    """

    def __init__(self, directories: Iterable[str | Path] = (DEFAULT_BINDIR,)) -> None:
        self.directories = tuple(Path(d) for d in directories)
        if not self.directories:
            self.directories = (Path(DEFAULT_BINDIR),)

    def candidates(self, name: str) -> list[Path]:
        return [directory / name for directory in self.directories]

    def resolve(self, name: str) -> Path:
        candidates = self.candidates(name)
        for candidate in candidates:
            if candidate.exists():
                return candidate
        return candidates[0]
