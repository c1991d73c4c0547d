"""Byte accounting for build artifacts."""

import logging
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_IGNORED_DIRS = frozenset({".git", "node_modules"})

_logger = logging.getLogger(__name__)


class PathNotFoundError(FileNotFoundError):
    """Raised when the path to measure does not exist."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(f"Path not found: {path}")
        self.path = path


@dataclass
class ByteAccountant:
    """Sum the sizes of regular files under a path."""

    ignored_dirs: frozenset[str] = field(default=DEFAULT_IGNORED_DIRS)

    def measure(self, path: str | os.PathLike[str]) -> int:
        """Return the size of a file, or the total size of files under a directory."""
        target = Path(path)
        if not target.exists():
            raise PathNotFoundError(path)
        if target.is_file():
            return target.stat().st_size
        if not target.is_dir():
            return 0
        return sum(size for _, size in self.iter_file_sizes(target))

    def iter_file_sizes(self, root: Path) -> Iterator[tuple[Path, int]]:
        """Yield regular files under ``root`` with their sizes, pruning ignored dirs."""
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [name for name in dirnames if name not in self.ignored_dirs]
            for name in filenames:
                file_path = Path(dirpath) / name
                try:
                    file_stat = file_path.lstat()
                except FileNotFoundError:
                    _logger.debug("Skipping vanished file: %s", file_path)
                    continue
                if stat.S_ISREG(file_stat.st_mode):
                    yield file_path, file_stat.st_size
