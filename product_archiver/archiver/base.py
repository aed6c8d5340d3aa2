"""Base class for archiver backends."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
import os
from pathlib import Path

__all__ = [
    "Archiver",
    "FileSet",
]


@dataclass
class FileSet:
    """All entries below a directory, in a stable order.

    There are no default excludes: hidden files and version control metadata
    are part of a product installation and are archived like any other file.
    """

    directory: Path

    def __iter__(self) -> Iterator[tuple[Path, str]]:
        """Yield each directory and file with its archive name."""
        for root, dirs, files in os.walk(self.directory):
            dirs.sort()
            root_path = Path(root)
            entries = [root_path / name for name in dirs] + [
                root_path / name for name in sorted(files)
            ]
            for path in sorted(entries):
                yield path, path.relative_to(self.directory).as_posix()


class Archiver(ABC):
    """A strategy for writing one archive format.

    A new archiver is created for every archive that is written.
    """

    @abstractmethod
    async def create_archive(self, source_dir: Path, dest_file: Path) -> None:
        """Write an archive with the full contents of the source directory.

        Raises ArchiverException when the archive cannot be written.
        """
