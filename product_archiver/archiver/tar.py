"""Archivers writing gzip compressed tar files.

Both archivers write GNU format tar entries so that paths longer than 100
characters are stored without truncation, and the archives they produce are
interchangeable. The command archiver exists as an escape hatch when the
tarfile module misbehaves for a particular installation.
"""

import asyncio
import logging
import os
from pathlib import Path
import tarfile

from product_archiver import command
from product_archiver.exceptions import ArchiverException, CommandException, TarException

from .base import Archiver, FileSet

_LOGGER = logging.getLogger(__name__)


class TarGzArchiver(Archiver):
    """Writes a tar.gz archive with the tarfile module."""

    def __init__(self, compresslevel: int = 9) -> None:
        """Initialize TarGzArchiver."""
        self._compresslevel = compresslevel

    def _write(self, source_dir: Path, dest_file: Path) -> None:
        with tarfile.open(
            dest_file,
            "w:gz",
            format=tarfile.GNU_FORMAT,
            compresslevel=self._compresslevel,
        ) as archive:
            for path, arcname in FileSet(source_dir):
                archive.add(path, arcname=arcname, recursive=False)

    async def create_archive(self, source_dir: Path, dest_file: Path) -> None:
        """Write a tar.gz archive with the full contents of the source directory."""
        _LOGGER.debug("Using tarfile to write %s from %s", dest_file, source_dir)
        try:
            await asyncio.to_thread(self._write, source_dir, dest_file)
        except (OSError, tarfile.TarError) as err:
            raise ArchiverException(
                f"Failed to write tar.gz archive {dest_file}: {err}"
            ) from err


class TarCommandArchiver(Archiver):
    """Writes a tar.gz archive by running GNU tar."""

    def __init__(self, tar_bin: str = "tar") -> None:
        """Initialize TarCommandArchiver."""
        self._tar_bin = tar_bin

    async def create_archive(self, source_dir: Path, dest_file: Path) -> None:
        """Write a tar.gz archive with the full contents of the source directory."""
        _LOGGER.debug("Using %s to write %s from %s", self._tar_bin, dest_file, source_dir)
        try:
            names = sorted(os.listdir(source_dir))
        except OSError as err:
            raise ArchiverException(
                f"Failed to list product directory {source_dir}: {err}"
            ) from err
        args = [
            self._tar_bin,
            "--format=gnu",
            "-czf",
            str(dest_file.absolute()),
        ]
        if names:
            args.extend(["--", *names])
        else:
            # tar refuses to create an archive from an empty member list
            args.extend(["--files-from", os.devnull])
        try:
            await command.run(
                command.Command(args, cwd=source_dir, exc=TarException, timeout=None)
            )
        except (CommandException, OSError) as err:
            raise ArchiverException(
                f"Failed to write tar.gz archive {dest_file}: {err}"
            ) from err
