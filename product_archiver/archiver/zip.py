"""Archiver writing zip files."""

import asyncio
import logging
from pathlib import Path
import zipfile

from product_archiver.exceptions import ArchiverException

from .base import Archiver, FileSet

_LOGGER = logging.getLogger(__name__)


class ZipArchiver(Archiver):
    """Writes a deflated zip archive."""

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        """Initialize ZipArchiver."""
        self._compression = compression

    def _write(self, source_dir: Path, dest_file: Path) -> None:
        # Timestamps before 1980 are clamped since zip cannot store them
        with zipfile.ZipFile(
            dest_file, "w", compression=self._compression, strict_timestamps=False
        ) as archive:
            for path, arcname in FileSet(source_dir):
                archive.write(path, arcname=arcname)

    async def create_archive(self, source_dir: Path, dest_file: Path) -> None:
        """Write a zip archive with the full contents of the source directory."""
        _LOGGER.debug("Writing zip archive %s from %s", dest_file, source_dir)
        try:
            await asyncio.to_thread(self._write, source_dir, dest_file)
        except (
            OSError,
            ValueError,
            zipfile.BadZipFile,
            zipfile.LargeZipFile,
        ) as err:
            raise ArchiverException(
                f"Failed to write zip archive {dest_file}: {err}"
            ) from err
