"""Archiver backends that write a product installation into an archive file.

An archiver is selected for a resolved archive format with `new_archiver`,
which returns a new instance on every call so that no archiver state is shared
between archives.
"""

import logging

from product_archiver.config import ArchiveOptions, TarBackend
from product_archiver.formats import ArchiveFormat

from .base import Archiver, FileSet
from .tar import TarCommandArchiver, TarGzArchiver
from .zip import ZipArchiver

__all__ = [
    "Archiver",
    "FileSet",
    "ZipArchiver",
    "TarGzArchiver",
    "TarCommandArchiver",
    "new_archiver",
]

_LOGGER = logging.getLogger(__name__)


def new_archiver(archive_format: ArchiveFormat, options: ArchiveOptions) -> Archiver:
    """Return a new archiver writing the archive format."""
    if archive_format == ArchiveFormat.ZIP:
        return ZipArchiver()
    if archive_format == ArchiveFormat.TAR_GZ:
        if options.tar_backend == TarBackend.COMMAND:
            _LOGGER.debug("Using %s command for tar.gz", options.tar_command)
            return TarCommandArchiver(options.tar_command)
        _LOGGER.debug("Using tarfile for tar.gz")
        return TarGzArchiver()
    raise ValueError(f"No archiver for {archive_format}")
