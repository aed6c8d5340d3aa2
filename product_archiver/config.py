"""Configuration objects for product-archiver."""

from dataclasses import dataclass, field
from enum import Enum
import os

from .exceptions import InputException

# Environment variable selecting the tar.gz archiver implementation
TAR_BACKEND_ENV = "PRODUCT_ARCHIVER_TAR"


class TarBackend(str, Enum):
    """Interchangeable implementations writing tar.gz archives."""

    LIBRARY = "library"
    """Write archives with the python tarfile module."""

    COMMAND = "command"
    """Write archives by running an external GNU tar."""


def default_tar_backend() -> TarBackend:
    """Return the tar backend selected by the environment, if any."""
    if value := os.environ.get(TAR_BACKEND_ENV):
        try:
            return TarBackend(value.strip().lower())
        except ValueError as err:
            raise InputException(
                f"Invalid {TAR_BACKEND_ENV} value '{value}', expected one of "
                f"{[backend.value for backend in TarBackend]}"
            ) from err
    return TarBackend.LIBRARY


@dataclass
class ArchiveOptions:
    """Options for writing product archives."""

    tar_backend: TarBackend = field(default_factory=default_tar_backend)

    tar_command: str = "tar"
    """Executable used by the command tar backend."""
