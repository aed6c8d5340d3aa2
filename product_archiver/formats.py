"""Library for resolving the archive format of a product.

By default a zip file is created. The format may be overridden per operating
system, or for multi-platform packages, with a format override map e.g.

```yaml
formats:
  linux: tar.gz
  macosx: tgz
  multiPlatformPackage: zip
```
"""

from enum import Enum
import logging

from .exceptions import UnsupportedFormatError
from .product import Product, TargetEnvironment

__all__ = [
    "ArchiveFormat",
    "DEFAULT_ARCHIVE_FORMAT",
    "MULTI_PLATFORM_PACKAGE",
    "resolve_archive_format",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_ARCHIVE_FORMAT = "zip"
TAR_GZ_ARCHIVE_FORMAT = "tar.gz"
TGZ_ARCHIVE_FORMAT = "tgz"

# Key of the format override map used for multi-platform packages
MULTI_PLATFORM_PACKAGE = "multiPlatformPackage"


class ArchiveFormat(str, Enum):
    """The on-disk formats an archiver can write."""

    ZIP = DEFAULT_ARCHIVE_FORMAT
    TAR_GZ = TAR_GZ_ARCHIVE_FORMAT

    @classmethod
    def parse(
        cls, value: str, environment: TargetEnvironment | None = None
    ) -> "ArchiveFormat":
        """Return the archive format for a resolved format string.

        Raises UnsupportedFormatError when no archiver writes the format.
        """
        if value == TGZ_ARCHIVE_FORMAT:
            return cls.TAR_GZ
        try:
            return cls(value)
        except ValueError as err:
            raise UnsupportedFormatError(
                value, environment.os if environment is not None else None
            ) from err


def resolve_archive_format(
    product: Product,
    environment: TargetEnvironment | None,
    formats: dict[str, str | None] | None,
) -> str:
    """Return the archive format string for the product and environment.

    Missing or blank overrides fall back to the default format. The returned
    string is not checked against the supported formats.
    """
    if formats is None:
        return DEFAULT_ARCHIVE_FORMAT
    archive_format: str | None
    if product.multi_platform_package:
        archive_format = formats.get(MULTI_PLATFORM_PACKAGE)
    elif environment is not None:
        archive_format = formats.get(environment.os)
    else:
        archive_format = None
    if archive_format is not None:
        archive_format = archive_format.strip()
    if not archive_format:
        _LOGGER.debug("No archive format override for %s, using default", product.id)
        return DEFAULT_ARCHIVE_FORMAT
    return archive_format
