"""Exceptions related to product-archiver."""

__all__ = [
    "ProductArchiverException",
    "InputException",
    "ConfigurationError",
    "UnsupportedFormatError",
    "ArchivingError",
    "ArchiverException",
    "CommandException",
    "TarException",
]


class ProductArchiverException(Exception):
    """Generic base exception used for this library."""


class InputException(ProductArchiverException):
    """Raised when the input files or values are not formatted as expected."""


class ConfigurationError(InputException):
    """Raised when the archived products would not have unique artifact names."""

    def __init__(
        self, products: str, environments: str, duplicates: list[str]
    ) -> None:
        super().__init__(
            "Artifact file names for the archived products are not unique. "
            "Configure the attachId or select a subset of products. "
            f"Duplicates: {duplicates}. "
            f"Current configuration: products={products} environments={environments}"
        )
        self.duplicates = duplicates


class UnsupportedFormatError(InputException):
    """Raised when there is no archiver for the resolved archive format."""

    def __init__(self, archive_format: str, os: str | None = None) -> None:
        os_segment = f"os={os} " if os is not None else ""
        super().__init__(
            f"Unknown or unsupported archive format {os_segment}format={archive_format}"
        )
        self.archive_format = archive_format
        self.os = os


class ArchivingError(ProductArchiverException):
    """Raised when a product installation could not be packed into an archive."""

    def __init__(self, product_id: str, message: str) -> None:
        super().__init__(f"Error packing product {product_id}: {message}")
        self.product_id = product_id


class ArchiverException(ProductArchiverException):
    """Raised by an archiver backend when writing an archive fails."""


class CommandException(ProductArchiverException):
    """Raised when there is a failure running a subcommand."""


class TarException(CommandException):
    """Raised when there is a failure running a tar command."""
