"""Library for deriving archive file names and artifact classifiers.

The classifier (and hence the attached artifact file name) ends with the
os.ws.arch of the target environment, similar to Eclipse download packages.
"""

from .product import Product, TargetEnvironment

__all__ = [
    "os_ws_arch",
    "archive_file_name",
    "artifact_classifier",
    "archive_name",
]


def os_ws_arch(environment: TargetEnvironment | None, separator: str = ".") -> str:
    """Encode the environment axes, or an empty string without an environment."""
    if environment is None:
        return ""
    return environment.os_ws_arch(separator)


def archive_file_name(product: Product) -> str:
    """Return the base name of the archive files for the product."""
    if product.archive_file_name is not None:
        return product.archive_file_name
    return product.id


def artifact_classifier(
    product: Product, environment: TargetEnvironment | None
) -> str:
    """Return the classifier of the artifact attached for the product and environment.

    A product with an attach id, including an empty one, prefixes the
    environment with `<attach_id>-`.
    """
    if product.attach_id is None:
        return os_ws_arch(environment)
    return f"{product.attach_id}-{os_ws_arch(environment)}"


def archive_name(
    product: Product, environment: TargetEnvironment | None, archive_format: str
) -> str:
    """Return the file name of the archive, `<name>-<os.ws.arch>.<format>`."""
    return f"{archive_file_name(product)}-{os_ws_arch(environment)}.{archive_format}"
