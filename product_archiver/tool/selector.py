"""Library for common flags that select the products to archive."""

from argparse import (
    ArgumentParser,
    Action,
    ArgumentError,
    Namespace,
)
import logging
import pathlib
from typing import Any

from product_archiver.config import ArchiveOptions, TarBackend
from product_archiver.layout import ProductLayout
from product_archiver.product import ProductConfig, TargetEnvironment, read_config

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG = "products.yaml"
DEFAULT_PRODUCTS_DIR = "target/products"


class ListAppendAction(Action):
    """Append comma separated values to the argument list."""

    def __call__(
        self,
        parser: ArgumentParser,
        namespace: Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        result = getattr(namespace, self.dest) or []
        result.extend(value for value in values.split(",") if value)
        setattr(namespace, self.dest, result)


class EnvironmentAppendAction(Action):
    """Append an os/ws/arch target environment to the argument list."""

    def __call__(
        self,
        parser: ArgumentParser,
        namespace: Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        result = getattr(namespace, self.dest) or []
        try:
            result.append(TargetEnvironment.from_str(values))
        except ValueError as err:
            raise ArgumentError(self, str(err))
        setattr(namespace, self.dest, result)


def add_product_flags(args: ArgumentParser) -> None:
    """Add flags for the product configuration and its layout on disk."""
    args.add_argument(
        "--config",
        "-c",
        type=pathlib.Path,
        default=pathlib.Path(DEFAULT_CONFIG),
        help="Path to the product configuration file",
    )
    args.add_argument(
        "--products-dir",
        type=pathlib.Path,
        default=pathlib.Path(DEFAULT_PRODUCTS_DIR),
        help="Directory with the materialized products, archives are written here",
    )
    args.add_argument(
        "--product",
        "-p",
        dest="product_ids",
        action=ListAppendAction,
        help="Only archive the products with these ids (comma separated, repeatable)",
    )
    args.add_argument(
        "--environment",
        "-e",
        dest="environments",
        action=EnvironmentAppendAction,
        help="Target environment as os/ws/arch, replaces the configured environments",
    )


def add_archive_flags(args: ArgumentParser) -> None:
    """Add flags that control how archives are written."""
    args.add_argument(
        "--tar-backend",
        choices=[backend.value for backend in TarBackend],
        default=None,
        help="Implementation for writing tar.gz archives (default: library)",
    )


async def build_config(
    config: pathlib.Path,
    product_ids: list[str] | None = None,
    environments: list[TargetEnvironment] | None = None,
    **kwargs: Any,  # pylint: disable=unused-argument
) -> ProductConfig:
    """Read the product configuration and apply the selector flags."""
    product_config = await read_config(config)
    if product_ids:
        product_config = product_config.select(product_ids)
    if environments:
        product_config = product_config.with_environments(environments)
    return product_config


def build_layout(
    products_dir: pathlib.Path,
    **kwargs: Any,  # pylint: disable=unused-argument
) -> ProductLayout:
    """Return the product layout for the selector flags."""
    return ProductLayout(products_directory=products_dir)


def options(
    tar_backend: str | None = None,
    **kwargs: Any,  # pylint: disable=unused-argument
) -> ArchiveOptions:
    """Return the archive options for the flags."""
    if tar_backend is None:
        return ArchiveOptions()
    return ArchiveOptions(tar_backend=TarBackend(tar_backend))
