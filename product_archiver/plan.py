"""Library for planning which product archives are written.

A product with a shared bundle pool is archived once without a target
environment. All other products are archived once per target environment.
The planned archives must have unique artifact classifiers, which is checked
before any archive is written.
"""

from collections import Counter
from collections.abc import Generator
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError
from .formats import resolve_archive_format
from .layout import ProductLayout
from .naming import artifact_classifier, os_ws_arch
from .product import Product, ProductConfig, TargetEnvironment

__all__ = [
    "PlannedArchive",
    "plan_materializations",
    "plan_archives",
    "check_unique_classifiers",
]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedArchive:
    """An archive that will be written for a product and environment."""

    product: Product
    environment: TargetEnvironment | None
    format: str
    path: Path
    classifier: str

    def summary(self) -> dict[str, Any]:
        """Return a printable summary of the planned archive."""
        return {
            "product": self.product.id,
            "environment": os_ws_arch(self.environment),
            "format": self.format,
            "file": self.path.name,
            "classifier": self.classifier,
        }


def plan_materializations(
    config: ProductConfig, layout: ProductLayout
) -> Generator[tuple[Product, TargetEnvironment | None], None, None]:
    """Yield each product and environment in the order they are archived."""
    for product in config.products:
        if layout.bundle_pool_directory(product) is not None:
            yield product, None
        else:
            for environment in config.environments:
                yield product, environment


def plan_archives(config: ProductConfig, layout: ProductLayout) -> list[PlannedArchive]:
    """Return the archives that will be written for the configuration."""
    results = []
    for product, environment in plan_materializations(config, layout):
        archive_format = resolve_archive_format(product, environment, config.formats)
        results.append(
            PlannedArchive(
                product=product,
                environment=environment,
                format=archive_format,
                path=layout.archive_path(product, environment, archive_format),
                classifier=artifact_classifier(product, environment),
            )
        )
    return results


def _duplicates(values: list[str]) -> list[str]:
    return [value for value, count in Counter(values).items() if count > 1]


def check_unique_classifiers(config: ProductConfig, layout: ProductLayout) -> None:
    """Raise ConfigurationError if two planned archives share a classifier or file.

    Products with distinct attach ids but the same archive file name would
    otherwise overwrite each other's archive.
    """
    planned = plan_archives(config, layout)
    duplicates = _duplicates([archive.classifier for archive in planned])
    if not duplicates:
        duplicates = _duplicates([archive.path.name for archive in planned])
    if duplicates:
        _LOGGER.debug("Duplicate artifact classifiers or files: %s", duplicates)
        raise ConfigurationError(
            str([product.compact_dict() for product in config.products]),
            str([str(environment) for environment in config.environments]),
            duplicates,
        )
