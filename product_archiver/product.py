"""Representation of the products to archive and their target environments.

The product configuration is a YAML document that lists the products built by a
project, the target environments they were materialized for, and optional
overrides of the archive format per operating system:

```yaml
project:
  name: my-rcp
products:
  - id: main.product.id
    attachId: ""
  - id: extra.product.id
    attachId: extra
    archiveFileName: extra
environments:
  - {os: linux, ws: gtk, arch: x86_64}
  - {os: win32, ws: win32, arch: x86_64}
formats:
  linux: tar.gz
```
"""

import logging
from pathlib import Path
import re
from typing import Any

import aiofiles
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .exceptions import InputException

__all__ = [
    "read_config",
    "Project",
    "Product",
    "TargetEnvironment",
    "ProductConfig",
]

_LOGGER = logging.getLogger(__name__)

_ENVIRONMENT_SEPARATORS = re.compile(r"[/.,]")


class BaseConfigObject(BaseModel):
    """Base class for all configuration objects.

    Fields are read from and written to camelCase keys, e.g. `attach_id` is
    the `attachId` key of the configuration file.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    def compact_dict(self) -> dict[str, Any]:
        """Return a dictionary representation with unset fields removed."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Project(BaseConfigObject):
    """The build project that owns the product archives."""

    name: str
    """Name of the project, used when attaching artifacts."""

    version: str | None = None
    """Optional version of the project."""

    def __str__(self) -> str:
        if self.version:
            return f"{self.name}:{self.version}"
        return self.name


class TargetEnvironment(BaseConfigObject):
    """An operating system, windowing system and architecture tuple."""

    model_config = ConfigDict(frozen=True)

    os: str
    ws: str
    arch: str

    def os_ws_arch(self, separator: str = ".") -> str:
        """Return the environment axes joined with the separator."""
        return separator.join([self.os, self.ws, self.arch])

    @classmethod
    def from_str(cls, value: str) -> "TargetEnvironment":
        """Parse an environment string like `linux/gtk/x86_64`."""
        parts = _ENVIRONMENT_SEPARATORS.split(value.strip())
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"Expected os/ws/arch format but got '{value}'")
        return cls(os=parts[0], ws=parts[1], arch=parts[2])

    def __str__(self) -> str:
        return self.os_ws_arch()


class Product(BaseConfigObject):
    """A logical installable application built by the project."""

    id: str
    """Stable identifier of the product."""

    archive_file_name: str | None = None
    """Base name of the archive files, defaults to the product id."""

    attach_id: str | None = None
    """Prefix of the artifact classifier.

    An empty string is distinct from an absent attach id: it still adds the
    classifier separator.
    """

    multi_platform_package: bool = False
    """The installation is shared by all target environments."""

    bundle_pool: str | None = None
    """Directory of a shared bundle pool, making the product environment independent."""


class ProductConfig(BaseConfigObject):
    """The set of products and environments to archive."""

    project: Project
    """The owning project of the archives."""

    products: list[Product] = Field(default_factory=list)
    """Products in the order they are archived."""

    environments: list[TargetEnvironment] = Field(default_factory=list)
    """Target environments each product was materialized for."""

    formats: dict[str, str | None] | None = None
    """Archive format overrides keyed by os or `multiPlatformPackage`."""

    def select(self, product_ids: list[str]) -> "ProductConfig":
        """Return a copy of the configuration restricted to the products ids."""
        known = {product.id for product in self.products}
        if unknown := [pid for pid in product_ids if pid not in known]:
            raise InputException(
                f"Unknown product ids {unknown}, expected one of {sorted(known)}"
            )
        return self.model_copy(
            update={
                "products": [
                    product for product in self.products if product.id in product_ids
                ]
            }
        )

    def with_environments(
        self, environments: list[TargetEnvironment]
    ) -> "ProductConfig":
        """Return a copy of the configuration with the target environments replaced."""
        return self.model_copy(update={"environments": list(environments)})


def parse_config(content: str) -> ProductConfig:
    """Parse the YAML contents of a product configuration file."""
    if not content.strip():
        raise InputException("Product configuration file is empty")
    try:
        doc = yaml.safe_load(content)
    except yaml.YAMLError as err:
        raise InputException(f"Invalid product configuration YAML: {err}") from err
    try:
        config = ProductConfig.model_validate(doc)
    except ValidationError as err:
        raise InputException(f"Invalid product configuration: {err}") from err
    for product in config.products:
        if not product.id:
            raise InputException(f"Invalid product missing id: {product!r}")
    return config


async def read_config(config_path: Path) -> ProductConfig:
    """Return the contents of a serialized product configuration from disk."""
    _LOGGER.debug("Reading product configuration %s", config_path)
    try:
        async with aiofiles.open(str(config_path)) as config_file:
            content = await config_file.read()
    except OSError as err:
        raise InputException(
            f"Unable to read product configuration {config_path}: {err}"
        ) from err
    return parse_config(content)
