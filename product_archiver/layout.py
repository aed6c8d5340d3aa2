"""Directory layout of materialized products and their archives.

Product installations are materialized (by an earlier build step) below the
products directory, one directory per product and target environment:

```
target/products/
  main.product.id/
    linux/gtk/x86_64/...
    win32/win32/x86_64/...
  pooled.product.id/
    pool/...
  main.product.id-linux.gtk.x86_64.tar.gz
```

Archives are written to the products directory itself.
"""

from dataclasses import dataclass
from pathlib import Path

from .naming import archive_name
from .product import Product, TargetEnvironment

__all__ = [
    "ProductLayout",
]


@dataclass
class ProductLayout:
    """Locations of the materialized products and the archives written from them."""

    products_directory: Path
    """Root directory holding the materialized products."""

    @property
    def build_directory(self) -> Path:
        """Directory the product archives are written to."""
        return self.products_directory

    def bundle_pool_directory(self, product: Product) -> Path | None:
        """Return the shared bundle pool of an environment independent product."""
        if product.bundle_pool is None:
            return None
        return self.products_directory / product.id / product.bundle_pool

    def materialize_directory(
        self, product: Product, environment: TargetEnvironment | None
    ) -> Path:
        """Return the directory holding the installation of the product."""
        root = self.products_directory / product.id
        if environment is None:
            return root
        return root / environment.os / environment.ws / environment.arch

    def archive_path(
        self,
        product: Product,
        environment: TargetEnvironment | None,
        archive_format: str,
    ) -> Path:
        """Return the destination file of the product archive."""
        return self.build_directory / archive_name(product, environment, archive_format)
