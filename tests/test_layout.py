"""Tests for the product layout library."""

from product_archiver.layout import ProductLayout
from product_archiver.product import Product

from .conftest import LINUX


def test_materialize_directory(layout: ProductLayout) -> None:
    """Test the directory of a materialized product."""
    product = Product(id="main")
    root = layout.products_directory
    assert layout.materialize_directory(product, LINUX) == root / "main/linux/gtk/x86"
    assert layout.materialize_directory(product, None) == root / "main"


def test_bundle_pool_directory(layout: ProductLayout) -> None:
    """Test the bundle pool of an environment independent product."""
    root = layout.products_directory
    assert layout.bundle_pool_directory(Product(id="main")) is None
    assert (
        layout.bundle_pool_directory(Product(id="shared", bundle_pool="pool"))
        == root / "shared/pool"
    )


def test_archive_path(layout: ProductLayout) -> None:
    """Test archives are written to the build directory."""
    product = Product(id="main", archive_file_name="sdk")
    assert layout.build_directory == layout.products_directory
    assert (
        layout.archive_path(product, LINUX, "tar.gz")
        == layout.products_directory / "sdk-linux.gtk.x86.tar.gz"
    )
    assert layout.archive_path(product, None, "zip") == layout.products_directory / "sdk-.zip"
