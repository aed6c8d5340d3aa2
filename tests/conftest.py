"""Test fixtures for product-archiver."""

from pathlib import Path

import pytest

from product_archiver.layout import ProductLayout
from product_archiver.product import Product, TargetEnvironment

WIN32 = TargetEnvironment(os="win32", ws="win32", arch="x86")
LINUX = TargetEnvironment(os="linux", ws="gtk", arch="x86")


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create the files relative to the root directory."""
    root.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


def materialize(
    layout: ProductLayout,
    product: Product,
    environment: TargetEnvironment | None,
    files: dict[str, str] | None = None,
) -> Path:
    """Write a fake product installation where the layout expects it."""
    return write_tree(
        layout.materialize_directory(product, environment),
        files
        or {
            "configuration/config.ini": "osgi.bundles=reference:file:simpleconfigurator\n",
            "plugins/.gitkeep": "",
            "eclipse.ini": f"-product {product.id}\n",
        },
    )


@pytest.fixture
def layout(tmp_path: Path) -> ProductLayout:
    """Create a layout for materialized products in a temporary directory."""
    return ProductLayout(products_directory=tmp_path / "target" / "products")
