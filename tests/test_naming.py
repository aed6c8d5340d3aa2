"""Tests for the archive naming library."""

import pytest

from product_archiver.naming import (
    archive_file_name,
    archive_name,
    artifact_classifier,
    os_ws_arch,
)
from product_archiver.product import Product, TargetEnvironment

from .conftest import LINUX, WIN32


def test_os_ws_arch() -> None:
    """Test encoding of the environment axes."""
    assert os_ws_arch(WIN32) == "win32.win32.x86"
    assert os_ws_arch(LINUX, "/") == "linux/gtk/x86"
    assert os_ws_arch(None) == ""


def test_archive_file_name_default() -> None:
    """Test the archive file name defaults to the product id."""
    assert archive_file_name(Product(id="main.product.id")) == "main.product.id"


def test_archive_file_name_override() -> None:
    """Test an explicit archive file name."""
    product = Product(id="main.product.id", archive_file_name="eclipse-sdk")
    assert archive_file_name(product) == "eclipse-sdk"


@pytest.mark.parametrize(
    ("attach_id", "environment", "expected"),
    [
        (None, LINUX, "linux.gtk.x86"),
        ("", LINUX, "-linux.gtk.x86"),
        ("extra", LINUX, "extra-linux.gtk.x86"),
        (None, None, ""),
        ("", None, "-"),
        ("pool", None, "pool-"),
    ],
    ids=[
        "no-attach-id",
        "empty-attach-id",
        "attach-id",
        "no-environment",
        "empty-attach-id-no-environment",
        "attach-id-no-environment",
    ],
)
def test_artifact_classifier(
    attach_id: str | None, environment: TargetEnvironment | None, expected: str
) -> None:
    """Test the artifact classifier of a product and environment."""
    product = Product(id="main", attach_id=attach_id)
    assert artifact_classifier(product, environment) == expected


def test_empty_attach_id_differs_from_absent() -> None:
    """Test that an empty attach id still adds the classifier separator."""
    absent = artifact_classifier(Product(id="main"), WIN32)
    empty = artifact_classifier(Product(id="main", attach_id=""), WIN32)
    assert absent == "win32.win32.x86"
    assert empty == "-win32.win32.x86"
    assert absent != empty


def test_archive_name() -> None:
    """Test the archive file name of a product and environment."""
    product = Product(id="main")
    assert archive_name(product, WIN32, "zip") == "main-win32.win32.x86.zip"
    assert archive_name(product, LINUX, "tar.gz") == "main-linux.gtk.x86.tar.gz"
    assert archive_name(product, None, "zip") == "main-.zip"


def test_archive_name_ignores_attach_id() -> None:
    """Test the attach id is only part of the classifier, not the file name."""
    product = Product(id="extra", attach_id="extra", archive_file_name="bundle")
    assert archive_name(product, LINUX, "tgz") == "bundle-linux.gtk.x86.tgz"
