"""Tests for the product-archiver `plan` command."""

from pathlib import Path

import pytest
import yaml

from product_archiver.tool.product_archiver import main

from . import write_config


def test_plan(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing the planned archives without writing them."""
    products_dir = tmp_path / "products"
    main(
        [
            "plan",
            "--config",
            str(write_config(tmp_path)),
            "--products-dir",
            str(products_dir),
        ]
    )

    lines = capsys.readouterr().out.splitlines()
    assert [line.split() for line in lines] == [
        ["PRODUCT", "ENVIRONMENT", "FORMAT", "FILE", "CLASSIFIER"],
        ["main.product.id", "win32.win32.x86", "zip", "main.product.id-win32.win32.x86.zip", "-win32.win32.x86"],
        ["main.product.id", "linux.gtk.x86", "tar.gz", "main.product.id-linux.gtk.x86.tar.gz", "-linux.gtk.x86"],
        ["extra.product.id", "win32.win32.x86", "zip", "extra-win32.win32.x86.zip", "extra-win32.win32.x86"],
        ["extra.product.id", "linux.gtk.x86", "tar.gz", "extra-linux.gtk.x86.tar.gz", "extra-linux.gtk.x86"],
    ]
    assert not products_dir.exists()


def test_plan_yaml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing the planned archives as yaml."""
    main(
        [
            "plan",
            "--config",
            str(write_config(tmp_path)),
            "--product",
            "main.product.id",
            "--environment",
            "macosx/cocoa/aarch64",
            "-o",
            "yaml",
        ]
    )

    assert yaml.safe_load(capsys.readouterr().out) == [
        {
            "product": "main.product.id",
            "environment": "macosx.cocoa.aarch64",
            "format": "zip",
            "file": "main.product.id-macosx.cocoa.aarch64.zip",
            "classifier": "-macosx.cocoa.aarch64",
        }
    ]


def test_plan_no_environments(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test a configuration without environments plans nothing."""
    config = write_config(tmp_path, "project: {name: app}\nproducts: [{id: main}]\n")
    main(["plan", "--config", str(config)])
    assert capsys.readouterr().out == "No product archives would be written\n"


def test_plan_unknown_product(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test selecting a product that is not configured."""
    with pytest.raises(SystemExit) as exc_info:
        main(["plan", "--config", str(write_config(tmp_path)), "-p", "other"])
    assert exc_info.value.code == 1
    assert "Unknown product ids ['other']" in capsys.readouterr().err


def test_plan_missing_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test a configuration file that does not exist."""
    with pytest.raises(SystemExit):
        main(["plan", "--config", str(tmp_path / "missing.yaml")])
    assert "Unable to read product configuration" in capsys.readouterr().err
