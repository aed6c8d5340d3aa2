"""Test helpers for product-archiver tools."""

from pathlib import Path

CONFIG = """\
project:
  name: pi.eclipse-repository
products:
  - id: main.product.id
    attachId: ""
  - id: extra.product.id
    attachId: extra
    archiveFileName: extra
environments:
  - {os: win32, ws: win32, arch: x86}
  - {os: linux, ws: gtk, arch: x86}
formats:
  linux: tar.gz
"""


def write_config(tmp_path: Path, content: str = CONFIG) -> Path:
    """Write a product configuration file in the directory."""
    config_file = tmp_path / "products.yaml"
    config_file.write_text(content)
    return config_file
