"""
product-archiver creates distributable archives of materialized product installations.

Each product is archived once per target environment (or once when it shares a
bundle pool across environments) into a zip or tar.gz file named from the
product and its os.ws.arch, and the archive is attached to the owning project.
"""

__all__ = [
    "archiver",
    "artifact",
    "exceptions",
    "formats",
    "layout",
    "naming",
    "packager",
    "plan",
    "product",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
