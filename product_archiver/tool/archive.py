"""Product-archiver archive action."""

from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import logging
import pathlib
from typing import cast

from product_archiver.artifact import InMemoryArtifactRegistry, write_artifacts
from product_archiver.packager import ProductPackager

from . import selector
from .format import FORMATTERS

_LOGGER = logging.getLogger(__name__)


class ArchiveAction:
    """Product-archiver archive action."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "archive",
                help="Create archives with the materialized product installations",
                description="""Writes one archive per product and target
                    environment from the materialized product directories
                    and attaches each archive to the project.""",
            ),
        )
        selector.add_product_flags(args)
        selector.add_archive_flags(args)
        args.add_argument(
            "--output",
            "-o",
            choices=list(FORMATTERS),
            default="table",
            help="Output format of the attached artifacts",
        )
        args.add_argument(
            "--output-file",
            type=str,
            default="/dev/stdout",
            help="Output file for the attached artifacts",
        )
        args.add_argument(
            "--artifacts-file",
            type=pathlib.Path,
            default=None,
            help="Optional file the attached artifacts are recorded in as YAML",
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        output: str,
        output_file: str,
        artifacts_file: pathlib.Path | None,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        config = await selector.build_config(**kwargs)
        registry = InMemoryArtifactRegistry()
        packager = ProductPackager(
            config,
            selector.build_layout(**kwargs),
            registry,
            selector.options(**kwargs),
        )
        artifacts = await packager.execute()
        _LOGGER.info("Attached %d product archives", len(artifacts))

        if artifacts_file is not None:
            await write_artifacts(artifacts_file, artifacts)

        with open(output_file, "w") as file:
            FORMATTERS[output]().print(
                [artifact.model_dump() for artifact in artifacts], file=file
            )
