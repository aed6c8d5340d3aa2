"""Product-archiver plan action."""

from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import logging
from typing import cast

from product_archiver.plan import check_unique_classifiers, plan_archives

from . import selector
from .format import FORMATTERS

_LOGGER = logging.getLogger(__name__)


class PlanAction:
    """Print the archives that would be written."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "plan",
                help="Print the product archives that would be written",
                description="Validates the product configuration and prints "
                "the archive file and classifier of each product and environment.",
            ),
        )
        selector.add_product_flags(args)
        args.add_argument(
            "--output",
            "-o",
            choices=list(FORMATTERS),
            default="table",
            help="Output format of the command",
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        output: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        config = await selector.build_config(**kwargs)
        layout = selector.build_layout(**kwargs)
        check_unique_classifiers(config, layout)
        results = [planned.summary() for planned in plan_archives(config, layout)]
        if not results:
            print("No product archives would be written")
            return
        FORMATTERS[output]().print(results)
