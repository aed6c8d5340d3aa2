"""Debug tracing of packager runs and the archives they write.

A run and each archive written by it are logged on entry and exit with the
elapsed time. Archive records are prefixed with the project of the enclosing
run so the output of concurrent runs can be told apart.
"""

import contextvars
from contextlib import contextmanager
import logging
from time import perf_counter
from typing import Generator

from .naming import os_ws_arch
from .product import Product, Project, TargetEnvironment

_LOGGER = logging.getLogger(__name__)

__all__ = [
    "archive_label",
    "trace_run",
    "trace_archive",
]

_RUN: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "archive_run", default=None
)


def archive_label(product: Product, environment: TargetEnvironment | None) -> str:
    """Return a human readable label for the archive of a product."""
    return f"{product.id} {os_ws_arch(environment) or '(no environment)'}"


@contextmanager
def trace_run(project: Project) -> Generator[None, None, None]:
    """Trace a packager run for the project."""
    token = _RUN.set(str(project))
    t1 = perf_counter()
    _LOGGER.debug("[Trace] > Archive products %s", project)
    try:
        yield
    finally:
        _RUN.reset(token)
        _LOGGER.debug(
            "[Trace] < Archive products %s (%0.2fs)", project, perf_counter() - t1
        )


@contextmanager
def trace_archive(
    product: Product, environment: TargetEnvironment | None
) -> Generator[str, None, None]:
    """Trace writing the archive of a product, yielding its label."""
    label = archive_label(product, environment)
    if (run := _RUN.get()) is not None:
        trace = f"{run} > {label}"
    else:
        trace = label
    t1 = perf_counter()
    _LOGGER.debug("[Trace] > %s", trace)
    try:
        yield label
    finally:
        _LOGGER.debug("[Trace] < %s (%0.2fs)", trace, perf_counter() - t1)
