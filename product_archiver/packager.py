"""Library for archiving materialized product installations.

The packager writes one archive for each product and target environment from
the already materialized installation directory, then attaches the archive to
the project:

```python
from product_archiver.artifact import InMemoryArtifactRegistry
from product_archiver.layout import ProductLayout
from product_archiver.packager import ProductPackager
from product_archiver.product import read_config

config = await read_config(Path("products.yaml"))
registry = InMemoryArtifactRegistry()
packager = ProductPackager(config, ProductLayout(Path("target/products")), registry)
for artifact in await packager.execute():
    print(f"Attached {artifact.classifier} {artifact.path}")
```

A run either archives every product or fails with the first error. Only a
single run in the process writes archives at a time.
"""

from collections.abc import AsyncGenerator
import asyncio
import contextlib
import logging
import threading

from aiofiles.ospath import isdir

from .archiver import new_archiver
from .artifact import ArtifactRegistry, AttachedArtifact
from .config import ArchiveOptions
from .context import trace_archive, trace_run
from .exceptions import ArchiverException, ArchivingError
from .formats import ArchiveFormat, resolve_archive_format
from .layout import ProductLayout
from .naming import artifact_classifier
from .plan import check_unique_classifiers, plan_materializations
from .product import Product, ProductConfig, TargetEnvironment

__all__ = [
    "ProductPackager",
]

_LOGGER = logging.getLogger(__name__)

# Serializes all packager runs in the process
_LOCK = threading.Lock()
_LOCK_POLL_INTERVAL = 0.05


@contextlib.asynccontextmanager
async def _exclusive() -> AsyncGenerator[None, None]:
    """Hold the process wide packager lock without blocking the event loop.

    The lock is polled so that a waiter cancelled before acquiring it never
    takes it.
    """
    while not _LOCK.acquire(blocking=False):
        await asyncio.sleep(_LOCK_POLL_INTERVAL)
    try:
        yield
    finally:
        _LOCK.release()


class ProductPackager:
    """Creates archives with the product installations."""

    def __init__(
        self,
        config: ProductConfig,
        layout: ProductLayout,
        registry: ArtifactRegistry,
        options: ArchiveOptions | None = None,
    ) -> None:
        """Initialize ProductPackager."""
        self._config = config
        self._layout = layout
        self._registry = registry
        self._options = options or ArchiveOptions()

    async def execute(self) -> list[AttachedArtifact]:
        """Archive and attach all products, returning the attached artifacts.

        The artifact classifiers are checked for uniqueness before any archive
        is written.
        """
        async with _exclusive():
            with trace_run(self._config.project):
                check_unique_classifiers(self._config, self._layout)
                artifacts = []
                for product, environment in plan_materializations(
                    self._config, self._layout
                ):
                    artifacts.append(await self._materialize(product, environment))
                return artifacts

    async def _materialize(
        self, product: Product, environment: TargetEnvironment | None
    ) -> AttachedArtifact:
        archive_format = resolve_archive_format(
            product, environment, self._config.formats
        )
        archiver = new_archiver(
            ArchiveFormat.parse(archive_format, environment), self._options
        )
        product_archive = self._layout.archive_path(
            product, environment, archive_format
        )
        source_dir = self._layout.materialize_directory(product, environment)
        with trace_archive(product, environment) as label:
            _LOGGER.info("Archiving product %s to %s", label, product_archive)
            if not await isdir(str(source_dir)):
                raise ArchivingError(
                    product.id, f"Product directory {source_dir} does not exist"
                )
            try:
                await asyncio.to_thread(
                    product_archive.parent.mkdir, parents=True, exist_ok=True
                )
                await archiver.create_archive(source_dir, product_archive)
            except (ArchiverException, OSError) as err:
                raise ArchivingError(product.id, str(err)) from err

        return self._registry.attach(
            self._config.project,
            archive_format,
            artifact_classifier(product, environment),
            product_archive,
        )
