"""Registration of the archives produced for a project.

Each written product archive is attached to the owning project with its type
(the archive format) and classifier. The registry is the sink of these
registrations, which may be written out for later build steps.
"""

from abc import ABC, abstractmethod
import logging
from pathlib import Path

import aiofiles
import yaml
from pydantic import BaseModel, ConfigDict, Field

from .product import Project

__all__ = [
    "AttachedArtifact",
    "ArtifactRegistry",
    "InMemoryArtifactRegistry",
    "write_artifacts",
]

_LOGGER = logging.getLogger(__name__)


class AttachedArtifact(BaseModel):
    """An archive attached to a project."""

    model_config = ConfigDict(frozen=True)

    project: str
    """Name of the owning project."""

    type: str
    """The artifact type, which is the archive format e.g. zip."""

    classifier: str
    """Distinguishes the artifacts of a project by product and environment."""

    path: str
    """Local filesystem path of the archive."""


class AttachedArtifacts(BaseModel):
    """A serializable list of attached artifacts."""

    artifacts: list[AttachedArtifact] = Field(default_factory=list)


class ArtifactRegistry(ABC):
    """Sink of the artifacts attached to a project."""

    @abstractmethod
    def attach(
        self, project: Project, artifact_type: str, classifier: str, path: Path
    ) -> AttachedArtifact:
        """Attach the archive file to the project."""

    @abstractmethod
    def list_artifacts(self) -> list[AttachedArtifact]:
        """Return all attached artifacts in the order they were attached."""


class InMemoryArtifactRegistry(ArtifactRegistry):
    """Registry that records attached artifacts in memory."""

    def __init__(self) -> None:
        """Initialize InMemoryArtifactRegistry."""
        self._artifacts: list[AttachedArtifact] = []

    def attach(
        self, project: Project, artifact_type: str, classifier: str, path: Path
    ) -> AttachedArtifact:
        """Attach the archive file to the project."""
        artifact = AttachedArtifact(
            project=project.name,
            type=artifact_type,
            classifier=classifier,
            path=str(path),
        )
        _LOGGER.debug("Attaching artifact %s", artifact)
        self._artifacts.append(artifact)
        return artifact

    def list_artifacts(self) -> list[AttachedArtifact]:
        """Return all attached artifacts in the order they were attached."""
        return list(self._artifacts)


async def write_artifacts(path: Path, artifacts: list[AttachedArtifact]) -> None:
    """Write the attached artifacts to disk as YAML."""
    content = yaml.dump(
        AttachedArtifacts(artifacts=artifacts).model_dump(),
        sort_keys=False,
        explicit_start=True,
    )
    async with aiofiles.open(str(path), mode="w") as artifacts_file:
        await artifacts_file.write(content)
