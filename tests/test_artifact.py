"""Tests for the artifact registry."""

from pathlib import Path

import yaml

from product_archiver.artifact import (
    AttachedArtifact,
    InMemoryArtifactRegistry,
    write_artifacts,
)
from product_archiver.product import Project


def test_attach() -> None:
    """Test artifacts are listed in the order they were attached."""
    registry = InMemoryArtifactRegistry()
    project = Project(name="app", version="1.0.0")
    first = registry.attach(project, "zip", "win32.win32.x86", Path("/tmp/a.zip"))
    registry.attach(project, "tar.gz", "linux.gtk.x86", Path("/tmp/a.tar.gz"))

    assert first == AttachedArtifact(
        project="app", type="zip", classifier="win32.win32.x86", path="/tmp/a.zip"
    )
    assert [artifact.classifier for artifact in registry.list_artifacts()] == [
        "win32.win32.x86",
        "linux.gtk.x86",
    ]


def test_list_artifacts_is_a_copy() -> None:
    """Test the listed artifacts do not change the registry."""
    registry = InMemoryArtifactRegistry()
    registry.attach(Project(name="app"), "zip", "", Path("a.zip"))
    registry.list_artifacts().clear()
    assert len(registry.list_artifacts()) == 1


async def test_write_artifacts(tmp_path: Path) -> None:
    """Test writing the attached artifacts as YAML."""
    artifacts = [
        AttachedArtifact(project="app", type="tgz", classifier="-linux.gtk.x86", path="a.tgz"),
    ]
    artifacts_file = tmp_path / "artifacts.yaml"
    await write_artifacts(artifacts_file, artifacts)
    assert yaml.safe_load(artifacts_file.read_text()) == {
        "artifacts": [
            {
                "project": "app",
                "type": "tgz",
                "classifier": "-linux.gtk.x86",
                "path": "a.tgz",
            }
        ]
    }
