"""
Shared fixtures for the resolver tests.

Trees are built on disk under pytest's tmp_path; the manifest classifier and
manifest source can be replaced by StubManifestLoader where a test should not
depend on real manifest files.
"""

import textwrap

from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest

from projector import description as manifest
from projector.details.file_handler import FileHandler
from projector.details.glob_filter import GlobResolver
from projector.details.manifest_loader import Manifest
from projector.details.printer import RecordingPrinter


def make_tree(root: Path, entries: Iterable[str]) -> Path:
    """Create files, or directories for entries ending in '/', under root."""
    for entry in entries:
        path = root.joinpath(entry)
        if entry.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"// {entry}\n")
    return root


def write_manifest(root: Path, kind: Manifest, source: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    path = root.joinpath(kind.value)
    path.write_text(textwrap.dedent(source))
    return path


class StubManifestLoader:
    def __init__(
        self,
        projects: Optional[Dict[Path, manifest.Project]] = None,
        workspaces: Optional[Dict[Path, manifest.Workspace]] = None,
        classified: Optional[Dict[Path, set]] = None,
    ):
        self.projects = projects or {}
        self.workspaces = workspaces or {}
        self.classified = classified or {}
        self.classified_paths = []

    def manifests(self, path: Path) -> set:
        self.classified_paths.append(path)
        return self.classified.get(path, set())

    def load_project(self, path: Path) -> manifest.Project:
        return self.projects[path]

    def load_workspace(self, path: Path) -> manifest.Workspace:
        return self.workspaces[path]


def app_target(name: str = "App", **kwargs) -> manifest.Target:
    fields = dict(
        name=name,
        platform=manifest.Platform.IOS,
        product=manifest.Product.APP,
        bundle_id=f"io.projector.{name}",
        info_plist="Info.plist",
    )
    fields.update(kwargs)
    return manifest.Target(**fields)


@pytest.fixture
def printer() -> RecordingPrinter:
    return RecordingPrinter()


@pytest.fixture
def file_handler() -> FileHandler:
    return FileHandler()


@pytest.fixture
def globs(file_handler, printer) -> GlobResolver:
    return GlobResolver(file_handler, printer)
