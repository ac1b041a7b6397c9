import logging

from pathlib import Path
from typing import Optional

from projector.details.file_handler import FileHandler
from projector.details.glob_filter import GlobResolver
from projector.details.manifest_loader import ManifestLoader
from projector.details.manifest_target import ManifestTargetGenerator
from projector.details.printer import Printer
from projector.details.translators import project_from_manifest, workspace_from_manifest
from projector.graph.model import Project, Workspace

logger = logging.getLogger(__name__)


class GeneratorModelLoader:
    """Loads manifests and resolves them into the graph model generators consume.

    Each load is a single pass: fetch the manifest, translate it, and (for
    projects) append the manifest target. Any error aborts the whole load.
    """

    def __init__(
        self,
        file_handler: Optional[FileHandler] = None,
        manifest_loader: Optional[ManifestLoader] = None,
        manifest_target_generator: Optional[ManifestTargetGenerator] = None,
        printer: Optional[Printer] = None,
    ):
        self.file_handler = file_handler or FileHandler()
        self.manifest_loader = manifest_loader or ManifestLoader(self.file_handler)
        self.manifest_target_generator = manifest_target_generator or ManifestTargetGenerator()
        self.printer = printer or Printer()

    def load_project(self, path: Path) -> Project:
        path = Path(path).resolve()
        logger.debug("loading project at %s", path)
        manifest = self.manifest_loader.load_project(path)
        project = project_from_manifest(manifest, path, self._globs())
        manifest_target = self.manifest_target_generator.generate_manifest_target(project.name, path)
        return project.adding(manifest_target)

    def load_workspace(self, path: Path) -> Workspace:
        path = Path(path).resolve()
        logger.debug("loading workspace at %s", path)
        manifest = self.manifest_loader.load_workspace(path)
        return workspace_from_manifest(manifest, path, self._globs(), self.manifest_loader)

    # Fresh per call, nothing is cached between loads
    def _globs(self) -> GlobResolver:
        return GlobResolver(self.file_handler, self.printer)
