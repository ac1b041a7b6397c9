import hashlib
import logging

from enum import Enum
from importlib.machinery import SourceFileLoader
from importlib.util import spec_from_loader, module_from_spec
from pathlib import Path
from typing import Optional, Set, Type, Union

from projector import description
from projector.details.context import ProjectContext, WorkspaceContext
from projector.details.file_handler import FileHandler
from projector.errors import ManifestNotDefined, ManifestNotFound

logger = logging.getLogger(__name__)


class Manifest(Enum):
    PROJECT = ProjectContext.FILENAME
    WORKSPACE = WorkspaceContext.FILENAME


def load_user_module(ctx: Union[ProjectContext, WorkspaceContext]):
    # Manifests live anywhere on disk, key their module names on the directory
    digest = hashlib.blake2b(ctx.root.as_posix().encode(), digest_size=8).hexdigest()
    module_name = ".".join(["projector", "manifests", f"{ctx.MODULENAME}_{digest}"])
    module_path = ctx.manifest_path
    spec = spec_from_loader(
        module_name, SourceFileLoader(module_name, str(module_path))
    )
    if not spec or not spec.loader:
        raise RuntimeError(f"failed to load module spec {module_path}")
    manifest_module = module_from_spec(spec)
    setattr(manifest_module, "CTX", ctx)
    logger.debug("executing manifest %s", module_path)
    spec.loader.exec_module(manifest_module)


class ManifestLoader:
    """Finds manifests on disk and runs them to obtain their description values."""

    def __init__(self, file_handler: Optional[FileHandler] = None):
        self.file_handler = file_handler or FileHandler()

    def manifests(self, path: Path) -> Set[Manifest]:
        return {m for m in Manifest if self.file_handler.exists(path.joinpath(m.value))}

    def load_project(self, path: Path) -> description.Project:
        ctx = self._load(path, ProjectContext, Manifest.PROJECT)
        if ctx.project is None:
            raise ManifestNotDefined(ctx.manifest_path)
        return ctx.project

    def load_workspace(self, path: Path) -> description.Workspace:
        ctx = self._load(path, WorkspaceContext, Manifest.WORKSPACE)
        if ctx.workspace is None:
            raise ManifestNotDefined(ctx.manifest_path)
        return ctx.workspace

    def _load(
        self,
        path: Path,
        ctx_type: Union[Type[ProjectContext], Type[WorkspaceContext]],
        kind: Manifest,
    ):
        if kind not in self.manifests(path):
            raise ManifestNotFound(kind.name.capitalize(), path)
        ctx = ctx_type(path)
        load_user_module(ctx)
        return ctx
