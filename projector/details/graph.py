from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Tuple

from projector.details.manifest_loader import Manifest
from projector.details.model_loader import GeneratorModelLoader
from projector.graph.model import Project, Target, Workspace


@dataclass(frozen=True)
class Graph:
    root: Path
    workspace: Optional[Workspace]
    projects: Tuple[Project, ...]

    @property
    def targets(self) -> Iterator[Tuple[Project, Target]]:
        for project in self.projects:
            for target in project.targets:
                yield project, target


def target_full_name(project: Project, target: Target) -> str:
    return ":".join([project.name, target.name])


# A workspace manifest wins over a project manifest in the same directory.
# Workspace members are loaded one by one as whole projects.
def load_graph(loader: GeneratorModelLoader, path: Path) -> Graph:
    root = Path(path).resolve()
    if Manifest.WORKSPACE in loader.manifest_loader.manifests(root):
        workspace = loader.load_workspace(root)
        projects = tuple(loader.load_project(p) for p in workspace.projects)
        return Graph(root=root, workspace=workspace, projects=projects)
    return Graph(root=root, workspace=None, projects=(loader.load_project(root),))
