from pathlib import Path
from typing import Optional

from projector import description


class Context:
    def __init__(self, root: Path):
        self.root = root

    @property
    def manifest_path(self) -> Path:
        return self.root.joinpath(self.FILENAME)


class ProjectContext(Context):
    FILENAME = "Project.projector"
    MODULENAME = "project"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.project: Optional[description.Project] = None

    def add_project(self, name: str, **kwargs) -> description.Project:
        if self.project is not None:
            raise RuntimeError(
                f"project '{self.project.name}' has already been registered in {self.manifest_path}"
            )
        self.project = description.Project(name=name, **kwargs)
        return self.project


class WorkspaceContext(Context):
    FILENAME = "Workspace.projector"
    MODULENAME = "workspace"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.workspace: Optional[description.Workspace] = None

    def add_workspace(self, name: str, **kwargs) -> description.Workspace:
        if self.workspace is not None:
            raise RuntimeError(
                f"workspace '{self.workspace.name}' has already been registered in {self.manifest_path}"
            )
        self.workspace = description.Workspace(name=name, **kwargs)
        return self.workspace
