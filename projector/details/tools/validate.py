from typing import List

from projector.details.file_handler import FileHandler
from projector.details.graph import Graph, target_full_name
from projector.details.manifest_loader import Manifest, ManifestLoader
from projector.details.paths import resolve_path
from projector.details.printer import Printer
from projector.details.tools.dump import describe_dependency
from projector.graph.model import (
    FrameworkDependency,
    LibraryDependency,
    Project,
    ProjectDependency,
    Target,
    TargetDependency,
)


def dependency_problems(
    project: Project,
    target: Target,
    file_handler: FileHandler,
    manifest_loader: ManifestLoader,
) -> List[str]:
    problems = []
    target_names = {t.name for t in project.targets}
    for dep in target.dependencies:
        if isinstance(dep, TargetDependency):
            if dep.name not in target_names:
                problems.append(f"no target named '{dep.name}' in project '{project.name}'")
        elif isinstance(dep, ProjectDependency):
            dep_path = resolve_path(project.path, dep.path.as_posix())
            if Manifest.PROJECT not in manifest_loader.manifests(dep_path):
                problems.append(f"no project manifest at '{dep_path.as_posix()}'")
        elif isinstance(dep, (FrameworkDependency, LibraryDependency)):
            dep_path = resolve_path(project.path, dep.path.as_posix())
            if not file_handler.exists(dep_path):
                problems.append(f"couldn't find '{dep_path.as_posix()}'")
        else:
            raise TypeError(f"unsupported dependency {dep!r}")
    return problems


def validate_main(graph: Graph, printer: Printer, file_handler: FileHandler, manifest_loader: ManifestLoader, **kwargs) -> int:
    exit_code = 0
    for project, target in graph.targets:
        printer.print(target_full_name(project, target))
        for dep in target.dependencies:
            printer.print(f"  {describe_dependency(dep)}")
        for problem in dependency_problems(project, target, file_handler, manifest_loader):
            printer.print_error(f"{target_full_name(project, target)}: {problem}")
            exit_code = 1
    return exit_code
