import os

from pathlib import Path

from projector.details.graph import Graph, target_full_name
from projector.details.printer import Printer
from projector.graph.model import (
    File,
    FileElement,
    FrameworkDependency,
    LibraryDependency,
    ProjectDependency,
    TargetDependency,
)


def describe_dependency(dependency) -> str:
    if isinstance(dependency, TargetDependency):
        return f"target {dependency.name}"
    elif isinstance(dependency, ProjectDependency):
        return f"project {dependency.path.as_posix()}:{dependency.target}"
    elif isinstance(dependency, FrameworkDependency):
        return f"framework {dependency.path.as_posix()}"
    elif isinstance(dependency, LibraryDependency):
        return f"library {dependency.path.as_posix()}"
    raise TypeError(f"unsupported dependency {dependency!r}")


def describe_file_element(element: FileElement, root: Path) -> str:
    kind = "file" if isinstance(element, File) else "folder"
    return f"{kind} {os.path.relpath(element.path, root)}"


def dump_main(graph: Graph, printer: Printer, **kwargs):
    if graph.workspace:
        printer.print(f"workspace {graph.workspace.name}")
        for path in graph.workspace.projects:
            printer.print(f"  project {os.path.relpath(path, graph.root)}")
        for element in graph.workspace.additional_files:
            printer.print(f"  {describe_file_element(element, graph.root)}")
    for project in graph.projects:
        printer.print(f"{project.name} ({project.path.as_posix()})")
        for target in project.targets:
            printer.print(
                f"  {target_full_name(project, target)} [{target.platform.value} {target.product.value}]"
            )
            printer.print(f"    sources : {len(target.sources)} files")
            printer.print(f"    resources : {len(target.resources)} elements")
            for action in target.actions:
                printer.print(f"    {action.order.value}-action : {action.name}")
            for dependency in target.dependencies:
                printer.print(f"    depends on {describe_dependency(dependency)}")
        for scheme in project.schemes:
            printer.print(f"  scheme {scheme.name}")
        for element in project.additional_files:
            printer.print(f"  {describe_file_element(element, project.path)}")
