import os

from pathlib import Path
from typing import Iterator, Tuple

from projector.details.graph import Graph, target_full_name
from projector.details.printer import Printer
from projector.graph.model import File, Target


def _count_lines(file_path: Path) -> int:
    with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
        return sum(1 for _ in f)


def target_files(target: Target) -> Iterator[Tuple[str, Path]]:
    for path in target.sources:
        yield "sources", path
    for element in target.resources:
        # Folder references are opaque, only plain files get counted
        if isinstance(element, File):
            yield "resources", element.path
    if target.headers:
        for group in ("public", "private", "project"):
            for path in getattr(target.headers, group):
                yield f"{group} headers", path


def sources_main(graph: Graph, printer: Printer, **kwargs):
    # Count all files once
    file_locs = {
        path: _count_lines(path)
        for _, target in graph.targets
        for _, path in target_files(target)
        if path.is_file()
    }

    for project in graph.projects:
        project_loc = sum(
            file_locs.get(path, 0)
            for target in project.targets
            for _, path in target_files(target)
        )
        printer.print(f"{project.name} : {project_loc:,} lines")
        for target in project.targets:
            files = list(target_files(target))
            target_loc = sum(file_locs.get(path, 0) for _, path in files)
            printer.print(f"  {target_full_name(project, target)} : {target_loc:,} lines")
            for group, path in files:
                rel_path = os.path.relpath(path, project.path)
                printer.print(f"    {group} : {rel_path} : {file_locs.get(path, 0):,} lines")

    total_loc = sum(file_locs.values())
    printer.print(f"\nTotal : {total_loc:,} lines")
