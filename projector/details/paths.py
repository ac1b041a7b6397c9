import os

from pathlib import Path

from projector.details.file_handler import FileHandler
from projector.errors import MissingFile


# Anchor a manifest-relative path at the manifest's directory
def resolve_path(anchor: Path, relative: str) -> Path:
    return Path(os.path.normpath(anchor.joinpath(relative)))


# Singular references that must exist, unlike globs a miss aborts resolution
def check_exists(path: Path, file_handler: FileHandler) -> Path:
    if not file_handler.exists(path):
        raise MissingFile(path)
    return path
