from enum import Enum
from pathlib import Path


class ErrorType(Enum):
    # The user can fix it, generation stops and the description is shown
    ABORT = "abort"
    # Something unexpected happened inside projector
    BUG = "bug"


class FatalError(Exception):
    error_type = ErrorType.ABORT

    @property
    def description(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.description


class GeneratorModelLoaderError(FatalError):
    pass


class FeatureNotYetSupported(GeneratorModelLoaderError):
    def __init__(self, details: str):
        super().__init__(details)
        self.details = details

    @property
    def description(self) -> str:
        return f"{self.details} is not yet supported"


class MissingFile(GeneratorModelLoaderError):
    def __init__(self, path: Path):
        super().__init__(path)
        self.path = path

    @property
    def description(self) -> str:
        return f"Couldn't find file at path '{self.path.as_posix()}'"


class ManifestLoaderError(FatalError):
    pass


class ManifestNotFound(ManifestLoaderError):
    def __init__(self, kind: str, path: Path):
        super().__init__(kind, path)
        self.kind = kind
        self.path = path

    @property
    def description(self) -> str:
        return f"{self.kind} manifest not found at path '{self.path.as_posix()}'"


class ManifestNotDefined(ManifestLoaderError):
    def __init__(self, path: Path):
        super().__init__(path)
        self.path = path

    @property
    def description(self) -> str:
        return f"manifest at '{self.path.as_posix()}' does not define anything, call CTX.add_project() or CTX.add_workspace()"
