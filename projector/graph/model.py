# Resolved project graph model.
#
# This module defines the values handed to project generators once manifests
# have been loaded and resolved against the filesystem. Filesystem
# references are absolute, sequences are tuples, and every value is frozen:
# "changing" one means building a new one (see Project.adding).

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Iterator, Mapping, Optional, Tuple, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")


# Read-only, hashable mapping for settings and environments
class FrozenDict(Mapping[K, V]):
    def __init__(self, *args, **kwargs):
        self._data = dict(*args, **kwargs)

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenDict({self._data!r})"


def _freeze(value, *names: str):
    for name in names:
        object.__setattr__(value, name, FrozenDict(getattr(value, name)))


class Platform(Enum):
    IOS = "iOS"
    MACOS = "macOS"
    TVOS = "tvOS"


class Product(Enum):
    APP = "app"
    STATIC_LIBRARY = "staticLibrary"
    DYNAMIC_LIBRARY = "dynamicLibrary"
    FRAMEWORK = "framework"
    STATIC_FRAMEWORK = "staticFramework"
    UNIT_TESTS = "unitTests"
    UI_TESTS = "uiTests"


class BuildConfiguration(Enum):
    DEBUG = "Debug"
    RELEASE = "Release"


class ActionOrder(Enum):
    PRE = "pre"
    POST = "post"


@dataclass(frozen=True)
class TargetAction:
    name: str
    order: ActionOrder
    tool: Optional[str] = None
    path: Optional[Path] = None
    arguments: Tuple[str, ...] = ()


# Dependencies
@dataclass(frozen=True)
class TargetDependency:
    name: str


# Paths below stay relative to the declaring project, the graph loader
# resolves them once it knows which project is asking.
@dataclass(frozen=True)
class ProjectDependency:
    target: str
    path: Path


@dataclass(frozen=True)
class FrameworkDependency:
    path: Path


@dataclass(frozen=True)
class LibraryDependency:
    path: Path
    public_headers: Path
    swift_module_map: Optional[Path] = None


Dependency = Union[TargetDependency, ProjectDependency, FrameworkDependency, LibraryDependency]


# File elements
@dataclass(frozen=True)
class File:
    path: Path


@dataclass(frozen=True)
class FolderReference:
    path: Path


FileElement = Union[File, FolderReference]


@dataclass(frozen=True)
class FilesGroup:
    name: str


@dataclass(frozen=True)
class Headers:
    public: Tuple[Path, ...] = ()
    private: Tuple[Path, ...] = ()
    project: Tuple[Path, ...] = ()


@dataclass(frozen=True)
class CoreDataModel:
    path: Path
    versions: Tuple[Path, ...]
    current_version: str


@dataclass(frozen=True)
class Configuration:
    settings: Mapping[str, str] = field(default_factory=FrozenDict)
    xcconfig: Optional[Path] = None

    def __post_init__(self):
        _freeze(self, "settings")


@dataclass(frozen=True)
class Settings:
    base: Mapping[str, str] = field(default_factory=FrozenDict)
    debug: Optional[Configuration] = None
    release: Optional[Configuration] = None

    def __post_init__(self):
        _freeze(self, "base")


@dataclass(frozen=True)
class Arguments:
    environment: Mapping[str, str] = field(default_factory=FrozenDict)
    launch: Mapping[str, bool] = field(default_factory=FrozenDict)

    def __post_init__(self):
        _freeze(self, "environment", "launch")


@dataclass(frozen=True)
class BuildAction:
    targets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TestAction:
    __test__ = False

    targets: Tuple[str, ...] = ()
    arguments: Optional[Arguments] = None
    config: BuildConfiguration = BuildConfiguration.DEBUG
    coverage: bool = False


@dataclass(frozen=True)
class RunAction:
    config: BuildConfiguration = BuildConfiguration.DEBUG
    executable: Optional[str] = None
    arguments: Optional[Arguments] = None


@dataclass(frozen=True)
class Scheme:
    name: str
    shared: bool = True
    build_action: Optional[BuildAction] = None
    test_action: Optional[TestAction] = None
    run_action: Optional[RunAction] = None


@dataclass(frozen=True)
class Target:
    name: str
    platform: Platform
    product: Product
    bundle_id: str
    info_plist: Optional[Path] = None
    entitlements: Optional[Path] = None
    settings: Optional[Settings] = None
    sources: Tuple[Path, ...] = ()
    resources: Tuple[FileElement, ...] = ()
    headers: Optional[Headers] = None
    core_data_models: Tuple[CoreDataModel, ...] = ()
    actions: Tuple[TargetAction, ...] = ()
    environment: Mapping[str, str] = field(default_factory=FrozenDict)
    files_group: FilesGroup = FilesGroup("Project")
    dependencies: Tuple[Dependency, ...] = ()

    def __post_init__(self):
        _freeze(self, "environment")

    @property
    def pre_actions(self) -> Tuple[TargetAction, ...]:
        return tuple(a for a in self.actions if a.order is ActionOrder.PRE)

    @property
    def post_actions(self) -> Tuple[TargetAction, ...]:
        return tuple(a for a in self.actions if a.order is ActionOrder.POST)


@dataclass(frozen=True)
class Project:
    path: Path
    name: str
    settings: Optional[Settings] = None
    files_group: FilesGroup = FilesGroup("Project")
    targets: Tuple[Target, ...] = ()
    schemes: Tuple[Scheme, ...] = ()
    additional_files: Tuple[FileElement, ...] = ()

    def adding(self, target: Target) -> "Project":
        return replace(self, targets=self.targets + (target,))

    def target(self, name: str) -> Target:
        for target in self.targets:
            if target.name == name:
                return target
        raise KeyError(f"project '{self.name}' has no target named '{name}'")


@dataclass(frozen=True)
class Workspace:
    name: str
    projects: Tuple[Path, ...] = ()
    additional_files: Tuple[FileElement, ...] = ()
