# Manifest description values.
#
# These are the values users build inside their Project.projector and
# Workspace.projector files. Paths are kept exactly as authored (relative to
# the manifest's directory); resolving them against the filesystem is the job
# of projector.details.translators.

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Dict, List, Optional, Union


class Platform(Enum):
    IOS = auto()
    MACOS = auto()
    TVOS = auto()
    WATCHOS = auto()


class Product(Enum):
    APP = auto()
    STATIC_LIBRARY = auto()
    DYNAMIC_LIBRARY = auto()
    FRAMEWORK = auto()
    STATIC_FRAMEWORK = auto()
    UNIT_TESTS = auto()
    UI_TESTS = auto()


class BuildConfiguration(Enum):
    DEBUG = auto()
    RELEASE = auto()


class ActionOrder(Enum):
    PRE = auto()
    POST = auto()


@dataclass
class TargetAction:
    Order: ClassVar = ActionOrder

    name: str
    order: ActionOrder
    tool: Optional[str] = None
    path: Optional[str] = None
    arguments: List[str] = field(default_factory=list)

    def __post_init__(self):
        if (self.tool is None) == (self.path is None):
            raise ValueError(f"target action '{self.name}' needs exactly one of tool= or path=")

    @classmethod
    def pre(cls, name: str, tool: Optional[str] = None, path: Optional[str] = None, arguments: Optional[List[str]] = None):
        return cls(name=name, order=ActionOrder.PRE, tool=tool, path=path, arguments=list(arguments or []))

    @classmethod
    def post(cls, name: str, tool: Optional[str] = None, path: Optional[str] = None, arguments: Optional[List[str]] = None):
        return cls(name=name, order=ActionOrder.POST, tool=tool, path=path, arguments=list(arguments or []))


# Target dependencies, a closed set of variants
class TargetDependency:
    pass


@dataclass
class TargetReference(TargetDependency):
    name: str


@dataclass
class ProjectReference(TargetDependency):
    target: str
    path: str


@dataclass
class FrameworkReference(TargetDependency):
    path: str


@dataclass
class LibraryReference(TargetDependency):
    path: str
    public_headers: str
    swift_module_map: Optional[str] = None


# File elements, a closed set of variants
class FileElement:
    pass


@dataclass
class Glob(FileElement):
    pattern: str


@dataclass
class FolderReference(FileElement):
    path: str


FileElements = List[Union[str, FileElement]]
Globs = Union[str, List[str]]


@dataclass
class SourceFilesList:
    globs: List[str] = field(default_factory=list)


@dataclass
class Headers:
    public: Optional[Globs] = None
    private: Optional[Globs] = None
    project: Optional[Globs] = None


@dataclass
class CoreDataModel:
    path: str
    current_version: str


@dataclass
class Configuration:
    settings: Dict[str, str] = field(default_factory=dict)
    xcconfig: Optional[str] = None


@dataclass
class Settings:
    base: Dict[str, str] = field(default_factory=dict)
    debug: Optional[Configuration] = None
    release: Optional[Configuration] = None


@dataclass
class Arguments:
    environment: Dict[str, str] = field(default_factory=dict)
    launch: Dict[str, bool] = field(default_factory=dict)


@dataclass
class BuildAction:
    targets: List[str] = field(default_factory=list)


@dataclass
class TestAction:
    __test__ = False

    targets: List[str] = field(default_factory=list)
    arguments: Optional[Arguments] = None
    config: BuildConfiguration = BuildConfiguration.DEBUG
    coverage: bool = False


@dataclass
class RunAction:
    config: BuildConfiguration = BuildConfiguration.DEBUG
    executable: Optional[str] = None
    arguments: Optional[Arguments] = None


@dataclass
class Scheme:
    name: str
    shared: bool = True
    build_action: Optional[BuildAction] = None
    test_action: Optional[TestAction] = None
    run_action: Optional[RunAction] = None


@dataclass
class Target:
    name: str
    platform: Platform
    product: Product
    bundle_id: str
    info_plist: str
    sources: Optional[Union[SourceFilesList, Globs]] = None
    resources: Optional[FileElements] = None
    headers: Optional[Headers] = None
    entitlements: Optional[str] = None
    actions: List[TargetAction] = field(default_factory=list)
    dependencies: List[TargetDependency] = field(default_factory=list)
    settings: Optional[Settings] = None
    core_data_models: List[CoreDataModel] = field(default_factory=list)
    environment: Dict[str, str] = field(default_factory=dict)


@dataclass
class Project:
    name: str
    targets: List[Target] = field(default_factory=list)
    schemes: List[Scheme] = field(default_factory=list)
    settings: Optional[Settings] = None
    additional_files: FileElements = field(default_factory=list)


@dataclass
class Workspace:
    name: str
    projects: List[str] = field(default_factory=list)
    additional_files: FileElements = field(default_factory=list)
