# Manifest to graph model translation.
#
# One *_from_manifest function per manifest value. Most of them are plain
# structural conversions; the ones that touch paths anchor them at the
# manifest's directory, expand globs through the call's GlobResolver, and
# check mandatory references for existence.

from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Type

from projector import description as manifest
from projector.details.as_iterator import str_iter
from projector.details.glob_filter import GlobResolver, PathFilter
from projector.details.manifest_loader import Manifest, ManifestLoader
from projector.details.paths import check_exists, resolve_path
from projector.errors import FeatureNotYetSupported
from projector.graph.model import (
    ActionOrder,
    Arguments,
    BuildAction,
    BuildConfiguration,
    Configuration,
    CoreDataModel,
    Dependency,
    File,
    FileElement,
    FilesGroup,
    FolderReference,
    FrameworkDependency,
    Headers,
    LibraryDependency,
    Platform,
    Product,
    Project,
    ProjectDependency,
    RunAction,
    Scheme,
    Settings,
    Target,
    TargetAction,
    TargetDependency,
    TestAction,
    Workspace,
)

NO_PROJECTS_FOUND = "No projects found at: {pattern}"

VALID_SOURCE_EXTENSIONS = frozenset({"m", "swift", "mm", "cpp", "c"})

# Folders with these extensions are bundles and get copied as a whole
VALID_FOLDER_EXTENSIONS = frozenset({"framework", "bundle", "app", "xcassets", "appiconset"})

PROJECT_FILES_GROUP = FilesGroup("Project")


# Fail at import time if a manifest enum grows a case nobody maps
def _exhaustive(table: Dict, enum_type: Type, unsupported: Iterable = ()) -> Dict:
    missing = set(enum_type) - set(table) - set(unsupported)
    if missing:
        raise RuntimeError(f"no translation for {sorted(m.name for m in missing)}")
    return table


def _translate(table: Dict, value):
    try:
        return table[value]
    except KeyError:
        raise TypeError(f"unsupported manifest value {value!r}") from None


_UNSUPPORTED_PLATFORMS = {
    manifest.Platform.WATCHOS: "watchOS platform",
}

_PLATFORMS = _exhaustive(
    {
        manifest.Platform.MACOS: Platform.MACOS,
        manifest.Platform.IOS: Platform.IOS,
        manifest.Platform.TVOS: Platform.TVOS,
    },
    manifest.Platform,
    unsupported=_UNSUPPORTED_PLATFORMS,
)

_PRODUCTS = _exhaustive(
    {
        manifest.Product.APP: Product.APP,
        manifest.Product.STATIC_LIBRARY: Product.STATIC_LIBRARY,
        manifest.Product.DYNAMIC_LIBRARY: Product.DYNAMIC_LIBRARY,
        manifest.Product.FRAMEWORK: Product.FRAMEWORK,
        manifest.Product.STATIC_FRAMEWORK: Product.STATIC_FRAMEWORK,
        manifest.Product.UNIT_TESTS: Product.UNIT_TESTS,
        manifest.Product.UI_TESTS: Product.UI_TESTS,
    },
    manifest.Product,
)

_BUILD_CONFIGURATIONS = _exhaustive(
    {
        manifest.BuildConfiguration.DEBUG: BuildConfiguration.DEBUG,
        manifest.BuildConfiguration.RELEASE: BuildConfiguration.RELEASE,
    },
    manifest.BuildConfiguration,
)

_ACTION_ORDERS = _exhaustive(
    {
        manifest.ActionOrder.PRE: ActionOrder.PRE,
        manifest.ActionOrder.POST: ActionOrder.POST,
    },
    manifest.ActionOrder,
)


def platform_from_manifest(platform: manifest.Platform) -> Platform:
    if platform in _UNSUPPORTED_PLATFORMS:
        raise FeatureNotYetSupported(_UNSUPPORTED_PLATFORMS[platform])
    return _translate(_PLATFORMS, platform)


def product_from_manifest(product: manifest.Product) -> Product:
    return _translate(_PRODUCTS, product)


def build_configuration_from_manifest(config: manifest.BuildConfiguration) -> BuildConfiguration:
    return _translate(_BUILD_CONFIGURATIONS, config)


def action_order_from_manifest(order: manifest.ActionOrder) -> ActionOrder:
    return _translate(_ACTION_ORDERS, order)


def dependency_from_manifest(dependency: manifest.TargetDependency) -> Dependency:
    if isinstance(dependency, manifest.TargetReference):
        return TargetDependency(name=dependency.name)
    elif isinstance(dependency, manifest.ProjectReference):
        return ProjectDependency(target=dependency.target, path=Path(dependency.path))
    elif isinstance(dependency, manifest.FrameworkReference):
        return FrameworkDependency(path=Path(dependency.path))
    elif isinstance(dependency, manifest.LibraryReference):
        module_map = dependency.swift_module_map
        return LibraryDependency(
            path=Path(dependency.path),
            public_headers=Path(dependency.public_headers),
            swift_module_map=Path(module_map) if module_map is not None else None,
        )
    raise TypeError(f"unsupported dependency {dependency!r}")


def arguments_from_manifest(arguments: manifest.Arguments) -> Arguments:
    return Arguments(environment=dict(arguments.environment), launch=dict(arguments.launch))


def build_action_from_manifest(action: manifest.BuildAction) -> BuildAction:
    return BuildAction(targets=tuple(action.targets))


def test_action_from_manifest(action: manifest.TestAction) -> TestAction:
    return TestAction(
        targets=tuple(action.targets),
        arguments=arguments_from_manifest(action.arguments) if action.arguments else None,
        config=build_configuration_from_manifest(action.config),
        coverage=action.coverage,
    )


def run_action_from_manifest(action: manifest.RunAction) -> RunAction:
    return RunAction(
        config=build_configuration_from_manifest(action.config),
        executable=action.executable,
        arguments=arguments_from_manifest(action.arguments) if action.arguments else None,
    )


def scheme_from_manifest(scheme: manifest.Scheme) -> Scheme:
    return Scheme(
        name=scheme.name,
        shared=scheme.shared,
        build_action=build_action_from_manifest(scheme.build_action) if scheme.build_action else None,
        test_action=test_action_from_manifest(scheme.test_action) if scheme.test_action else None,
        run_action=run_action_from_manifest(scheme.run_action) if scheme.run_action else None,
    )


def configuration_from_manifest(configuration: manifest.Configuration, path: Path) -> Configuration:
    xcconfig = configuration.xcconfig
    return Configuration(
        settings=dict(configuration.settings),
        xcconfig=resolve_path(path, xcconfig) if xcconfig is not None else None,
    )


def settings_from_manifest(settings: manifest.Settings, path: Path) -> Settings:
    return Settings(
        base=dict(settings.base),
        debug=configuration_from_manifest(settings.debug, path) if settings.debug else None,
        release=configuration_from_manifest(settings.release, path) if settings.release else None,
    )


def target_action_from_manifest(action: manifest.TargetAction, path: Path) -> TargetAction:
    return TargetAction(
        name=action.name,
        order=action_order_from_manifest(action.order),
        tool=action.tool,
        path=resolve_path(path, action.path) if action.path is not None else None,
        arguments=tuple(action.arguments),
    )


def headers_from_manifest(headers: manifest.Headers, path: Path, globs: GlobResolver) -> Headers:
    def group(patterns) -> Tuple[Path, ...]:
        return tuple(sorted(globs.glob_many(path, list(str_iter(patterns)))))

    return Headers(
        public=group(headers.public),
        private=group(headers.private),
        project=group(headers.project),
    )


def core_data_model_from_manifest(model: manifest.CoreDataModel, path: Path, globs: GlobResolver) -> CoreDataModel:
    model_path = check_exists(resolve_path(path, model.path), globs.file_handler)
    # The current version is not checked against the versions found on disk
    versions = globs.glob(model_path, "*.xcdatamodel", warning=None)
    return CoreDataModel(path=model_path, versions=versions, current_version=model.current_version)


def _folder_references(relative_path: str, path: Path, globs: GlobResolver) -> Tuple[Path, ...]:
    folder_reference_path = resolve_path(path, relative_path)
    if not globs.file_handler.exists(folder_reference_path):
        globs.printer.print_warning(f"{relative_path} does not exist")
        return ()
    if not globs.file_handler.is_folder(folder_reference_path):
        globs.printer.print_warning(
            f"{relative_path} is not a directory - folder reference paths need to point to directories"
        )
        return ()
    return (folder_reference_path,)


def file_element_from_manifest(
    element,
    path: Path,
    globs: GlobResolver,
    include: Optional[PathFilter] = None,
) -> Tuple[FileElement, ...]:
    # Plain strings are shorthand for globs
    if isinstance(element, str):
        element = manifest.Glob(pattern=element)
    if isinstance(element, manifest.Glob):
        return tuple(File(p) for p in globs.glob(path, element.pattern, include=include))
    elif isinstance(element, manifest.FolderReference):
        return tuple(FolderReference(p) for p in _folder_references(element.path, path, globs))
    raise TypeError(f"unsupported file element {element!r}")


def file_elements_from_manifest(elements, path: Path, globs: GlobResolver, include: Optional[PathFilter] = None):
    return tuple(
        file_element
        for element in elements or []
        for file_element in file_element_from_manifest(element, path, globs, include=include)
    )


def is_source(path: Path) -> bool:
    return path.suffix[1:] in VALID_SOURCE_EXTENSIONS


def is_resource(path: Path, globs: GlobResolver) -> bool:
    if not globs.file_handler.is_folder(path):
        return True
    return path.suffix[1:] in VALID_FOLDER_EXTENSIONS


def source_globs(sources) -> list:
    if isinstance(sources, manifest.SourceFilesList):
        return list(sources.globs)
    return list(str_iter(sources))


def target_from_manifest(target: manifest.Target, path: Path, globs: GlobResolver) -> Target:
    return Target(
        name=target.name,
        platform=platform_from_manifest(target.platform),
        product=product_from_manifest(target.product),
        bundle_id=target.bundle_id,
        info_plist=resolve_path(path, target.info_plist),
        entitlements=resolve_path(path, target.entitlements) if target.entitlements else None,
        settings=settings_from_manifest(target.settings, path) if target.settings else None,
        sources=globs.glob_many(path, source_globs(target.sources), include=is_source),
        resources=file_elements_from_manifest(
            target.resources, path, globs, include=lambda p: is_resource(p, globs)
        ),
        headers=headers_from_manifest(target.headers, path, globs) if target.headers else None,
        core_data_models=tuple(
            core_data_model_from_manifest(model, path, globs) for model in target.core_data_models
        ),
        actions=tuple(target_action_from_manifest(action, path) for action in target.actions),
        environment=dict(target.environment),
        files_group=PROJECT_FILES_GROUP,
        dependencies=tuple(dependency_from_manifest(d) for d in target.dependencies),
    )


def project_from_manifest(project: manifest.Project, path: Path, globs: GlobResolver) -> Project:
    return Project(
        path=path,
        name=project.name,
        settings=settings_from_manifest(project.settings, path) if project.settings else None,
        files_group=PROJECT_FILES_GROUP,
        targets=tuple(target_from_manifest(target, path, globs) for target in project.targets),
        schemes=tuple(scheme_from_manifest(scheme) for scheme in project.schemes),
        additional_files=file_elements_from_manifest(project.additional_files, path, globs),
    )


def workspace_from_manifest(
    workspace: manifest.Workspace,
    path: Path,
    globs: GlobResolver,
    manifest_loader: ManifestLoader,
) -> Workspace:
    # Directories first, only then ask whether they hold a project manifest
    def is_project(candidate: Path) -> bool:
        return globs.file_handler.is_folder(candidate) and Manifest.PROJECT in manifest_loader.manifests(candidate)

    projects = [
        project
        for pattern in workspace.projects
        for project in globs.glob(path, pattern, include=is_project, warning=NO_PROJECTS_FOUND)
    ]
    return Workspace(
        name=workspace.name,
        # Overlapping patterns list a project once, at its first match
        projects=tuple(dict.fromkeys(projects)),
        additional_files=file_elements_from_manifest(workspace.additional_files, path, globs),
    )
