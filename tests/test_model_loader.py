from dataclasses import replace

import pytest

from conftest import StubManifestLoader, app_target, make_tree, write_manifest
from projector import description as manifest
from projector.details.manifest_loader import Manifest, ManifestLoader
from projector.details.manifest_target import ManifestTargetGenerator, manifest_target_name
from projector.details.model_loader import GeneratorModelLoader
from projector.errors import FeatureNotYetSupported, ManifestNotFound, MissingFile
from projector.graph import model


PROJECT_MANIFEST = """
from projector.description import (
    CoreDataModel,
    Platform,
    Product,
    Scheme,
    BuildAction,
    Target,
    TargetReference,
)

CTX.add_project(
    name="App",
    targets=[
        Target(
            name="App",
            platform=Platform.IOS,
            product=Product.APP,
            bundle_id="io.projector.App",
            info_plist="Info.plist",
            sources="Sources/**/*.swift",
            resources=["Resources/*.png"],
            dependencies=[TargetReference("Core")],
        ),
        Target(
            name="Core",
            platform=Platform.IOS,
            product=Product.FRAMEWORK,
            bundle_id="io.projector.Core",
            info_plist="Core/Info.plist",
            sources=["Core/*.swift"],
        ),
    ],
    schemes=[Scheme(name="App", build_action=BuildAction(targets=["App"]))],
    additional_files=["README.md"],
)
"""


@pytest.fixture
def loader(printer) -> GeneratorModelLoader:
    return GeneratorModelLoader(printer=printer)


def test_load_project_appends_manifest_target(tmp_path, loader, printer):
    make_tree(tmp_path, ["Sources/App.swift", "Sources/Views/Main.swift", "Resources/icon.png", "Core/Core.swift", "README.md"])
    write_manifest(tmp_path, Manifest.PROJECT, PROJECT_MANIFEST)

    project = loader.load_project(tmp_path)

    assert project.name == "App"
    assert project.path == tmp_path
    assert [t.name for t in project.targets] == ["App", "Core", "App-Manifest"]
    assert project.target("App").sources == (
        tmp_path / "Sources" / "App.swift",
        tmp_path / "Sources" / "Views" / "Main.swift",
    )
    assert project.target("App").resources == (model.File(tmp_path / "Resources" / "icon.png"),)
    assert project.schemes[0].build_action == model.BuildAction(targets=("App",))
    assert project.additional_files == (model.File(tmp_path / "README.md"),)
    manifest_target = project.targets[-1]
    assert manifest_target.sources == (tmp_path / "Project.projector",)
    assert manifest_target.files_group == model.FilesGroup("Manifest")
    assert manifest_target.platform is model.Platform.MACOS
    assert manifest_target.product is model.Product.STATIC_FRAMEWORK
    assert printer.warnings == []


def test_load_project_with_stubbed_manifest(tmp_path, printer):
    targets = [app_target(f"Target{i}") for i in range(3)]
    manifest_loader = StubManifestLoader(projects={tmp_path: manifest.Project(name="Stubbed", targets=targets)})
    loader = GeneratorModelLoader(manifest_loader=manifest_loader, printer=printer)

    project = loader.load_project(tmp_path)

    assert len(project.targets) == len(targets) + 1
    assert project.targets[-1] == ManifestTargetGenerator().generate_manifest_target("Stubbed", tmp_path)
    assert project.targets[-1].name == manifest_target_name("Stubbed") == "Stubbed-Manifest"


def test_missing_sources_warn_once_per_pattern(tmp_path, printer):
    targets = [app_target("A", sources="Missing/*.swift"), app_target("B", sources="Missing/*.swift")]
    manifest_loader = StubManifestLoader(projects={tmp_path: manifest.Project(name="App", targets=targets)})
    loader = GeneratorModelLoader(manifest_loader=manifest_loader, printer=printer)

    project = loader.load_project(tmp_path)

    assert project.target("A").sources == ()
    assert printer.warnings == ["No files found at: Missing/*.swift"]
    # A new load starts from scratch
    loader.load_project(tmp_path)
    assert printer.warnings == ["No files found at: Missing/*.swift"] * 2


def test_adding_a_target_leaves_the_original_untouched(tmp_path):
    project = model.Project(path=tmp_path, name="App")
    target = ManifestTargetGenerator().generate_manifest_target("App", tmp_path)

    extended = project.adding(target)

    assert project.targets == ()
    assert extended.targets == (target,)
    assert extended == replace(project, targets=(target,))


def test_loaded_settings_and_environment_are_read_only(tmp_path, printer):
    targets = [app_target(environment={"LOG": "1"}, settings=manifest.Settings(base={"A": "B"}))]
    manifest_loader = StubManifestLoader(projects={tmp_path: manifest.Project(name="App", targets=targets)})
    project = GeneratorModelLoader(manifest_loader=manifest_loader, printer=printer).load_project(tmp_path)
    app, manifest_target = project.targets

    with pytest.raises(TypeError):
        manifest_target.settings.base["PYTHONPATH"] = "/elsewhere"
    with pytest.raises(TypeError):
        app.environment["LOG"] = "0"
    with pytest.raises(TypeError):
        app.settings.base["A"] = "C"

    assert app.environment == {"LOG": "1"}
    assert hash(app) == hash(project.target("App"))
    assert project == GeneratorModelLoader(manifest_loader=manifest_loader, printer=printer).load_project(tmp_path)


def test_load_project_aborts_on_missing_core_data_model(tmp_path, printer):
    targets = [app_target(core_data_models=[manifest.CoreDataModel(path="Model.xcdatamodeld", current_version="1")])]
    manifest_loader = StubManifestLoader(projects={tmp_path: manifest.Project(name="App", targets=targets)})
    loader = GeneratorModelLoader(manifest_loader=manifest_loader, printer=printer)

    with pytest.raises(MissingFile) as excinfo:
        loader.load_project(tmp_path)
    assert excinfo.value.path == tmp_path / "Model.xcdatamodeld"


def test_load_project_aborts_on_unsupported_platform(tmp_path, loader):
    write_manifest(
        tmp_path,
        Manifest.PROJECT,
        """
        from projector.description import Platform, Product, Target

        CTX.add_project(
            name="Watch",
            targets=[Target(name="Watch", platform=Platform.WATCHOS, product=Product.APP, bundle_id="io.watch", info_plist="Info.plist")],
        )
        """,
    )
    with pytest.raises(FeatureNotYetSupported):
        loader.load_project(tmp_path)


def test_load_project_without_manifest(tmp_path, loader):
    with pytest.raises(ManifestNotFound):
        loader.load_project(tmp_path)


def test_load_workspace(tmp_path, loader, printer):
    make_tree(tmp_path, ["Projects/A/", "Projects/B/", "Projects/C/", "Projects/notes.txt", "Shared/"])
    write_manifest(tmp_path / "Projects" / "A", Manifest.PROJECT, 'CTX.add_project(name="A")\n')
    write_manifest(tmp_path / "Projects" / "C", Manifest.PROJECT, 'CTX.add_project(name="C")\n')
    write_manifest(
        tmp_path,
        Manifest.WORKSPACE,
        """
        from projector.description import FolderReference

        CTX.add_workspace(
            name="Workspace",
            projects=["Projects/*", "Nowhere/*"],
            additional_files=[FolderReference("Shared")],
        )
        """,
    )

    workspace = loader.load_workspace(tmp_path)

    assert workspace.name == "Workspace"
    assert workspace.projects == (tmp_path / "Projects" / "A", tmp_path / "Projects" / "C")
    assert workspace.additional_files == (model.FolderReference(tmp_path / "Shared"),)
    assert printer.warnings == ["No projects found at: Nowhere/*"]


def test_manifest_loader_classifies_directories(tmp_path):
    write_manifest(tmp_path / "Both", Manifest.PROJECT, 'CTX.add_project(name="P")\n')
    write_manifest(tmp_path / "Both", Manifest.WORKSPACE, 'CTX.add_workspace(name="W")\n')
    (tmp_path / "Empty").mkdir()
    manifest_loader = ManifestLoader()
    assert manifest_loader.manifests(tmp_path / "Both") == {Manifest.PROJECT, Manifest.WORKSPACE}
    assert manifest_loader.manifests(tmp_path / "Empty") == set()
