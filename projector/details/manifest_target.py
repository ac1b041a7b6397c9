from pathlib import Path
from typing import Optional

from projector import description
from projector.details.manifest_loader import Manifest
from projector.graph.model import FilesGroup, Platform, Product, Settings, Target

MANIFEST_BUNDLE_ID = "io.projector.manifests.${PRODUCT_NAME:rfc1034identifier}"


def manifest_target_name(project_name: str) -> str:
    return f"{project_name}-Manifest"


class ManifestTargetGenerator:
    """Builds the extra target that lets users edit a project's manifest in the generated project."""

    def __init__(self, description_path: Optional[Path] = None):
        self.description_path = description_path or Path(description.__file__).resolve()

    @property
    def search_path(self) -> Path:
        # Directory holding the projector package, so manifests can import it
        return self.description_path.parent.parent

    def generate_manifest_target(self, project_name: str, path: Path) -> Target:
        return Target(
            name=manifest_target_name(project_name),
            platform=Platform.MACOS,
            product=Product.STATIC_FRAMEWORK,
            bundle_id=MANIFEST_BUNDLE_ID,
            settings=Settings(base={"PYTHONPATH": self.search_path.as_posix()}),
            sources=(path.joinpath(Manifest.PROJECT.value),),
            files_group=FilesGroup("Manifest"),
        )
