from pathlib import Path
from typing import List


class FileHandler:
    """Filesystem operations used while resolving manifests.

    Kept behind a class so resolution can be exercised against a fake tree.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_folder(self, path: Path) -> bool:
        return path.is_dir()

    def glob(self, root: Path, pattern: str) -> List[Path]:
        # pathlib only yields directories for a trailing "**"
        if pattern == "**" or pattern.endswith("/**"):
            pattern += "/*"
        # Sorted so that generated projects do not change between runs
        return sorted(root.glob(pattern))
