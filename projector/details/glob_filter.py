import fnmatch
import logging
import os

from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, Set, Tuple

from projector.details.file_handler import FileHandler
from projector.details.printer import Printer

logger = logging.getLogger(__name__)

NO_FILES_FOUND = "No files found at: {pattern}"

PathFilter = Callable[[Path], bool]


def split_patterns(patterns: Sequence[str]) -> Tuple[list, list]:
    includes = [p for p in patterns if not p.startswith("!")]
    excludes = [p[1:] for p in patterns if p.startswith("!")]
    return includes, excludes


class GlobResolver:
    """Expands manifest glob patterns into sorted absolute paths.

    One resolver lives for the duration of a single load call: a pattern is
    expanded at most once per root and an empty result is reported to the
    printer at most once per pattern. Nothing survives between calls.
    """

    def __init__(self, file_handler: FileHandler, printer: Printer):
        self.file_handler = file_handler
        self.printer = printer
        self._expanded: Dict[Tuple[Path, str], Tuple[Path, ...]] = {}
        self._warned: Set[str] = set()

    def expand(self, root: Path, pattern: str) -> Tuple[Path, ...]:
        key = (root, pattern)
        if key not in self._expanded:
            logger.debug("expanding '%s' in %s", pattern, root)
            self._expanded[key] = tuple(sorted(self.file_handler.glob(root, pattern)))
        return self._expanded[key]

    def glob(
        self,
        root: Path,
        pattern: str,
        include: Optional[PathFilter] = None,
        warning: Optional[str] = NO_FILES_FOUND,
    ) -> Tuple[Path, ...]:
        matched = self.expand(root, pattern)
        if include is not None:
            matched = tuple(path for path in matched if include(path))
        if not matched and warning:
            self.warn_once(warning.format(pattern=pattern))
        return matched

    def glob_many(
        self,
        root: Path,
        patterns: Sequence[str],
        include: Optional[PathFilter] = None,
        warning: Optional[str] = NO_FILES_FOUND,
    ) -> Tuple[Path, ...]:
        includes, excludes = split_patterns(patterns)
        if not includes:
            return ()
        matched = [
            path
            for pattern in includes
            for path in self.glob(root, pattern, include=include, warning=warning)
        ]
        if excludes:
            # Exclusions are matched against root relative posix paths
            matched = [
                path
                for path in matched
                if not any(
                    fnmatch.fnmatch(Path(os.path.relpath(path, root)).as_posix(), exclude)
                    for exclude in excludes
                )
            ]
        return tuple(dict.fromkeys(matched))

    def warn_once(self, message: str):
        if message in self._warned:
            return
        self._warned.add(message)
        self.printer.print_warning(message)
