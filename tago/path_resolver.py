"""Logic for finding the description files that apply to a target path."""

import logging
import os
import stat
from pathlib import Path
from typing import Any

from tago.errors import InvalidTargetError, TargetNotFoundError
from tago.is_description_file import is_description_file
from tago.resolution_result import ResolutionResult
from tago.split_name import split_name

logger = logging.getLogger(__name__)


class PathResolver:
    """Walks the directory hierarchy around a target to collect description files.

    Results are ordered nearest scope first:

    1. the named match (``foo.tago`` for ``foo.txt``), or the target itself
       when it is a description file;
    2. the scope-root file in the target's directory (``tago.tago``);
    3. the scope-root file of every ancestor directory up to the filesystem
       root, closest first.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the resolver with the ``description`` config section."""
        description = config["description"]
        self.extension: str = description["extension"]
        self.root_marker: str = description["root_marker"]

    def resolve(self, target: str | Path) -> ResolutionResult:
        """Return the description files for ``target``, nearest first.

        Raises TargetNotFoundError when the target does not exist and
        InvalidTargetError when it is neither a regular file nor a directory.
        Directory listing failures end the walk and are reported through
        ``ResolutionResult.error`` alongside the paths found so far.
        """
        target_path = Path(os.path.abspath(target))
        is_file = self._classify(target_path)

        result = ResolutionResult(target=target_path)

        if is_file:
            anchor = target_path.parent
            anchor_stem, _ = split_name(str(target_path))
        else:
            anchor = target_path
            anchor_stem = None

        # 1. Local scope
        self_reference = is_file and self._is_description_file(target_path.name)
        try:
            named, scope_root = self._scan_local(anchor, target_path, anchor_stem)
        except OSError as e:
            if self_reference:
                result.paths.append(target_path)
            result.error = e
            logger.debug("Listing %s failed: %s", anchor, e)
            return result

        if self_reference:
            named = target_path
        if named is not None:
            result.paths.append(named)
        if scope_root is not None:
            result.paths.append(scope_root)

        # 2. Ancestor scope, all the way to the filesystem root
        current = anchor
        while True:
            parent = current.parent
            if parent == current or not str(parent):
                break
            current = parent
            try:
                found = self._find_scope_root(current)
            except OSError as e:
                result.error = e
                logger.debug("Listing %s failed: %s", current, e)
                break
            if found is not None:
                result.paths.append(found)

        for p in result.paths:
            logger.debug("Resolved description file: %s", p)
        return result

    def _classify(self, target: Path) -> bool:
        """Return True for a regular file, False for a directory."""
        try:
            st = target.stat()
        except (FileNotFoundError, NotADirectoryError) as e:
            msg = f"{target} does not exist"
            raise TargetNotFoundError(msg) from e

        if stat.S_ISREG(st.st_mode):
            return True
        if stat.S_ISDIR(st.st_mode):
            return False
        msg = f"{target} is not a regular file nor directory"
        raise InvalidTargetError(msg)

    def _scan_local(
        self, anchor: Path, target: Path, anchor_stem: str | None
    ) -> tuple[Path | None, Path | None]:
        """Find the named match and scope-root match in the anchor directory."""
        named: Path | None = None
        scope_root: Path | None = None
        for entry_path in self._list_description_files(anchor):
            if entry_path == target:
                continue
            stem, _ = split_name(entry_path.name)
            if anchor_stem is not None and stem == anchor_stem:
                named = entry_path
            if stem == self.root_marker:
                scope_root = entry_path
        return named, scope_root

    def _find_scope_root(self, directory: Path) -> Path | None:
        """Find the scope-root description file directly inside ``directory``."""
        found: Path | None = None
        for entry_path in self._list_description_files(directory):
            stem, _ = split_name(entry_path.name)
            if stem == self.root_marker:
                found = entry_path
        return found

    def _list_description_files(self, directory: Path) -> list[Path]:
        """List regular description files in ``directory`` in sorted name order."""
        with os.scandir(directory) as it:
            names = sorted(
                e.name
                for e in it
                if e.is_file(follow_symlinks=False)
                and self._is_description_file(e.name)
            )
        return [directory / name for name in names]

    def _is_description_file(self, name: str) -> bool:
        return is_description_file(name, self.extension)
