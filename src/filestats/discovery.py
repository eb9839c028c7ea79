"""
Path enumeration for filestats.

Walks a directory tree down to a depth limit and applies the include/exclude
extension filters, producing the ordered file list the scheduler consumes.
"""

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import normalize_extensions
from .exceptions import InvalidConfigError, InvalidPathError
from .logging_config import get_logger
from .scanning.classify import classify

logger = get_logger(__name__)


def matches_extension_filters(
    name: str, include: Iterable[str] = (), exclude: Iterable[str] = ()
) -> bool:
    """
    Check a file name against include/exclude extension tags.

    Both lists are compared by exact tag equality.

    Args:
        name: Bare file name
        include: If non-empty, keep only these tags
        exclude: If non-empty, drop these tags

    Returns:
        True if the file should be kept
    """
    extension = classify(name)
    include = set(include)
    if include:
        return extension in include
    return extension not in set(exclude)


def discover_files(
    root: Union[str, Path],
    recursive: bool = False,
    max_depth: Optional[int] = None,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    follow_symlinks: bool = False,
) -> list[Path]:
    """
    List the files to scan under ``root``.

    Depth counts from the root: files directly inside it are at depth 1.
    Without ``recursive`` only depth 1 is visited, whatever ``max_depth`` says.

    Args:
        root: Directory to walk (a single file is returned as-is if it passes)
        recursive: Descend into subdirectories
        max_depth: Deepest level to visit when recursive (None = unlimited)
        include: Extension tags to keep
        exclude: Extension tags to drop
        follow_symlinks: Descend into symlinked directories

    Returns:
        Sorted list of file paths

    Raises:
        InvalidPathError: If root does not exist
        InvalidConfigError: If both include and exclude are given, or max_depth < 1
    """
    root = Path(root)
    include = normalize_extensions(list(include))
    exclude = normalize_extensions(list(exclude))

    if include and exclude:
        raise InvalidConfigError(
            "include_extensions",
            ",".join(include),
            "include and exclude extensions are mutually exclusive, pick one",
        )
    if max_depth is not None and max_depth < 1:
        raise InvalidConfigError("max_depth", max_depth, "must be at least 1")

    if not root.exists():
        raise InvalidPathError(root, "path does not exist")

    if root.is_file():
        if matches_extension_filters(root.name, include, exclude):
            return [root]
        return []

    limit = 1 if not recursive else max_depth

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_report_walk_error, followlinks=follow_symlinks
    ):
        current = Path(dirpath)
        depth = len(current.relative_to(root).parts) + 1

        if limit is not None and depth >= limit:
            # Files below this level would exceed the limit
            dirnames[:] = []

        for filename in filenames:
            if matches_extension_filters(filename, include, exclude):
                found.append(current / filename)

    found.sort()
    logger.debug(f"Discovered {len(found)} file(s) under {root}")
    return found


def _report_walk_error(error: OSError) -> None:
    # os.walk drops directories it cannot list; the run carries on without them
    logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")
