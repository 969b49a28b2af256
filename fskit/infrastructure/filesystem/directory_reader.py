"""Directory listing operations."""
import os
from typing import List

from fskit.core.exceptions import FilesystemError
from fskit.infrastructure.filesystem.path_operations import PathLike, from_slash
from fskit.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _scan(path: str) -> List[os.DirEntry]:
    try:
        with os.scandir(path) as entries:
            return list(entries)
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e


def read_dir_entries(path: PathLike, directories: bool) -> List[str]:
    """List the names of either the subdirectories or the files in path.

    Names come back in the order the filesystem reports them. Symlinks are
    classified by what they point to.
    """
    path = from_slash(path)
    logger.debug("reading_dir_entries", path=path, directories=directories)

    try:
        names = [entry.name for entry in _scan(path) if entry.is_dir() == directories]
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e

    return names


def read_dir_entries_ending_with(path: PathLike, *suffixes: str) -> List[str]:
    """List entry names in path ending with any of suffixes, sorted."""
    path = from_slash(path)
    wanted = tuple(suffixes)

    names = [entry.name for entry in _scan(path) if entry.name.endswith(wanted)]
    return sorted(names)
