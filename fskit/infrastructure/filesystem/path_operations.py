"""Path and directory operations."""
import os
import shutil
from typing import Tuple, Union

from fskit.core.config import settings
from fskit.core.exceptions import (
    AlreadyExistsError,
    FilesystemError,
    InvalidArgumentError,
    IOFailureError,
    NotDirectoryError,
    NotFoundError,
)
from fskit.infrastructure.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def from_slash(path: PathLike) -> str:
    """Replace each '/' in path with the native separator."""
    path = os.fspath(path)
    if os.sep == "/":
        return path
    return path.replace("/", os.sep)


def path_exists(path: PathLike) -> bool:
    """Check whether something exists at path.

    A missing path is not an error. Any other stat failure (for instance
    a permission problem on a parent directory) raises IOFailureError.
    """
    path = from_slash(path)
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        raise IOFailureError(f"Cannot stat path: {e.strerror or e}", path=path) from e
    return True


def require_path(path: PathLike) -> str:
    """Return path unchanged if it exists, else raise NotFoundError."""
    path = os.fspath(path)
    if not path_exists(path):
        raise NotFoundError(path)
    return path


def create_dir(path: PathLike) -> None:
    """Create a directory and any missing parents.

    Raises AlreadyExistsError if anything is already present at path.
    """
    path = from_slash(path)
    if path_exists(path):
        raise AlreadyExistsError(path)

    try:
        os.makedirs(path, mode=settings.dir_permissions)
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e

    logger.info("directory_created", path=path)


def ensure_dir(path: PathLike) -> None:
    """Create path (with parents) unless it already exists.

    An empty path means the working directory and is left alone.
    """
    path = from_slash(path)
    if not path or path_exists(path):
        return

    try:
        os.makedirs(path, mode=settings.dir_permissions, exist_ok=True)
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e

    logger.debug("directory_ensured", path=path)


def remove_dir(path: PathLike) -> None:
    """Remove a single empty directory."""
    path = from_slash(path)
    if not path_exists(path):
        raise NotFoundError(path)
    if not os.path.isdir(path):
        raise NotDirectoryError(path)

    try:
        os.rmdir(path)
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e

    logger.info("directory_removed", path=path)


def remove_dir_contents(path: PathLike) -> None:
    """Recursively remove every child of path, keeping path itself.

    Stops at the first child that cannot be removed.
    """
    path = from_slash(path)
    try:
        names = os.listdir(path)
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e

    for name in names:
        child = os.path.join(path, name)
        try:
            if os.path.isdir(child) and not os.path.islink(child):
                shutil.rmtree(child)
            else:
                os.remove(child)
        except OSError as e:
            raise IOFailureError(
                f"Failed to remove {child}: {e.strerror or e}", path=child
            ) from e

    logger.info("directory_contents_removed", path=path, removed=len(names))


def remove_file(path: PathLike, filename: str) -> None:
    full_path = os.path.join(from_slash(path), filename)
    try:
        os.remove(full_path)
    except OSError as e:
        raise FilesystemError.from_os_error(e, full_path) from e

    logger.info("file_removed", path=full_path)


def is_valid_path_to(path: PathLike, *suffixes: str) -> bool:
    """True if path exists and its name ends with one of suffixes.

    Every other outcome, including a path that cannot be checked, logs a
    warning and returns False.
    """
    path = os.fspath(path)
    reason = None
    try:
        exists = path_exists(path)
    except IOFailureError as e:
        exists, reason = False, e.message

    if exists and path.endswith(tuple(suffixes)):
        return True

    logger.warning(
        "path_not_matching_suffixes",
        path=path,
        reason=reason,
        expected_suffixes=list(suffixes),
        message=(
            "This path doesn't lead to any file with an ending like "
            + ", ".join(suffixes)
        ),
    )
    return False


def split_path(path: PathLike) -> Tuple[str, str]:
    """Split path on its last separator.

    The directory part keeps its trailing separator:

        >>> split_path("a/b/c.png")
        ('a/b/', 'c.png')

    Nothing touches the filesystem. Raises InvalidArgumentError if there is
    no separator or nothing follows the last one.
    """
    path = os.fspath(path)
    index = max(path.rfind(sep) for sep in {"/", os.sep})
    if index < 0 or index == len(path) - 1:
        raise InvalidArgumentError(
            f"Path has no filename to split off: {path!r}", path=path
        )
    return path[: index + 1], path[index + 1:]


def get_path_without_filename(path: PathLike) -> str:
    return split_path(path)[0]


def get_filename_from_path(path: PathLike) -> str:
    return split_path(path)[1]
