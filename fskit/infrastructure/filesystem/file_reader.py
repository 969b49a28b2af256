"""File reading operations."""
from fskit.core.exceptions import DecodeFailureError, FilesystemError
from fskit.infrastructure.filesystem.path_operations import PathLike, from_slash
from fskit.infrastructure.logging import get_logger

logger = get_logger(__name__)


def read_bytes_from_file(path: PathLike) -> bytes:
    """Read the entire content of a file.

    An empty file is not an error, but it is logged as a warning.
    """
    path = from_slash(path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise FilesystemError.from_os_error(e, path) from e

    if not raw:
        logger.warning("empty_file", path=path)

    return raw


def read_file_as_string(path: PathLike) -> str:
    """Read a file and decode it as UTF-8."""
    raw = read_bytes_from_file(path)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeFailureError(
            f"File is not valid UTF-8 (byte {e.start}): {path}", path=str(path)
        ) from e
