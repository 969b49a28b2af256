"""File writing operations."""
import os
import shutil
import tempfile

from fskit.core.config import settings
from fskit.core.exceptions import FilesystemError
from fskit.infrastructure.filesystem.path_operations import (
    PathLike,
    ensure_dir,
    from_slash,
)
from fskit.infrastructure.logging import get_logger

logger = get_logger(__name__)


def write_bytes_to_fs(
    path: PathLike,
    filename: str,
    content: bytes,
    atomic: bool = False
) -> None:
    """Write content to path/filename, creating path if needed.

    Existing files are overwritten in place. With ``atomic=True`` the content
    goes to a temporary file in the same directory which is then renamed over
    the target.
    """
    path = from_slash(path)
    ensure_dir(path)
    full_path = os.path.join(path, filename)

    try:
        if atomic:
            tmp_file = tempfile.NamedTemporaryFile(dir=path or os.curdir, delete=False)
            tmp_path = tmp_file.name
            try:
                with tmp_file:
                    tmp_file.write(content)
                os.chmod(tmp_path, settings.file_permissions)
                os.replace(tmp_path, full_path)
            except OSError:
                os.unlink(tmp_path)
                raise
        else:
            fd = os.open(
                full_path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                settings.file_permissions,
            )
            with os.fdopen(fd, "wb") as f:
                f.write(content)
    except OSError as e:
        raise FilesystemError.from_os_error(e, full_path) from e

    logger.debug("file_written", path=full_path, size=len(content), atomic=atomic)


def write_string_to_fs(path: PathLike, filename: str, content: str) -> None:
    write_bytes_to_fs(path, filename, content.encode("utf-8"))


def copy_file(src: PathLike, dst: PathLike) -> None:
    """Copy the bytes of src into dst and flush them to stable storage.

    dst is created or truncated. Its handle is closed whether or not the copy
    succeeds.
    """
    src = from_slash(src)
    dst = from_slash(dst)

    try:
        source = open(src, "rb")
    except OSError as e:
        raise FilesystemError.from_os_error(e, src) from e

    with source:
        try:
            with open(dst, "wb") as destination:
                shutil.copyfileobj(source, destination, settings.copy_chunk_size)
                destination.flush()
                os.fsync(destination.fileno())
        except OSError as e:
            raise FilesystemError.from_os_error(e, dst) from e

    logger.debug("file_copied", src=src, dst=dst)
