from typing import Any, Dict, Optional


class FilesystemError(Exception):
    """Base error for every fskit operation."""

    default_code = "FS-000"
    default_message = "Filesystem operation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = self.default_code
        self.message = message or self.default_message
        self.path = path
        self.details = dict(details or {})
        if path is not None:
            self.details.setdefault("path", path)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details or None,
        }

    @classmethod
    def from_os_error(cls, exc: OSError, path: Optional[str] = None) -> "FilesystemError":
        """Translate an OSError into the matching fskit error."""
        target = path if path is not None else exc.filename
        if target is not None:
            target = str(target)
        reason = exc.strerror or str(exc)

        if isinstance(exc, FileNotFoundError):
            error: FilesystemError = NotFoundError(target)
        elif isinstance(exc, FileExistsError):
            error = AlreadyExistsError(target)
        elif isinstance(exc, NotADirectoryError):
            error = NotDirectoryError(target)
        else:
            error = IOFailureError(f"{reason}: {target}", path=target)
        return error


class NotFoundError(FilesystemError):
    default_code = "FS-404"

    def __init__(self, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Path does not exist: {path}",
            path=path,
            details=details,
        )


class AlreadyExistsError(FilesystemError):
    default_code = "FS-409"

    def __init__(self, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Path already exists: {path}",
            path=path,
            details=details,
        )


class NotDirectoryError(FilesystemError):
    default_code = "FS-420"

    def __init__(self, path: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Is not a directory: {path}",
            path=path,
            details=details,
        )


class IOFailureError(FilesystemError):
    default_code = "FS-500"
    default_message = "I/O operation failed"


class DecodeFailureError(FilesystemError):
    default_code = "FS-422"
    default_message = "Could not decode file contents"


class InvalidArgumentError(FilesystemError):
    default_code = "FS-400"
    default_message = "Invalid argument"


ERROR_CODES = {
    "FS-000": "Filesystem Error - An unspecified filesystem operation failed",
    "FS-400": "Invalid Argument - The argument cannot be used for this operation",
    "FS-404": "Not Found - The path does not exist",
    "FS-409": "Already Exists - The path is already present",
    "FS-420": "Not A Directory - The path exists but is not a directory",
    "FS-422": "Decode Failure - The file contents could not be decoded",
    "FS-500": "I/O Failure - The operating system reported an error",
}
