"""fskit - file, directory and image header utilities."""
from fskit.core.exceptions import (
    FilesystemError,
    NotFoundError,
    AlreadyExistsError,
    NotDirectoryError,
    IOFailureError,
    DecodeFailureError,
    InvalidArgumentError,
)
from fskit.core.models import FileContainer

__version__ = "0.1.0"

__all__ = [
    'FilesystemError',
    'NotFoundError',
    'AlreadyExistsError',
    'NotDirectoryError',
    'IOFailureError',
    'DecodeFailureError',
    'InvalidArgumentError',
    'FileContainer',
]
