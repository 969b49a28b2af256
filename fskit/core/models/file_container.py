import os

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from fskit.core.exceptions import DecodeFailureError
from fskit.infrastructure.filesystem.file_reader import read_bytes_from_file
from fskit.infrastructure.filesystem.file_writer import write_bytes_to_fs
from fskit.infrastructure.filesystem.path_operations import from_slash


class FileContainer(BaseModel):
    """A byte payload bound to a directory and a filename.

    ``data`` is the single owned buffer; ``text`` is a UTF-8 view over it.
    Nothing is validated against the filesystem until ``read()`` or
    ``write()`` is called.
    """

    model_config = ConfigDict(validate_assignment=True)

    path: str = Field(default="", description="Directory holding the file")
    filename: str = Field(default="", description="Name of the file inside path")
    data: bytes = Field(default=b"", description="File payload", repr=False)

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, v):
        if isinstance(v, os.PathLike):
            v = os.fspath(v)
        if isinstance(v, str):
            return from_slash(v)
        return v

    @field_validator("data", mode="before")
    @classmethod
    def copy_buffer(cls, v):
        if isinstance(v, (bytearray, memoryview)):
            return bytes(v)
        return v

    @property
    def text(self) -> str:
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailureError(
                f"Container data is not valid UTF-8 (byte {e.start})",
                path=self.full_path,
            ) from e

    @text.setter
    def text(self, value: str) -> None:
        self.data = value.encode("utf-8")

    @computed_field
    @property
    def full_path(self) -> str:
        return os.path.join(self.path, self.filename)

    def write(self) -> None:
        """Persist data to path/filename, creating path if missing."""
        write_bytes_to_fs(self.path, self.filename, self.data)

    def read(self) -> None:
        """Replace data with the content of path/filename."""
        directory = self.path
        if directory and not directory.endswith(("/", os.sep)):
            directory += os.sep
        self.data = read_bytes_from_file(directory + self.filename)
