"""Header-only image introspection.

Pillow's ``Image.open`` identifies the format from the leading magic bytes and
parses only the container header; pixel data is never decoded here.
"""
import base64
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from PIL import Image, UnidentifiedImageError

from fskit.core.config import settings
from fskit.core.exceptions import DecodeFailureError, FilesystemError
from fskit.infrastructure.filesystem.file_reader import read_bytes_from_file
from fskit.infrastructure.filesystem.path_operations import PathLike, from_slash
from fskit.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImageConfig:
    """Image metadata read from the file header."""
    format: str
    width: int
    height: int
    mode: str


class EncodedImage(NamedTuple):
    data: str
    width: int
    height: int


def get_image_config(path: PathLike) -> ImageConfig:
    """Decode the header of a PNG, JPEG or GIF file.

    Raises:
        NotFoundError: if there is no file at path.
        DecodeFailureError: if the header is not one of the accepted formats.
    """
    path = from_slash(path)
    try:
        with Image.open(path, formats=settings.image_formats) as img:
            config = ImageConfig(
                format=img.format,
                width=img.width,
                height=img.height,
                mode=img.mode,
            )
    except UnidentifiedImageError as e:
        logger.error("image_decode_failed", path=path, error=str(e))
        raise DecodeFailureError(
            f"Unrecognised image header: {path}", path=path
        ) from e
    except OSError as e:
        logger.error("image_open_failed", path=path, error=str(e))
        raise FilesystemError.from_os_error(e, path) from e

    return config


def get_image_dimensions(path: PathLike) -> Tuple[int, int]:
    config = get_image_config(path)
    return config.width, config.height


def get_base64_from_png_file(path: PathLike) -> EncodedImage:
    """Base64-encode a whole image file and report its dimensions."""
    raw = read_bytes_from_file(path)
    width, height = get_image_dimensions(path)
    return EncodedImage(
        data=base64.b64encode(raw).decode("ascii"),
        width=width,
        height=height,
    )
