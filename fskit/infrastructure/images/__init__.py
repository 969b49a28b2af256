"""Image introspection module."""
from .image_reader import (
    ImageConfig,
    EncodedImage,
    get_image_config,
    get_image_dimensions,
    get_base64_from_png_file,
)

__all__ = [
    'ImageConfig',
    'EncodedImage',
    'get_image_config',
    'get_image_dimensions',
    'get_base64_from_png_file',
]
