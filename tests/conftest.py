"""Pytest configuration and fixtures"""

from pathlib import Path
from typing import Dict

import pytest
from PIL import Image

from fskit.core.config import settings

# Pixel sizes of the generated image fixtures
PNG_SIZE = (80, 164)
JPEG_SIZE = (64, 48)
GIF_SIZE = (32, 16)


@pytest.fixture
def test_resources(tmp_path: Path) -> Path:
    """Create the testResources tree.

    testResources/
        images/
            colour_tutorial.png
            photo.jpg
            anim.gif
            broken.png        (not an image)
            readme.txt
            thumbs/           (directory)
            raw.png/          (directory with an image-like name)
        text/
            hello.txt
            empty.txt
            latin1.txt        (not valid UTF-8)
        nested/
            a/b/deep.txt
            top.txt
    """
    root = tmp_path / "testResources"

    images = root / "images"
    images.mkdir(parents=True)
    Image.new("RGBA", PNG_SIZE, (255, 0, 0, 128)).save(images / "colour_tutorial.png")
    Image.new("RGB", JPEG_SIZE, (0, 128, 255)).save(images / "photo.jpg", format="JPEG")
    Image.new("P", GIF_SIZE).save(images / "anim.gif", format="GIF")
    (images / "broken.png").write_bytes(b"definitely not a png header")
    (images / "readme.txt").write_text("image fixtures")
    (images / "thumbs").mkdir()
    (images / "raw.png").mkdir()

    text = root / "text"
    text.mkdir()
    (text / "hello.txt").write_text("hello world", encoding="utf-8")
    (text / "empty.txt").write_bytes(b"")
    (text / "latin1.txt").write_bytes("café".encode("latin-1"))

    nested = root / "nested"
    (nested / "a" / "b").mkdir(parents=True)
    (nested / "a" / "b" / "deep.txt").write_text("deep")
    (nested / "top.txt").write_text("top")

    return root


@pytest.fixture
def image_sizes() -> Dict[str, tuple]:
    """Expected dimensions of the generated images"""
    return {
        "colour_tutorial.png": PNG_SIZE,
        "photo.jpg": JPEG_SIZE,
        "anim.gif": GIF_SIZE,
    }


@pytest.fixture
def small_copy_chunks(monkeypatch):
    """Force copy_file through several chunks"""
    monkeypatch.setattr(settings, "copy_chunk_size", 7)
    return 7
