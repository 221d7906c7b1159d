"""Shared fixtures for the bwstamp test suite."""

from pathlib import Path

import pytest
from PIL import Image

from bwstamp.models.overlay_model import OverlayStyle
from bwstamp.services.overlay_service import OverlayService


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests - full stdin to output file runs")


@pytest.fixture
def color_image_path(tmp_path) -> Path:
    """100x100 solid red PNG."""
    path = tmp_path / "photo.png"
    Image.new("RGB", (100, 100), (255, 0, 0)).save(path)
    return path


@pytest.fixture
def gradient_image_path(tmp_path) -> Path:
    """64x48 RGBA image with per-pixel varying colors."""
    path = tmp_path / "gradient.png"
    image = Image.new("RGBA", (64, 48))
    image.putdata([(x * 4, y * 5, (x + y) % 256, 128) for y in range(48) for x in range(64)])
    image.save(path)
    return path


@pytest.fixture
def not_an_image_path(tmp_path) -> Path:
    path = tmp_path / "notes.png"
    path.write_text("definitely not a PNG")
    return path


@pytest.fixture
def overlay_service() -> OverlayService:
    return OverlayService(OverlayStyle())
