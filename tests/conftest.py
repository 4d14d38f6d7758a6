"""Shared fixtures: a freshly seeded store with latency disabled."""

import base64
import io
import os

os.environ.setdefault("LATENCY_SCALE", "0")

import pytest
from PIL import Image

from app.core.latency import Latency
from app.database import DataStore


@pytest.fixture
def store():
    """Seeded store, admin logged in, no simulated latency."""
    return DataStore.seeded(session_role="admin", latency=Latency(scale=0))


@pytest.fixture
def anonymous_store():
    """Seeded store with nobody logged in."""
    return DataStore.seeded(session_role="", latency=Latency(scale=0))


def make_image_data_url(color=(200, 30, 30), size=(8, 8), fmt="PNG") -> str:
    """Encode a tiny solid-colour image as a data URL."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    mime = "image/png" if fmt == "PNG" else "image/jpeg"
    return f"data:{mime};base64,{base64.b64encode(buffer.getvalue()).decode()}"


@pytest.fixture
def png_data_url():
    return make_image_data_url()


@pytest.fixture
def make_image():
    """Factory for image data URLs of a given colour."""
    return make_image_data_url
