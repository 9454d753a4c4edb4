"""Shared fixtures for rgbcanvas tests."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from rgbcanvas import Canvas


@pytest.fixture
def blank_canvas() -> Canvas:
    """8x6 white canvas."""
    return Canvas.blank(8, 6)


@pytest.fixture
def noise_canvas() -> Canvas:
    """32x24 canvas of seeded random colors."""
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(24, 32, 3), dtype=np.uint8)
    return Canvas.from_image(Image.fromarray(pixels))
