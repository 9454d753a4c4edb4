"""Exceptions raised by rgbcanvas."""

from __future__ import annotations


class RgbCanvasError(Exception):
    """Base exception for all rgbcanvas errors."""


class OutOfBoundsError(RgbCanvasError, IndexError):
    """Pixel read outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            f"Pixel ({x}, {y}) out of bounds for {width}x{height} canvas"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class CodecUnavailableError(RgbCanvasError):
    """Canvas has no codec attached for encoding."""
