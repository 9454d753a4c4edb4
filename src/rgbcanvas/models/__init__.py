"""Data models for rgbcanvas."""

from .pixel import WHITE, Pixel

__all__ = [
    "Pixel",
    "WHITE",
]
