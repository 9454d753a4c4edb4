"""Image codec collaborators."""

from .codec import ImageCodec, PillowCodec, save_image, to_rgb8

__all__ = [
    "ImageCodec",
    "PillowCodec",
    "save_image",
    "to_rgb8",
]
