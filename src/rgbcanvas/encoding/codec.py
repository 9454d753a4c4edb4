"""Image codec collaborators backed by Pillow."""

from __future__ import annotations

import logging
import struct
from io import BytesIO
from os import PathLike
from typing import Protocol, runtime_checkable

import numpy as np
from PIL import Image

_LOGGER = logging.getLogger(__name__)

# Everything Pillow raises for malformed, truncated or unsupported input
_DECODE_ERRORS = (
    OSError,
    ValueError,
    SyntaxError,
    EOFError,
    struct.error,
    Image.DecompressionBombError,
)
_ENCODE_ERRORS = (OSError, ValueError, SystemError)

# Greyscale modes wider than 8 bits; Pillow clips these on convert("RGB")
_WIDE_GREY_MODES = frozenset({"I", "I;16", "I;16L", "I;16B", "I;16N"})


@runtime_checkable
class ImageCodec(Protocol):
    """Byte-buffer codec used by Canvas for decode and encode."""

    def decode(self, data: bytes) -> np.ndarray | None:
        """Return an (H, W, 3) uint8 array, or None if the data can't be decoded."""
        ...

    def encode(self, raw: bytes, width: int, height: int) -> bytes | None:
        """Encode interleaved row-major RGB bytes, or None on failure."""
        ...


def to_rgb8(image: Image.Image) -> Image.Image:
    """Convert to 8-bit RGB, scaling wide greyscale down rather than clipping it."""
    if image.mode not in _WIDE_GREY_MODES:
        return image.convert("RGB")

    wide = np.clip(np.array(image, dtype=np.int64), 0, 0xFFFF)
    # Round to nearest, 0xFFFF -> 0xFF
    narrow = ((wide + 128) // 257).astype(np.uint8)
    return Image.fromarray(narrow).convert("RGB")


class PillowCodec:
    """PNG encoder and general-purpose decoder using Pillow.

    Decoding accepts any format Pillow can open. Encoding always writes
    8-bit RGB PNG.
    """

    def __init__(self, compress_level: int = 6):
        if not 0 <= compress_level <= 9:
            raise ValueError(
                f"compress_level out of range: {compress_level} (must be 0-9)"
            )
        self.compress_level = compress_level

    def decode(self, data: bytes) -> np.ndarray | None:
        try:
            with Image.open(BytesIO(data)) as image:
                image.load()
                rgb = to_rgb8(image)
        except _DECODE_ERRORS as err:
            _LOGGER.debug("Failed to decode %d bytes: %s", len(data), err)
            return None

        return np.array(rgb, dtype=np.uint8).reshape(rgb.height, rgb.width, 3)

    def encode(self, raw: bytes, width: int, height: int) -> bytes | None:
        buffer = BytesIO()
        try:
            image = Image.frombytes("RGB", (width, height), raw)
            image.save(buffer, format="PNG", compress_level=self.compress_level)
        except _ENCODE_ERRORS as err:
            _LOGGER.debug("Failed to encode %dx%d PNG: %s", width, height, err)
            return None

        return buffer.getvalue()


def save_image(
    raw: bytes,
    width: int,
    height: int,
    path: str | PathLike[str],
) -> None:
    """Write interleaved RGB bytes to path, format chosen by file extension.

    Raises:
        ValueError: If the extension maps to no known format
        OSError: If the file can't be written
    """
    Image.frombytes("RGB", (width, height), raw).save(path)
