"""Mutable RGB pixel canvas."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from os import PathLike
from typing import Final

import numpy as np
from PIL import Image

from .encoding import ImageCodec, PillowCodec, save_image, to_rgb8
from .exceptions import CodecUnavailableError, OutOfBoundsError
from .models.pixel import WHITE, Pixel

_LOGGER = logging.getLogger(__name__)

DEFAULT_CODEC: Final[PillowCodec] = PillowCodec()


def _as_channels(color: Pixel | Sequence[int]) -> tuple[int, int, int]:
    if isinstance(color, Pixel):
        return color.as_tuple()
    return Pixel.from_tuple(color).as_tuple()


class Canvas:
    """Fixed-size RGB pixel grid.

    Pixels are stored row-major as a (height, width, 3) uint8 array, the
    same layout Pillow uses for raw RGB data.

    Reads and writes follow different bounds policies: ``put_pixel`` (and
    everything built on it) silently drops coordinates outside the canvas,
    while ``get_pixel`` raises ``OutOfBoundsError``.

    Usage:
        canvas = Canvas.blank(64, 64)
        canvas.fill_circle(32, 32, 10, Pixel.red())
        png = canvas.encode()

        decoded = Canvas.decode(png)
        if decoded is None:
            ...  # not an image
    """

    def __init__(
            self,
            width: int,
            height: int,
            *,
            codec: ImageCodec | None = DEFAULT_CODEC,
    ):
        """Create a white canvas.

        Args:
            width: Width in pixels (0 gives an empty canvas)
            height: Height in pixels (0 gives an empty canvas)
            codec: Codec used by encode(); None disables encoding
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        self._pixels = np.full((height, width, 3), WHITE, dtype=np.uint8)
        self._codec = codec

    @classmethod
    def blank(
            cls,
            width: int,
            height: int,
            *,
            codec: ImageCodec | None = DEFAULT_CODEC,
    ) -> Canvas:
        """Create a width x height canvas with every pixel white."""
        return cls(width, height, codec=codec)

    @classmethod
    def _from_array(cls, pixels: np.ndarray, codec: ImageCodec | None) -> Canvas:
        canvas = cls.__new__(cls)
        canvas._pixels = pixels
        canvas._codec = codec
        return canvas

    @classmethod
    def decode(
            cls,
            data: bytes,
            *,
            codec: ImageCodec | None = DEFAULT_CODEC,
    ) -> Canvas | None:
        """Decode an encoded image (PNG or anything the codec reads).

        Alpha and any other extra channels are dropped.

        Returns:
            The decoded canvas, or None if the data could not be decoded

        Raises:
            CodecUnavailableError: If codec is None
        """
        if codec is None:
            raise CodecUnavailableError("Cannot decode without a codec")

        pixels = codec.decode(data)
        if pixels is None:
            return None

        return cls._from_array(
            np.ascontiguousarray(pixels[:, :, :3], dtype=np.uint8), codec
        )

    @classmethod
    def from_image(
            cls,
            image: Image.Image,
            *,
            codec: ImageCodec | None = DEFAULT_CODEC,
    ) -> Canvas:
        """Create a canvas from a PIL image, converting it to RGB."""
        rgb = image if image.mode == "RGB" else to_rgb8(image)
        pixels = np.array(rgb, dtype=np.uint8).reshape(rgb.height, rgb.width, 3)
        return cls._from_array(pixels, codec)

    def to_image(self) -> Image.Image:
        """Return the canvas as a new PIL RGB image."""
        return Image.frombytes("RGB", (self.width, self.height), self._pixels.tobytes())

    def copy(self) -> Canvas:
        """Return an independent copy using the same codec."""
        return self._from_array(self._pixels.copy(), self._codec)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def can_encode(self) -> bool:
        """True if a codec is attached and encode() is usable."""
        return self._codec is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return a copy of the pixel at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) lies outside the canvas
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        r, g, b = self._pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def put_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Set the pixel at (x, y); does nothing if (x, y) is out of bounds."""
        if self.in_bounds(x, y):
            self._pixels[y, x] = pixel.as_tuple()

    def pixels(self) -> list[Pixel]:
        """Snapshot of every pixel, left to right then top to bottom.

        The pixel at (x, y) is at index ``y * width + x``.
        """
        return [
            Pixel(int(r), int(g), int(b))
            for r, g, b in self._pixels.reshape(-1, 3).tolist()
        ]

    def recolor_by_key(self, color: Pixel | Sequence[int]) -> None:
        """Replace every "black" pixel with color.

        A pixel counts as black when its red channel is 0; green and blue
        are not looked at, so (0, 99, 5) is recolored too.
        """
        mask = self._pixels[:, :, 0] == 0
        self._pixels[mask] = _as_channels(color)

    def clear(self) -> None:
        """Reset every pixel to white."""
        self._pixels[:] = WHITE

    def fill_circle(self, cx: int, cy: int, radius: int, pixel: Pixel) -> None:
        """Draw a filled disk centred on (cx, cy).

        Pixels are scanned over the half-open box [c - radius, c + radius)
        on each axis, clipped to the canvas, and set when the Euclidean
        distance to the centre, truncated to an int, is <= radius. The
        right and bottom edge of the disk are therefore one pixel short.
        """
        if radius < 0:
            raise ValueError(f"radius must be non-negative, got {radius}")

        # Radius 0 still covers the centre pixel
        reach = max(radius, 1)
        x0, x1 = max(cx - radius, 0), min(cx + reach, self.width)
        y0, y1 = max(cy - radius, 0), min(cy + reach, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        dy = cy - np.arange(y0, y1).reshape(-1, 1)
        dx = cx - np.arange(x0, x1).reshape(1, -1)
        # Distance in float32; boundary pixels at large radii depend on it
        distance = np.sqrt((dy * dy + dx * dx).astype(np.float32)).astype(np.int64)

        region = self._pixels[y0:y1, x0:x1]
        region[distance <= radius] = pixel.as_tuple()

    def composite(self, x: int, y: int, source: Canvas) -> None:
        """Copy source onto this canvas with its top-left corner at (x, y).

        Whatever falls outside this canvas is clipped.
        """
        x0, x1 = max(x, 0), min(x + source.width, self.width)
        y0, y1 = max(y, 0), min(y + source.height, self.height)
        if x0 >= x1 or y0 >= y1:
            return

        self._pixels[y0:y1, x0:x1] = source._pixels[y0 - y:y1 - y, x0 - x:x1 - x]

    def encode(self) -> bytes | None:
        """Encode as 8-bit RGB PNG.

        Returns:
            PNG bytes, or None if the codec failed

        Raises:
            CodecUnavailableError: If the canvas has no codec
        """
        if self._codec is None:
            raise CodecUnavailableError("Canvas was created without a codec")
        return self._codec.encode(self._pixels.tobytes(), self.width, self.height)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the canvas to path, picking the format from the extension.

        Errors from the image library (unknown extension, I/O failure)
        propagate unchanged.
        """
        save_image(self._pixels.tobytes(), self.width, self.height, path)
        _LOGGER.debug("Saved %dx%d canvas to %s", self.width, self.height, path)
