"""rgbcanvas: in-memory RGB canvas.

  Blank or decoded canvases, bounds-safe pixel writes, filled circles,
  compositing, color-keyed recoloring and PNG encoding through Pillow.
  """

from .canvas import DEFAULT_CODEC, Canvas
from .encoding import ImageCodec, PillowCodec, save_image, to_rgb8
from .exceptions import CodecUnavailableError, OutOfBoundsError, RgbCanvasError
from .models.pixel import WHITE, Pixel

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Canvas",
    "Pixel",
    # Codec
    "ImageCodec",
    "PillowCodec",
    "DEFAULT_CODEC",
    "save_image",
    "to_rgb8",
    # Exceptions
    "RgbCanvasError",
    "OutOfBoundsError",
    "CodecUnavailableError",
    # Constants
    "WHITE",
]
