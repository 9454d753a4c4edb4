"""Test Canvas construction, accessors and bounds policy."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from rgbcanvas import Canvas, OutOfBoundsError, Pixel


class TestConstruction:
    """Test blank canvases."""

    def test_blank_is_all_white(self, blank_canvas: Canvas) -> None:
        assert blank_canvas.width == 8
        assert blank_canvas.height == 6
        for y in range(blank_canvas.height):
            for x in range(blank_canvas.width):
                assert blank_canvas.get_pixel(x, y) == Pixel.white()

    def test_constructor_matches_blank(self) -> None:
        assert Canvas(3, 2) == Canvas.blank(3, 2)

    @pytest.mark.parametrize("size", [(0, 0), (0, 5), (5, 0)])
    def test_zero_sized_canvas_is_empty(self, size: tuple[int, int]) -> None:
        canvas = Canvas.blank(*size)
        assert (canvas.width, canvas.height) == size
        assert canvas.pixels() == []

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Canvas.blank(-1, 4)

    def test_from_image_converts_to_rgb(self) -> None:
        image = Image.new("L", (2, 2), color=0)
        canvas = Canvas.from_image(image)
        assert canvas.get_pixel(1, 1) == Pixel.black()

    def test_from_image_scales_16bit_greyscale(self) -> None:
        image = Image.fromarray(np.full((1, 2), 0x8000, dtype=np.uint16))
        canvas = Canvas.from_image(image)
        assert canvas.get_pixel(1, 0) == Pixel(128, 128, 128)

    def test_to_image_round_trip(self, noise_canvas: Canvas) -> None:
        image = noise_canvas.to_image()
        assert image.mode == "RGB"
        assert image.size == (noise_canvas.width, noise_canvas.height)
        assert image.getpixel((3, 2)) == noise_canvas.get_pixel(3, 2).as_tuple()
        assert Canvas.from_image(image) == noise_canvas


class TestPixelAccess:
    """Test get_pixel/put_pixel and their bounds policies."""

    def test_put_then_get(self, blank_canvas: Canvas) -> None:
        blank_canvas.put_pixel(7, 5, Pixel(1, 2, 3))
        assert blank_canvas.get_pixel(7, 5) == Pixel(1, 2, 3)

    def test_get_pixel_returns_copy(self, blank_canvas: Canvas) -> None:
        pixel = blank_canvas.get_pixel(0, 0)
        pixel.invert()
        assert blank_canvas.get_pixel(0, 0) == Pixel.white()

    @pytest.mark.parametrize("x, y", [(8, 0), (0, 6), (8, 6), (100, 100), (-1, 0), (0, -1)])
    def test_out_of_bounds_put_is_noop(self, blank_canvas: Canvas, x: int, y: int) -> None:
        before = blank_canvas.pixels()
        blank_canvas.put_pixel(x, y, Pixel.black())
        assert blank_canvas.pixels() == before

    @pytest.mark.parametrize("x, y", [(8, 0), (0, 6), (-1, 0), (0, -1)])
    def test_out_of_bounds_get_raises(self, blank_canvas: Canvas, x: int, y: int) -> None:
        with pytest.raises(OutOfBoundsError) as exc_info:
            blank_canvas.get_pixel(x, y)
        assert (exc_info.value.x, exc_info.value.y) == (x, y)
        assert (exc_info.value.width, exc_info.value.height) == (8, 6)

    def test_out_of_bounds_error_is_index_error(self, blank_canvas: Canvas) -> None:
        with pytest.raises(IndexError):
            blank_canvas.get_pixel(8, 6)


class TestPixelSequence:
    """Test row-major pixel snapshots."""

    def test_row_major_order(self) -> None:
        canvas = Canvas.blank(3, 2)
        canvas.put_pixel(2, 0, Pixel.red())
        canvas.put_pixel(0, 1, Pixel.black())

        pixels = canvas.pixels()

        assert len(pixels) == 6
        assert pixels[2] == Pixel.red()
        assert pixels[3] == Pixel.black()
        assert pixels.count(Pixel.white()) == 4

    def test_index_maps_to_coordinates(self, noise_canvas: Canvas) -> None:
        pixels = noise_canvas.pixels()
        width = noise_canvas.width
        for x, y in [(0, 0), (31, 0), (0, 23), (17, 9), (31, 23)]:
            assert pixels[y * width + x] == noise_canvas.get_pixel(x, y)

    def test_snapshot_is_detached(self, blank_canvas: Canvas) -> None:
        pixels = blank_canvas.pixels()
        blank_canvas.put_pixel(0, 0, Pixel.black())
        assert pixels[0] == Pixel.white()


class TestCopyAndEquality:
    """Test copy() and canvas comparison."""

    def test_copy_is_independent(self, noise_canvas: Canvas) -> None:
        clone = noise_canvas.copy()
        assert clone == noise_canvas

        clone.put_pixel(0, 0, Pixel(1, 1, 1))
        clone.put_pixel(1, 0, Pixel(2, 2, 2))

        assert clone != noise_canvas

    def test_different_sizes_are_unequal(self) -> None:
        assert Canvas.blank(2, 3) != Canvas.blank(3, 2)

    def test_not_equal_to_other_types(self, blank_canvas: Canvas) -> None:
        assert blank_canvas != "canvas"
