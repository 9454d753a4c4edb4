"""RGB pixel value."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

WHITE: Final[tuple[int, int, int]] = (255, 255, 255)


def _check_u8(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value} (must be 0-255)")


@dataclass(slots=True)
class Pixel:
    """One 8-bit-per-channel RGB color.

    Compared by value. Canvas accessors hand out fresh instances, so
    mutating a Pixel never touches the canvas it came from.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_u8("r", self.r)
        _check_u8("g", self.g)
        _check_u8("b", self.b)

    @classmethod
    def black(cls) -> Pixel:
        return cls(0, 0, 0)

    @classmethod
    def red(cls) -> Pixel:
        return cls(255, 0, 0)

    @classmethod
    def white(cls) -> Pixel:
        return cls(*WHITE)

    @classmethod
    def from_tuple(cls, channels: Sequence[int]) -> Pixel:
        """Build from an (r, g, b[, ...]) sequence; extra channels are ignored."""
        if len(channels) < 3:
            raise ValueError(f"Expected at least 3 channels, got {len(channels)}")
        return cls(int(channels[0]), int(channels[1]), int(channels[2]))

    def as_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def invert(self) -> None:
        """Invert in place: every channel becomes 255 - channel."""
        self.r = 255 - self.r
        self.g = 255 - self.g
        self.b = 255 - self.b
