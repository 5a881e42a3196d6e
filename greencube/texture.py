"""Loading images as textures and sampling them with wrapping and filtering."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Union

from PIL import Image


class TextureError(Exception):
    """Raised when an image cannot be loaded as a texture."""


@dataclass(frozen=True)
class Texture:
    """Pixel data stored row by row, RGB or RGBA, eight bits per channel."""

    width: int
    height: int
    channels: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.channels not in (3, 4):
            raise ValueError(f"textures have 3 or 4 channels, not {self.channels}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        expected = self.width * self.height * self.channels
        if len(self.pixels) != expected:
            raise ValueError(f"expected {expected} bytes of pixel data, got {len(self.pixels)}")

    def _texel(self, i: int, j: int) -> bytes:
        i %= self.width
        j %= self.height
        start = (j * self.width + i) * self.channels
        return self.pixels[start : start + self.channels]

    def sample(self, u: float, v: float) -> tuple[float, ...]:
        """Bilinearly filtered colour at (u, v), repeating outside [0, 1]."""
        x = u * self.width - 0.5
        y = v * self.height - 0.5
        x0, y0 = math.floor(x), math.floor(y)
        fx, fy = x - x0, y - y0
        c00 = self._texel(x0, y0)
        c10 = self._texel(x0 + 1, y0)
        c01 = self._texel(x0, y0 + 1)
        c11 = self._texel(x0 + 1, y0 + 1)
        return tuple(
            (
                (a * (1 - fx) + b * fx) * (1 - fy) + (c * (1 - fx) + d * fx) * fy
            ) / 255.0
            for a, b, c, d in zip(c00, c10, c01, c11)
        )


def load_texture(path: Union[str, os.PathLike]) -> Texture:
    """Read an image file; images with transparency become RGBA, others RGB."""
    try:
        with Image.open(path) as image:
            image.load()
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            converted = image.convert("RGBA" if has_alpha else "RGB")
    except OSError as exc:
        raise TextureError(f"Failed to load texture: {os.fspath(path)}") from exc
    return Texture(
        converted.width,
        converted.height,
        len(converted.getbands()),
        converted.tobytes(),
    )