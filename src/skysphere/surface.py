from pathlib import Path

import torch as t
from loguru import logger
from PIL import Image

from .camera import check_dimensions
from .config import RenderSettings, default_settings
from .errors import BufferSizeError
from .render import CHANNELS, render_into
from .utils import frame_to_image, write_ppm

# Pillow formats that cannot store an alpha channel
NO_ALPHA_FORMATS = {"JPEG", "PCX", "EPS"}


class Surface:
    """In-process drawing surface that owns the pixel buffer and displays what it is given."""

    def __init__(self, width: int, height: int):
        width, height = check_dimensions(width, height)
        self.width = width
        self.height = height
        self._data = bytearray(width * height * CHANNELS)

    def image_data(self) -> bytearray:
        """A fresh copy of the displayed pixels for a renderer to draw into."""
        return bytearray(self._data)

    def put_image_data(self, data) -> None:
        data = bytes(data)
        if len(data) != len(self._data):
            raise BufferSizeError(f"image data holds {len(data)} bytes, expected {len(self._data)}")
        self._data[:] = data

    def frame(self) -> t.Tensor:
        pixels = t.frombuffer(bytearray(self._data), dtype=t.uint8)
        return pixels.reshape(self.height, self.width, CHANNELS)

    def to_image(self) -> Image.Image:
        return frame_to_image(self.frame())

    def save(self, path) -> Path:
        path = Path(path)
        if path.suffix.lower() == ".ppm":
            with path.open("w") as f:
                write_ppm(self.frame(), f)
        else:
            image = self.to_image()
            if Image.registered_extensions().get(path.suffix.lower()) in NO_ALPHA_FORMATS:
                image = image.convert("RGB")
            image.save(path)
        logger.info(f"Saved {self.width}x{self.height} image to {path}")
        return path


def render_to_surface(surface: Surface, settings: RenderSettings = default_settings) -> Surface:
    pixels = surface.image_data()
    render_into(pixels, surface.width, surface.height, settings=settings)
    surface.put_image_data(pixels)
    return surface
