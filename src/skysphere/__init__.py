from .camera import Camera
from .errors import BufferSizeError, DegenerateVectorError, InvalidDimensionsError, RenderError
from .ray import Ray
from .render import default_world, render, render_into
from .shader import shade
from .sphere import Sphere
from .surface import Surface, render_to_surface
from .vec3 import vec3

__all__ = [
    "BufferSizeError",
    "Camera",
    "DegenerateVectorError",
    "InvalidDimensionsError",
    "Ray",
    "RenderError",
    "Sphere",
    "Surface",
    "default_world",
    "render",
    "render_into",
    "render_to_surface",
    "shade",
    "vec3",
]
