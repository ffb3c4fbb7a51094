import operator

import torch as t
from jaxtyping import Float, Int, jaxtyped
from typeguard import typechecked as typechecker

from .config import device, dtype
from .errors import InvalidDimensionsError
from .ray import Ray
from .vec3 import add, scale, sub, vec3

# Viewport of the pinhole camera, fixed for the whole render
LOWER_LEFT_CORNER = (-2.0, -1.0, -1.0)
HORIZONTAL = (4.0, 0.0, 0.0)
VERTICAL = (0.0, 2.0, 0.0)
ORIGIN = (0.0, 0.0, 0.0)


def check_dimensions(width: int, height: int) -> tuple[int, int]:
    """Reject frames where u = i / (width - 1) or v = j / (height - 1) is undefined.

    Integer-like sizes (numpy integers, for instance) are accepted and returned as plain ints.
    """
    try:
        sizes = (operator.index(width), operator.index(height))
    except TypeError as e:
        raise InvalidDimensionsError(width, height) from e
    if min(sizes) < 2:
        raise InvalidDimensionsError(width, height)
    return sizes


class Camera:
    def __init__(
        self,
        lower_left_corner: Float[t.Tensor, "3"] | None = None,
        horizontal: Float[t.Tensor, "3"] | None = None,
        vertical: Float[t.Tensor, "3"] | None = None,
        origin: Float[t.Tensor, "3"] | None = None,
    ):
        self.lower_left_corner = vec3(*LOWER_LEFT_CORNER) if lower_left_corner is None else lower_left_corner
        self.horizontal = vec3(*HORIZONTAL) if horizontal is None else horizontal
        self.vertical = vec3(*VERTICAL) if vertical is None else vertical
        self.origin = vec3(*ORIGIN) if origin is None else origin

    @jaxtyped(typechecker=typechecker)
    def get_ray(
        self,
        i: int | Int[t.Tensor, "..."],
        j: int | Int[t.Tensor, "..."],
        width: int,
        height: int,
    ) -> Ray:
        """Ray through pixel column i and world row j (j = 0 is the bottom row).

        The direction is left unnormalized, so its length varies across the frame.
        """
        check_dimensions(width, height)
        i = t.as_tensor(i, device=device).to(dtype)
        j = t.as_tensor(j, device=device).to(dtype)
        u = i / (width - 1)
        v = j / (height - 1)

        direction = add(add(self.lower_left_corner, scale(self.horizontal, u)), scale(self.vertical, v))
        direction = sub(direction, self.origin)
        return Ray(self.origin, direction)

    @jaxtyped(typechecker=typechecker)
    def rays_for_rows(self, rows: Int[t.Tensor, "rows"], width: int, height: int) -> Ray:
        """Rays for whole image rows, shaped (rows, width). Image row 0 is the top of the frame."""
        # Image rows run top to bottom, world rows bottom to top
        j_indices = (height - 1) - rows
        i_indices = t.arange(width, device=device)
        j_grid, i_grid = t.meshgrid(j_indices, i_indices, indexing="ij")
        return self.get_ray(i_grid, j_grid, width, height)
