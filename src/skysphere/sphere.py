from dataclasses import dataclass

import torch as t
from jaxtyping import Float, jaxtyped
from typeguard import typechecked as typechecker

from .config import device, dtype
from .errors import DegenerateVectorError
from .hittable import NO_HIT, Hittable
from .ray import Ray
from .vec3 import dot, normalize, sub


@jaxtyped(typechecker=typechecker)
@dataclass(frozen=True)
class Sphere(Hittable):
    center: Float[t.Tensor, "3"]
    radius: float

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"sphere radius must be positive, got {self.radius}")
        # Frozen dataclass: bypass the setter to move the center once
        object.__setattr__(self, "center", self.center.to(device=device, dtype=dtype))

    @jaxtyped(typechecker=typechecker)
    def hit(self, ray: Ray) -> Float[t.Tensor, "..."]:
        direction = ray.direction
        oc = sub(ray.origin, self.center)

        # Solve quadratic equation
        a = dot(direction, direction)
        if (a == 0).any():
            raise DegenerateVectorError("ray direction has zero length")
        b = 2.0 * dot(oc, direction)
        c = dot(oc, oc) - self.radius * self.radius

        discriminant = b * b - 4 * a * c
        a, b, discriminant = t.broadcast_tensors(a, b, discriminant)

        # Near root only; the far root is never needed for primary rays
        sqrt_discriminant = t.sqrt(discriminant.clamp(min=0.0))
        t_near = (-b - sqrt_discriminant) / (2.0 * a)

        return t.where(discriminant < 0, t.full_like(t_near, NO_HIT), t_near)

    @jaxtyped(typechecker=typechecker)
    def normal_at(self, point: Float[t.Tensor, "... 3"]) -> Float[t.Tensor, "... 3"]:
        return normalize(sub(point, self.center))
