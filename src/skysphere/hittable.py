from abc import ABC, abstractmethod

import torch as t
from jaxtyping import Float, jaxtyped
from typeguard import typechecked as typechecker

from .ray import Ray

# Returned by hit() when the ray's line never meets the surface
NO_HIT: float = -1.0


class Hittable(ABC):
    """Abstract class for surfaces a ray can be tested against."""

    @abstractmethod
    @jaxtyped(typechecker=typechecker)
    def hit(self, ray: Ray) -> Float[t.Tensor, "..."]:
        """Parametric distance of the nearest root along each ray, or NO_HIT.

        The root may be zero or negative when the surface lies behind the ray
        origin; callers accept a hit only where t > 0.
        """

    @abstractmethod
    @jaxtyped(typechecker=typechecker)
    def normal_at(self, point: Float[t.Tensor, "... 3"]) -> Float[t.Tensor, "... 3"]:
        """Outward unit normal at a point on the surface."""
