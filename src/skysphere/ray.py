from dataclasses import dataclass

import torch as t
from jaxtyping import Float, jaxtyped
from typeguard import typechecked as typechecker

from .vec3 import Scalar, Vec3, add, scale


@jaxtyped(typechecker=typechecker)
@dataclass(frozen=True)
class Ray:
    """Origin and direction of one ray, or of a batch of rays sharing the leading dims.

    The direction is kept as given; it is not normalized here.
    """

    origin: Float[t.Tensor, "... 3"]
    direction: Float[t.Tensor, "... 3"]

    @jaxtyped(typechecker=typechecker)
    def point_at(self, t_param: float | Scalar) -> Vec3:
        return add(self.origin, scale(self.direction, t_param))
