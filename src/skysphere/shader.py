import torch as t
from jaxtyping import Float, jaxtyped
from typeguard import typechecked as typechecker

from .hittable import Hittable
from .ray import Ray
from .vec3 import add, normalize, scale, vec3

WHITE = (1.0, 1.0, 1.0)
SKY_BLUE = (0.5, 0.7, 1.0)


@jaxtyped(typechecker=typechecker)
def background(ray: Ray) -> Float[t.Tensor, "... 3"]:
    """Vertical gradient from white at the horizon to sky blue overhead."""
    unit_direction = normalize(ray.direction)
    blend = 0.5 * (unit_direction[..., 1] + 1.0)
    return add(scale(vec3(*WHITE), 1.0 - blend), scale(vec3(*SKY_BLUE), blend))


@jaxtyped(typechecker=typechecker)
def normal_color(normal: Float[t.Tensor, "... 3"]) -> Float[t.Tensor, "... 3"]:
    # Map each component from [-1, 1] to [0, 1]
    return 0.5 * (normal + 1.0)


@jaxtyped(typechecker=typechecker)
def shade(ray: Ray, world: Hittable) -> Float[t.Tensor, "... 3"]:
    """Color of each ray: the hit normal where t > 0, the sky gradient everywhere else."""
    t_hit = world.hit(ray)
    origin, direction = t.broadcast_tensors(ray.origin, ray.direction)
    batch_shape = t_hit.shape

    colors = background(Ray(origin, direction)).reshape(-1, 3)
    hit_mask = (t_hit > 0).reshape(-1)
    if hit_mask.any():
        hit_rays = Ray(origin.reshape(-1, 3)[hit_mask], direction.reshape(-1, 3)[hit_mask])
        hit_points = hit_rays.point_at(t_hit.reshape(-1)[hit_mask])
        colors[hit_mask] = normal_color(world.normal_at(hit_points))

    return colors.reshape(*batch_shape, 3)
