import torch as t

from skysphere.ray import Ray
from skysphere.vec3 import vec3


def make_ray(origin, direction) -> Ray:
    return Ray(vec3(*origin), vec3(*direction))


def allclose(a: t.Tensor, expected, atol: float = 1e-12) -> bool:
    return t.allclose(a, t.as_tensor(expected, dtype=a.dtype, device=a.device), atol=atol)
