"""
Vector math on torch tensors whose last dimension holds (x, y, z).

A single vector has shape (3,), a batch has shape (..., 3); every function
broadcasts so both go through the same code. Nothing here works in place:
each call returns a new tensor, so vectors behave as immutable values.
"""
import torch as t
from jaxtyping import Float, jaxtyped
from typeguard import typechecked as typechecker

from .config import device, dtype
from .errors import DegenerateVectorError

Vec3 = Float[t.Tensor, "... 3"]
Scalar = Float[t.Tensor, "..."]


@jaxtyped(typechecker=typechecker)
def vec3(x: float, y: float, z: float) -> Float[t.Tensor, "3"]:
    """Handy shorthand to make a single vector on the configured device."""
    return t.tensor([x, y, z], dtype=dtype, device=device)


@jaxtyped(typechecker=typechecker)
def add(a: Vec3, b: Vec3) -> Vec3:
    return a + b


@jaxtyped(typechecker=typechecker)
def sub(a: Vec3, b: Vec3) -> Vec3:
    return a - b


@jaxtyped(typechecker=typechecker)
def scale(v: Vec3, k: float | Scalar) -> Vec3:
    if isinstance(k, t.Tensor):
        k = k.unsqueeze(-1)
    return v * k


@jaxtyped(typechecker=typechecker)
def divide(v: Vec3, k: float | Scalar) -> Vec3:
    if isinstance(k, t.Tensor):
        if (k == 0).any():
            raise DegenerateVectorError("division of a vector by zero")
        k = k.unsqueeze(-1)
    elif k == 0:
        raise DegenerateVectorError("division of a vector by zero")
    return v / k


@jaxtyped(typechecker=typechecker)
def dot(a: Vec3, b: Vec3) -> Scalar:
    # Summed left to right, matching scalar double arithmetic bit for bit
    return a[..., 0] * b[..., 0] + a[..., 1] * b[..., 1] + a[..., 2] * b[..., 2]


@jaxtyped(typechecker=typechecker)
def length(v: Vec3) -> Scalar:
    return t.sqrt(dot(v, v))


@jaxtyped(typechecker=typechecker)
def normalize(v: Vec3) -> Vec3:
    """Return a unit vector in the direction of v.

    Raises DegenerateVectorError when any vector in the batch has length zero.
    """
    norm = length(v)
    if (norm == 0).any():
        raise DegenerateVectorError("cannot normalize a zero-length vector")
    return divide(v, norm)
