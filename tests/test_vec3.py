import math

import pytest
import torch as t

from skysphere.errors import DegenerateVectorError, RenderError
from skysphere.vec3 import add, divide, dot, length, normalize, scale, sub, vec3

from .helpers import allclose


# --- Arithmetic ---

def test_add_and_sub():
    a = vec3(1.0, 2.0, 3.0)
    b = vec3(0.5, -1.0, 4.0)
    assert allclose(add(a, b), [1.5, 1.0, 7.0])
    assert allclose(sub(a, b), [0.5, 3.0, -1.0])


def test_scale_and_divide_by_float():
    v = vec3(1.0, -2.0, 4.0)
    assert allclose(scale(v, 2.5), [2.5, -5.0, 10.0])
    assert allclose(divide(v, 4.0), [0.25, -0.5, 1.0])


def test_scale_broadcasts_per_vector_factor():
    """A tensor factor scales each vector of a batch by its own amount."""
    v = vec3(1.0, 1.0, 1.0).expand(3, 3)
    factors = t.tensor([0.0, 1.0, 2.0], dtype=v.dtype, device=v.device)
    assert allclose(scale(v, factors), [[0.0] * 3, [1.0] * 3, [2.0] * 3])


def test_operations_return_new_values():
    a = vec3(1.0, 2.0, 3.0)
    before = a.clone()
    result = scale(add(a, a), 3.0)
    assert result is not a
    assert t.equal(a, before)


# --- Dot, length, normalize ---

def test_dot_and_length():
    a = vec3(1.0, 2.0, 3.0)
    b = vec3(4.0, -5.0, 6.0)
    assert float(dot(a, b)) == pytest.approx(12.0)
    assert float(length(vec3(2.0, 3.0, 6.0))) == pytest.approx(7.0)


def test_normalize_three_four_zero():
    assert allclose(normalize(vec3(3.0, 4.0, 0.0)), [0.6, 0.8, 0.0])


def test_normalize_batch_gives_unit_lengths():
    v = t.stack([vec3(1.0, 2.0, 2.0), vec3(0.0, -3.0, 0.0), vec3(1e-3, 0.0, 1e-3)])
    lengths = length(normalize(v))
    assert allclose(lengths, [1.0, 1.0, 1.0])


# --- Degenerate input ---

def test_normalize_zero_vector_fails_fast():
    with pytest.raises(DegenerateVectorError):
        normalize(vec3(0.0, 0.0, 0.0))


def test_normalize_batch_with_one_zero_vector_fails():
    v = t.stack([vec3(1.0, 0.0, 0.0), vec3(0.0, 0.0, 0.0)])
    with pytest.raises(DegenerateVectorError):
        normalize(v)


def test_divide_by_zero_is_a_zero_division_and_render_error():
    with pytest.raises(ZeroDivisionError):
        divide(vec3(1.0, 2.0, 3.0), 0.0)
    with pytest.raises(RenderError):
        divide(vec3(1.0, 2.0, 3.0), t.zeros_like(vec3(0.0, 0.0, 0.0))[0])


def test_tiny_vectors_still_normalize():
    v = vec3(1e-100, 0.0, 0.0)
    assert math.isfinite(float(length(normalize(v))))
