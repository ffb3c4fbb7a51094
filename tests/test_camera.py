import numpy as np
import pytest
import torch as t

from skysphere.camera import Camera, check_dimensions
from skysphere.config import device
from skysphere.errors import InvalidDimensionsError

from .helpers import allclose


def test_corner_rays_span_viewport():
    camera = Camera()
    assert allclose(camera.get_ray(0, 0, 200, 100).direction, [-2.0, -1.0, -1.0])
    assert allclose(camera.get_ray(199, 99, 200, 100).direction, [2.0, 1.0, -1.0])
    assert allclose(camera.get_ray(199, 0, 200, 100).direction, [2.0, -1.0, -1.0])


def test_rays_start_at_origin_and_are_not_normalized():
    ray = Camera().get_ray(0, 0, 4, 3)
    assert allclose(ray.origin, [0.0, 0.0, 0.0])
    assert float(t.linalg.vector_norm(ray.direction)) == pytest.approx(6 ** 0.5)


def test_center_of_odd_frame_looks_down_negative_z():
    assert allclose(Camera().get_ray(2, 1, 5, 3).direction, [0.0, 0.0, -1.0])


def test_rows_for_image_run_top_to_bottom():
    """Image row 0 is the top of the frame, i.e. world row height - 1."""
    rows = t.arange(0, 3, device=device)
    ray = Camera().rays_for_rows(rows, 5, 3)
    assert ray.direction.shape == (3, 5, 3)
    assert allclose(ray.direction[0, :, 1], [1.0] * 5)
    assert allclose(ray.direction[2, :, 1], [-1.0] * 5)
    assert allclose(ray.direction[:, 0, 0], [-2.0] * 3)
    assert allclose(ray.direction[:, 4, 0], [2.0] * 3)


@pytest.mark.parametrize("width, height", [(1, 10), (10, 1), (0, 0), (-3, 5), (2.0, 2)])
def test_degenerate_dimensions_rejected(width, height):
    with pytest.raises(InvalidDimensionsError):
        check_dimensions(width, height)


def test_get_ray_rejects_single_pixel_columns():
    with pytest.raises(InvalidDimensionsError):
        Camera().get_ray(0, 0, 1, 10)


def test_integer_like_dimensions_are_normalized():
    width, height = check_dimensions(np.int64(8), np.int32(4))
    assert (width, height) == (8, 4)
    assert type(width) is int and type(height) is int
