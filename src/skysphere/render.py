"""
Render loop: one deterministic pass over the fixed scene.

Rows are shaded in vectorized bands into a frame owned by this module. The
caller's buffer is written once, after the whole frame is finished, so a
failure part way through never leaves a partial frame behind.
"""
from datetime import datetime

import torch as t
from jaxtyping import UInt8
from loguru import logger
from tqdm import tqdm

from .camera import Camera, check_dimensions
from .config import OPAQUE, RenderSettings, default_settings, device
from .errors import BufferSizeError
from .hittable import Hittable
from .shader import shade
from .sphere import Sphere
from .utils import quantize
from .vec3 import vec3

CHANNELS = 4


def default_world() -> Sphere:
    return Sphere(center=vec3(0.0, 0.0, -1.0), radius=0.5)


def render(
    width: int,
    height: int,
    world: Hittable | None = None,
    camera: Camera | None = None,
    settings: RenderSettings = default_settings,
) -> UInt8[t.Tensor, "h w 4"]:
    """Render the scene into a new (height, width, 4) RGBA frame, row 0 at the top."""
    width, height = check_dimensions(width, height)
    world = default_world() if world is None else world
    camera = Camera() if camera is None else camera
    rows_per_batch = settings.rows_per_batch

    logger.info(f"Rendering {width}x{height} frame in bands of {rows_per_batch} rows")
    start_time = datetime.now()

    frame = t.empty((height, width, CHANNELS), dtype=t.uint8, device=device)
    for start in tqdm(
        range(0, height, rows_per_batch),
        desc="Rendering",
        unit="band",
        disable=not settings.show_progress,
    ):
        end = min(start + rows_per_batch, height)
        rows = t.arange(start, end, device=device)
        colors = shade(camera.rays_for_rows(rows, width, height), world)
        frame[start:end, :, :3] = quantize(colors)
    frame[..., 3] = OPAQUE

    elapsed_time = datetime.now() - start_time
    logger.info(f"Rendering time: {elapsed_time}")
    return frame


def _writable_target(buffer, width: int, height: int):
    """Validate the caller's buffer and return a flat byte view of it."""
    expected = width * height * CHANNELS

    if isinstance(buffer, t.Tensor):
        if buffer.dtype != t.uint8:
            raise BufferSizeError(f"pixel buffer must hold uint8 values, got {buffer.dtype}")
        if buffer.numel() != expected:
            raise BufferSizeError(f"pixel buffer holds {buffer.numel()} bytes, expected {expected}")
        if not buffer.is_contiguous():
            raise BufferSizeError("pixel buffer must be contiguous")
        return buffer.view(-1)

    try:
        view = memoryview(buffer)
    except TypeError as e:
        raise BufferSizeError(f"{type(buffer).__name__} does not expose a byte buffer") from e
    if view.readonly:
        raise BufferSizeError("pixel buffer is read-only")
    if view.format != "B":
        raise BufferSizeError(f"pixel buffer must hold unsigned bytes, got format {view.format!r}")
    if not view.c_contiguous:
        raise BufferSizeError("pixel buffer must be contiguous")
    if view.nbytes != expected:
        raise BufferSizeError(f"pixel buffer holds {view.nbytes} bytes, expected {expected}")
    return view.cast("B")


def render_into(
    buffer,
    width: int,
    height: int,
    world: Hittable | None = None,
    camera: Camera | None = None,
    settings: RenderSettings = default_settings,
) -> None:
    """Fill a caller-owned RGBA buffer of width * height * 4 bytes, row-major, top row first.

    Accepts a uint8 torch tensor or any writable object exposing a byte
    buffer (bytearray, memoryview, numpy uint8 array). Dimensions and buffer
    are checked before anything is rendered or written.
    """
    width, height = check_dimensions(width, height)
    target = _writable_target(buffer, width, height)

    frame = render(width, height, world=world, camera=camera, settings=settings)

    if isinstance(target, t.Tensor):
        target.copy_(frame.reshape(-1).to(target.device))
    else:
        target[:] = frame.cpu().numpy().tobytes()
