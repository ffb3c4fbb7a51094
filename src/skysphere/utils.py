from typing import TextIO

import numpy as np
import torch as t
from jaxtyping import Float, UInt8, jaxtyped
from PIL import Image
from typeguard import typechecked as typechecker

from .config import QUANTIZE_SCALE


@jaxtyped(typechecker=typechecker)
def quantize(colors: Float[t.Tensor, "... 3"]) -> UInt8[t.Tensor, "... 3"]:
    """Translate [0,1] channel values to the byte range [0,255]."""
    return t.floor(QUANTIZE_SCALE * colors).clamp(0, 255).to(t.uint8)


@jaxtyped(typechecker=typechecker)
def frame_to_image(frame: UInt8[t.Tensor, "h w 4"]) -> Image.Image:
    array = frame.cpu().numpy().astype(np.uint8)
    return Image.fromarray(array)


@jaxtyped(typechecker=typechecker)
def write_ppm(frame: UInt8[t.Tensor, "h w 4"], out: TextIO) -> None:
    """Write the frame as a plain-text (P3) PPM image; alpha is dropped."""
    height, width = frame.shape[0], frame.shape[1]
    out.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in frame[..., :3].reshape(-1, 3).cpu().tolist():
        out.write(f"{r} {g} {b}\n")
