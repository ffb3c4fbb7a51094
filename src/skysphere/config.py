from dataclasses import dataclass

import torch as t
from loguru import logger

device = t.device("cuda" if t.cuda.is_available() else "cpu")
# Double precision keeps quantized output identical to IEEE double arithmetic
dtype = t.float64

logger.debug(f"Using device: {device}")

QUANTIZE_SCALE: float = 255.99
OPAQUE: int = 255


@dataclass(frozen=True)
class RenderSettings:
    width: int = 200
    height: int = 100
    rows_per_batch: int = 32  # image rows shaded per vectorized band
    show_progress: bool = True
    output: str = "image.png"

    def __post_init__(self):
        if isinstance(self.rows_per_batch, bool) or not isinstance(self.rows_per_batch, int) or self.rows_per_batch < 1:
            raise ValueError(f"rows_per_batch must be a positive integer, got {self.rows_per_batch!r}")


default_settings = RenderSettings()
