"""Color space conversion functions."""

from torchcolor.conversion._hsv_to_rgb import hsv_to_rgb
from torchcolor.conversion._quantize_to_packed_color import (
    quantize_to_packed_color,
)
from torchcolor.conversion._rgb_to_hsv import rgb_to_hsv
from torchcolor.conversion._types import Argb8888, Hsv, Rgb
from torchcolor.conversion._vector import hsv_to_vector, vector_to_hsv

__all__ = [
    "Argb8888",
    "Hsv",
    "Rgb",
    "hsv_to_rgb",
    "hsv_to_vector",
    "quantize_to_packed_color",
    "rgb_to_hsv",
    "vector_to_hsv",
]
