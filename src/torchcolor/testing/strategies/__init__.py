"""Hypothesis strategies for color conversion testing."""

from ._available_devices import available_devices
from ._hsv_tensors import hsv_tensors
from ._hues import hues
from ._real_number_dtypes import real_number_dtypes
from ._real_numbers import real_numbers
from ._rgb_tensors import rgb_tensors
from ._shapes import shapes
from ._tensors import tensors
from ._unit_interval_numbers import unit_interval_numbers

__all__ = [
    # Numeric strategies
    "real_numbers",
    "unit_interval_numbers",
    "hues",
    # Tensor strategies
    "shapes",
    "tensors",
    "rgb_tensors",
    "hsv_tensors",
    # Dtype strategies
    "real_number_dtypes",
    # Device strategies
    "available_devices",
]
