"""torchcolor: PyTorch operators for RGB and HSV color conversion."""

from . import conversion

__all__ = [
    "conversion",
]

__version__ = "0.1.0"
