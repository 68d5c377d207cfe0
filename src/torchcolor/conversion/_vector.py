"""Explicit conversions between Hsv and 4-component vectors."""

from typing import Optional

import torch
from torch import Tensor

from torchcolor.conversion._types import Hsv


def hsv_to_vector(
    hsv: Hsv,
    *,
    dtype: torch.dtype = torch.float32,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Pack an ``Hsv`` into a vector ``(h, s, v, 0)`` of shape ``(4,)``.

    The vector form is meant for interpolation and animation code that
    blends colors component-wise. The default dtype is float32.
    """
    return torch.tensor(
        [hsv.h, hsv.s, hsv.v, 0.0], dtype=dtype, device=device
    )


def vector_to_hsv(vector: Tensor) -> Hsv:
    """Read an ``Hsv`` from the first three components of ``vector``.

    Components after the third are ignored.
    """
    if vector.dim() != 1 or vector.shape[0] < 3:
        raise ValueError(
            f"vector_to_hsv: vector must be 1-D with at least 3 components, "
            f"got shape {tuple(vector.shape)}"
        )

    h, s, v = vector[:3].tolist()
    return Hsv(h, s, v)
