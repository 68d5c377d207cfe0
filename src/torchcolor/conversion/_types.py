from typing import NamedTuple, Optional

import torch
from torch import Tensor


class Rgb(NamedTuple):
    """Normalized RGB color.

    Parameters
    ----------
    r, g, b : float
        Channel intensities, semantically in ``[0, 1]``. The range is not
        enforced; callers clamp before display.
    """

    r: float
    g: float
    b: float

    @classmethod
    def from_tensor(cls, input: Tensor) -> "Rgb":
        """Build an ``Rgb`` from a tensor of shape ``(3,)``."""
        if input.shape != (3,):
            raise ValueError(
                f"Rgb.from_tensor: input must have shape (3,), got {tuple(input.shape)}"
            )
        r, g, b = input.tolist()
        return cls(r, g, b)

    def to_tensor(
        self,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ) -> Tensor:
        """Return the channels as a tensor of shape ``(3,)``."""
        return torch.tensor(
            [self.r, self.g, self.b], dtype=dtype, device=device
        )


class Hsv(NamedTuple):
    """HSV color with hue in degrees.

    Parameters
    ----------
    h : float
        Hue in degrees, intended in ``[0, 360)``. Not normalized on
        construction.
    s : float
        Saturation, intended in ``[0, 1]``.
    v : float
        Value, intended in ``[0, 1]``.
    """

    h: float
    s: float
    v: float

    @classmethod
    def from_tensor(cls, input: Tensor) -> "Hsv":
        """Build an ``Hsv`` from a tensor of shape ``(3,)``."""
        if input.shape != (3,):
            raise ValueError(
                f"Hsv.from_tensor: input must have shape (3,), got {tuple(input.shape)}"
            )
        h, s, v = input.tolist()
        return cls(h, s, v)

    def to_tensor(
        self,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ) -> Tensor:
        """Return ``(h, s, v)`` as a tensor of shape ``(3,)``."""
        return torch.tensor(
            [self.h, self.s, self.v], dtype=dtype, device=device
        )


class Argb8888(NamedTuple):
    """Packed color with four 8-bit channels.

    Parameters
    ----------
    a, r, g, b : int
        Alpha, red, green and blue, each in ``[0, 255]``.
    """

    a: int
    r: int
    g: int
    b: int

    @classmethod
    def from_tensor(cls, input: Tensor) -> "Argb8888":
        """Build an ``Argb8888`` from a tensor of shape ``(4,)``."""
        if input.shape != (4,):
            raise ValueError(
                f"Argb8888.from_tensor: input must have shape (4,), got {tuple(input.shape)}"
            )
        a, r, g, b = (int(channel) for channel in input.tolist())
        return cls(a, r, g, b)
