"""Quantization of normalized RGB to packed 8-bit ARGB."""

import warnings
from typing import Union, overload

import torch
from torch import Tensor

from torchcolor.conversion._types import Argb8888, Rgb

_OVERFLOW_MODES = ("wrap", "saturate")


@overload
def quantize_to_packed_color(
    input: Tensor,
    alpha: Union[float, Tensor] = 1.0,
    *,
    overflow: str = "wrap",
) -> Tensor:
    ...


@overload
def quantize_to_packed_color(
    input: Rgb,
    alpha: float = 1.0,
    *,
    overflow: str = "wrap",
) -> Argb8888:
    ...


def quantize_to_packed_color(
    input: Union[Tensor, Rgb],
    alpha: Union[float, Tensor] = 1.0,
    *,
    overflow: str = "wrap",
) -> Union[Tensor, Argb8888]:
    r"""Quantize normalized RGB and alpha to four 8-bit channels.

    Each channel is scaled by 255 and rounded to the nearest integer, with
    ties rounded away from zero.

    Mathematical Definition
    -----------------------
    .. math::
        q(x) = \operatorname{sgn}(x) \left\lfloor |255 x| + \tfrac{1}{2} \right\rfloor

    applied to :math:`(A, R, G, B)`.

    Parameters
    ----------
    input : Tensor, shape (..., 3), or Rgb
        RGB color values, expected in [0, 1]. They are not clamped.
    alpha : float or Tensor, optional
        Alpha, expected in [0, 1]. A tensor must broadcast to
        ``input.shape[:-1]``. Default: ``1.0`` (fully opaque).
    overflow : str, optional
        What to do with rounded channels outside [0, 255]. ``"wrap"``
        reduces them modulo 256, like an unchecked byte cast. ``"saturate"``
        clamps them into [0, 255]. Default: ``"wrap"``.

    Returns
    -------
    Tensor, shape (..., 4), or Argb8888
        ``torch.uint8`` channels ordered (alpha, red, green, blue). An
        :class:`Rgb` input returns an :class:`Argb8888` of Python ints.

    Raises
    ------
    ValueError
        If the last dimension of ``input`` is not 3 or ``overflow`` is not a
        known mode.

    Warns
    -----
    RuntimeWarning
        If any channel or alpha lies outside [0, 1]. Skipped for meta tensors
        and under ``torch.compile``.

    Examples
    --------
    >>> rgb = torch.tensor([1.0, 0.0, 0.0])
    >>> torchcolor.conversion.quantize_to_packed_color(rgb)
    tensor([255, 255,   0,   0], dtype=torch.uint8)

    >>> torchcolor.conversion.quantize_to_packed_color(Rgb(0.5, 0.5, 0.5), 0.0)
    Argb8888(a=0, r=128, g=128, b=128)

    See Also
    --------
    hsv_to_rgb : Produce RGB input from an HSV color.
    """
    if overflow not in _OVERFLOW_MODES:
        raise ValueError(
            f"quantize_to_packed_color: overflow must be one of "
            f"{_OVERFLOW_MODES}, got {overflow!r}"
        )

    if isinstance(input, Rgb):
        return Argb8888.from_tensor(
            _quantize(input.to_tensor(), alpha, overflow)
        )

    if not isinstance(input, Tensor):
        raise TypeError(
            f"quantize_to_packed_color: input must be a Tensor or Rgb, "
            f"got {type(input).__name__}"
        )

    if input.shape[-1] != 3:
        raise ValueError(
            f"quantize_to_packed_color: input must have last dimension 3, "
            f"got {input.shape[-1]}"
        )

    if not input.is_floating_point():
        raise TypeError(
            f"quantize_to_packed_color: input must be a floating-point "
            f"tensor, got {input.dtype}"
        )

    return _quantize(input, alpha, overflow)


def _quantize(
    input: Tensor,
    alpha: Union[float, Tensor],
    overflow: str,
) -> Tensor:
    alpha = torch.as_tensor(alpha, dtype=input.dtype, device=input.device)
    alpha = torch.broadcast_to(alpha, input.shape[:-1])

    channels = torch.cat([alpha.unsqueeze(-1), input], dim=-1)

    if not channels.is_meta and not torch.compiler.is_compiling():
        if ((channels < 0) | (channels > 1)).any().item():
            warnings.warn(
                f"quantize_to_packed_color: channels outside [0, 1] do not "
                f"fit in 8 bits and will {overflow}.",
                RuntimeWarning,
                stacklevel=3,
            )

    scaled = channels.detach() * 255

    # torch.round rounds ties to even; ties go away from zero here.
    truncated = scaled.trunc()
    rounded = torch.where(
        (scaled - truncated).abs() == 0.5,
        truncated + scaled.sign(),
        scaled.round(),
    )

    if overflow == "saturate":
        rounded = rounded.clamp(0, 255)
    else:
        rounded = torch.remainder(rounded, 256)

    return rounded.to(torch.uint8)
