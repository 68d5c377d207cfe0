"""HSV to RGB color conversion."""

from typing import Union, overload

import torch
from torch import Tensor

from torchcolor.conversion._types import Hsv, Rgb


@overload
def hsv_to_rgb(input: Tensor) -> Tensor:
    ...


@overload
def hsv_to_rgb(input: Hsv) -> Rgb:
    ...


def hsv_to_rgb(input: Union[Tensor, Hsv]) -> Union[Tensor, Rgb]:
    r"""Convert HSV to normalized RGB color space.

    Converts input colors from HSV (Hue, Saturation, Value), with the hue
    measured in degrees, to RGB. The conversion is differentiable and
    supports arbitrary batch dimensions.

    Mathematical Definition
    -----------------------
    Given input :math:`(H, S, V)` with :math:`H` reduced into
    :math:`[0, 360)` and :math:`S, V` clamped into :math:`[0, 1]`:

    .. math::
        C &= S \times V \\
        m &= V - C \\
        k &= \lfloor H / 60 \rfloor \\
        f &= H / 60 - k

    In sextant :math:`k` one channel is :math:`m + C`, one is :math:`m` and
    the remaining one interpolates between them:

    ====  ==============  ==============  ==============
    k     R               G               B
    ====  ==============  ==============  ==============
    0     m + C           m + C f         m
    1     m + C (1 - f)   m + C           m
    2     m               m + C           m + C f
    3     m               m + C (1 - f)   m + C
    4     m + C f         m               m + C
    5     m + C           m               m + C (1 - f)
    ====  ==============  ==============  ==============

    Parameters
    ----------
    input : Tensor, shape (..., 3), or Hsv
        HSV color values where:

        - H (hue): degrees, any real value. 0 = red, 120 = green, 240 = blue.
        - S (saturation): any real value, clamped into [0, 1].
        - V (value): any real value, clamped into [0, 1].

        An :class:`Hsv` is converted in float64 and returned as :class:`Rgb`.

    Returns
    -------
    Tensor, shape (..., 3), or Rgb
        RGB color values in [0, 1].

    Examples
    --------
    Convert HSV green to RGB:

    >>> hsv = torch.tensor([[120.0, 1.0, 1.0]])
    >>> torchcolor.conversion.hsv_to_rgb(hsv)
    tensor([[0., 1., 0.]])

    Hue wraps around the color wheel:

    >>> torchcolor.conversion.hsv_to_rgb(Hsv(-60.0, 1.0, 1.0))
    Rgb(r=1.0, g=0.0, b=1.0)

    Notes
    -----
    - The hue is reduced to the nonnegative remainder modulo 360, so -60
      and 300 give the same color.
    - When :math:`C = 0` (exactly) the result is the gray :math:`(m, m, m)`
      and the hue is ignored, even if it is NaN. A NaN or infinite hue on a
      chromatic color yields NaN in the interpolated channel.
    - At sextant boundaries the output is continuous but gradients with
      respect to the hue are not.

    See Also
    --------
    rgb_to_hsv : Inverse conversion from RGB to HSV.

    References
    ----------
    .. [1] A. R. Smith, "Color Gamut Transform Pairs", SIGGRAPH 1978.
    """
    if isinstance(input, Hsv):
        return Rgb.from_tensor(hsv_to_rgb(input.to_tensor()))

    if not isinstance(input, Tensor):
        raise TypeError(
            f"hsv_to_rgb: input must be a Tensor or Hsv, got {type(input).__name__}"
        )

    if input.shape[-1] != 3:
        raise ValueError(
            f"hsv_to_rgb: input must have last dimension 3, got {input.shape[-1]}"
        )

    if not input.is_floating_point():
        raise TypeError(
            f"hsv_to_rgb: input must be a floating-point tensor, got {input.dtype}"
        )

    hue, saturation, value = input.unbind(-1)

    saturation = saturation.clamp(0, 1)
    value = value.clamp(0, 1)

    chroma = saturation * value
    minimum = value - chroma
    maximum = chroma + minimum

    achromatic = chroma == 0

    # The hue of a gray never reaches the sextant lookup.
    hue = torch.where(achromatic, torch.zeros_like(hue), hue)

    hue = torch.remainder(hue, 360)
    # The remainder of a tiny negative hue rounds up to exactly 360.
    hue = torch.where(hue >= 360, hue - 360, hue)

    position = hue / 60
    # A NaN position (NaN or infinite hue) still needs a valid gather index.
    sextant = torch.nan_to_num(position.floor(), nan=0.0).clamp(0, 5)
    fraction = position - sextant

    forward = minimum + chroma * fraction
    backward = minimum + chroma * (1 - fraction)

    index = sextant.long().unsqueeze(-1)

    r = torch.stack(
        [maximum, backward, minimum, minimum, forward, maximum], dim=-1
    )
    g = torch.stack(
        [forward, maximum, maximum, backward, minimum, minimum], dim=-1
    )
    b = torch.stack(
        [minimum, minimum, forward, maximum, maximum, backward], dim=-1
    )

    output = torch.stack(
        [
            r.gather(-1, index).squeeze(-1),
            g.gather(-1, index).squeeze(-1),
            b.gather(-1, index).squeeze(-1),
        ],
        dim=-1,
    )

    return torch.where(achromatic.unsqueeze(-1), minimum.unsqueeze(-1), output)
