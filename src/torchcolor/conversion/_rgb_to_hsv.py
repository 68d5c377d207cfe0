"""RGB to HSV color conversion."""

from typing import Union, overload

import torch
from torch import Tensor

from torchcolor.conversion._types import Hsv, Rgb


@overload
def rgb_to_hsv(input: Tensor) -> Tensor:
    ...


@overload
def rgb_to_hsv(input: Rgb) -> Hsv:
    ...


def rgb_to_hsv(input: Union[Tensor, Rgb]) -> Union[Tensor, Hsv]:
    r"""Convert normalized RGB to HSV color space.

    Converts input colors from RGB to HSV (Hue, Saturation, Value) with the
    hue measured in degrees. The conversion is differentiable away from
    achromatic colors and supports arbitrary batch dimensions.

    Mathematical Definition
    -----------------------
    Given input :math:`(R, G, B)`:

    .. math::
        V &= \max(R, G, B) \\
        C &= \max(R, G, B) - \min(R, G, B) \\
        S &= C / V \\
        H &= 60 \times \begin{cases}
            \frac{G - B}{C} & \text{if } R = \max \\
            \frac{B - R}{C} + 2 & \text{if } G = \max \\
            \frac{R - G}{C} + 4 & \text{if } B = \max
        \end{cases}

    A negative :math:`H` is shifted once by 360 degrees. When :math:`C = 0`
    (exactly) the color is achromatic and both :math:`H` and :math:`S` are 0.

    Parameters
    ----------
    input : Tensor, shape (..., 3), or Rgb
        RGB color values. No clamping is applied, so values outside
        [0, 1] are allowed and produce HSV values outside the usual range.
        An :class:`Rgb` is converted in float64 and returned as :class:`Hsv`.

    Returns
    -------
    Tensor, shape (..., 3), or Hsv
        HSV color values where:

        - H (hue): in [0, 360) degrees. 0 = red, 120 = green, 240 = blue.
        - S (saturation): 0 = grayscale, 1 = fully saturated.
        - V (value): the largest channel.

    Examples
    --------
    Convert pure red to HSV:

    >>> rgb = torch.tensor([[1.0, 0.0, 0.0]])
    >>> torchcolor.conversion.rgb_to_hsv(rgb)
    tensor([[0., 1., 1.]])

    Convert a single value:

    >>> torchcolor.conversion.rgb_to_hsv(Rgb(0.0, 0.0, 1.0))
    Hsv(h=240.0, s=1.0, v=1.0)

    Notes
    -----
    - Ties between channels resolve in the fixed order red, green, blue, so
      yellow (1, 1, 0) has hue 60 and magenta (1, 0, 1) has hue 300.
    - The achromatic test is exact; there is no epsilon tolerance.
    - Hue and saturation gradients are zero at achromatic points.

    See Also
    --------
    hsv_to_rgb : Inverse conversion from HSV to RGB.

    References
    ----------
    .. [1] A. R. Smith, "Color Gamut Transform Pairs", SIGGRAPH 1978.
    """
    if isinstance(input, Rgb):
        return Hsv.from_tensor(rgb_to_hsv(input.to_tensor()))

    if not isinstance(input, Tensor):
        raise TypeError(
            f"rgb_to_hsv: input must be a Tensor or Rgb, got {type(input).__name__}"
        )

    if input.shape[-1] != 3:
        raise ValueError(
            f"rgb_to_hsv: input must have last dimension 3, got {input.shape[-1]}"
        )

    if not input.is_floating_point():
        raise TypeError(
            f"rgb_to_hsv: input must be a floating-point tensor, got {input.dtype}"
        )

    r, g, b = input.unbind(-1)

    # Nested comparisons keep the red > green > blue tie-break.
    maximum = torch.where(
        r >= g,
        torch.where(r >= b, r, b),
        torch.where(g >= b, g, b),
    )
    minimum = torch.where(
        r <= g,
        torch.where(r <= b, r, b),
        torch.where(g <= b, g, b),
    )

    chroma = maximum - minimum
    achromatic = chroma == 0

    one = torch.ones_like(chroma)
    zero = torch.zeros_like(chroma)

    safe_chroma = torch.where(achromatic, one, chroma)

    hue = torch.where(
        r == maximum,
        60 * (g - b) / safe_chroma,
        torch.where(
            g == maximum,
            120 + 60 * (b - r) / safe_chroma,
            240 + 60 * (r - g) / safe_chroma,
        ),
    )
    hue = torch.where(hue < 0, hue + 360, hue)
    hue = torch.where(achromatic, zero, hue)

    # maximum can only be zero with nonzero chroma for negative inputs.
    saturation = torch.where(
        achromatic,
        zero,
        chroma / torch.where(achromatic, one, maximum),
    )

    return torch.stack([hue, saturation, maximum], dim=-1)
