"""Testing helpers for color conversion operators.

Example usage:

    import hypothesis

    from torchcolor.conversion import hsv_to_rgb, rgb_to_hsv
    from torchcolor.testing import ToleranceConfig, strategies

    @hypothesis.given(strategies.rgb_tensors())
    def test_round_trip(rgb):
        rtol, atol = ToleranceConfig().get_tolerances(rgb.dtype)
        torch.testing.assert_close(
            hsv_to_rgb(rgb_to_hsv(rgb)), rgb, rtol=rtol, atol=atol
        )
"""

from . import strategies
from ._tolerance import ToleranceConfig

__all__ = [
    "ToleranceConfig",
    "strategies",
]
