"""Tests for the color value types and vector conversions."""

import pytest
import torch

from torchcolor.conversion import (
    Argb8888,
    Hsv,
    Rgb,
    hsv_to_vector,
    vector_to_hsv,
)


class TestValueTypes:
    """Tests for Rgb, Hsv and Argb8888."""

    def test_immutable(self):
        """Value types cannot be mutated."""
        rgb = Rgb(0.1, 0.2, 0.3)
        with pytest.raises(AttributeError):
            rgb.r = 0.5

    def test_no_clamping_on_construction(self):
        """Out-of-range fields are stored as given."""
        hsv = Hsv(725.0, 2.0, -1.0)
        assert hsv == (725.0, 2.0, -1.0)

    def test_rgb_tensor_round_trip(self):
        """Rgb survives to_tensor/from_tensor."""
        rgb = Rgb(0.1, 0.2, 0.3)
        tensor = rgb.to_tensor()
        assert tensor.dtype == torch.float64
        assert Rgb.from_tensor(tensor) == rgb

    def test_hsv_to_tensor_dtype(self):
        """to_tensor honors the requested dtype."""
        tensor = Hsv(90.0, 0.5, 0.25).to_tensor(dtype=torch.float32)
        assert tensor.dtype == torch.float32
        assert tensor.tolist() == [90.0, 0.5, 0.25]

    def test_from_tensor_shape(self):
        """from_tensor rejects tensors that are not a single color."""
        with pytest.raises(ValueError, match="shape \\(3,\\)"):
            Rgb.from_tensor(torch.zeros(2, 3))
        with pytest.raises(ValueError, match="shape \\(4,\\)"):
            Argb8888.from_tensor(torch.zeros(3, dtype=torch.uint8))

    def test_argb_from_tensor(self):
        """Argb8888 reads uint8 channels as ints."""
        packed = Argb8888.from_tensor(
            torch.tensor([255, 1, 2, 3], dtype=torch.uint8)
        )
        assert packed == Argb8888(255, 1, 2, 3)


class TestVectorConversion:
    """Tests for hsv_to_vector and vector_to_hsv."""

    def test_hsv_to_vector(self):
        """The fourth component is zero and the dtype float32."""
        vector = hsv_to_vector(Hsv(180.0, 0.5, 0.75))
        assert vector.dtype == torch.float32
        assert vector.tolist() == [180.0, 0.5, 0.75, 0.0]

    def test_vector_to_hsv_ignores_fourth(self):
        """Only the first three components are read."""
        hsv = vector_to_hsv(torch.tensor([60.0, 1.0, 0.5, 42.0]))
        assert hsv == Hsv(60.0, 1.0, 0.5)

    def test_round_trip(self):
        """Values exact in float32 survive the vector form."""
        hsv = Hsv(270.0, 0.25, 0.5)
        assert vector_to_hsv(hsv_to_vector(hsv)) == hsv

    def test_interpolation(self):
        """The vector form supports component-wise blending."""
        start = hsv_to_vector(Hsv(0.0, 0.0, 0.0))
        end = hsv_to_vector(Hsv(120.0, 1.0, 1.0))
        assert vector_to_hsv(torch.lerp(start, end, 0.5)) == Hsv(
            60.0, 0.5, 0.5
        )

    def test_too_short(self):
        """Fewer than three components is an error."""
        with pytest.raises(ValueError, match="at least 3 components"):
            vector_to_hsv(torch.tensor([1.0, 2.0]))
