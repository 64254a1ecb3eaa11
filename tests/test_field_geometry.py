"""
Unit tests for field geometry helpers.
"""
import math

import pytest

from farmopt.utils.field_geometry import (
    area_from_dimensions,
    aspect_ratio_dimensions,
    dimensions_match_area,
    golden_ratio_dimensions,
    square_plot_dimensions,
)


class TestDimensionFormulas:
    """The predictor and golden-ratio formulas are distinct."""

    def test_aspect_ratio_dimensions(self):
        dims = aspect_ratio_dimensions(1.0)

        assert dims.length == pytest.approx(120.0)
        assert dims.width == pytest.approx(100 / 1.2)

    def test_aspect_ratio_preserves_area(self):
        dims = aspect_ratio_dimensions(3.7)
        assert area_from_dimensions(dims.length, dims.width) == pytest.approx(3.7)

    def test_golden_ratio_dimensions(self):
        dims = golden_ratio_dimensions(1.0)

        assert dims.width == 79
        assert dims.length == 127

    def test_golden_ratio_shape(self):
        dims = golden_ratio_dimensions(25.0)

        expected_width = math.sqrt(250000 / 1.618)
        assert dims.width == round(expected_width)
        assert dims.length == round(expected_width * 1.618)

    def test_formulas_differ(self):
        assert aspect_ratio_dimensions(2.0) != golden_ratio_dimensions(2.0)

    def test_square_plot(self):
        dims = square_plot_dimensions(2.5)
        assert dims.length == dims.width == 158


class TestAreaConsistency:
    """Tests for the area / dimensions consistency check."""

    def test_area_from_dimensions(self):
        assert area_from_dimensions(100, 100) == pytest.approx(1.0)

    def test_rounded_square_plot_matches(self):
        assert dimensions_match_area(2.5, 158, 158)

    def test_exact_rectangle_matches(self):
        assert dimensions_match_area(0.5, 100, 50)

    def test_mismatch_rejected(self):
        assert not dimensions_match_area(2.5, 100, 100)

    def test_small_area_uses_absolute_tolerance(self):
        # 0.0144 ha declared as 0.02 ha: within 0.01 ha
        assert dimensions_match_area(0.02, 12, 12)
        assert not dimensions_match_area(0.05, 12, 12)
