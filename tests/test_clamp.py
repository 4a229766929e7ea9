"""
tests/test_clamp.py
===================
clamp() expression text.
"""
import pytest

from config.spacing.clamp import ClampBuilder, build_clamp
from exceptions import InvalidParameterRange


class TestBuildClamp:

    def test_default_scale_anchor(self):
        assert build_clamp(8, 12, 375, 1620) == "clamp(8px, 6.7952px + 0.3213vw, 12px)"

    def test_rem_output(self):
        assert build_clamp(8, 12, 375, 1620, "rem") == (
            "clamp(0.500rem, 0.4247rem + 0.3213vw, 0.750rem)"
        )

    def test_zero_constant_is_omitted(self):
        assert build_clamp(4, 8, 400, 800) == "clamp(4px, 1.0000vw, 8px)"

    def test_negative_constant(self):
        assert build_clamp(2, 40, 375, 1620) == "clamp(2px, -9.4458px + 3.0522vw, 40px)"

    def test_flat_range(self):
        assert build_clamp(10, 10, 375, 1620) == "clamp(10px, 10.0000px + 0.0000vw, 10px)"

    def test_deterministic(self):
        first = build_clamp(9, 15, 375, 1620, "rem")
        assert all(build_clamp(9, 15, 375, 1620, "rem") == first for _ in range(5))

    def test_equal_viewports_rejected(self):
        with pytest.raises(InvalidParameterRange) as exc:
            build_clamp(8, 12, 800, 800)
        assert exc.value.field == "max_viewport"


class TestCoefficients:

    def test_constant_uses_unrounded_coefficient(self):
        coefficient, constant = ClampBuilder.coefficients(8, 12, 375, 1620)
        assert coefficient == pytest.approx(0.321285, rel=1e-5)
        assert constant == pytest.approx(8 - coefficient * 3.75)

    def test_line_hits_both_edges(self):
        coefficient, constant = ClampBuilder.coefficients(6, 24, 375, 1620)
        assert constant + coefficient * 375 / 100 == pytest.approx(6)
        assert constant + coefficient * 1620 / 100 == pytest.approx(24)
