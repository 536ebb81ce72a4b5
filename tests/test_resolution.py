"""Unit tests for the linear model conversions in image_to_body.resolution."""

import math

import pytest

from image_to_body.angle import Angle
from image_to_body.errors import (
    ConversionError,
    DegenerateExtentError,
    DegenerateResolutionError,
    OutOfRangeError,
)
from image_to_body.image import ImageExtent, PixelCoordinate
from image_to_body.resolution import (
    pixel_from_tangent_angle,
    pixel_from_tangent_offset,
    tangent_offset_from_pixel,
    tangent_offset_from_pixel_clipped,
)
from image_to_body.validation import RangePolicy

K = 0.0025


@pytest.fixture
def vga() -> ImageExtent:
    """Return a 640x480 image extent."""
    return ImageExtent(640, 480)


class TestTangentOffsetFromPixel:
    """Tests for tangent_offset_from_pixel."""

    def test_centre_is_zero(self, vga: ImageExtent) -> None:
        """Test the centre pixel has zero offset."""
        assert tangent_offset_from_pixel(PixelCoordinate(320), vga, K) == 0.0

    @pytest.mark.parametrize(
        "pixel,expected",
        [(0, -0.8), (640, 0.8), (360, 0.1), (280, -0.1)],
        ids=["left-edge", "right-edge", "right-of-centre", "left-of-centre"],
    )
    def test_linear(self, vga: ImageExtent, pixel: int, expected: float) -> None:
        """Test the offset is linear in pixel distance from the centre."""
        assert tangent_offset_from_pixel(PixelCoordinate(pixel), vga, K) == pytest.approx(expected)

    def test_odd_width_centre(self) -> None:
        """Test half width is not truncated for odd widths."""
        extent = ImageExtent(641, 480)

        assert tangent_offset_from_pixel(PixelCoordinate(320), extent, 1.0) == -0.5

    def test_pixel_beyond_width(self, vga: ImageExtent) -> None:
        """Test pixels beyond the width raise, or clamp."""
        with pytest.raises(OutOfRangeError):
            tangent_offset_from_pixel(PixelCoordinate(641), vga, K)

        clamped = tangent_offset_from_pixel(PixelCoordinate(641), vga, K, policy=RangePolicy.CLAMP)
        assert clamped == pytest.approx(0.8)

    def test_zero_width_raises(self) -> None:
        """Test a zero-width extent raises."""
        with pytest.raises(DegenerateExtentError):
            tangent_offset_from_pixel(PixelCoordinate(0), ImageExtent(0, 480), K)

    def test_non_finite_k_raises(self, vga: ImageExtent) -> None:
        """Test a non-finite resolution constant raises."""
        with pytest.raises(DegenerateResolutionError):
            tangent_offset_from_pixel(PixelCoordinate(10), vga, math.inf)


class TestTangentOffsetFromPixelClipped:
    """Tests for tangent_offset_from_pixel_clipped."""

    @pytest.mark.parametrize(
        "pixel,expected",
        [
            (330, 0.0),
            (310, 0.0),
            (320, 0.0),
            (360, 0.1),
            (280, -0.1),
            (336, 0.04),
            (304, -0.04),
        ],
        ids=[
            "inside-right",
            "inside-left",
            "centre",
            "outside-right",
            "outside-left",
            "boundary-right",
            "boundary-left",
        ],
    )
    def test_dead_zone(self, vga: ImageExtent, pixel: int, expected: float) -> None:
        """Test offsets inside a 5% dead-zone (16 px) are zero."""
        result = tangent_offset_from_pixel_clipped(PixelCoordinate(pixel), vga, K, 0.05)

        assert result == pytest.approx(expected)

    def test_inside_is_exactly_zero(self, vga: ImageExtent) -> None:
        """Test the dead-zone returns exactly 0.0, not a small value."""
        result = tangent_offset_from_pixel_clipped(PixelCoordinate(330), vga, K, 0.05)

        assert result == 0.0

    def test_outside_equals_unclipped(self, vga: ImageExtent) -> None:
        """Test outside the dead-zone the clipped and linear values agree exactly."""
        pixel = PixelCoordinate(500)

        assert tangent_offset_from_pixel_clipped(pixel, vga, K, 0.05) == tangent_offset_from_pixel(
            pixel, vga, K
        )

    def test_zero_threshold_never_clips(self, vga: ImageExtent) -> None:
        """Test a zero threshold leaves every offset untouched."""
        result = tangent_offset_from_pixel_clipped(PixelCoordinate(321), vga, K, 0.0)

        assert result == pytest.approx(K)

    def test_full_threshold_clips_inside_image(self, vga: ImageExtent) -> None:
        """Test a threshold of 1 clips everything but the edges."""
        assert tangent_offset_from_pixel_clipped(PixelCoordinate(1), vga, K, 1.0) == 0.0
        assert tangent_offset_from_pixel_clipped(PixelCoordinate(0), vga, K, 1.0) == pytest.approx(-0.8)

    def test_non_finite_threshold_raises(self, vga: ImageExtent) -> None:
        """Test a NaN threshold raises instead of silently never clipping."""
        with pytest.raises(ConversionError):
            tangent_offset_from_pixel_clipped(PixelCoordinate(330), vga, K, math.nan)


class TestPixelFromTangentAngle:
    """Tests for pixel_from_tangent_angle."""

    def test_centre(self, vga: ImageExtent) -> None:
        """Test a zero offset maps to the centre pixel."""
        assert pixel_from_tangent_angle(Angle.from_radians(0.0), vga, K).value == 320

    def test_uses_raw_value_not_tangent(self, vga: ImageExtent) -> None:
        """Test the Angle's stored value is read as the tangent offset."""
        result = pixel_from_tangent_angle(Angle.from_radians(0.5), vga, K)

        # 0.5 / 0.0025 + 320; tan(0.5) would give 538
        assert result.value == 520

    def test_ignores_unit_tag(self, vga: ImageExtent) -> None:
        """Test a degree-tagged Angle is read by its raw value too."""
        from_degrees = pixel_from_tangent_angle(Angle.from_degrees(0.5), vga, K)
        from_radians = pixel_from_tangent_angle(Angle.from_radians(0.5), vga, K)

        assert from_degrees == from_radians

    def test_accepts_float(self, vga: ImageExtent) -> None:
        """Test a bare float is treated as the same scalar."""
        assert pixel_from_tangent_angle(-0.1, vga, K).value == 280

    def test_inverse_of_linear_model(self, vga: ImageExtent) -> None:
        """Test it inverts tangent_offset_from_pixel."""
        for value in (0, 17, 320, 471, 640):
            offset = tangent_offset_from_pixel(PixelCoordinate(value), vga, K)
            assert pixel_from_tangent_angle(Angle.from_radians(offset), vga, K).value == value

    def test_zero_k_raises(self, vga: ImageExtent) -> None:
        """Test a zero resolution constant raises instead of dividing by zero."""
        with pytest.raises(DegenerateResolutionError):
            pixel_from_tangent_angle(Angle.from_radians(0.1), vga, 0.0)

    def test_out_of_range(self, vga: ImageExtent) -> None:
        """Test offsets beyond the image raise, or clamp."""
        with pytest.raises(OutOfRangeError):
            pixel_from_tangent_angle(Angle.from_radians(-1.0), vga, K)

        clamped = pixel_from_tangent_angle(Angle.from_radians(-1.0), vga, K, policy=RangePolicy.CLAMP)
        assert clamped.value == 0


class TestPixelFromTangentOffset:
    """Tests for pixel_from_tangent_offset."""

    @pytest.mark.parametrize(
        "tangent,round_to_nearest,expected",
        [
            (10.75, True, 342),
            (10.75, False, 341),
            (0.25, True, 321),
            (0.25, False, 320),
            (-10.75, True, 299),
            (-10.75, False, 298),
            (0.0, True, 320),
            (0.0, False, 320),
        ],
        ids=[
            "round-up",
            "truncate-down",
            "tie-away-from-zero",
            "tie-truncated",
            "negative-round",
            "negative-truncate",
            "centre-round",
            "centre-truncate",
        ],
    )
    def test_rounding_policy(
        self, vga: ImageExtent, tangent: float, round_to_nearest: bool, expected: int
    ) -> None:
        """Test both rounding policies with k = 0.5."""
        assert pixel_from_tangent_offset(tangent, vga, 0.5, round_to_nearest).value == expected

    def test_accepts_angle(self, vga: ImageExtent) -> None:
        """Test an Angle is read by its raw stored value."""
        result = pixel_from_tangent_offset(Angle.from_degrees(10.75), vga, 0.5, True)

        assert result.value == 342

    def test_truncation_below_zero(self, vga: ImageExtent) -> None:
        """Test truncation of a position in (-1, 0) gives pixel 0."""
        # -160.25 / 0.5 + 320 = -0.5
        assert pixel_from_tangent_offset(-160.25, vga, 0.5, False).value == 0

    def test_negative_position_raises(self, vga: ImageExtent) -> None:
        """Test a negative pixel raises instead of wrapping to a huge index."""
        with pytest.raises(OutOfRangeError):
            pixel_from_tangent_offset(-200.0, vga, 0.5, False)

    def test_negative_k(self, vga: ImageExtent) -> None:
        """Test a negative k mirrors the axis."""
        assert pixel_from_tangent_offset(10.0, vga, -0.5, True).value == 300

    def test_zero_k_raises(self, vga: ImageExtent) -> None:
        """Test a zero resolution constant raises."""
        with pytest.raises(DegenerateResolutionError):
            pixel_from_tangent_offset(0.1, vga, 0.0, True)

    def test_nan_tangent_raises(self, vga: ImageExtent) -> None:
        """Test a NaN tangent offset raises."""
        with pytest.raises(ConversionError):
            pixel_from_tangent_offset(math.nan, vga, K, True)
