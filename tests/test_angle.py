"""Unit tests for image_to_body.angle module."""

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from image_to_body.angle import Angle, AngleUnit, as_radians, to_degrees, to_radians


class TestAngle:
    """Tests for the unit-tagged Angle value type."""

    def test_default_unit_is_radians(self) -> None:
        """Test an Angle without a unit is tagged as radians."""
        angle = Angle(1.0)

        assert angle.unit is AngleUnit.RADIANS
        assert angle.radians == 1.0

    @pytest.mark.parametrize(
        "degrees,radians",
        [
            (0.0, 0.0),
            (180.0, math.pi),
            (90.0, math.pi / 2),
            (-45.0, -math.pi / 4),
            (32.0, 0.5585053606381855),
        ],
        ids=["zero", "half-turn", "right-angle", "negative", "camera-fov"],
    )
    def test_unit_conversion(self, degrees: float, radians: float) -> None:
        """Test degree and radian accessors agree in both directions."""
        from_deg = Angle.from_degrees(degrees)
        from_rad = Angle.from_radians(radians)

        assert from_deg.radians == pytest.approx(radians)
        assert from_rad.degrees == pytest.approx(degrees)

    def test_raw_value_keeps_unit(self) -> None:
        """Test the stored value is not silently converted."""
        angle = Angle.from_degrees(30.0)

        assert angle.value == 30.0
        assert angle.unit is AngleUnit.DEGREES
        assert angle.degrees == 30.0

    def test_tangent_uses_radian_value(self) -> None:
        """Test tangent() is computed from radians whatever the tag."""
        assert Angle.from_degrees(45.0).tangent() == pytest.approx(1.0)
        assert Angle.from_radians(math.pi / 12).tangent() == pytest.approx(math.tan(math.pi / 12))
        assert Angle.from_degrees(-30.0).tangent() == pytest.approx(-math.tan(math.pi / 6))

    def test_to_unit(self) -> None:
        """Test to() re-tags the angle in the requested unit."""
        angle = Angle.from_degrees(90.0).to(AngleUnit.RADIANS)

        assert angle.unit is AngleUnit.RADIANS
        assert angle.value == pytest.approx(math.pi / 2)
        assert angle.to(AngleUnit.DEGREES).value == pytest.approx(90.0)

    def test_conversion_functions(self) -> None:
        """Test the module-level conversion functions."""
        deg = Angle.from_degrees(60.0)
        rad = to_radians(deg)

        assert rad == Angle(math.radians(60.0), AngleUnit.RADIANS)
        assert to_degrees(rad).value == pytest.approx(60.0)
        # Already in the target unit: same object back
        assert to_radians(rad) is rad
        assert to_degrees(deg) is deg

    def test_as_radians_accepts_float(self) -> None:
        """Test bare floats are taken to be radians."""
        assert as_radians(0.25) == 0.25
        assert as_radians(Angle.from_degrees(180.0)) == pytest.approx(math.pi)

    def test_frozen(self) -> None:
        """Test Angle is immutable."""
        angle = Angle.from_radians(0.5)

        with pytest.raises(FrozenInstanceError):
            angle.value = 1.0  # type: ignore[misc]

    def test_invalid_unit(self) -> None:
        """Test a unit that is not an AngleUnit is rejected."""
        with pytest.raises(TypeError):
            Angle(1.0, "degrees")  # type: ignore[arg-type]

    def test_value_stored_as_float(self) -> None:
        """Test integer and numpy values are stored as plain floats."""
        assert type(Angle(5).value) is float
        assert Angle(5) == Angle(5.0)
        assert type(Angle(np.float32(0.5)).value) is float

    @pytest.mark.parametrize("value", ["x", None, True], ids=["string", "none", "bool"])
    def test_invalid_value(self, value: object) -> None:
        """Test non-numeric values are rejected at construction."""
        with pytest.raises(TypeError):
            Angle(value)  # type: ignore[arg-type]

    def test_hashable_and_equal(self) -> None:
        """Test Angles compare and hash by value and unit."""
        assert Angle.from_degrees(10.0) == Angle.from_degrees(10.0)
        assert Angle.from_degrees(10.0) != Angle.from_radians(10.0)
        assert len({Angle.from_degrees(10.0), Angle.from_degrees(10.0)}) == 1
