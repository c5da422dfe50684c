"""Tests for layer_tree.types and layer_tree.geometry — Vec2, Margins, Path."""

import pytest

from layer_tree.geometry import Path
from layer_tree.types import Margins, Vec2, Winding


class TestVec2:
    def test_add(self):
        assert Vec2(1.0, 2.0) + Vec2(3.0, 4.5) == Vec2(4.0, 6.5)

    def test_scaled_uniform(self):
        assert Vec2(2.0, 3.0).scaled(2.0) == Vec2(4.0, 6.0)

    def test_scaled_per_axis(self):
        assert Vec2(2.0, 3.0).scaled(2.0, 0.5) == Vec2(4.0, 1.5)

    def test_zero(self):
        assert Vec2.zero() == Vec2(0.0, 0.0)

    def test_frozen(self):
        v = Vec2(1.0, 1.0)
        with pytest.raises(AttributeError):
            v.x = 5.0  # type: ignore[misc]


class TestMargins:
    def test_overhang_when_inner_exceeds_twice_outer(self):
        m = Margins(inner_margins=Vec2(5.0, 0.0), outer_margins=Vec2(2.0, 0.0))
        assert m.may_overhang()

    def test_no_overhang_at_boundary(self):
        m = Margins(inner_margins=Vec2(4.0, 9.0), outer_margins=Vec2(2.0, 0.0))
        assert not m.may_overhang()


class TestPath:
    def test_positive_rectangle_corners(self):
        path = Path.rectangle(Vec2(1.0, 2.0), Vec2(5.0, 7.0))
        assert path.points == (Vec2(1.0, 2.0), Vec2(5.0, 2.0), Vec2(5.0, 7.0), Vec2(1.0, 7.0))
        assert path.closed

    def test_negative_rectangle_corners(self):
        path = Path.rectangle(Vec2(1.0, 2.0), Vec2(5.0, 7.0), Winding.Negative)
        assert path.points == (Vec2(1.0, 2.0), Vec2(1.0, 7.0), Vec2(5.0, 7.0), Vec2(5.0, 2.0))

    def test_bounds(self):
        path = Path.rectangle(Vec2(-3.0, 2.0), Vec2(5.0, 7.0), Winding.Negative)
        assert path.bounds() == (Vec2(-3.0, 2.0), Vec2(5.0, 7.0))

    def test_empty_path_has_no_bounds(self):
        with pytest.raises(ValueError):
            Path(points=()).bounds()
