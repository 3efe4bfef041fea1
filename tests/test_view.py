"""
Tests for ViewController pan and zoom.

Covers:
- Pan keeps the view point under the cursor (at any zoom)
- Zoom keeps the view point under the cursor
- Zoom factor law (1 + d/10 per wheel line)
- Scale clamping and rejection of non-positive factors
- Composition order: pan/zoom followed by their inverses returns to identity
"""
import pytest

from vgview.transform import AffineTransform
from vgview.view import ViewController


STARTS = [
    AffineTransform.identity(),
    AffineTransform(a=2, d=2, e=-40, f=15),
    AffineTransform(a=0.5, d=0.5, e=100, f=-30),
    AffineTransform(a=1.2, b=0.3, c=-0.3, d=1.2, e=5, f=7),
]


# ══════════════════════════════════════════════════════════════════════════
# Pan
# ══════════════════════════════════════════════════════════════════════════

class TestPan:

    @pytest.mark.parametrize("start", STARTS)
    @pytest.mark.parametrize("delta", [(20, 10), (-7.5, 3), (0, -120)])
    def test_point_under_cursor_is_kept(self, start, delta):
        view = ViewController(start)
        cursor = (300, 200)
        before = view.to_view(*cursor)
        view.pan(*delta, anchor=cursor)
        after = view.to_view(cursor[0] + delta[0], cursor[1] + delta[1])
        assert after == pytest.approx(before, abs=1e-9)

    def test_pan_at_unit_zoom_is_screen_delta(self):
        view = ViewController()
        view.pan(20, 10)
        assert view.transform.translation() == pytest.approx((20, 10))

    def test_pan_does_not_depend_on_anchor(self):
        a = ViewController(STARTS[3])
        b = ViewController(STARTS[3])
        a.pan(13, -4)
        b.pan(13, -4, anchor=(555, 12))
        assert a.transform.almost_equal(b.transform)

    def test_pan_keeps_scale(self):
        view = ViewController(AffineTransform(a=3, d=3))
        view.pan(30, 30)
        assert view.transform.scale_factors() == pytest.approx((3, 3))
        assert view.transform.translation() == pytest.approx((30, 30))


# ══════════════════════════════════════════════════════════════════════════
# Zoom
# ══════════════════════════════════════════════════════════════════════════

class TestZoom:

    @pytest.mark.parametrize("start", STARTS)
    @pytest.mark.parametrize("cursor", [(0, 0), (320, 210), (-50, 999)])
    @pytest.mark.parametrize("delta", [1, -1, 3, -4.5, 0.25])
    def test_zoom_is_about_the_cursor(self, start, cursor, delta):
        view = ViewController(start)
        before = view.to_view(*cursor)
        view.zoom_about(*cursor, delta)
        assert view.to_view(*cursor) == pytest.approx(before, abs=1e-7)

    @pytest.mark.parametrize("delta", [-5, -3, -1, 0.5, 1, 2, 5])
    def test_zoom_factor_law(self, delta):
        view = ViewController()
        applied = view.zoom_about(100, 100, delta)
        assert applied == pytest.approx(1 + delta / 10)
        assert view.transform.scale_factors() == pytest.approx((1 + delta / 10,) * 2)

    def test_zoom_factor_is_relative_to_current_scale(self):
        view = ViewController(AffineTransform(a=2, d=2))
        view.zoom_about(0, 0, 1)
        assert view.transform.scale_factors() == pytest.approx((2.2, 2.2))

    def test_zero_delta_changes_nothing(self):
        view = ViewController(STARTS[1])
        assert view.zoom_about(10, 10, 0) == 1.0
        assert view.transform == STARTS[1]

    def test_zoom_factor(self):
        view = ViewController()
        assert view.zoom_factor(1) == pytest.approx(1.1)
        assert view.zoom_factor(-2) == pytest.approx(0.8)

    def test_custom_divisor(self):
        view = ViewController(zoom_divisor=4)
        assert view.zoom_factor(1) == pytest.approx(1.25)


class TestZoomClamp:

    def test_non_positive_factor_is_rejected(self):
        view = ViewController()
        assert view.zoom_about(50, 50, -10) == 1.0
        assert view.zoom_about(50, 50, -25) == 1.0
        assert view.transform == AffineTransform.identity()

    def test_zoom_out_stops_at_min_scale(self):
        view = ViewController(min_scale=0.25, max_scale=4)
        for _ in range(100):
            view.zoom_about(320, 240, -5)
        assert view.transform.average_scale() == pytest.approx(0.25)
        # still invertible
        view.transform.inverse()

    def test_zoom_in_stops_at_max_scale(self):
        view = ViewController(min_scale=0.25, max_scale=4)
        for _ in range(100):
            view.zoom_about(320, 240, 5)
        assert view.transform.average_scale() == pytest.approx(4)

    def test_clamped_zoom_still_keeps_cursor(self):
        view = ViewController(min_scale=0.25, max_scale=4)
        before = view.to_view(123, 45)
        view.zoom_about(123, 45, 50)
        assert view.transform.average_scale() == pytest.approx(4)
        assert view.to_view(123, 45) == pytest.approx(before)

    def test_zoom_at_bound_is_noop(self):
        view = ViewController(AffineTransform(a=4, d=4), min_scale=0.25, max_scale=4)
        assert view.zoom_about(0, 0, 1) == 1.0
        assert view.transform == AffineTransform(a=4, d=4)

    def test_below_min_zoom_out_is_noop(self):
        start = AffineTransform(a=0.005, d=0.005)
        view = ViewController(start, min_scale=0.01, max_scale=100)
        assert view.zoom_about(0, 0, -1) == 1.0
        assert view.transform == start

    def test_below_min_zoom_in_follows_factor_law(self):
        view = ViewController(AffineTransform(a=0.005, d=0.005), min_scale=0.01, max_scale=100)
        assert view.zoom_about(0, 0, 1) == pytest.approx(1.1)
        assert view.transform.average_scale() == pytest.approx(0.0055)

    def test_above_max_zoom_in_is_noop(self):
        start = AffineTransform(a=200, d=200)
        view = ViewController(start, min_scale=0.01, max_scale=100)
        assert view.zoom_about(0, 0, 1) == 1.0
        assert view.transform == start

    def test_above_max_zoom_out_follows_factor_law(self):
        view = ViewController(AffineTransform(a=200, d=200), min_scale=0.01, max_scale=100)
        assert view.zoom_about(0, 0, -1) == pytest.approx(0.9)
        assert view.transform.average_scale() == pytest.approx(180)

    def test_tightened_bounds_never_reverse_direction(self):
        view = ViewController(AffineTransform(a=2, d=2))
        view.min_scale, view.max_scale = 3, 10
        for delta in (-1, -5, -0.5):
            assert view.zoom_about(0, 0, delta) == 1.0
        assert view.transform.average_scale() == pytest.approx(2)
        assert view.zoom_about(0, 0, 5) == pytest.approx(1.5)


# ══════════════════════════════════════════════════════════════════════════
# Composition order
# ══════════════════════════════════════════════════════════════════════════

class TestComposition:

    def test_inverse_sequence_returns_to_identity(self):
        view = ViewController()
        view.pan(50, 30)
        view.zoom_about(100, 100, 2)
        # undo the zoom (factor 1/1.2) at the same cursor, then the pan
        view.zoom_about(100, 100, 10 * (1 / 1.2 - 1))
        view.pan(-50, -30)
        assert view.transform.almost_equal(AffineTransform.identity(), tol=1e-9)
