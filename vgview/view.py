from .params import params
from .util import clamp
from .transform import AffineTransform, near_zero

class ViewController:
    "Owns the view -> screen transform of one view"
    def __init__(self, transform = None, min_scale = None, max_scale = None, zoom_divisor = None):
        self.transform = AffineTransform.identity() if transform is None else transform
        self.min_scale = params.min_scale if min_scale is None else min_scale
        self.max_scale = params.max_scale if max_scale is None else max_scale
        self.zoom_divisor = params.zoom_divisor if zoom_divisor is None else zoom_divisor
    #
    def to_view(self, sx, sy):
        "screen to view"
        return self.transform.inverse().map_point(sx, sy)
    #
    def pan(self, dx, dy, anchor = (0, 0)):
        # the view-space point that was under `anchor` ends up under `anchor + (dx, dy)`
        (ax, ay) = anchor
        inv = self.transform.inverse()
        (x0, y0) = inv.map_point(ax, ay)
        (x1, y1) = inv.map_point(ax + dx, ay + dy)
        self.transform = self.transform.translate(x1 - x0, y1 - y0)
    #
    def zoom_factor(self, wheel_delta):
        return 1 + wheel_delta / self.zoom_divisor
    #
    def _clamped_factor(self, factor):
        if factor <= 0:
            return 1.
        scale = self.transform.average_scale()
        # a view already out of bounds may only move back towards them
        lo, hi = min(scale, self.min_scale), max(scale, self.max_scale)
        target = scale * factor
        if lo <= target <= hi:
            return factor
        clamped = clamp(target, lo, hi) / scale
        if (clamped - 1.) * (factor - 1.) < 0:
            return 1.
        return clamped
    #
    def zoom_about(self, sx, sy, wheel_delta):
        "zoom keeping the view-space point under (sx, sy) fixed. returns the applied factor"
        factor = self._clamped_factor(self.zoom_factor(wheel_delta))
        if near_zero(factor - 1.):
            return 1.
        (px, py) = self.to_view(sx, sy)
        self.transform = (self.transform
                .translate(px, py)
                .scale(factor, factor)
                .translate(-px, -py))
        return factor
    ###
