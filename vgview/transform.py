import numpy as np
from math import sqrt

from .params import params

def ar(seq):
    return np.array(seq, dtype = float)

def near_zero(x, eps = None):
    eps = params.eps if eps is None else eps
    return -eps < x < eps

class SingularTransformError(ValueError): pass

class AffineTransform:
    """
    2D affine map, stored as a 3x3 matrix acting on column vectors (x, y, 1):

        x' = a*x + c*y + e
        y' = b*x + d*y + f

    Instances are values: every operation returns a new transform.
    """
    __slots__ = ('_m',)
    #
    def __init__(self, a = 1., b = 0., c = 0., d = 1., e = 0., f = 0.):
        self._m = ar([
            [a, c, e],
            [b, d, f],
            [0, 0, 1],
        ])
    #
    @classmethod
    def identity(cls):
        return cls()
    #
    @classmethod
    def from_matrix(cls, m):
        m = ar(m)
        return cls(m[0, 0], m[1, 0], m[0, 1], m[1, 1], m[0, 2], m[1, 2])
    #
    @classmethod
    def translation_of(cls, dx, dy):
        return cls(e = dx, f = dy)
    #
    @classmethod
    def scaling_of(cls, sx, sy):
        return cls(a = sx, d = sy)
    #
    @property
    def matrix(self):
        return self._m.copy()
    #
    def coefficients(self):
        m = self._m
        return tuple(float(v) for v in (m[0, 0], m[1, 0], m[0, 1], m[1, 1], m[0, 2], m[1, 2]))
    #
    def __repr__(self):
        return "AffineTransform(a={:g}, b={:g}, c={:g}, d={:g}, e={:g}, f={:g})".format(
                *self.coefficients())
    #
    def __eq__(self, other):
        if not isinstance(other, AffineTransform): return NotImplemented
        return bool(np.array_equal(self._m, other._m))
    #
    def __hash__(self):
        return hash(self.coefficients())
    #
    def almost_equal(self, other, tol = 1e-9):
        return bool(np.allclose(self._m, other._m, rtol = 0, atol = tol))
    #
    def map_point(self, x, y):
        x2, y2, _ = self._m @ ar([x, y, 1])
        return (float(x2), float(y2))
    #
    def multiply(self, other):
        "self after other: (T @ U).map_point(p) == T.map_point(U.map_point(p))"
        return AffineTransform.from_matrix(self._m @ other._m)
    #
    def __matmul__(self, other):
        return self.multiply(other)
    #
    def determinant(self):
        m = self._m
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
    #
    def inverse(self):
        det = self.determinant()
        if near_zero(det):
            raise SingularTransformError(f"cannot invert {self!r}")
        (a, b, c, d, e, f) = self.coefficients()
        ia, ib, ic, id_ = d / det, -b / det, -c / det, a / det
        return AffineTransform(ia, ib, ic, id_, -(ia * e + ic * f), -(ib * e + id_ * f))
    #
    # elementary operations are post-multiplied:
    # they act on points *before* the current transform does
    def translate(self, dx, dy):
        return self @ AffineTransform.translation_of(dx, dy)
    #
    def scale(self, sx, sy):
        return self @ AffineTransform.scaling_of(sx, sy)
    #
    def translation(self):
        return (float(self._m[0, 2]), float(self._m[1, 2]))
    #
    def scale_factors(self):
        "length of the images of the unit axes"
        cols = self._m[:2, :2]
        return (float(np.hypot(*cols[:, 0])), float(np.hypot(*cols[:, 1])))
    #
    def average_scale(self):
        return sqrt(abs(self.determinant()))
    ###
