"""
Shared fixtures for vgview tests.

Provides fake window / graphics context / text canvas collaborators that
record what the core asks of them.
"""
import sys
import os
import pytest

# Ensure the repository root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from vgview.surface import SurfaceBinding
from vgview.text import GlyphDrawer, LabelSpec, ALIGN_LEFT, ALIGN_RIGHT
from vgview.run import RenderLoop


class FakeWindow:
    def __init__(self, size=(640, 480), scale=1.0):
        self.size = size
        self.scale = scale

    def inner_size(self):
        return self.size

    def scale_factor(self):
        return self.scale


class FakeContext:
    def __init__(self, log=None):
        self.log = log if log is not None else []
        self.resizes = []
        self.swaps = 0
        self.releases = 0

    def resize_surface(self, w, h):
        self.resizes.append((w, h))
        self.log.append(('resize_surface', w, h))

    def make_current(self):
        self.log.append(('make_current',))

    def swap_buffers(self):
        self.swaps += 1
        self.log.append(('swap_buffers',))

    def release(self):
        self.releases += 1
        self.log.append(('release',))


class FakeCanvas:
    def __init__(self, log=None):
        self.log = log if log is not None else []
        self.transform = None
        self.texts = []

    def set_size(self, w, h, dpr):
        self.log.append(('set_size', w, h, dpr))

    def clear_rect(self, x, y, w, h, color):
        self.log.append(('clear_rect', x, y, w, h))

    def set_transform(self, transform):
        self.transform = transform
        self.log.append(('set_transform', transform))

    def fill_text(self, x, y, text, paint):
        self.texts.append((x, y, text, paint))
        self.log.append(('fill_text', x, y, text))

    def flush(self):
        self.log.append(('flush',))


LABELS = (
    LabelSpec("Hallo Leute", 200., 100., 280., 20., ALIGN_LEFT, 'regular'),
    LabelSpec("سلام دوستان", 200., 150., 280., 20., ALIGN_RIGHT, 'arabic'),
)
FONTS = {'regular': 'font:regular', 'arabic': 'font:arabic'}


@pytest.fixture
def log():
    return []


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def context(log):
    return FakeContext(log)


@pytest.fixture
def canvas(log):
    return FakeCanvas(log)


@pytest.fixture
def surface(window, context):
    return SurfaceBinding(window, context)


@pytest.fixture
def loop(surface, canvas):
    return RenderLoop(surface, canvas, GlyphDrawer(FONTS), LABELS)
