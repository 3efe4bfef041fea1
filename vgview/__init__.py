from os import environ
environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

from .run import main, RenderLoop
from .view import ViewController
from .transform import AffineTransform
from .surface import SurfaceBinding, SurfaceDescriptor
from .text import GlyphDrawer, LabelSpec
