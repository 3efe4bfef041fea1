from dataclasses import dataclass

from .params import params
from .util import Rec, StartupError, constants

ALIGN_LEFT, ALIGN_CENTER, ALIGN_RIGHT = constants(3)
BASELINE_TOP, BASELINE_MIDDLE, BASELINE_BOTTOM = constants(3)

@dataclass(frozen = True)
class LabelSpec:
    text: str
    x: float
    y: float
    w: float
    h: float
    align: int = ALIGN_LEFT
    font: str = 'regular'

def default_labels():
    return (
        LabelSpec("Hallo Leute", 200., 100., 280., 20., ALIGN_LEFT, 'regular'),
        LabelSpec("سلام دوستان", 200., 150., 280., 20., ALIGN_RIGHT, 'arabic'),
    )

def Paint(font, size, color, align = ALIGN_LEFT, baseline = BASELINE_MIDDLE):
    return Rec(font = font, size = size, color = color, align = align, baseline = baseline)

def load_fonts(loader, paths, scripts = None):
    "load every font once, {key: path} -> {key: font}"
    scripts = scripts or {}
    fonts = {}
    for key, path in paths.items():
        try:
            if key in scripts: fonts[key] = loader(path, scripts[key])
            else: fonts[key] = loader(path)
        except OSError as e:
            raise StartupError(f"could not load font '{key}' from '{path}': {e}") from e
    return fonts

class GlyphDrawer:
    def __init__(self, fonts, size = None, color = None):
        self.fonts = fonts
        self.size = params.label_font_size if size is None else size
        self.color = params.label_color if color is None else color
    #
    def check(self, labels):
        for label in labels:
            if label.font not in self.fonts:
                raise StartupError(f"label {label.text!r} uses unloaded font '{label.font}'")
        return labels
    #
    def paint(self, label):
        return Paint(self.fonts[label.font], self.size, self.color, label.align, BASELINE_MIDDLE)
    #
    def draw(self, canvas, label):
        # single line, vertically centered in the label's box
        canvas.fill_text(label.x, label.y + label.h * 0.5, label.text, self.paint(label))
    ###
