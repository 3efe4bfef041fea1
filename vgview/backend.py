import pygame as pg
import pygame.freetype
from pygame._sdl2.video import Window, Renderer, Texture

from .params import params
from .util import StartupError, eprint
from .hooks import translate_all
from .text import ALIGN_CENTER, ALIGN_RIGHT, BASELINE_TOP, BASELINE_BOTTOM
from .transform import AffineTransform

######### WINDOWING ##########
class PygameWindow:
    def __init__(self, size, title, resizable = False):
        try:
            self.window = Window(title, size = size, resizable = resizable, allow_high_dpi = True)
        except pg.error as e:
            raise StartupError(f"could not create window: {e}") from e
        self.renderer = None # set by GpuContext, needed for the pixel size
    #
    def logical_size(self):
        return tuple(self.window.size)
    #
    def inner_size(self):
        "size in pixels"
        if self.renderer is None:
            return self.logical_size()
        vp = self.renderer.get_viewport()
        return (vp.width, vp.height)
    #
    def scale_factor(self):
        (lw, _) = self.logical_size()
        (pw, _) = self.inner_size()
        if lw <= 0 or pw <= 0: return 1.
        return pw / lw
    #
    def poll(self):
        return translate_all(pg.event.get(), self.scale_factor())
    #
    def close(self):
        self.window.destroy()
    ###

######### GRAPHICS CONTEXT ##########
class GpuContext:
    "SDL2 accelerated renderer bound to a window; software renderer if that fails"
    def __init__(self, window, vsync = None):
        vsync = params.vsync if vsync is None else vsync
        try:
            self.renderer = Renderer(window.window, accelerated = 1, vsync = vsync)
        except pg.error as e:
            eprint(f"accelerated renderer unavailable ({e}), falling back to software")
            try:
                self.renderer = Renderer(window.window, accelerated = 0)
            except pg.error as e:
                raise StartupError(f"could not create renderer: {e}") from e
        window.renderer = self.renderer
        self.released = False
    #
    def make_current(self):
        self.renderer.target = None
    #
    def resize_surface(self, _width, _height):
        # SDL resizes the backing store with the window, only the viewport is stale
        self.renderer.set_viewport(None)
    #
    def swap_buffers(self):
        self.renderer.present()
    #
    def release(self):
        self.released = True
        self.renderer = None
    ###

RTL_SCRIPTS = {'Arab', 'Hebr', 'Syrc', 'Thaa', 'Nkoo'}

class ShapedFont:
    """
    SDL_ttf font shaped for one script (joining, right to left), with the
    same `render(text, color, size = ...)` call as a freetype font.
    SDL_ttf fonts have a fixed size, so one is opened per pixel size.
    """
    alpha_by_texture = True # color alpha goes on the texture
    #
    def __init__(self, path, script):
        self.path = path
        self.script = script
        self.rtl = script in RTL_SCRIPTS
        self._sized = {}
        self.sized(16) # unreadable files fail here, at startup
    #
    def sized(self, size):
        if size not in self._sized:
            f = pg.font.Font(self.path, size)
            f.set_script(self.script)
            direction = getattr(pg, 'DIRECTION_RTL', None)
            if self.rtl and direction is not None and hasattr(f, 'set_direction'):
                f.set_direction(direction)
            self._sized[size] = f
        return self._sized[size]
    #
    def render(self, text, color, size):
        c = pg.Color(color)
        surf = self.sized(size).render(text, True, (c.r, c.g, c.b))
        return surf, surf.get_rect()
    ###

def can_shape():
    return hasattr(pg.font.Font, 'set_script')

def load_font(path, script = None):
    try:
        if script and can_shape():
            if not pg.font.get_init(): pg.font.init()
            return ShapedFont(path, script)
        if script:
            eprint(f"no text shaping in this pygame, '{script}' text in '{path}' is drawn unjoined")
        if not pg.freetype.get_init(): pg.freetype.init()
        return pg.freetype.Font(path)
    except pg.error as e:
        raise OSError(str(e)) from e

######### TEXT ##########
class TextCanvas:
    """
    Buffers clear and fill_text commands and sends them to the renderer on `flush`.
    Each fill_text remembers the transform current when it was issued.
    """
    def __init__(self, renderer):
        self.renderer = renderer
        self.transform = AffineTransform.identity()
        self.size = (0, 0, 1.)
        self.commands = []
        self._textures = {}
    #
    def set_size(self, width, height, dpr):
        self.size = (width, height, dpr)
        self.renderer.set_viewport(None)
        self._textures = {} # glyph sizes depend on dpr
    #
    def set_transform(self, transform):
        self.transform = transform
    #
    def clear_rect(self, x, y, w, h, color):
        self.commands.append(('clear', (x, y, w, h), color))
    #
    def fill_text(self, x, y, text, paint):
        self.commands.append(('text', (x, y, text, paint), self.transform))
    #
    def _texture(self, text, paint, px_size):
        key = (id(paint.font), text, px_size, tuple(paint.color))
        if key not in self._textures:
            if len(self._textures) > 256: self._textures = {}
            surf, _ = paint.font.render(text, paint.color, size = px_size)
            tex = Texture.from_surface(self.renderer, surf)
            if getattr(paint.font, 'alpha_by_texture', False):
                tex.alpha = pg.Color(paint.color).a
            self._textures[key] = tex
        return self._textures[key]
    #
    def _draw_text(self, x, y, text, paint, transform):
        dpr = self.size[2]
        px_size = int(round(paint.size * transform.average_scale() * dpr))
        if px_size < 1 or not text: return
        tex = self._texture(text, paint, px_size)
        (sx, sy) = transform.map_point(x, y)
        (sx, sy) = (sx * dpr, sy * dpr)
        #
        if paint.align == ALIGN_RIGHT: left = sx - tex.width
        elif paint.align == ALIGN_CENTER: left = sx - tex.width / 2
        else: left = sx
        if paint.baseline == BASELINE_TOP: top = sy
        elif paint.baseline == BASELINE_BOTTOM: top = sy - tex.height
        else: top = sy - tex.height / 2
        tex.draw(dstrect = (int(left), int(top), tex.width, tex.height))
    #
    def flush(self):
        for (kind, a, extra) in self.commands:
            if kind == 'clear':
                self.renderer.draw_color = extra
                self.renderer.fill_rect(a)
            else:
                self._draw_text(*a, extra)
        self.commands = []
    ###
