import sys
import pygame as pg

from .util import Rec, StartupError, eprint, constants
from .params import params
from .hooks import ev, MS_LEFT
from .view import ViewController
from .surface import SurfaceBinding
from .text import GlyphDrawer, default_labels, load_fonts

IDLE, DISPATCHING, DRAWING, STOPPED = constants(4)

def PointerState(x = 0., y = 0., dragging = False):
    return Rec(x = x, y = y, dragging = dragging)

class RenderLoop:
    """
    Event driven redraw scheduler.

    Owns the view, the pointer and the surface binding. Events go through
    `dispatch`, one at a time; once a batch is drained `redraw` builds and
    presents one frame (continuous redraw).
    """
    def __init__(self, surface, canvas, glyphs, labels, view = None, background = None):
        self.surface = surface
        self.canvas = canvas
        self.glyphs = glyphs
        self.labels = tuple(glyphs.check(labels))
        self.view = ViewController() if view is None else view
        self.pointer = PointerState()
        self.background = params.background if background is None else background
        self.state = IDLE
        self.frames = 0
    #
    def stopped(self):
        return self.state == STOPPED
    #
    def stop(self):
        self.state = STOPPED
    #
    def dispatch(self, event):
        if self.stopped(): return
        self.state = DISPATCHING
        p = self.pointer
        match event.type:
            case ev.RESIZED:
                self.surface.on_resize(event.w, event.h)
            case ev.MOTION:
                if p.dragging:
                    self.view.pan(event.x - p.x, event.y - p.y, anchor = (p.x, p.y))
                p.x, p.y = event.x, event.y
            case ev.PRESS if event.button == MS_LEFT:
                p.dragging = True
            case ev.RELEASE if event.button == MS_LEFT:
                p.dragging = False
            case ev.WHEEL:
                self.view.zoom_about(p.x, p.y, event.dy)
            case ev.CLOSE:
                self.stop()
                return
            case _: pass
        self.state = IDLE
    #
    def redraw(self):
        if self.stopped(): return
        self.state = DRAWING
        descriptor, changed = self.surface.sync()
        (w, h) = (descriptor.width, descriptor.height)
        if changed:
            self.canvas.set_size(w, h, descriptor.scale)
        self.canvas.clear_rect(0, 0, w, h, self.background)
        self.canvas.set_transform(self.view.transform)
        for label in self.labels:
            self.glyphs.draw(self.canvas, label)
        self.canvas.flush()
        self.surface.present()
        self.frames += 1
        self.state = IDLE
    #
    def step(self, events):
        for event in events:
            self.dispatch(event)
            if self.stopped(): return
        self.redraw()
    #
    def run(self, poll):
        try:
            while not self.stopped():
                self.step(poll())
        finally:
            self.stop()
            self.surface.release()
    ###

def init_context(dimensions = None, title = None, resizable = None):
    "build the collaborators. raises StartupError"
    from .backend import PygameWindow, GpuContext, TextCanvas, load_font
    #
    cx = Rec()
    cx.window = PygameWindow(
            dimensions or params.start_dimensions,
            params.title if title is None else title,
            params.resizable if resizable is None else resizable)
    try:
        cx.context = GpuContext(cx.window)
        cx.context.make_current()
        cx.surface = SurfaceBinding(cx.window, cx.context)
        cx.canvas = TextCanvas(cx.context.renderer)
        cx.fonts = load_fonts(load_font, params.font_paths, params.font_scripts)
        cx.loop = RenderLoop(cx.surface, cx.canvas, GlyphDrawer(cx.fonts), default_labels())
    except StartupError:
        cx.window.close()
        raise
    return cx

def main():
    pg.init()
    try:
        try:
            cx = init_context()
        except StartupError as e:
            eprint(f"Fatal: {e}")
            sys.exit(1)
        #
        try:
            cx.loop.run(cx.window.poll)
        except pg.error as e: # e.g. context loss, no recovery
            eprint(f"Fatal: {e}")
            sys.exit(1)
        finally:
            cx.window.close()
    finally:
        pg.quit()
