import pygame as pg

from .util import Rec, constants

######### CORE EVENTS ##########
ev = Rec()
ev.RESIZED, ev.MOTION, ev.PRESS, ev.RELEASE, ev.WHEEL, ev.CLOSE, ev.REDRAW = constants(7)

MS_LEFT, MS_MID, MS_RIGHT = 1, 2, 3

def Resized(w, h):    return Rec(type = ev.RESIZED, w = w, h = h)
def Motion(x, y):     return Rec(type = ev.MOTION, x = x, y = y)
def Pressed(button):  return Rec(type = ev.PRESS, button = button)
def Released(button): return Rec(type = ev.RELEASE, button = button)
def Wheel(dy):        return Rec(type = ev.WHEEL, dy = dy)
def Close():          return Rec(type = ev.CLOSE)
def Redraw():         return Rec(type = ev.REDRAW)

## Pygame event related utils
_RESIZE_TYPES = {getattr(pg, name) for name in ('WINDOWRESIZED', 'WINDOWSIZECHANGED') if hasattr(pg, name)}
_CLOSE_TYPES = {getattr(pg, name) for name in ('QUIT', 'WINDOWCLOSE') if hasattr(pg, name)}
_REDRAW_TYPES = {getattr(pg, name) for name in ('WINDOWEXPOSED', 'VIDEOEXPOSE') if hasattr(pg, name)}

def wheel_lines(pg_ev):
    # `precise_y` keeps fractional notches from touchpads, when available
    return float(getattr(pg_ev, 'precise_y', pg_ev.y))

def translate(pg_ev, scale = 1.):
    """
    pygame event -> core event, or None if the core doesn't care.
    `scale` is the device pixel ratio: window sizes are reported in pixels
    while pointer positions stay in logical (screen-space) coordinates.
    """
    t = pg_ev.type
    if t in _CLOSE_TYPES:
        return Close()
    if t in _RESIZE_TYPES:
        return Resized(int(round(pg_ev.x * scale)), int(round(pg_ev.y * scale)))
    if t == pg.MOUSEMOTION:
        return Motion(*pg_ev.pos)
    if t == pg.MOUSEBUTTONDOWN and pg_ev.button in (MS_LEFT, MS_MID, MS_RIGHT):
        return Pressed(pg_ev.button)
    if t == pg.MOUSEBUTTONUP and pg_ev.button in (MS_LEFT, MS_MID, MS_RIGHT):
        return Released(pg_ev.button)
    if t == pg.MOUSEWHEEL:
        return Wheel(wheel_lines(pg_ev))
    if t in _REDRAW_TYPES:
        return Redraw()
    return None

def translate_all(pg_events, scale = 1.):
    return [cev for cev in (translate(e, scale) for e in pg_events) if cev is not None]
