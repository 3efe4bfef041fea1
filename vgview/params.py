import os.path
from pygame import Color

from .util import Rec, eprint
params = Rec()

#############################
params.start_dimensions = (640, 480)
params.title = 'Hello'
params.resizable = False

_INSTALL = os.path.expanduser('~/.vgview')
params.homedir = _INSTALL

params.background = Color(77, 77, 82) # rgbf(0.3, 0.3, 0.32)
params.label_color = Color(255, 255, 255, 128)
params.label_font_size = 14

params.font_paths = {
        'regular': os.path.join('assets', 'Roboto-Regular.ttf'),
        'arabic': os.path.join('assets', 'NotoSansArabic-Black.ttf'),
        }
# ISO 15924 script of each font's text, for shaping
params.font_scripts = {'arabic': 'Arab'}

# one wheel notch = 1 / zoom_divisor relative zoom
params.zoom_divisor = 10
params.min_scale = 0.01
params.max_scale = 100

params.vsync = True
params.eps = 1e-12 # determinant under which a transform is singular

### CODE to read from conf

def cast(f):
    def partial(*a, **ka):
        return lambda s: f(s.strip(), *a, **ka)
    return partial

class CastExn(Exception): pass

def xassert(truthy):
    if not truthy:
        raise CastExn

@cast
def rint(s, min = None, max = None):
    expected = "int"
    if min is not None: expected = f'{min} <= ' + expected
    if max is not None: expected += f' <= {max}'
    try:
        x = int(s)
        if min is not None: xassert( min <= x)
        if max is not None: xassert( x <= max)
        return x
    except (ValueError, CastExn):
        raise CastExn(expected)

@cast
def rfloat(s, min = 1e-6, max = 1e6):
    try:
        x = float(s)
        xassert( min <= x <= max )
        return x
    except (ValueError, CastExn):
        raise CastExn(f"{min} <= float <= {max}")

@cast
def rcolor(s):
    words = [w for w in s.replace(',', ' ').split() if w]
    try:
        xassert(len(words) in (3, 4))
        return Color(*[ rint(0, 255)(compo) for compo in words ])
    except CastExn:
        try:
            xassert(len(s) in (6, 8))
            return Color(*[int(s[i:i+2], 16) for i in range(0, len(s), 2)])
        except (ValueError, CastExn):
            raise CastExn("color (r, g, b[, a] or xxxxxx[xx] (x = hex digit))")

@cast
def rpath(s):
    return os.path.expanduser(s)

def _font_setter(key):
    def setter(val):
        params.font_paths = { **params.font_paths, key: val }
    return setter

setable_to_type = {
        'background': rcolor(),
        'label_color': rcolor(),
        'label_font_size': rint(4, 200),
        #
        'zoom_divisor': rfloat(1, 1000),
        'min_scale': rfloat(1e-6, 1),
        'max_scale': rfloat(1, 1e6),
        #
        'vsync': lambda s: s.strip().lower() in ('1', 'yes', 'true', 'on'),
        #
        'font_regular': rpath(),
        'font_arabic': rpath(),
        }
_special_setters = {
        'font_regular': _font_setter('regular'),
        'font_arabic': _font_setter('arabic'),
        }

def apply_conf_lines(lines, where = 'conf'):
    for i, line in enumerate(lines):
        line = line.strip()
        if not line or line[0] == '#': continue
        #
        try:
            [param, val_str] = [s.strip() for s in line.split('=', 1)]
        except ValueError:
            eprint(f"{where}: line {i+1} | expected 'param = value'")
            continue
        try:
            apply_cast = setable_to_type[param]
            val = apply_cast(val_str)
        except KeyError:
            eprint(f"{where}: line {i+1} | no such param: '{param}'")
            continue
        except CastExn as e:
            eprint(f"{where}: line {i+1} | expected [{e}] for '{param}', but got '{val_str}'")
            continue
        if param in _special_setters: _special_setters[param](val)
        else: setattr(params, param, val)

def read_conf(directory = _INSTALL):
    if not os.path.isdir(directory):
        return
    #
    for fname in sorted(os.listdir(directory)):
        if not (parts := fname.split('.')) or parts[-1] != 'conf':
            continue
        try:
            with open(os.path.join(directory, fname)) as f:
                apply_conf_lines(f, where = fname)
        except OSError as e:
            eprint(f"could not read conf file '{fname}': {e}")
    ##

read_conf() # read conf when initing module
