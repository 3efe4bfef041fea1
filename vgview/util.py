import sys

def eprint(*a, **ka):
    ka['file'] = sys.stderr
    print(*a, **ka)

class Rec:
    def __init__(self, **kwargs):
        self.__dict__ = kwargs
    #
    def update(self, other = None, /, **ka):
        if other:
            ka = other.__dict__
        self.__dict__.update(ka)
        return self
    ###

def clamp(x, mini, maxi):
    if x < mini: return mini
    elif x > maxi: return maxi
    else: return x

def constants(n):
    return range(n)
# use case K1, K2, K3 = constants(3)

class StartupError(Exception):
    "Anything that prevents the viewer from reaching its event loop"
