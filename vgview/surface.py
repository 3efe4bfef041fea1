from dataclasses import dataclass

@dataclass(frozen = True)
class SurfaceDescriptor:
    width: int
    height: int
    scale: float = 1.

class SurfaceBinding:
    """
    Keeps the presentable surface of `context` the size of `window`.

    `window` needs `inner_size()` and `scale_factor()`,
    `context` needs `resize_surface(w, h)`, `swap_buffers()` and `release()`.
    """
    def __init__(self, window, context):
        self.window = window
        self.context = context
        (w, h) = window.inner_size()
        self.descriptor = SurfaceDescriptor(int(w), int(h), float(window.scale_factor()))
        self._last_synced = None
        self.released = False
    #
    def on_resize(self, width, height):
        "returns True if the surface was reconfigured"
        width, height = int(width), int(height)
        assert width >= 0 and height >= 0, "window sizes are never negative"
        if width == 0 or height == 0: # minimized
            return False
        d = self.descriptor
        if (width, height) == (d.width, d.height):
            return False
        self.context.resize_surface(width, height)
        self.descriptor = SurfaceDescriptor(width, height, d.scale)
        return True
    #
    def current_scale_factor(self):
        return float(self.window.scale_factor())
    #
    def sync(self):
        "descriptor for the frame about to be drawn, and whether it differs from the previous frame's"
        scale = self.current_scale_factor()
        if scale > 0 and scale != self.descriptor.scale:
            d = self.descriptor
            self.descriptor = SurfaceDescriptor(d.width, d.height, scale)
        changed = self.descriptor != self._last_synced
        self._last_synced = self.descriptor
        return self.descriptor, changed
    #
    def present(self):
        # may block until vertical sync
        self.context.swap_buffers()
    #
    def release(self):
        if self.released: return
        self.released = True
        self.context.release()
    ###
