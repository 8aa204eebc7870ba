# canvasutils.py - cairo canvas for the clock face
import cairo

# init_canvas - initialize a cairo canvas and context
# The canvas is of size (w, h) in display units, and is optionally cleared
# to the given color. Unlike a map canvas the coordinates are not
# normalized: one unit is one pixel, y grows downward.
def init_canvas(w, h, clearcolor = None):
    surf = cairo.ImageSurface(cairo.FORMAT_RGB24, w, h)
    ctx = cairo.Context(surf)
    ctx.set_line_cap(cairo.LINE_CAP_ROUND)
    ctx.set_line_width(1)

    if clearcolor:
        ctx.set_source_rgb(*clearcolor)
        ctx.paint()

    return (ctx, surf)


class CairoSurface:
    """Drawing surface for the face backed by a cairo context.

    color selects the palette policy; a monochrome surface still draws
    into an RGB canvas, only the styles change.
    """

    def __init__(self, ctx, color=True):
        self.ctx = ctx
        self.is_color = color

    def set_stroke_color(self, rgb):
        self.ctx.set_source_rgb(*rgb)

    def set_stroke_width(self, width):
        self.ctx.set_line_width(width)

    # draw_line - stroke one segment between integer points.
    # Lines sit on pixel centers so one unit wide strokes stay crisp.
    def draw_line(self, a, b):
        self.ctx.move_to(a[0] + 0.5, a[1] + 0.5)
        self.ctx.line_to(b[0] + 0.5, b[1] + 0.5)
        self.ctx.stroke()
