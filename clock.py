# clock.py: draw the echo clock face on a drawing surface.

from chain import build_chain
from echoes import build_echoes
from style import echo_style, outline_style, overlay_style

# draw_lines_and_echoes - draw every echo, then the base chain on top
# parameters:
#   surface - anything with is_color, set_stroke_color, set_stroke_width
#             and draw_line (see canvasutils.CairoSurface)
#   echoes - an echoes.EchoSet
#   point_count - joints in use (5 or 6)
def draw_lines_and_echoes(surface, echoes, point_count):
    color = surface.is_color
    base = echoes.base

    surface.set_stroke_width(echo_style(1, color).width)
    for p in range(1, point_count):
        surface.set_stroke_color(echo_style(p, color).color)
        for offset in echoes.offsets():
            points = echoes[offset]
            surface.draw_line(points[p - 1], points[p])

    for p in range(1, point_count):
        style = outline_style(p)
        surface.set_stroke_width(style.width)
        surface.set_stroke_color(style.color)
        surface.draw_line(base[p - 1], base[p])

    for p in range(1, point_count):
        style = overlay_style(p, color)
        surface.set_stroke_width(style.width)
        surface.set_stroke_color(style.color)
        surface.draw_line(base[p - 1], base[p])

# draw_clock - redraw callback for the whole face
# parameters:
#   surface - the drawing surface
#   bounds - chain.Bounds of the drawable area
#   state - ticker.ClockState with the current snapshot and precision
def draw_clock(surface, bounds, state):
    point_count = state.point_count
    base = build_chain(bounds, state.snapshot)
    echoes = build_echoes(base, point_count)
    draw_lines_and_echoes(surface, echoes, point_count)
    return echoes
