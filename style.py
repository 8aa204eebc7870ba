# style.py - stroke colors and widths for the face
from typing import NamedTuple

from config import BOLD_START_SEGMENT, NUM_POINTS

BLACK = (0.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)

# one color per segment: year-month, month-hour, hour-minute,
# minute-second, second tip
segment_colors = [
    (0.667, 0.0, 0.667),    # purple
    (1.0, 0.0, 0.0),        # red
    (1.0, 0.667, 0.0),      # chrome yellow
    (0.0, 1.0, 0.0),        # green
    (0.0, 0.667, 1.0),      # vivid cerulean
]

ECHO_WIDTH = 1
OUTLINE_WIDTH = 7
OVERLAY_WIDTH = 3
THIN_OVERLAY_WIDTH = 1


class Style(NamedTuple):
    color: tuple
    width: int


def _check_segment(segment):
    if not 1 <= segment < NUM_POINTS:
        raise ValueError("segment index must be in 1..%d, got %r" % (NUM_POINTS - 1, segment))

# segment_color - palette entry for segment i, which joins point i-1 to point i
def segment_color(segment, color):
    _check_segment(segment)
    return segment_colors[segment - 1] if color else WHITE

def echo_style(segment, color):
    return Style(segment_color(segment, color), ECHO_WIDTH)

# outline_style - wide black stroke laid under each base segment
def outline_style(segment):
    _check_segment(segment)
    return Style(BLACK, OUTLINE_WIDTH)

# overlay_style - colored stroke on top of the outline.
# Without color, the two long background strokes stay thin so the
# hands still stand out.
def overlay_style(segment, color):
    fill = segment_color(segment, color)
    if not color and segment <= BOLD_START_SEGMENT:
        return Style(fill, THIN_OVERLAY_WIDTH)
    return Style(fill, OVERLAY_WIDTH)
