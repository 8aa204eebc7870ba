# chain.py - build the pivot chain of the clock face
from typing import NamedTuple

from angles import (year_angle, month_angle, hour_angle, minute_angle,
                    second_angle)
from fixedtrig import TRIG_MAX_ANGLE, TRIG_MAX_RATIO, cos_lookup, sin_lookup, trunc_div


class Point(NamedTuple):
    x: int
    y: int


class Bounds(NamedTuple):
    width: int
    height: int


# angular_point - point at distance r from center in direction angle
def angular_point(center, r, angle):
    return Point(center.x + trunc_div(r * cos_lookup(angle), TRIG_MAX_RATIO),
                 center.y + trunc_div(r * sin_lookup(angle), TRIG_MAX_RATIO))

# build_chain - the six joints of the face for a time snapshot.
# Returns (year anchor, month anchor, center, hour tip, minute tip, second tip).
# The month and year hands are turned half a circle so they point away
# from the hours; the year hand is long enough to leave the display.
def build_chain(bounds, snapshot):
    w, h = bounds.width, bounds.height
    center = Point(w // 2, h // 2)

    month = angular_point(center, w // 3, month_angle(snapshot.yday) + TRIG_MAX_ANGLE // 2)
    year = angular_point(month, h + w, year_angle(snapshot.yday) + TRIG_MAX_ANGLE // 2)

    hour = angular_point(center, w // 4, hour_angle(snapshot.seconds))
    minute = angular_point(hour, w // 6, minute_angle(snapshot.seconds))

    sec_radius = max(w // 8, 0)
    second = angular_point(minute, sec_radius, second_angle(snapshot.seconds))

    return (year, month, center, hour, minute, second)
