# fixedtrig.py - fixed-point trigonometry and integer helpers
import math

TRIG_MAX_ANGLE = 0x10000
TRIG_MAX_RATIO = 0xffff

# one entry per angle unit, ratios scaled by TRIG_MAX_RATIO
_sin_table = [int(round(math.sin(2 * math.pi * i / TRIG_MAX_ANGLE) * TRIG_MAX_RATIO))
              for i in range(TRIG_MAX_ANGLE)]

# sin_lookup, cos_lookup - fixed-point sine and cosine of an angle.
# The angle may be any integer; it is wrapped onto the full circle.
def sin_lookup(angle):
    return _sin_table[angle % TRIG_MAX_ANGLE]

def cos_lookup(angle):
    return _sin_table[(angle + TRIG_MAX_ANGLE // 4) % TRIG_MAX_ANGLE]

# trunc_div - integer division rounding toward zero.
# Every scaled quantity in the engine goes through this, so negative
# offsets round the same way as positive ones.
def trunc_div(a, b):
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q

# int_distance - integer square root of the squared length of (dx, dy)
def int_distance(dx, dy):
    return math.isqrt(dx * dx + dy * dy)
