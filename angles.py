# angles.py - map time fields onto the clock's angle scale
from fixedtrig import TRIG_MAX_ANGLE

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12

# clock_angle - angle of x on a dial of outof positions.
# Position 0 points up, so a quarter turn is taken off.
def clock_angle(x, outof):
    return (x * TRIG_MAX_ANGLE) // outof - TRIG_MAX_ANGLE // 4

def year_angle(yday):
    return clock_angle(yday, DAYS_PER_YEAR)

# month_angle - months are treated as twelfths of the year, not calendar months
def month_angle(yday):
    return clock_angle(yday * MONTHS_PER_YEAR, DAYS_PER_YEAR)

def hour_angle(seconds):
    return clock_angle(seconds, SECONDS_PER_HOUR * 12)

def minute_angle(seconds):
    return clock_angle(seconds, SECONDS_PER_HOUR)

def second_angle(seconds):
    return clock_angle(seconds, SECONDS_PER_MINUTE)
