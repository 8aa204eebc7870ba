# timedata.py - time snapshots consumed by the clock face
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TimeSnapshot:
    yday: int       # 0-based day of year
    seconds: int    # seconds since local midnight


# snapshot_from_datetime - reduce a datetime to the fields the face needs
def snapshot_from_datetime(dt):
    yday = dt.timetuple().tm_yday - 1
    seconds = dt.hour * 3600 + dt.minute * 60 + dt.second
    return TimeSnapshot(yday, seconds)

# local_now - default time source: the current local time
def local_now():
    return snapshot_from_datetime(datetime.now())
