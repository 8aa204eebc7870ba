# ticker.py - tick scheduling and the state the redraw reads
from dataclasses import dataclass

from config import NUM_POINTS, SECONDS_PRECISION_MAX_COUNTDOWN
from logging_utils import log_event
from timedata import TimeSnapshot, local_now

SECOND_UNIT = "second"
MINUTE_UNIT = "minute"


@dataclass
class ClockState:
    snapshot: TimeSnapshot
    seconds_precision: bool = False
    countdown: int = 0

    # point_count - joints drawn: the second hand only shows at seconds precision
    @property
    def point_count(self):
        return NUM_POINTS if self.seconds_precision else NUM_POINTS - 1


class TickScheduler:
    """Owns the ClockState and decides the tick granularity.

    Ticks come at minute granularity by default. A tap switches to
    seconds for SECONDS_PRECISION_MAX_COUNTDOWN ticks, then the
    scheduler falls back to minutes. Every tick refreshes the snapshot
    and hands the state to on_redraw.
    """

    def __init__(self, time_source=local_now, on_redraw=None):
        self.time_source = time_source
        self.on_redraw = on_redraw
        self.state = None
        self.running = False

    @property
    def granularity(self):
        if not self.running:
            return None
        return SECOND_UNIT if self.state.seconds_precision else MINUTE_UNIT

    def start(self):
        self.state = ClockState(self.time_source())
        self.running = True
        self._schedule_with_precision(True)
        return self.state

    def stop(self):
        self.running = False
        log_event("debug", "Ticker", "stopped")

    def tick(self):
        self._check_running()
        state = self.state
        if state.seconds_precision:
            state.countdown -= 1
            if state.countdown <= 0:
                self._schedule_with_precision(False)
        state.snapshot = self.time_source()
        if self.on_redraw is not None:
            self.on_redraw(state)
        return state

    # tap - motion trigger; restarts the seconds window if one is running
    def tap(self):
        self._check_running()
        self._schedule_with_precision(True)

    def _schedule_with_precision(self, use_seconds):
        if use_seconds:
            self.state.countdown = SECONDS_PRECISION_MAX_COUNTDOWN
        self.state.seconds_precision = use_seconds
        log_event("debug", "Ticker", "granularity switched",
                  unit=SECOND_UNIT if use_seconds else MINUTE_UNIT,
                  countdown=self.state.countdown)

    def _check_running(self):
        if not self.running:
            raise RuntimeError("tick scheduler is not running")
