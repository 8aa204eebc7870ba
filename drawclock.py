#!/usr/bin/python3
# drawclock.py - simulate the echo clock over a run of ticks and write
# one PNG per redraw.
import argparse
import os
import sys
from datetime import datetime, timedelta

from canvasutils import CairoSurface, init_canvas
from chain import Bounds
from clock import draw_clock
from config import ClockConfig
from logging_utils import log_event, set_log_level
from style import BLACK
from ticker import SECOND_UNIT, TickScheduler
from timedata import snapshot_from_datetime


# SimulatedTime - time source that only moves when advanced
class SimulatedTime:
    def __init__(self, start):
        self.now = start

    def advance(self, unit):
        self.now += timedelta(seconds=1) if unit == SECOND_UNIT else timedelta(minutes=1)

    def __call__(self):
        return snapshot_from_datetime(self.now)


# render_frame - draw one redraw of the face into a PNG file
def render_frame(config, state, filename):
    (ctx, surf) = init_canvas(config.width, config.height, BLACK)
    surface = CairoSurface(ctx, config.color)
    draw_clock(surface, Bounds(config.width, config.height), state)
    surf.write_to_png(filename)


# run - drive the scheduler for config.frames redraws.
# taps holds the frame numbers before which a motion tap arrives.
# Returns the list of files written.
def run(config, start, taps=()):
    clock_time = SimulatedTime(start)
    written = []

    def redraw(state):
        filename = os.path.join(config.outdir, config.frame_filename(len(written)))
        render_frame(config, state, filename)
        written.append(filename)
        log_event("info", "Draw", "frame written", file=filename,
                  points=state.point_count, yday=state.snapshot.yday,
                  seconds=state.snapshot.seconds)

    scheduler = TickScheduler(time_source=clock_time, on_redraw=redraw)
    # the face is drawn once when it is first shown
    redraw(scheduler.start())
    for frame in range(1, config.frames):
        if frame in taps:
            log_event("debug", "Draw", "tap", frame=frame)
            scheduler.tap()
        clock_time.advance(scheduler.granularity)
        scheduler.tick()
    scheduler.stop()
    return written


def parse_args(argv):
    defaults = ClockConfig()
    parser = argparse.ArgumentParser(description="Render frames of the echo clock face")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--mono", action="store_true", help="use the monochrome style policy")
    parser.add_argument("--frames", type=int, default=defaults.frames)
    parser.add_argument("--start", type=datetime.fromisoformat, default=None,
                        help="ISO start time (default: now)")
    parser.add_argument("--tap", type=int, action="append", default=[],
                        help="frame number preceded by a motion tap (repeatable)")
    parser.add_argument("--outdir", default=defaults.outdir)
    parser.add_argument("--prefix", default=defaults.prefix)
    parser.add_argument("--log-level", default=defaults.log_level)
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("width and height must be positive")
    if args.frames < 1:
        parser.error("--frames must be at least 1")
    config = ClockConfig(width=args.width, height=args.height, color=not args.mono,
                         frames=args.frames, outdir=args.outdir, prefix=args.prefix,
                         log_level=args.log_level)
    return config, args.start, set(args.tap)


def main(argv=None):
    config, start, taps = parse_args(sys.argv[1:] if argv is None else argv)
    set_log_level(config.log_level)
    os.makedirs(config.outdir, exist_ok=True)
    written = run(config, start or datetime.now(), taps)
    log_event("info", "Draw", "done", frames=len(written), outdir=config.outdir)
    return 0

if __name__ == "__main__":
    sys.exit(main())
