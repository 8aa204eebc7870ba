# echoclock configuration
# Engine constants and the settings of a rendering run

from dataclasses import dataclass

NUM_POINTS = 6                  # joints in a full-precision chain
NUM_BEHIND_ECHOES = 15          # trailing echoes, offsets -1..-15
NUM_AHEAD_ECHOES = 15           # leading echoes, offsets +1..+15
FOLLOW_DISTANCE = 8             # step between neighbouring echoes, display units
BOLD_START_SEGMENT = 2          # monochrome overlay is thin up to this segment
SECONDS_PRECISION_MAX_COUNTDOWN = 30   # ticks of seconds precision after a tap


@dataclass
class ClockConfig:
    """Settings for a simulated run of the clock face"""
    width: int = 144
    height: int = 168
    color: bool = True          # False renders with the monochrome style policy
    frames: int = 40            # redraws to simulate
    outdir: str = "."
    prefix: str = "echoclock"
    log_level: str = "INFO"

    def frame_filename(self, index):
        return "%s-%03d.png" % (self.prefix, index)
