"""
Active small-block selection.

The game commits one half of the save at a time, so the two small blocks
are an older and a newer copy. The newer one is found by comparing the
elapsed play time recorded in each; the other copy is left alone as a
backup.
"""

import struct
import logging
from dataclasses import dataclass
from typing import Dict, Any

from ..core.errors import BufferTooSmall, SaveNeverWritten
from ..core.offsets import SMALL_BLOCK_OFFSETS, OffsetProfile

logger = logging.getLogger(__name__)

NEVER_SAVED = 0xFF


@dataclass(frozen=True)
class PlayTime:
    hours:   int
    minutes: int
    seconds: int

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hours':         self.hours,
            'minutes':       self.minutes,
            'seconds':       self.seconds,
            'total_seconds': self.total_seconds,
        }

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"


def read_play_time(data: bytes, block_start: int, profile: OffsetProfile) -> PlayTime:
    """Read the hours/minutes/seconds field of one small block."""
    pos = block_start + profile.play_time
    if len(data) < pos + 4:
        raise BufferTooSmall(pos + 4, len(data))
    hours, minutes, seconds = struct.unpack_from('<HBB', data, pos)
    return PlayTime(hours, minutes, seconds)


class BlockSelector:
    """Picks which of the two mirrored small blocks holds the latest save."""

    def __init__(self, profile: OffsetProfile):
        self.profile = profile

    def play_times(self, data: bytes) -> tuple:
        return tuple(read_play_time(data, start, self.profile) for start in SMALL_BLOCK_OFFSETS)

    def select(self, data: bytes) -> int:
        """
        Return 0 or 1, the index of the active small block.

        Ties go to the second block.

        Raises:
            SaveNeverWritten: the first block's hours field is still erased flash
            BufferTooSmall:   the image cannot hold the second block's play time
        """
        first, second = self.play_times(data)
        if data[SMALL_BLOCK_OFFSETS[0] + self.profile.play_time + 1] == NEVER_SAVED:
            raise SaveNeverWritten()

        index = 0 if first.total_seconds > second.total_seconds else 1
        logger.debug(f"Play time block 1 = {first}, block 2 = {second}; using block {index + 1}")
        return index
