"""Encoder progress monitoring."""

import re
from collections.abc import Callable

_FRAME_RE = re.compile(r"frame=\s*(\d+)")


class EncoderProgressMonitor:
    """Monitor encoding progress from the frame= counter in ffmpeg output."""

    def __init__(self, total_frames: int, callback: Callable[[float], None] | None = None):
        self.total_frames = total_frames
        self.callback = callback
        self.current_frame = 0

    def parse_line(self, line: str) -> float | None:
        """Parse an ffmpeg output line for frame= progress."""
        # Status lines use \r between updates, the last one is the latest.
        matches = _FRAME_RE.findall(line)
        if not matches:
            return None
        self.current_frame = int(matches[-1])
        progress = self.progress
        if self.callback:
            self.callback(progress)
        return progress

    @property
    def progress(self) -> float:
        """Current progress as fraction [0, 1]."""
        if self.total_frames <= 0:
            return 0.0
        return min(1.0, self.current_frame / self.total_frames)
