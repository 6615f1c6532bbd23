"""Bitrate policies for codecs that are driven by a target bitrate."""

from typing import Protocol


class BitratePolicy(Protocol):
    """Computes a target bitrate in kbit/s for a frame size."""

    def __call__(self, width: int, height: int) -> int: ...


class FixedBitratePolicy:
    """Same nominal bitrate whatever the frame size."""

    def __init__(self, kbps: int = 1000):
        if kbps <= 0:
            raise ValueError(f"Bitrate must be positive, got {kbps}")
        self.kbps = kbps

    def __call__(self, width: int, height: int) -> int:
        return self.kbps


class PixelRateBitratePolicy:
    """Bitrate proportional to pixels per second, clamped to [min_kbps, max_kbps]."""

    def __init__(
        self,
        bits_per_pixel: float = 0.1,
        frame_rate: float = 25.0,
        min_kbps: int = 100,
        max_kbps: int = 50_000,
    ):
        if min_kbps > max_kbps:
            raise ValueError("min_kbps must not exceed max_kbps")
        self.bits_per_pixel = bits_per_pixel
        self.frame_rate = frame_rate
        self.min_kbps = min_kbps
        self.max_kbps = max_kbps

    def __call__(self, width: int, height: int) -> int:
        kbps = round(width * height * self.frame_rate * self.bits_per_pixel / 1000)
        return max(self.min_kbps, min(self.max_kbps, kbps))
