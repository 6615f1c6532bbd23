"""Data models for Simovex."""

from simovex.models.codecs import (
    CODEC_IDENTIFIERS,
    QUALITY_PRESETS,
    CodecType,
    CompressionQuality,
)
from simovex.models.encode import EncodeResult
from simovex.models.errors import (
    DimensionMismatchError,
    EncodeError,
    EncodeFailedError,
    SessionClosedError,
    SimovexError,
    StageIOError,
)

__all__ = [
    "CODEC_IDENTIFIERS",
    "QUALITY_PRESETS",
    "CodecType",
    "CompressionQuality",
    "DimensionMismatchError",
    "EncodeError",
    "EncodeFailedError",
    "EncodeResult",
    "SessionClosedError",
    "SimovexError",
    "StageIOError",
]
