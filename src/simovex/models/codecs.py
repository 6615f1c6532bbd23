"""Codec and compression quality enums with their encoder lookup tables."""

from enum import StrEnum


class CodecType(StrEnum):
    """Video codecs the exporter can ask the encoder for."""

    FLV = "flv"
    H263 = "h263"
    H264 = "h264"
    MPEG4 = "mpeg4"
    ANIMATION = "animation"
    RAW = "raw"
    THEORA = "theora"
    WMV = "wmv"


class CompressionQuality(StrEnum):
    """Quality levels, only consumed by codecs that take a preset (H264)."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    BEST = "best"


# FFmpeg -vcodec names
CODEC_IDENTIFIERS: dict[CodecType, str] = {
    CodecType.FLV: "flv",
    CodecType.H263: "h263",
    CodecType.H264: "libx264",
    CodecType.MPEG4: "mpeg4",
    CodecType.ANIMATION: "qtrle",
    CodecType.RAW: "rawvideo",
    CodecType.THEORA: "libtheora",
    CodecType.WMV: "wmv2",
}

# libx264 .ffpreset names
QUALITY_PRESETS: dict[CompressionQuality, str] = {
    CompressionQuality.LOW: "baseline",
    CompressionQuality.MEDIUM: "default",
    CompressionQuality.HIGH: "hq",
    CompressionQuality.BEST: "lossless_max",
}

# Codecs that take a -fpre preset file instead of a -b bitrate.
PRESET_CODECS: frozenset[CodecType] = frozenset({CodecType.H264})
