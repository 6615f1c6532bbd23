"""FFmpeg command line construction for image-sequence encodes."""

from pathlib import Path

from simovex.config import Settings, get_settings
from simovex.models.codecs import (
    CODEC_IDENTIFIERS,
    PRESET_CODECS,
    QUALITY_PRESETS,
    CodecType,
    CompressionQuality,
)
from simovex.rendering.bitrate import BitratePolicy, FixedBitratePolicy


class FFmpegCommandBuilder:
    """Builds the ffmpeg argument list for encoding a staged frame sequence."""

    def __init__(
        self,
        settings: Settings | None = None,
        bitrate_policy: BitratePolicy | None = None,
    ):
        self.settings = settings or get_settings()
        self.bitrate_policy = bitrate_policy or FixedBitratePolicy(self.settings.bitrate_kbps)
        self.codec_identifiers = dict(CODEC_IDENTIFIERS)
        for codec, identifier in self.settings.codec_identifier_overrides.items():
            self.codec_identifiers[CodecType(codec)] = identifier
        self.quality_presets = dict(QUALITY_PRESETS)
        for quality, preset in self.settings.quality_preset_overrides.items():
            self.quality_presets[CompressionQuality(quality)] = preset

    def codec_identifier(self, codec: CodecType) -> str:
        return self.codec_identifiers[codec]

    def preset_path(self, quality: CompressionQuality) -> str:
        """Preset file for a quality level, e.g. BEST -> .../libx264-lossless_max.ffpreset."""
        return self.settings.h264_preset_template.format(preset=self.quality_presets[quality])

    def build_command(
        self,
        binary: Path,
        input_template: str,
        output_path: str,
        codec: CodecType,
        quality: CompressionQuality,
        width: int,
        height: int,
    ) -> list[str]:
        """Build the complete ffmpeg command.

        ``<binary> -y -i <template> -vcodec <codec> [-fpre <preset> | -b <kbps>k] <output>``
        """
        cmd = [str(binary), "-y", "-i", input_template]
        cmd.extend(["-vcodec", self.codec_identifier(codec)])
        if codec in PRESET_CODECS:
            cmd.extend(["-fpre", self.preset_path(quality)])
        else:
            cmd.extend(["-b", f"{self.bitrate_policy(width, height)}k"])
        cmd.append(str(output_path))
        return cmd
