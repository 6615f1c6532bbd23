"""Application configuration using Pydantic BaseSettings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Simovex configuration loaded from environment variables."""

    model_config = {"env_prefix": "SIMOVEX_", "env_file": ".env", "extra": "ignore"}

    # Encoder binary
    ffmpeg_binary: Path | None = None
    platform_dir: Path = Path("platform")
    system_ffmpeg: Path = Path("/usr/bin/ffmpeg")

    # Frame staging
    temp_dir: Path | None = None  # None = system temp dir
    temp_file_prefix: str = "sme"
    frame_file_suffix: str = "-%05d.png"
    png_compression: int = Field(default=3, ge=0, le=9)

    # Encoding
    h264_preset_template: str = "res/ffpresets/libx264-{preset}.ffpreset"
    bitrate_kbps: int = Field(default=1000, gt=0)
    check_exit_status: bool = True
    codec_identifier_overrides: dict[str, str] = {}
    quality_preset_overrides: dict[str, str] = {}


def get_settings() -> Settings:
    """Return a fresh settings instance."""
    return Settings()
