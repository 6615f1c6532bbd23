"""Encoder binary lookup for the current platform."""

import logging
import platform
import shutil
from pathlib import Path

from simovex.config import Settings, get_settings

logger = logging.getLogger(__name__)


def packaged_binary_path(platform_dir: Path, system: str | None = None) -> Path:
    """Path of the bundled ffmpeg for a platform: <platform_dir>/<system>/bin/ffmpeg."""
    system = system or platform.system()
    return platform_dir / system / "bin" / "ffmpeg"


def resolve_encoder_binary(settings: Settings | None = None) -> Path:
    """Resolve the ffmpeg executable to invoke.

    Order: explicit setting, packaged platform binary, ``ffmpeg`` on PATH,
    then the conventional system install path. The last fallback is not
    checked for existence; a missing binary surfaces when it is launched.
    """
    settings = settings or get_settings()

    if settings.ffmpeg_binary is not None:
        return settings.ffmpeg_binary.absolute()

    packaged = packaged_binary_path(settings.platform_dir)
    if packaged.is_file():
        logger.debug("Using packaged encoder %s", packaged)
        return packaged.absolute()

    on_path = shutil.which("ffmpeg")
    if on_path:
        return Path(on_path).absolute()

    logger.debug("No packaged or PATH encoder, falling back to %s", settings.system_ffmpeg)
    return settings.system_ffmpeg.absolute()
