"""End-to-end encodes with a real ffmpeg binary."""

import shutil
import subprocess
from pathlib import Path

import pytest

from simovex.config import Settings
from simovex.models.codecs import CodecType, CompressionQuality
from simovex.models.errors import DimensionMismatchError
from simovex.movie import Movie
from tests.conftest import make_frame, staged_files

FFMPEG = shutil.which("ffmpeg")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(FFMPEG is None, reason="ffmpeg not installed"),
]


def has_encoder(name: str) -> bool:
    result = subprocess.run(
        [FFMPEG, "-hide_banner", "-encoders"], capture_output=True, text=True, timeout=30
    )
    return any(line.split()[1:2] == [name] for line in result.stdout.splitlines())


@pytest.fixture
def ffmpeg_settings(frame_dir, tmp_path):
    preset_dir = tmp_path / "presets"
    preset_dir.mkdir()
    for preset in ["baseline", "default", "hq", "lossless_max"]:
        (preset_dir / f"libx264-{preset}.ffpreset").write_text("crf=18\n")
    return Settings(
        temp_dir=frame_dir,
        ffmpeg_binary=Path(FFMPEG),
        h264_preset_template=str(preset_dir / "libx264-{preset}.ffpreset"),
    )


class TestFFmpegEncode:
    def test_mpeg4_movie(self, ffmpeg_settings, tmp_path, frame_dir):
        output = tmp_path / "out.mp4"
        movie = Movie(output, 100, 100, CodecType.MPEG4, settings=ffmpeg_settings)
        for i in range(5):
            movie.add_frame(make_frame(seed=i))
        result = movie.save()
        assert result.return_code == 0
        assert output.exists()
        assert output.stat().st_size > 0
        assert staged_files(frame_dir) == []

    def test_h264_scenario(self, ffmpeg_settings, tmp_path, frame_dir):
        if not has_encoder("libx264"):
            pytest.skip("ffmpeg built without libx264")
        output = tmp_path / "out.mp4"
        movie = Movie(
            output, 100, 100, CodecType.H264, CompressionQuality.BEST, settings=ffmpeg_settings
        )
        movie.add_frame(make_frame(seed=1))
        movie.add_frame(make_frame(seed=2))
        assert movie.frame_count == 2
        assert len(staged_files(frame_dir)) == 2
        movie.save()
        assert staged_files(frame_dir) == []
        assert output.stat().st_size > 0

    def test_dimension_scenario(self, ffmpeg_settings, tmp_path):
        movie = Movie(tmp_path / "out.mp4", 100, 100, settings=ffmpeg_settings)
        movie.add_frame(make_frame())
        with pytest.raises(DimensionMismatchError):
            movie.add_frame(make_frame(50, 50))
        assert movie.frame_count == 1
        movie.cleanup()
