"""Shared test fixtures, frame generators and a fake encoder."""

import stat
import sys
from pathlib import Path

import numpy as np
import pytest

from simovex.config import Settings

FAKE_ENCODER_SOURCE = '''
import sys
from pathlib import Path

EXIT_CODE = {exit_code}

args = sys.argv[1:]
template = args[args.index("-i") + 1]
output = Path(args[-1])
found = 0
while Path(template % found).exists():
    found += 1
print("fake encoder " + " ".join(args))
for i in range(1, found + 1):
    print("frame={{:5d}} fps=0.0 q=0.0 size=0kB time=00:00:00.04".format(i))
sys.stderr.write("stderr line\\n")
sys.stderr.flush()
sys.stdout.flush()
sys.stdout.buffer.write(b"Input #0 \\xff\\xfe title\\n")
sys.stdout.buffer.flush()
if EXIT_CODE == 0:
    output.write_text("frames=%d\\n" % found)
sys.exit(EXIT_CODE)
'''


def write_fake_encoder(directory: Path, exit_code: int = 0) -> Path:
    """Write an executable that mimics ffmpeg's image-sequence encode.

    It counts the staged frames reachable through the -i template, prints
    frame= progress lines, echoes a metadata line that is not valid UTF-8
    and writes the frame count to the output path.
    """
    script = directory / f"fake_ffmpeg_{exit_code}.py"
    script.write_text(FAKE_ENCODER_SOURCE.format(exit_code=exit_code))
    wrapper = directory / f"fake_ffmpeg_{exit_code}"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return wrapper


def make_frame(width: int = 100, height: int = 100, channels: int = 3, seed: int = 0) -> np.ndarray:
    """Generate a random 8-bit BGR frame."""
    rng = np.random.default_rng(seed)
    shape = (height, width) if channels == 1 else (height, width, channels)
    return rng.integers(0, 256, size=shape, dtype=np.uint8)


@pytest.fixture
def frame_dir(tmp_path):
    """Directory the staged frames are written to."""
    d = tmp_path / "frames"
    d.mkdir()
    return d


@pytest.fixture
def fake_encoder(tmp_path):
    return write_fake_encoder(tmp_path)


@pytest.fixture
def failing_encoder(tmp_path):
    return write_fake_encoder(tmp_path, exit_code=3)


@pytest.fixture
def settings(frame_dir, fake_encoder):
    """Settings staging into frame_dir and encoding with the fake encoder."""
    return Settings(temp_dir=frame_dir, ffmpeg_binary=fake_encoder)


@pytest.fixture
def frame():
    return make_frame()


def staged_files(directory: Path) -> list[Path]:
    return sorted(directory.glob("*.png"))
