"""Frame staging: numbered PNG files that the encoder reads as an image sequence."""

import logging
import os
import tempfile
from pathlib import Path

import cv2
import numpy as np

from simovex.config import Settings, get_settings
from simovex.models.errors import DimensionMismatchError, StageIOError

logger = logging.getLogger(__name__)


def create_temporary_template(
    prefix: str = "sme", suffix: str = "-%05d.png", temp_dir: Path | None = None
) -> str:
    """Derive a session-unique file template from a freshly created temp file.

    The temp file only reserves a unique base name, it is deleted right away.
    """
    if temp_dir is not None:
        temp_dir.mkdir(parents=True, exist_ok=True)
    fd, base = tempfile.mkstemp(prefix=prefix, dir=temp_dir)
    os.close(fd)
    Path(base).unlink()
    return base + suffix


class FrameStager:
    """Writes frames of a fixed size to numbered temporary PNG files."""

    def __init__(self, width: int, height: int, settings: Settings | None = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Frame size must be positive, got {width}x{height}")
        self.settings = settings or get_settings()
        self.width = width
        self.height = height
        self.frame_count = 0
        self._template = create_temporary_template(
            prefix=self.settings.temp_file_prefix,
            suffix=self.settings.frame_file_suffix,
            temp_dir=self.settings.temp_dir,
        )

    @property
    def template(self) -> str:
        """The printf-style template handed to the encoder as its input."""
        return self._template

    def path_for_frame(self, index: int) -> Path:
        """Temporary file path for a frame index, staged or not."""
        return Path(self._template % index)

    def staged_paths(self) -> list[Path]:
        return [self.path_for_frame(i) for i in range(self.frame_count)]

    def stage(self, frame: np.ndarray) -> Path:
        """Write a frame to the next temporary file and return its path.

        Raises:
            DimensionMismatchError: frame size differs from the stager's. Nothing is written.
            StageIOError: the PNG could not be written. All staged files are removed first.
        """
        self.check_dimensions(frame)

        path = self.path_for_frame(self.frame_count)
        params = [cv2.IMWRITE_PNG_COMPRESSION, self.settings.png_compression]
        try:
            written = cv2.imwrite(str(path), frame, params)
        except (cv2.error, OSError) as e:
            self._discard(path)
            raise StageIOError(
                f"Could not write frame {self.frame_count}: {e}",
                details={"path": str(path), "frame": self.frame_count},
            ) from e
        if not written:
            self._discard(path)
            raise StageIOError(
                f"Could not write frame {self.frame_count}",
                details={"path": str(path), "frame": self.frame_count},
            )

        self.frame_count += 1
        logger.debug("Staged frame %d at %s", self.frame_count - 1, path)
        return path

    def _discard(self, path: Path) -> None:
        """Remove a partially written frame and everything staged before it."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove partial frame %s: %s", path, e)
        self.cleanup()

    def check_dimensions(self, frame: np.ndarray) -> None:
        shape = getattr(frame, "shape", ())
        if len(shape) not in (2, 3):
            raise DimensionMismatchError(
                f"Expected a 2-D or 3-D image array, got shape {shape}",
                details={"shape": list(shape)},
            )
        height, width = shape[0], shape[1]
        if width != self.width or height != self.height:
            raise DimensionMismatchError(
                f"Frame is {width}x{height}, movie is {self.width}x{self.height}",
                details={
                    "frame_size": [width, height],
                    "movie_size": [self.width, self.height],
                },
            )

    def cleanup(self) -> None:
        """Delete all staged frame files. Missing files and delete errors are ignored."""
        removed = 0
        for path in self.staged_paths():
            try:
                path.unlink()
                removed += 1
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Could not remove staged frame %s: %s", path, e)
        logger.debug("Removed %d staged frames for %s", removed, self._template)
