"""Movie export session.

To export a movie::

    movie = Movie("hello.mp4", 640, 480)
    for img in images:
        movie.add_frame(img)
    movie.save()

Frames are staged as temporary PNG files and encoded by ffmpeg in one go when
save() is called. A movie is single-use: after save() or cleanup() it cannot
take more frames.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import numpy as np

from simovex.config import Settings, get_settings
from simovex.models.codecs import CodecType, CompressionQuality
from simovex.models.encode import EncodeResult
from simovex.models.errors import SessionClosedError, StageIOError
from simovex.rendering.bitrate import BitratePolicy
from simovex.rendering.encoder import EncodeInvoker
from simovex.rendering.ffmpeg_builder import FFmpegCommandBuilder
from simovex.staging.frame_stager import FrameStager

logger = logging.getLogger(__name__)


class Movie:
    """One movie export: stages frames, then encodes them into movie_filename.

    With verbose=True the encoder command and its output are logged at INFO on
    the simovex loggers. Nothing is shown unless the caller configures logging,
    e.g. logging.basicConfig(level=logging.INFO).
    """

    def __init__(
        self,
        movie_filename: str | Path,
        width: int,
        height: int,
        codec: CodecType = CodecType.H264,
        quality: CompressionQuality = CompressionQuality.BEST,
        verbose: bool = False,
        *,
        settings: Settings | None = None,
        bitrate_policy: BitratePolicy | None = None,
        encoder_binary: Path | None = None,
    ):
        self.settings = settings or get_settings()
        self.movie_filename = str(movie_filename)
        self.codec = CodecType(codec)
        self.quality = CompressionQuality(quality)
        self.verbose = verbose
        self.stager = FrameStager(width, height, self.settings)
        self.invoker = EncodeInvoker(
            self.settings,
            builder=FFmpegCommandBuilder(self.settings, bitrate_policy),
            encoder_binary=encoder_binary,
        )
        self._closed = False

    def __enter__(self) -> "Movie":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed:
            self.cleanup()

    @property
    def width(self) -> int:
        return self.stager.width

    @property
    def height(self) -> int:
        return self.stager.height

    @property
    def frame_count(self) -> int:
        return self.stager.frame_count

    @property
    def temporary_file_template(self) -> str:
        return self.stager.template

    @property
    def movie_file(self) -> Path:
        return Path(self.movie_filename)

    @property
    def closed(self) -> bool:
        return self._closed

    def temporary_file_for_frame(self, frame: int) -> Path:
        return self.stager.path_for_frame(frame)

    def add_frame(self, img: np.ndarray) -> None:
        """Add an image to the movie.

        The image must have exactly the movie's width and height. It is saved to
        a temporary file which is removed by save(), cleanup(), or when staging fails.
        """
        self._ensure_open("add_frame")
        try:
            self.stager.stage(img)
        except StageIOError:
            # Staged files are gone, the movie cannot be completed.
            self._closed = True
            raise

    def save(self, progress_callback: Callable[[float], None] | None = None) -> EncodeResult:
        """Encode the staged frames and remove the temporary files."""
        self._ensure_open("save")
        self._closed = True
        result = self.invoker.encode(
            self.stager,
            self.movie_filename,
            self.codec,
            self.quality,
            verbose=self.verbose,
            progress_callback=progress_callback,
        )
        logger.info("Saved %d frames to %s", result.frame_count, self.movie_filename)
        return result

    def cleanup(self) -> None:
        """Remove the temporary images without encoding.

        save() already does this, so only call it to abandon a movie after
        adding frames. Safe to call more than once.
        """
        self._closed = True
        self.stager.cleanup()

    def _ensure_open(self, operation: str) -> None:
        if self._closed:
            raise SessionClosedError(
                f"Cannot {operation}: movie {self.movie_filename} was already saved or cleaned up",
                details={"operation": operation, "movie": self.movie_filename},
            )
