"""Encode invoker: runs the external encoder over a staged frame sequence."""

import logging
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from simovex.config import Settings, get_settings
from simovex.models.codecs import CodecType, CompressionQuality
from simovex.models.encode import EncodeResult
from simovex.models.errors import EncodeError, EncodeFailedError
from simovex.platform.binary import resolve_encoder_binary
from simovex.rendering.ffmpeg_builder import FFmpegCommandBuilder
from simovex.rendering.progress import EncoderProgressMonitor
from simovex.staging.frame_stager import FrameStager

logger = logging.getLogger(__name__)

OUTPUT_TAIL_LINES = 30


class EncodeInvoker:
    """Invokes ffmpeg on the files of a FrameStager and always cleans them up."""

    def __init__(
        self,
        settings: Settings | None = None,
        builder: FFmpegCommandBuilder | None = None,
        encoder_binary: Path | None = None,
    ):
        self.settings = settings or get_settings()
        self.builder = builder or FFmpegCommandBuilder(self.settings)
        self.encoder_binary = encoder_binary

    def resolve_binary(self) -> Path:
        if self.encoder_binary is not None:
            return Path(self.encoder_binary).absolute()
        return resolve_encoder_binary(self.settings)

    def encode(
        self,
        stager: FrameStager,
        output_path: str | Path,
        codec: CodecType,
        quality: CompressionQuality,
        verbose: bool = False,
        progress_callback: Callable[[float], None] | None = None,
    ) -> EncodeResult:
        """Encode the staged frames into output_path.

        Staged files are removed afterwards whether the encode succeeded or not.

        Raises:
            EncodeError: the encoder could not be launched, read from or waited on.
            EncodeFailedError: the encoder exited non-zero (when check_exit_status is set).
        """
        try:
            return self._run(stager, str(output_path), codec, quality, verbose, progress_callback)
        finally:
            stager.cleanup()

    def _run(
        self,
        stager: FrameStager,
        output_path: str,
        codec: CodecType,
        quality: CompressionQuality,
        verbose: bool,
        progress_callback: Callable[[float], None] | None,
    ) -> EncodeResult:
        cmd = self.builder.build_command(
            self.resolve_binary(),
            stager.template,
            output_path,
            codec,
            quality,
            stager.width,
            stager.height,
        )
        level = logging.INFO if verbose else logging.DEBUG
        logger.log(level, "Running encoder: %s", shlex.join(cmd))

        monitor = EncoderProgressMonitor(stager.frame_count, progress_callback)
        output_lines: list[str] = []
        try:
            Path(output_path).parent.mkdir(parents=True, exist_ok=True)
            with subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
            ) as process:
                for line in process.stdout:
                    output_lines.append(line)
                    monitor.parse_line(line)
                return_code = process.wait()
        except OSError as e:
            logger.error("Encoder invocation failed: %s", e)
            raise EncodeError(
                f"Encoder invocation failed: {e}",
                details={"command": cmd, "output": "".join(output_lines[-OUTPUT_TAIL_LINES:])},
            ) from e

        output = "".join(output_lines)
        logger.log(level, "Encoder output:\n%s", output)

        if return_code != 0 and self.settings.check_exit_status:
            logger.error("Encoder exited with code %d", return_code)
            raise EncodeFailedError(
                f"Encoder exited with code {return_code}",
                return_code=return_code,
                details={"command": cmd, "output": "".join(output_lines[-OUTPUT_TAIL_LINES:])},
            )

        return EncodeResult(
            output_path=output_path,
            frame_count=stager.frame_count,
            codec=codec,
            command=cmd,
            output=output,
            return_code=return_code,
        )
