"""Encode result data models."""

from pathlib import Path

from pydantic import BaseModel, Field

from simovex.models.codecs import CodecType


class EncodeResult(BaseModel):
    """Result of an encoder invocation."""

    output_path: str = Field(..., description="Path of the encoded movie")
    frame_count: int = Field(..., ge=0)
    codec: CodecType
    command: list[str] = Field(default_factory=list)
    output: str = Field(default="", description="Combined stdout/stderr of the encoder")
    return_code: int = 0

    @property
    def output_file(self) -> Path:
        return Path(self.output_path)

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0
