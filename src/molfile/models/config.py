"""Splitter configuration model."""

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SplitterConfig(BaseModel):
    """Settings shared by every SDF splitter front end.

    Attributes:
        encoding: Codec used to decode byte chunks
        decode_errors: Error handler passed to the incremental decoder
        min_trailing_length: Minimum length of an unterminated trailing
            fragment for it to be emitted as a record at end of input
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = Field(default="utf-8", description="Codec for byte chunks")
    decode_errors: Literal["strict", "replace", "ignore"] = Field(
        default="replace", description="Decoder error handling"
    )
    min_trailing_length: int = Field(
        default=2,
        ge=1,
        description="Shortest trailing fragment emitted by finish()",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding names a codec Python knows about."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v
