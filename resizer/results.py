"""
Typed outcomes of a resize call
Every failure is a value, never an exception escaping the pipeline
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure taxonomy of the resize pipeline"""

    INVALID_DIMENSION = "invalid_dimension"
    EMPTY_INPUT = "empty_input"
    CODEC_ERROR = "codec_error"
    IMAGE_DECODE_ERROR = "image_decode_error"
    IMAGE_ENCODE_ERROR = "image_encode_error"

    @property
    def is_client_error(self) -> bool:
        return self in _CLIENT_ERRORS

    @property
    def http_status(self) -> int:
        return 400 if self.is_client_error else 500


_CLIENT_ERRORS = frozenset({
    ErrorKind.INVALID_DIMENSION,
    ErrorKind.EMPTY_INPUT,
    ErrorKind.CODEC_ERROR,
})

DEFAULT_MESSAGES = {
    ErrorKind.INVALID_DIMENSION: "Target dimensions must be positive integers",
    ErrorKind.EMPTY_INPUT: "Invalid or empty base64 input",
    ErrorKind.CODEC_ERROR: "Malformed base64 input",
    ErrorKind.IMAGE_DECODE_ERROR: "Failed to decode JPEG image - invalid format or corrupted data",
    ErrorKind.IMAGE_ENCODE_ERROR: "Failed to encode resized image to JPEG",
}


@dataclass(frozen=True)
class TransformError:
    kind: ErrorKind
    message: str = ""

    def __post_init__(self):
        if not self.message:
            object.__setattr__(self, "message", DEFAULT_MESSAGES[self.kind])

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TransformResult:
    """Either the resized image as base64 text or the first failure hit."""

    output_jpeg: Optional[str] = None
    error: Optional[TransformError] = None

    def __post_init__(self):
        if (self.output_jpeg is None) == (self.error is None):
            raise ValueError("TransformResult needs exactly one of output_jpeg or error")

    @classmethod
    def success(cls, output_jpeg: str) -> "TransformResult":
        return cls(output_jpeg=output_jpeg)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str = "") -> "TransformResult":
        return cls(error=TransformError(kind, message))

    @property
    def ok(self) -> bool:
        return self.error is None

