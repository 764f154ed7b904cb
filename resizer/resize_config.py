"""
Configuration for the JPEG resize service
Centralized settings for the transform pipeline and the HTTP server
"""

import os
from dataclasses import dataclass, field
from typing import List

import cv2

from resizer.dimensions import MAX_DIMENSION
from resizer.transcoder import DEFAULT_QUALITY

INTERPOLATIONS = {
    "area": cv2.INTER_AREA,
    "nearest": cv2.INTER_NEAREST,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "lanczos": cv2.INTER_LANCZOS4,
}


@dataclass(frozen=True)
class ResizeConfig:
    """Transform Pipeline Configuration"""

    # JPEG output
    jpeg_quality: int = DEFAULT_QUALITY
    optimize: bool = True

    # Upper bound for either target side
    max_dimension: int = MAX_DIMENSION

    # Same filter for enlarging and shrinking
    interpolation: int = cv2.INTER_AREA

    def __post_init__(self):
        if not 0 <= self.jpeg_quality <= 100:
            raise ValueError(f"jpeg_quality must be within 0..100, got {self.jpeg_quality}")
        if not 1 <= self.max_dimension <= MAX_DIMENSION:
            raise ValueError(f"max_dimension must be within 1..{MAX_DIMENSION}, got {self.max_dimension}")

    def to_dict(self):
        return dict(self.__dict__)


@dataclass(frozen=True)
class ServerConfig:
    """HTTP Server Configuration"""

    host: str = "0.0.0.0"
    port: int = 8080

    log_level: str = "INFO"

    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    resize: ResizeConfig = field(default_factory=ResizeConfig)

    def to_dict(self):
        return {
            'host': self.host,
            'port': self.port,
            'log_level': self.log_level,
            'cors_origins': list(self.cors_origins),
            'resize': self.resize.to_dict(),
        }

    @classmethod
    def from_env(cls) -> "ServerConfig":
        interpolation_name = os.getenv("RESIZER_INTERPOLATION", "area").lower()
        if interpolation_name not in INTERPOLATIONS:
            raise ValueError(
                f"RESIZER_INTERPOLATION must be one of {sorted(INTERPOLATIONS)}, got {interpolation_name!r}"
            )
        origins = os.getenv("RESIZER_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("RESIZER_HOST", "0.0.0.0"),
            port=int(os.getenv("RESIZER_PORT", 8080)),
            log_level=os.getenv("RESIZER_LOG_LEVEL", "INFO").upper(),
            cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
            resize=ResizeConfig(
                jpeg_quality=int(os.getenv("RESIZER_JPEG_QUALITY", DEFAULT_QUALITY)),
                interpolation=INTERPOLATIONS[interpolation_name],
            ),
        )

