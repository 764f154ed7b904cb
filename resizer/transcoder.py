"""
JPEG transcoding with OpenCV
Pure functions: decode bytes to a BGR pixel buffer, resample it, encode it back
"""

import cv2
import numpy as np
from typing import Optional, Tuple

DEFAULT_QUALITY = 85


def decode_image(data: bytes) -> Optional[np.ndarray]:
    """
    Decodes compressed image bytes into an HxWx3 uint8 BGR array.
    Returns None for empty, unrecognised or truncated input.
    """
    if not data:
        return None
    nparr = np.frombuffer(data, np.uint8)
    try:
        img = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
    except cv2.error:
        return None
    if img is None or img.size == 0:
        return None
    return img


def resample(
    image: np.ndarray,
    target_size: Tuple[int, int],
    interpolation: int = cv2.INTER_AREA,
) -> np.ndarray:
    """
    Resizes to exactly target_size (width, height), ignoring aspect ratio.
    Area averaging is used for both shrinking and enlarging unless another
    OpenCV interpolation flag is passed.
    """
    return cv2.resize(image, target_size, interpolation=interpolation)


def encode_image(
    image: np.ndarray,
    quality: int = DEFAULT_QUALITY,
    optimize: bool = True,
) -> Optional[bytes]:
    """Encodes a pixel buffer as JPEG. None means the encoder produced nothing."""
    params = [
        cv2.IMWRITE_JPEG_QUALITY, quality,
        cv2.IMWRITE_JPEG_OPTIMIZE, int(optimize),
    ]
    try:
        success, buffer = cv2.imencode(".jpg", image, params)
    except cv2.error:
        return None
    if not success or buffer is None or buffer.size == 0:
        return None
    return buffer.tobytes()
