import numbers
from typing import Optional

from resizer.results import ErrorKind, TransformError

# Largest side a baseline JPEG can address
MAX_DIMENSION = 65500


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate(width: int, height: int, max_dimension: int = MAX_DIMENSION) -> Optional[TransformError]:
    """Returns None for usable target dimensions, otherwise the reason they are not."""
    if not (_is_int(width) and _is_int(height)):
        return TransformError(ErrorKind.INVALID_DIMENSION)
    if width <= 0 or height <= 0:
        return TransformError(ErrorKind.INVALID_DIMENSION)
    if width > max_dimension or height > max_dimension:
        return TransformError(
            ErrorKind.INVALID_DIMENSION,
            "Target dimensions exceed maximum JPEG size",
        )
    return None
