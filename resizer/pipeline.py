"""
Base64 JPEG in, resized base64 JPEG out
"""

from typing import Optional

from resizer import dimensions, text_codec, transcoder
from resizer.resize_config import ResizeConfig
from resizer.results import ErrorKind, TransformResult


class ResizePipeline:
    """
    Stateless composition of codec, validator and transcoder.

    Holds only its immutable config, so one instance may serve any number
    of concurrent calls. Stages run in a fixed order and the first failure
    is returned as a TransformResult; nothing here raises on bad input.
    """

    def __init__(self, config: Optional[ResizeConfig] = None):
        self.config = config or ResizeConfig()

    def run(self, input_jpeg: str, width: int, height: int) -> TransformResult:
        invalid = dimensions.validate(width, height, self.config.max_dimension)
        if invalid is not None:
            return TransformResult(error=invalid)

        if not isinstance(input_jpeg, str):
            return TransformResult.failure(ErrorKind.CODEC_ERROR)
        jpeg_data = text_codec.decode(input_jpeg)
        if jpeg_data is None:
            return TransformResult.failure(ErrorKind.CODEC_ERROR)
        if not jpeg_data:
            return TransformResult.failure(ErrorKind.EMPTY_INPUT)

        img = transcoder.decode_image(jpeg_data)
        if img is None:
            return TransformResult.failure(ErrorKind.IMAGE_DECODE_ERROR)

        resized = transcoder.resample(img, (int(width), int(height)), self.config.interpolation)

        output = transcoder.encode_image(
            resized,
            quality=self.config.jpeg_quality,
            optimize=self.config.optimize,
        )
        if output is None:
            return TransformResult.failure(ErrorKind.IMAGE_ENCODE_ERROR)

        return TransformResult.success(text_codec.encode(output))


def transform(input_jpeg: str, width: int, height: int, config: Optional[ResizeConfig] = None) -> TransformResult:
    return ResizePipeline(config).run(input_jpeg, width, height)
