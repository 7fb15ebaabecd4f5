"""Optional pre-upload downscaling with Pillow."""

import asyncio
import io
import logging

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_WIDTH = 1200
JPEG_QUALITY = 85


class DownscaleError(Exception):
    """The image could not be read or decoded."""


def _downscale(data: bytes, max_width: int) -> bytes:
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            width, height = img.size

            if width > max_width:
                height = round(height * (max_width / width))
                width = max_width
                img = img.resize((width, max(height, 1)), Image.Resampling.LANCZOS)

            # JPEG has no alpha channel
            if img.mode != "RGB":
                img = img.convert("RGB")

            buf = io.BytesIO()
            img.save(buf, format="JPEG", quality=JPEG_QUALITY)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DownscaleError(f"Failed to decode image: {e}") from e

    logger.debug(f"Downscaled image to {width}x{height} ({buf.tell()} bytes)")
    return buf.getvalue()


async def downscale_image(data: bytes, max_width: int = DEFAULT_MAX_WIDTH) -> bytes:
    """
    Shrink an image to at most ``max_width`` pixels wide and re-encode as JPEG.

    Aspect ratio is preserved. Narrower images keep their size but are still
    re-encoded.

    Args:
        data: Encoded image bytes
        max_width: Maximum output width in pixels

    Returns:
        JPEG bytes at quality 85

    Raises:
        DownscaleError: If the bytes cannot be decoded or exceed Pillow's pixel limit
    """
    return await asyncio.to_thread(_downscale, data, max_width)
