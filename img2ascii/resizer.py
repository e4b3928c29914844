#!/usr/bin/env python3
"""
Image to ASCII Converter - Resizer
==================================
Bilinear resampling of a CanonicalImage to an exact target size.
"""

import logging

from PIL import Image

from img2ascii.errors import ResizeError
from img2ascii.models import CanonicalImage


logger = logging.getLogger(__name__)


def resize(image: CanonicalImage, width: int, height: int) -> CanonicalImage:
    """
    Resample an image to exactly width x height.

    Pillow's bilinear filter widens its support when downscaling, so each
    output pixel averages the source area it covers.

    Args:
        image: Source image
        width: Target width in pixels
        height: Target height in pixels

    Returns:
        New CanonicalImage of the requested size. When the size is unchanged
        the pixel data is copied without resampling.

    Raises:
        ResizeError: width or height is not positive
    """
    if width <= 0 or height <= 0:
        raise ResizeError(f"Invalid target size {width}x{height}")

    if (width, height) == image.size:
        return CanonicalImage(image.identifier, image.width, image.height, bytes(image.data))

    if image.width == 0 or image.height == 0:
        raise ResizeError(f"Cannot resample empty image {image.width}x{image.height}")

    # Per band, so colour is never premultiplied by alpha
    src = Image.frombytes('RGBA', image.size, image.data)
    bands = [band.resize((width, height), Image.Resampling.BILINEAR) for band in src.split()]
    dst = Image.merge('RGBA', bands)

    logger.debug("Resized %s %dx%d -> %dx%d", image.identifier or '<image>',
                 image.width, image.height, width, height)
    return CanonicalImage(image.identifier, width, height, dst.tobytes())
