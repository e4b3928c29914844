#!/usr/bin/env python3
"""
Image to ASCII Converter - Decoder
==================================
Turns PNG, JPEG or GIF bytes into a CanonicalImage.
"""

import io
import logging
import os
from typing import BinaryIO, Union

from PIL import Image, UnidentifiedImageError

from img2ascii.constants import SUPPORTED_FORMATS
from img2ascii.errors import DecodeError
from img2ascii.models import CanonicalImage


logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, bytes, bytearray, BinaryIO]


def normalize(image: Image.Image, identifier: str = '') -> CanonicalImage:
    """Convert a loaded PIL image to straight RGBA."""
    if image.mode != 'RGBA':
        image = image.convert('RGBA')
    return CanonicalImage(identifier, image.width, image.height, image.tobytes())


def decode(data: bytes, identifier: str = '') -> CanonicalImage:
    """
    Decode an encoded raster image.

    Args:
        data: Encoded PNG, JPEG or GIF bytes
        identifier: Name carried on the result

    Returns:
        CanonicalImage in RGBA; the first frame for animated GIFs

    Raises:
        DecodeError: Unrecognized format, or truncated/corrupt stream
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            if image.format not in SUPPORTED_FORMATS:
                raise DecodeError(f"Unsupported image format: {image.format}")
            image.load()
            canonical = normalize(image, identifier)
    except DecodeError:
        raise
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unrecognized image data in {identifier or 'input'}") from e
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Corrupt image data in {identifier or 'input'}: {e}") from e

    logger.debug("Decoded %s: %dx%d", identifier or '<bytes>', canonical.width, canonical.height)
    return canonical


def read_source(source: Source) -> bytes:
    """Read raw bytes from a path, a bytes object or a binary stream."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if hasattr(source, 'read'):
        try:
            return source.read()
        except OSError as e:
            raise DecodeError(f"Cannot read {source_name(source) or 'stream'}: {e}") from e
    try:
        with open(source, 'rb') as f:
            return f.read()
    except OSError as e:
        raise DecodeError(f"Cannot read {source}: {e}") from e


def source_name(source: Source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return str(getattr(source, 'name', '') or '')


def load(source: Source) -> CanonicalImage:
    """Read and decode an image from any supported source."""
    return decode(read_source(source), source_name(source))
