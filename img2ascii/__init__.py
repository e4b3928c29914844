"""
Image to ASCII Converter
========================
Converts PNG, JPEG and GIF images into monochrome character art fitted to a
bounded grid, and rasterizes short messages into banner art.
"""

from img2ascii.constants import (
    AspectMode, ConversionMode, GlyphRamp,
    DEFAULT_RAMP, BANNER_RAMP, DEFAULT_BOUNDING_BOX, PIXEL_MODE_CAP,
)
from img2ascii.errors import (
    ConversionError, DecodeError, ResizeError, WriteError, BannerError,
)
from img2ascii.models import (
    CanonicalImage, Resolution, ConversionOptions, ConversionConfig,
)
from img2ascii.decoder import decode, load
from img2ascii.resizer import resize
from img2ascii.luminance import calculate_luminance, score
from img2ascii.mapper import map_luminance, render
from img2ascii.sizing import scale_to_fit, pixel_dimensions, resolve_dimensions
from img2ascii.converter import Converter, convert, convert_banner, convert_with_options
from img2ascii.banner import Banner, render_banner


__version__ = '1.0.0'

__all__ = [
    # Entry points
    'convert',
    'convert_banner',
    'convert_with_options',
    'render_banner',
    'Converter',
    'Banner',

    # Data model
    'CanonicalImage',
    'Resolution',
    'ConversionOptions',
    'ConversionConfig',
    'AspectMode',
    'ConversionMode',
    'GlyphRamp',
    'DEFAULT_RAMP',
    'BANNER_RAMP',
    'DEFAULT_BOUNDING_BOX',
    'PIXEL_MODE_CAP',

    # Stages
    'decode',
    'load',
    'resize',
    'score',
    'calculate_luminance',
    'map_luminance',
    'render',
    'scale_to_fit',
    'pixel_dimensions',
    'resolve_dimensions',

    # Errors
    'ConversionError',
    'DecodeError',
    'ResizeError',
    'WriteError',
    'BannerError',
]
