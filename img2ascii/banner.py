#!/usr/bin/env python3
"""
Image to ASCII Converter - Banners
==================================
Rasterizes a short message to a glyph image and converts it with the
banner ramp.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from img2ascii.constants import (
    BANNER_DEFAULT_WIDTH, BANNER_DEFAULT_HEIGHT,
    BANNER_CELL_SIZE, BANNER_CANVAS_MARGIN, BANNER_FONT_SCALE,
)
from img2ascii.converter import convert_banner
from img2ascii.errors import BannerError


logger = logging.getLogger(__name__)


@dataclass
class Banner:
    """A message to render, sized in output characters."""
    message: str
    width: int = BANNER_DEFAULT_WIDTH
    height: int = BANNER_DEFAULT_HEIGHT
    font_path: Optional[str] = None       # TrueType file (Pillow default if None)

    def __post_init__(self):
        if self.width <= 0:
            self.width = BANNER_DEFAULT_WIDTH
        if self.height <= 0:
            self.height = BANNER_DEFAULT_HEIGHT

    @property
    def canvas_size(self):
        return (BANNER_CANVAS_MARGIN + self.width * BANNER_CELL_SIZE,
                BANNER_CANVAS_MARGIN + self.height * BANNER_CELL_SIZE)


def _load_font(font_path: Optional[str], size: float) -> ImageFont.FreeTypeFont:
    try:
        if font_path:
            return ImageFont.truetype(font_path, size)
        return ImageFont.load_default(size=size)
    except OSError as e:
        raise BannerError(f"Failed to load font {font_path or '<default>'}: {e}") from e


def render_banner_image(banner: Banner) -> Image.Image:
    """Black message centred on a white canvas."""
    if not banner.message.strip():
        raise BannerError("Banner message is empty")

    canvas_width, canvas_height = banner.canvas_size
    font = _load_font(banner.font_path, canvas_height * BANNER_FONT_SCALE)

    image = Image.new('RGB', (canvas_width, canvas_height), (255, 255, 255))
    draw = ImageDraw.Draw(image)
    draw.text((canvas_width / 2, canvas_height / 2), banner.message,
              fill=(0, 0, 0), font=font, anchor='mm')
    return image


def banner_png(banner: Banner) -> bytes:
    """Rasterized banner resampled to exactly width x height pixels, as PNG."""
    image = render_banner_image(banner)
    logger.debug("Rasterized banner %r at %dx%d", banner.message, *image.size)
    image = image.resize((banner.width, banner.height), Image.Resampling.BILINEAR)
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


def render_banner(banner: Banner, destination: str, **config_kwargs) -> str:
    """
    Rasterize `banner` and write its banner-ramp art to `destination`.

    Returns:
        The rendered text, exactly `banner.height` rows of `banner.width`
        characters
    """
    return convert_banner(banner_png(banner), destination, banner.width, banner.height,
                          **config_kwargs)
