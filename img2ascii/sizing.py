#!/usr/bin/env python3
"""
Image to ASCII Converter - Sizing Policies
==========================================
Chooses the character grid size for each aspect mode.
"""

import logging
from typing import Tuple

from img2ascii.constants import AspectMode
from img2ascii.models import ConversionConfig, Resolution


logger = logging.getLogger(__name__)


def scale_to_fit(source: Resolution, box: Tuple[int, int]) -> Resolution:
    """
    Largest size inside `box` that keeps the source aspect ratio.

    The constrained axis takes the box size and the other axis is truncated,
    so either dimension may be up to one unit short of the exact ratio.
    An axis truncated to zero is raised to one.
    """
    max_width, max_height = box
    if max_width <= 0 or max_height <= 0 or source.width <= 0 or source.height <= 0:
        return Resolution(max_width, max_height)
    if source.as_tuple() == (max_width, max_height):
        return Resolution(max_width, max_height)

    img_aspect = source.width / source.height
    box_aspect = max_width / max_height

    if img_aspect > box_aspect:
        width = max_width
        height = min(int(max_width / img_aspect), max_height)
    else:
        height = max_height
        width = min(int(max_height * img_aspect), max_width)

    return Resolution(max(1, width), max(1, height))


def pixel_dimensions(source: Resolution, cap: Tuple[int, int]) -> Resolution:
    """
    Source size, shrunk proportionally if it exceeds `cap`.

    Width is corrected first and height second, each with its own ratio, so
    a large image that overflows both axes ends up bound by whichever
    correction ran last.
    """
    max_width, max_height = cap
    width, height = source.width, source.height

    if width > max_width:
        ratio = max_width / width
        width = max_width
        height = int(height * ratio)
    if height > max_height:
        ratio = max_height / height
        height = max_height
        width = int(width * ratio)

    return Resolution(max(1, width), max(1, height))


def fixed_dimensions(width: int, height: int) -> Resolution:
    """Caller size as given; the resizer rejects non-positive values."""
    return Resolution(width, height)


def resolve_dimensions(source: Resolution, config: ConversionConfig) -> Resolution:
    """Target grid size for `source` under the configured aspect mode."""
    if config.aspect_mode == AspectMode.PIXEL:
        target = pixel_dimensions(source, config.pixel_cap)
    elif config.aspect_mode == AspectMode.FIXED:
        target = fixed_dimensions(*config.fixed_size)
    else:
        target = scale_to_fit(source, config.bounding_box)

    logger.debug("%s sizing: %dx%d -> %dx%d", config.aspect_mode.name,
                 source.width, source.height, target.width, target.height)
    return target
