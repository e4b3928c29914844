#!/usr/bin/env python3
"""
Image to ASCII Converter - Character Mapper
===========================================
Quantizes luminance values onto a glyph ramp.
"""

from typing import Sequence

import numpy as np

from img2ascii.constants import GlyphRamp


def glyph_index(luminance: int, ramp_length: int) -> int:
    """Ramp index for a luminance in 0-255, clamped to the ramp."""
    idx = luminance * (ramp_length - 1) // 255
    return max(0, min(ramp_length - 1, idx))


def map_luminance(luminance: int, ramp: GlyphRamp, reverse: bool = False) -> str:
    """
    Map one luminance value to one glyph.

    Args:
        luminance: Brightness, expected 0-255
        ramp: Glyph ramp, darkest first
        reverse: Look up against the reversed ramp

    Returns:
        Single character
    """
    if reverse:
        ramp = ramp.reversed()
    return ramp[glyph_index(int(luminance), len(ramp))]


def build_lookup(ramp: GlyphRamp) -> np.ndarray:
    """Glyph for every luminance 0-255."""
    return np.array([ramp[glyph_index(lum, len(ramp))] for lum in range(256)])


def render(field: Sequence[int], width: int, ramp: GlyphRamp, reverse: bool = False) -> str:
    """
    Render a luminance field as newline-terminated rows.

    The ramp is reversed at most once and its lookup table is built once,
    then applied row-major to every value.

    Args:
        field: Luminance values, row-major
        width: Row length in characters
        ramp: Glyph ramp, darkest first
        reverse: Use the reversed ramp

    Returns:
        len(field) // width rows of exactly `width` characters, each
        followed by a single newline
    """
    if reverse:
        ramp = ramp.reversed()
    values = np.asarray(field, dtype=np.int64)
    if width <= 0 or values.size == 0:
        return ''
    if values.size % width:
        raise ValueError(f"Field of {values.size} values is not a multiple of width {width}")

    table = build_lookup(ramp)
    glyphs = table[np.clip(values, 0, 255)].reshape(-1, width)
    return ''.join(''.join(row) + '\n' for row in glyphs)
