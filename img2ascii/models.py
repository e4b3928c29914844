#!/usr/bin/env python3
"""
Image to ASCII Converter - Data Model
=====================================
Immutable values passed between pipeline stages.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from img2ascii.constants import (
    AspectMode, ConversionMode, GlyphRamp, RAMPS,
    DEFAULT_BOUNDING_BOX, PIXEL_MODE_CAP,
)


# =============================================================================
# IMAGE TYPES
# =============================================================================

@dataclass(frozen=True)
class Resolution:
    """Width and height of an image or character grid."""
    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def as_tuple(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class CanonicalImage:
    """
    Decoded image as a row-major buffer of straight RGBA byte quads.

    Attributes:
        identifier: Name of the source (path or caller label)
        width: Width in pixels
        height: Height in pixels
        data: width * height * 4 bytes, R G B A per pixel
    """
    identifier: str
    width: int
    height: int
    data: bytes = field(repr=False)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Negative image size: {self.width}x{self.height}")
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"Buffer holds {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    @property
    def resolution(self) -> Resolution:
        return Resolution(self.width, self.height)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def to_array(self) -> np.ndarray:
        """Read-only (height, width, 4) uint8 view of the buffer."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, 4)

    @classmethod
    def from_array(cls, arr: np.ndarray, identifier: str = '') -> 'CanonicalImage':
        """Build from a (height, width, 4) uint8 array."""
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError(f"Expected (height, width, 4) array, got shape {arr.shape}")
        height, width = arr.shape[:2]
        return cls(identifier, width, height, np.ascontiguousarray(arr, dtype=np.uint8).tobytes())


# =============================================================================
# REQUEST CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class ConversionOptions:
    """Caller-facing options for a general conversion."""
    aspect_mode: AspectMode = AspectMode.SCALE
    fixed_width: int = 0
    fixed_height: int = 0
    reverse: bool = False
    mode: ConversionMode = ConversionMode.DEFAULT


@dataclass(frozen=True)
class ConversionConfig:
    """
    Everything one conversion needs, built once per request.

    Attributes:
        ramp: Glyph ramp, darkest first
        reverse: Map bright pixels to dark glyphs instead
        aspect_mode: Sizing policy
        bounding_box: (width, height) box used by the scale policy
        pixel_cap: (width, height) limit used by the pixel policy
        fixed_size: (width, height) used verbatim by the fixed policy
        workers: Luminance pool size (None = available CPUs)
        debug_log: Optional extra path the artifact is copied to
    """
    ramp: GlyphRamp = RAMPS[ConversionMode.DEFAULT]
    reverse: bool = False
    aspect_mode: AspectMode = AspectMode.SCALE
    bounding_box: Tuple[int, int] = DEFAULT_BOUNDING_BOX
    pixel_cap: Tuple[int, int] = PIXEL_MODE_CAP
    fixed_size: Tuple[int, int] = (0, 0)
    workers: Optional[int] = None
    debug_log: Optional[str] = None

    def __post_init__(self):
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be positive, got {self.workers}")

    @classmethod
    def default(cls, reverse: bool = False, **kwargs) -> 'ConversionConfig':
        """Full-art conversion inside the 65x54 box."""
        return cls(ramp=RAMPS[ConversionMode.DEFAULT], reverse=reverse, **kwargs)

    @classmethod
    def banner(cls, width: int, height: int, **kwargs) -> 'ConversionConfig':
        """Banner conversion inside a caller-supplied box, never reversed."""
        return cls(ramp=RAMPS[ConversionMode.BANNER], reverse=False,
                   bounding_box=(width, height), **kwargs)

    @classmethod
    def for_options(cls, options: ConversionOptions, **kwargs) -> 'ConversionConfig':
        return cls(
            ramp=RAMPS[options.mode],
            reverse=options.reverse,
            aspect_mode=options.aspect_mode,
            fixed_size=(options.fixed_width, options.fixed_height),
            **kwargs
        )
