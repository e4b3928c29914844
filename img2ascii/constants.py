#!/usr/bin/env python3
"""
Image to ASCII Converter - Constants
====================================
Enums, glyph ramps and size limits shared by every stage of the pipeline.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# ENUMS
# =============================================================================

class ConversionMode(Enum):
    """Selects which glyph ramp a conversion uses."""
    DEFAULT = auto()      # Full-art ramp
    BANNER = auto()       # Banner ramp (ends in a space)


class AspectMode(Enum):
    """How the output grid size is derived from the source image."""
    SCALE = auto()        # Fit inside a bounding box, keep aspect ratio
    PIXEL = auto()        # One character per source pixel, capped
    FIXED = auto()        # Caller-specified size, aspect ratio ignored

    @classmethod
    def from_name(cls, name: str) -> 'AspectMode':
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown aspect mode: {name}") from None


# =============================================================================
# CHARACTER SETS
# =============================================================================

@dataclass(frozen=True)
class GlyphRamp:
    """Ordered characters, darkest first."""
    chars: str

    def __post_init__(self):
        if not self.chars:
            raise ValueError("Glyph ramp must contain at least one character")

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        return self.chars[index]

    def reversed(self) -> 'GlyphRamp':
        """Return the ramp ordered lightest first."""
        return GlyphRamp(self.chars[::-1])


DEFAULT_RAMP = GlyphRamp("@#%*o()1l=:-.")
BANNER_RAMP = GlyphRamp("@#*+=-:. ")

RAMPS = {
    ConversionMode.DEFAULT: DEFAULT_RAMP,
    ConversionMode.BANNER: BANNER_RAMP,
}


# =============================================================================
# SIZE LIMITS
# =============================================================================

DEFAULT_BOUNDING_BOX: Tuple[int, int] = (65, 54)     # Full-art scale box
PIXEL_MODE_CAP: Tuple[int, int] = (300, 200)         # Max grid in pixel mode

# Banner canvas defaults (characters)
BANNER_DEFAULT_WIDTH = 80
BANNER_DEFAULT_HEIGHT = 10
BANNER_CELL_SIZE = 16                                # Canvas pixels per char
BANNER_CANVAS_MARGIN = 5
BANNER_FONT_SCALE = 0.8                              # Font size / canvas height

SUPPORTED_FORMATS = frozenset({'PNG', 'JPEG', 'GIF'})
