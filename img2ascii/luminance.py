#!/usr/bin/env python3
"""
Image to ASCII Converter - Luminance Scorer
===========================================
Per-pixel perceptual brightness, computed by a pool of workers that each own
a disjoint slice of the output field.
"""

import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from img2ascii.models import CanonicalImage


logger = logging.getLogger(__name__)

# Rec. 709 weights
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722


def calculate_luminance(r: int, g: int, b: int) -> int:
    """Weighted RGB sum rounded half away from zero."""
    value = RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _luminance_of(pixels: np.ndarray) -> np.ndarray:
    """Vectorised calculate_luminance over an (n, 4) uint8 block."""
    rgb = pixels[:, :3].astype(np.float64)
    value = RED_WEIGHT * rgb[:, 0] + GREEN_WEIGHT * rgb[:, 1] + BLUE_WEIGHT * rgb[:, 2]
    # Values are non-negative, so floor(x + 0.5) rounds half away from zero
    return np.floor(value + 0.5).astype(np.int64)


def partition(count: int, parts: int) -> List[Tuple[int, int]]:
    """
    Split [0, count) into `parts` contiguous, disjoint, non-empty ranges.

    The first count % parts ranges are one index longer than the rest.
    """
    parts = max(1, min(parts, count))
    base, extra = divmod(count, parts)
    ranges = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def pool_size(pixel_count: int, workers: Optional[int] = None) -> int:
    available = workers or os.cpu_count() or 1
    return min(available, pixel_count)


def score(image: CanonicalImage, workers: Optional[int] = None) -> np.ndarray:
    """
    Compute the luminance field of an image.

    Args:
        image: Source image
        workers: Pool size limit (None = available CPUs); the pool never
            exceeds the pixel count

    Returns:
        int64 array of length width * height; index i is pixel
        (i // width, i % width)
    """
    pixel_count = image.resolution.pixel_count
    field = np.zeros(pixel_count, dtype=np.int64)
    if pixel_count == 0:
        return field

    pixels = np.frombuffer(image.data, dtype=np.uint8).reshape(pixel_count, 4)
    size = pool_size(pixel_count, workers)
    ranges = partition(pixel_count, size)

    def work(start: int, stop: int) -> None:
        # Each worker writes only field[start:stop]
        field[start:stop] = _luminance_of(pixels[start:stop])

    if size == 1:
        work(0, pixel_count)
    else:
        with ThreadPoolExecutor(max_workers=size, thread_name_prefix='luminance') as pool:
            futures = [pool.submit(work, start, stop) for start, stop in ranges]
            for future in futures:
                future.result()

    logger.debug("Scored %d pixels with %d worker(s)", pixel_count, size)
    return field


def score_sequential(image: CanonicalImage) -> np.ndarray:
    """Single-threaded reference computation, one pixel at a time."""
    data = image.data
    return np.array(
        [calculate_luminance(data[i], data[i + 1], data[i + 2])
         for i in range(0, len(data), 4)],
        dtype=np.int64,
    )
