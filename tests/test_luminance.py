import numpy as np
import pytest

from img2ascii.luminance import (
    calculate_luminance, partition, pool_size, score, score_sequential,
)
from img2ascii.models import CanonicalImage

from conftest import canonical


@pytest.mark.parametrize("rgb, expected", [
    ((0, 0, 0), 0),
    ((255, 255, 255), 255),
    ((255, 0, 0), 54),
    ((0, 255, 0), 182),
    ((0, 0, 255), 18),
    ((128, 128, 128), 128),
])
def test_calculate_luminance(rgb, expected):
    assert calculate_luminance(*rgb) == expected


def test_alpha_is_ignored():
    opaque = score(canonical(2, 1, (10, 200, 30, 255)))
    clear = score(canonical(2, 1, (10, 200, 30, 0)))
    assert opaque.tolist() == clear.tolist()


def test_field_length_matches_pixel_count():
    field = score(canonical(3, 4, (128, 128, 128, 255)))
    assert len(field) == 12
    assert set(field.tolist()) == {128}


@pytest.mark.parametrize("workers", [1, 4, 35])
def test_parallel_matches_sequential(noisy_image, workers):
    expected = score_sequential(noisy_image)
    result = score(noisy_image, workers=workers)
    assert result.dtype == expected.dtype
    assert np.array_equal(result, expected)


def test_field_is_row_major(noisy_image):
    field = score(noisy_image, workers=3)
    arr = noisy_image.to_array()
    row, col = 3, 5
    r, g, b = (int(v) for v in arr[row, col, :3])
    assert field[row * noisy_image.width + col] == calculate_luminance(r, g, b)


def test_empty_image():
    empty = CanonicalImage('empty', 0, 0, b'')
    assert len(score(empty, workers=4)) == 0


def test_pool_never_exceeds_pixel_count():
    assert pool_size(3, workers=16) == 3
    assert pool_size(100, workers=4) == 4


def test_partition_is_disjoint_and_complete():
    ranges = partition(10, 4)
    assert ranges == [(0, 3), (3, 6), (6, 8), (8, 10)]
    covered = [i for start, stop in ranges for i in range(start, stop)]
    assert covered == list(range(10))


def test_partition_caps_parts_at_count():
    assert partition(2, 8) == [(0, 1), (1, 2)]
