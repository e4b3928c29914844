import io

import numpy as np
import pytest
from PIL import Image

from img2ascii.models import CanonicalImage


def encode(image, fmt='PNG'):
    """Encode a PIL image to bytes."""
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def solid_image(width, height, color=(0, 0, 0, 255)):
    return Image.new('RGBA', (width, height), color)


def canonical(width, height, color=(0, 0, 0, 255)):
    data = bytes(color) * (width * height)
    return CanonicalImage('test', width, height, data)


@pytest.fixture
def png_bytes():
    """Factory for solid-colour PNG bytes."""
    def make(width, height, color=(0, 0, 0, 255)):
        return encode(solid_image(width, height, color))
    return make


@pytest.fixture
def image_file(tmp_path):
    """Factory writing a solid-colour image to disk and returning its path."""
    def make(width, height, color=(0, 0, 0, 255), fmt='PNG', name=None):
        image = solid_image(width, height, color)
        if fmt == 'JPEG':
            image = image.convert('RGB')
        path = tmp_path / (name or f"source.{fmt.lower()}")
        path.write_bytes(encode(image, fmt))
        return str(path)
    return make


@pytest.fixture
def noisy_image():
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8)
    return CanonicalImage.from_array(arr, 'noise')
