import numpy as np
from PIL import Image
import pytest

@pytest.fixture
def make_image(tmp_path):
    def make(name, width, height, color=(255, 0, 0), mode='RGB'):
        path = tmp_path / name
        if mode == 'RGB':
            img = Image.new('RGB', (width, height), color)
        else:
            img = Image.new('RGB', (width, height), color).convert(mode)
        img.save(path)
        return str(path)
    return make

@pytest.fixture
def gradient_image(tmp_path):
    """PNG whose every pixel is distinct, so misplaced copies show up."""
    def make(name, width, height):
        ys, xs = np.mgrid[0:height, 0:width]
        pixels = np.stack([xs * 7 % 256, ys * 11 % 256, (xs + ys) % 256], axis=-1).astype(np.uint8)
        path = tmp_path / name
        Image.fromarray(pixels).save(path)
        return str(path), pixels
    return make
