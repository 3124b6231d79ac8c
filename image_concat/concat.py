import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from . import ConcatError
from .sizes import canvas_size, column_offsets, read_image_sizes

print = logging.info

def load_rgb(path):
    try:
        with Image.open(path) as img:
            rgb = img.convert('RGB')
    except FileNotFoundError as e:
        raise ConcatError(f"No such image: {path}") from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise ConcatError(f"Failed to decode {path}: {e}") from e
    return np.asarray(rgb, dtype=np.uint8)

def concat_images(paths):
    """
    Lay the images at `paths` side by side, left to right, in the given order.

    The canvas is as wide as all images together and as tall as the tallest
    one. Shorter images sit against the top edge and the rows below them are
    left black. Every image is converted to 8-bit RGB.
    """
    sizes = read_image_sizes(paths)
    width, height = canvas_size(sizes)
    logging.debug(f"Canvas size: {width}x{height}")

    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    for path, (w, h), x in zip(paths, sizes, column_offsets(sizes)):
        print(f"Loading {path}")
        pixels = load_rgb(path)
        if pixels.shape[:2] != (h, w):
            raise ConcatError(f"{path} changed size while loading: expected {w}x{h}, "
                              f"got {pixels.shape[1]}x{pixels.shape[0]}")
        canvas[:h, x:x + w] = pixels

    return Image.fromarray(canvas)

def save_image(image, path):
    """
    Encode `image` next to `path` and move it into place once it is complete,
    so a failed save leaves any previous file at `path` untouched.
    """
    ext = os.path.splitext(path)[1].lower()
    fmt = Image.registered_extensions().get(ext)
    if fmt is None:
        raise ConcatError(f"Failed to save concatenated image: unknown file extension {ext!r}")

    tmp_path = f"{path}.{os.getpid()}.tmp"
    try:
        with open(tmp_path, 'wb') as f:
            image.save(f, format=fmt)
        os.replace(tmp_path, path)
    except (OSError, ValueError) as e:
        if os.path.isfile(tmp_path):
            os.remove(tmp_path)
        raise ConcatError(f"Failed to save concatenated image: {e}") from e
