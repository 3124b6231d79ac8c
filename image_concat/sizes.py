import logging

from PIL import Image, UnidentifiedImageError

from . import ConcatError

def read_image_size(path):
    # Image.open only parses the header; pixels are decoded on first access
    try:
        with Image.open(path) as img:
            return img.size
    except FileNotFoundError as e:
        raise ConcatError(f"No such image: {path}") from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ConcatError(f"Failed to read size of {path}: {e}") from e

def read_image_sizes(paths):
    sizes = []
    for path in paths:
        size = read_image_size(path)
        logging.debug(f"{path}: {size[0]}x{size[1]}")
        sizes.append(size)
    return sizes

def canvas_size(sizes):
    """Total width of the row of images and the height of the tallest one."""
    if not sizes:
        raise ConcatError("At least one image is needed")
    width_sum = sum(w for w, _ in sizes)
    max_height = max(h for _, h in sizes)
    return width_sum, max_height

def column_offsets(sizes):
    offsets = []
    width_acc = 0
    for w, _ in sizes:
        offsets.append(width_acc)
        width_acc += w
    return offsets
