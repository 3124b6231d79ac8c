import argparse
import logging
import sys

from . import ConcatError, __version__
from .concat import concat_images, save_image

OUTPUT_PATH = "out.jpg"
LOG_FORMAT = "%(asctime)-15s %(levelname)-8s %(message)s"

def parse_options(argv=None):
    parser = argparse.ArgumentParser(
        prog='image-concat',
        description='Concatenate images horizontally into a single image',
        usage='%(prog)s [-h] [--version] [--verbose] PATH...')
    parser.add_argument('paths', type=str, nargs='+', metavar='PATH', help='images to concatenate, left to right')
    parser.add_argument('--verbose', action='store_true', default=False, help='log image and canvas sizes')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)

def main(argv=None):
    opts = parse_options(argv)
    logging.basicConfig(level=logging.DEBUG if opts.verbose else logging.INFO,
                        format=LOG_FORMAT, stream=sys.stderr)

    try:
        image = concat_images(opts.paths)
        save_image(image, OUTPUT_PATH)
    except ConcatError as e:
        logging.error(str(e))
        sys.exit(1)

    logging.info(f"Saved {image.width}x{image.height} image to {OUTPUT_PATH}")

if __name__ == '__main__':
    main()
