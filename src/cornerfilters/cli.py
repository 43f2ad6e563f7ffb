import argparse
import logging
import sys

import numpy
from PIL import Image

from ._core import feature_strength_map
from ._errors import FilterError

logger = logging.getLogger(__name__)


def to_bytes(values):
    """Round floats to 8-bit samples, snapping values within 0.05 of the range ends."""
    values = numpy.asarray(values, dtype=numpy.float32)
    out = numpy.floor(values + 0.5)
    out[values > 255.05] = 255
    out[values < 0.05] = 0
    return numpy.clip(out, 0, 255).astype(numpy.uint8)


def read_image(path):
    with Image.open(path) as image:
        if image.mode not in ("L", "RGB"):
            image = image.convert("RGB")
        return numpy.asarray(image, dtype=numpy.float32)


def write_image(path, samples):
    Image.fromarray(to_bytes(samples)).save(path)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cornerfilters",
        description="Gaussian-smooth an image and compute its structure-tensor feature strength.",
    )
    parser.add_argument("input", help="input image (8-bit grayscale or RGB)")
    parser.add_argument("output", help="where to write the smoothed image")
    parser.add_argument("sigma", type=float, help="Gaussian standard deviation")
    parser.add_argument("half_window", type=int, metavar="H", help="block half size")
    parser.add_argument("search_margin", type=int, metavar="S", help="search range")
    parser.add_argument("--strength", metavar="PATH", help="save the feature strength map as .npy")
    parser.add_argument(
        "--window-ratio",
        type=float,
        default=0.0,
        help="kernel half-width in multiples of sigma (default: 3)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every stage")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.info("sigma: %s", args.sigma)
    logger.info("block half size: %d", args.half_window)
    logger.info("search range: %d", args.search_margin)

    try:
        samples = read_image(args.input)
        maps = feature_strength_map(
            samples,
            args.sigma,
            args.half_window,
            args.search_margin,
            window_ratio=args.window_ratio,
        )
        write_image(args.output, maps.smoothed)
        if args.strength:
            numpy.save(args.strength, maps.strength)
    except FilterError as e:
        logger.error("invalid input: %s", e)
        return 1
    except OSError as e:
        logger.error("cannot read or write image: %s", e)
        return 1

    logger.info("wrote %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
