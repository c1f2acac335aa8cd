"""
Command-line front end.

    seamcarving input.png output.png --width 300 --height 200
"""

import argparse
import logging
import sys

from .carver import SeamCarver
from .carving import carve_picture, overlay_seam
from .errors import SeamCarvingError
from .picture import Picture

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarving',
        description="Content-aware image shrinking by seam carving"
    )
    parser.add_argument('input', help='Input image path')
    parser.add_argument('output', help='Output image path')
    parser.add_argument(
        '--width',
        type=int,
        help='Target width (default: keep current width)'
    )
    parser.add_argument(
        '--height',
        type=int,
        help='Target height (default: keep current height)'
    )
    parser.add_argument(
        '--order',
        choices=['topological', 'rows'],
        default='topological',
        help='Node order for the seam search (default: topological)'
    )
    parser.add_argument(
        '--show-seam',
        metavar='PATH',
        help='Also save the input with its first vertical seam painted red'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        picture = Picture.open(args.input)
        logger.info("Loaded %s (%d x %d)", args.input, picture.width, picture.height)

        if args.show_seam:
            seam = SeamCarver(picture, order=args.order).find_vertical_seam()
            overlay_seam(picture, seam).save(args.show_seam)
            logger.info("Saved seam overlay to %s", args.show_seam)

        carved = carve_picture(picture, width=args.width, height=args.height, order=args.order)
        carved.save(args.output)
    except (SeamCarvingError, ValueError, OSError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    logger.info("Saved %s (%d x %d)", args.output, carved.width, carved.height)
    return 0
