#!/usr/bin/env python3
"""Print the 256-colour terminal palette, ordered or as harmony sets."""

import argparse
import logging
import sys

from harmony import generate_harmonies
from ordering import Strategy, order_cube
from palette import CUBE
from render import (
    harmony_rows, palette_rows, render_description, render_harmonies,
    render_palette, visualize_rows,
)

logger = logging.getLogger(__name__)

# Flag priority when several selectors are given
SELECTOR_PRIORITY = (
    'distance', 'greyscale', 'harmony', 'hue',
    'luminance', 'saturation', 'similarity', 'temperature',
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Print the 256-colour terminal palette in a chosen order.'
    )
    parser.add_argument(
        '--distance', '-d',
        type=int,
        metavar='N',
        help='Order the cube by distance from colour N (16-231)'
    )
    parser.add_argument(
        '--greyscale', '-g',
        action='store_true',
        help='Order the cube by greyscale brightness, lightest first'
    )
    parser.add_argument(
        '--harmony', '-m',
        type=int,
        metavar='N',
        help='Show colour harmonies for colour N (16-231)'
    )
    parser.add_argument('--hue', '-u', action='store_true', help='Order the cube by hue, grays last')
    parser.add_argument('--luminance', '-l', action='store_true', help='Order the cube by luminance')
    parser.add_argument('--saturation', '-s', action='store_true', help='Order the cube by saturation')
    parser.add_argument('--similarity', '-c', action='store_true', help='Group similar colours together')
    parser.add_argument('--temperature', '-t', action='store_true',
                        help='Order the cube warm, medium, then cool')
    parser.add_argument(
        '--describe',
        type=int,
        metavar='N',
        help='Describe palette colour N (0-255) and exit'
    )
    parser.add_argument(
        '--image', '-o',
        metavar='PATH',
        help='Also save the printed colours as a PNG swatch sheet'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Log debug output to stderr')
    return parser


def select_mode(args: argparse.Namespace) -> str:
    """Highest-priority selector given on the command line, or 'rgb'."""
    for name in SELECTOR_PRIORITY:
        value = getattr(args, name)
        if value is not None and value is not False:
            return name
    return 'rgb'


def validate_reference(name: str, value: int) -> None:
    """Exit with status 2 if a reference colour is outside the cube."""
    if value not in CUBE:
        print(f"Error: --{name} must be between {CUBE.start} and {CUBE.stop - 1}, got {value}",
              file=sys.stderr)
        sys.exit(2)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.describe is not None:
        if not 0 <= args.describe <= 255:
            print(f"Error: --describe must be between 0 and 255, got {args.describe}",
                  file=sys.stderr)
            sys.exit(2)
        print(render_description(args.describe))
        return

    mode = select_mode(args)
    logger.debug("Selected mode: %s", mode)

    if mode == 'harmony':
        validate_reference('harmony', args.harmony)
        harmonies = generate_harmonies(args.harmony)
        print(render_harmonies(harmonies))
        rows = harmony_rows(harmonies)
    else:
        reference = None
        if mode == 'distance':
            validate_reference('distance', args.distance)
            reference = args.distance
        cube_order = order_cube(Strategy(mode), reference)
        print(render_palette(cube_order))
        rows = palette_rows(cube_order)

    # Write swatch sheet if requested
    if args.image:
        try:
            visualize_rows(rows, args.image)
            print(f"\nWrote: {args.image}")
        except (OSError, ValueError) as e:
            print(f"Error writing image: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == '__main__':
    main()
