"""
Command line front end for world files.

usage:
    worldfile show scene.tfw
    worldfile to-world scene.tfw 171 343
    worldfile to-image scene.tfw 696672 4565024
    worldfile for-image scene.tif
"""

import argparse
import logging
import sys

from worldfile import geometry
from worldfile.config import LINE_ORDER
from worldfile.errors import WorldFileError, WorldFileIOError
from worldfile.io import find_world_file, read_from_path

log = logging.getLogger(__name__)


def _show(args):
    wf = read_from_path(args.path, strict=args.strict)
    for name in LINE_ORDER:
        print(f'{name:<8} {getattr(wf, name)!r}')
    print(f'{"det":<8} {wf.determinant!r}')
    if args.width and args.height:
        for label, (x, y) in zip(('ul', 'ur', 'lr', 'll'),
                                 geometry.image_corners(wf, args.width, args.height)):
            print(f'{label:<8} {x!r} {y!r}')


def _to_world(args):
    wf = read_from_path(args.path, strict=args.strict)
    x, y = wf.image_to_world((args.x, args.y))
    print(f'{x!r} {y!r}')


def _to_image(args):
    wf = read_from_path(args.path, strict=args.strict)
    x, y = wf.world_to_image((args.x, args.y))
    print(f'{x!r} {y!r}')


def _for_image(args):
    found = find_world_file(args.image)
    if found is None:
        raise WorldFileIOError(f'no world file found for image {args.image}', path=args.image)
    print(found)


def build_parser():
    parser = argparse.ArgumentParser(prog='worldfile', description='Inspect world files and convert coordinates')
    parser.add_argument('--verbose', dest='verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--strict', dest='strict', action='store_true', help='Reject content after the sixth line')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('show', help='Print the six coefficients and the determinant')
    p.add_argument('path', help='World file path')
    p.add_argument('--width', type=int, default=None, help='Image width in pixels, prints image corners')
    p.add_argument('--height', type=int, default=None, help='Image height in pixels, prints image corners')
    p.set_defaults(func=_show)

    p = sub.add_parser('to-world', help='Convert a pixel coordinate to world coordinates')
    p.add_argument('path', help='World file path')
    p.add_argument('x', type=float, help='Pixel x (column)')
    p.add_argument('y', type=float, help='Pixel y (row)')
    p.set_defaults(func=_to_world)

    p = sub.add_parser('to-image', help='Convert a world coordinate to pixel coordinates')
    p.add_argument('path', help='World file path')
    p.add_argument('x', type=float, help='World x')
    p.add_argument('y', type=float, help='World y')
    p.set_defaults(func=_to_image)

    p = sub.add_parser('for-image', help="Print the path of an image's world file")
    p.add_argument('image', help='Image path')
    p.set_defaults(func=_for_image)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
    )

    try:
        args.func(args)
    except WorldFileError as e:
        log.debug('command %s failed', args.command, exc_info=True)
        print(f'worldfile: error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
