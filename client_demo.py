#!/usr/bin/env python3
#
# PROJECT: perspective-wireframe
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import argparse
import logging
import sys

from perspective_wireframe import (Model, RenderConfig, Renderer, SegmentRecorder,
                                   WireframeError, load_scene, setup_logging)
from perspective_wireframe.demo import main as demo_main


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s scenes/cube.json                            Interactive viewer (w/a/s/d, arrows, q)
  %(prog)s scenes/cube.json --obj cobra.obj            Add an OBJ model to the scene
  %(prog)s scenes/cube.json --dump 800x600             Print 2-D segments and exit
  %(prog)s scenes/cube.json --ascii --log-file run.log ASCII cells, log to a file
"""
    parser = argparse.ArgumentParser(
        description="Perspective wireframe viewer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("scene", help="Path to a scene .json file")
    parser.add_argument("--obj", action="append", default=[], metavar="PATH",
                        help="Append a model loaded from an .obj file (repeatable)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--dump", metavar="WxH",
                        help="Render one frame headlessly at WxH pixels and print the segments")
    parser.add_argument("--step", type=float, default=1.0,
                        help="Camera move step in world units (default: 1.0)")
    parser.add_argument("--angle", type=float, default=0.5,
                        help="Camera turn angle in radians (default: 0.5)")
    parser.add_argument("--log-file", help="Write log messages to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def parse_size(text):
    try:
        w, h = text.lower().split('x')
        return float(w), float(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None


def dump(scene, size):
    width, height = size
    port = SegmentRecorder()
    Renderer().draw(scene, port, width, height)
    for x0, y0, x1, y1 in port.segments:
        print(f"{x0:.3f} {y0:.3f} {x1:.3f} {y1:.3f}")


def main(argv=None):
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    # curses owns the terminal in interactive mode
    setup_logging(level, args.log_file, console=bool(args.dump))

    try:
        scene = load_scene(args.scene)
        if args.obj:
            scene = scene.with_models(list(scene.models) + [Model.from_obj(p) for p in args.obj])
    except WireframeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = RenderConfig.detect_terminal()
    if args.ascii:
        config.use_braille = False
    config.move_step = args.step
    config.rotate_angle = args.angle

    if args.dump:
        try:
            dump(scene, parse_size(args.dump))
        except (argparse.ArgumentTypeError, WireframeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    try:
        curses.wrapper(lambda s: demo_main(s, scene, config))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
