"""
Copyright 2026 mirror-optics authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
mirror-optics: render a spherical mirror ray diagram to SVG.

Usage:
    mirror-optics --kind concave -o concave.svg
    mirror-optics --kind convex --object-distance 200 --focal-length 120
    mirror-optics --kind concave --object-distance 154 --focal-length 154 --verbose
"""

import argparse
import logging
import sys

from .core.constants import (
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_HEIGHT,
    DEFAULT_OBJECT_DISTANCE,
    DEFAULT_OBJECT_HEIGHT,
    DEFAULT_WIDTH,
    STROKE_WIDTH,
)
from .core.optics import MirrorKind, MirrorState
from .core.scene import render_frame
from .core.svg_renderer import RenderSettings, SVGRenderer
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mirror-optics",
        description="Render a concave or convex mirror ray diagram to SVG.",
    )
    parser.add_argument("--kind", default="concave",
                        choices=[k.value for k in MirrorKind],
                        help="mirror kind (default: concave)")
    parser.add_argument("--object-height", type=float, default=DEFAULT_OBJECT_HEIGHT,
                        help="object height in pixels, positive upward")
    parser.add_argument("--object-distance", type=float, default=DEFAULT_OBJECT_DISTANCE,
                        help="object distance from the mirror in pixels")
    parser.add_argument("--focal-length", type=float, default=DEFAULT_FOCAL_LENGTH,
                        help="focal length in pixels")
    parser.add_argument("--width", type=float, default=DEFAULT_WIDTH,
                        help="canvas width in pixels")
    parser.add_argument("--height", type=float, default=DEFAULT_HEIGHT,
                        help="canvas height in pixels")
    parser.add_argument("--stroke-width", type=float, default=STROKE_WIDTH,
                        help="line width in pixels")
    parser.add_argument("-o", "--output", default="mirror.svg",
                        help="output SVG file (default: mirror.svg)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log degenerate geometry at DEBUG level")
    return parser


def run(args) -> MirrorState:
    """Compute, render and save one diagram; returns the mirror state."""
    state = MirrorState(MirrorKind.from_name(args.kind))
    state.set_viewport(args.width, args.height)
    state.set_inputs(args.object_height, args.object_distance, args.focal_length)

    commands = render_frame(state)
    logger.info("%s mirror: %d draw commands", state.kind.value, len(commands))

    renderer = SVGRenderer(args.width, args.height,
                           RenderSettings(stroke_width=args.stroke_width))
    renderer.draw_commands(commands)
    renderer.save(args.output)
    logger.info("Wrote %s", args.output)
    return state


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    state = run(args)
    readout = state.readout()
    print(f"image distance: {readout['image_distance']}")
    print(f"image height:   {readout['image_height']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
