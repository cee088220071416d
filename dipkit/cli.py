# -*- coding: utf-8 -*-
"""
dipkit CLI - Load an image, apply one algorithm, save the result.

Usage
-----
    dipkit input.png output.png nn-zoom --scale 2
    dipkit input.png output.png rotate --theta 0.785
    dipkit input.jpg output.png quantize --levels 4 --channels 1

Command-line options for algorithm parameters are generated from the
tunable parameters each transform declares.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-13

Modified
--------
2026-03-02
"""

# Standard library
import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type

# dipkit internal
from dipkit.IO import load_image, save_image
from dipkit.algorithms import (
    BilinearZoom,
    Downsample,
    ImageTransform,
    Invert,
    NearestNeighborZoom,
    Quantize,
    Rotate,
)
from dipkit.exceptions import DipkitError

logger = logging.getLogger(__name__)

OPERATIONS: Dict[str, Type[ImageTransform]] = {
    'nn-zoom': NearestNeighborZoom,
    'bilinear-zoom': BilinearZoom,
    'rotate': Rotate,
    'quantize': Quantize,
    'invert': Invert,
    'downsample': Downsample,
}


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one option per declared transform parameter."""
    parser = argparse.ArgumentParser(
        prog='dipkit',
        description="Apply one image-processing operation to an image file.",
    )
    parser.add_argument("input", type=Path, help="Input image file.")
    parser.add_argument("output", type=Path,
                        help="Output image file; the extension picks the format.")
    parser.add_argument("operation", choices=sorted(OPERATIONS),
                        help="Operation to apply.")
    parser.add_argument(
        "--channels",
        type=int,
        choices=[1, 2, 3, 4],
        default=None,
        help="Force the decoded channel count (default: keep the file's).",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging.")

    seen = set()
    for name in sorted(OPERATIONS):
        for spec in OPERATIONS[name].__param_specs__:
            if spec.name in seen:
                continue
            seen.add(spec.name)
            parser.add_argument(
                f"--{spec.name.replace('_', '-')}",
                dest=spec.name,
                type=spec.param_type,
                default=None,
                help=f"{spec.description} (default: {spec.default}).",
            )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    return build_parser().parse_args(argv)


def make_transform(args: argparse.Namespace) -> ImageTransform:
    """Instantiate the selected transform from the parsed options."""
    cls = OPERATIONS[args.operation]
    kwargs = {}
    for spec in cls.__param_specs__:
        value = getattr(args, spec.name, None)
        if value is not None:
            kwargs[spec.name] = value
    return cls(**kwargs)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        transform = make_transform(args)
        image = load_image(args.input, channels=args.channels)
        logger.info("Loaded %s: %r", args.input, image)
        result = transform.apply(image)
        save_image(result, args.output)
    except (DipkitError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Saved %s: %r", args.output, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
