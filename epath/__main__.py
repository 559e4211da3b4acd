import argparse
import logging
import sys
from pathlib import Path as FilePath
from typing import List, Optional, Sequence

from epath import (
    ROUNDING_RULES,
    Path,
    RoundingWarning,
    format_analysis,
    generate_tikz_document,
    parse_path_data,
    print_path_data,
    round_path,
    thin_path,
)
from epath.shapes import SHAPES

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_path(args: argparse.Namespace) -> Path:
    if args.shape:
        logger.info("Using built-in shape %s", args.shape)
        return Path((SHAPES[args.shape](),))
    with open(args.path) as fin:
        text = fin.read()
    logger.info("Parsing path data from %s", args.path)
    return parse_path_data(text)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Thin and round 2D vector paths")
    parser.add_argument("path", nargs="?", help="File with SVG path data")
    parser.add_argument(
        "--shape",
        choices=sorted(SHAPES),
        help="Use a built-in sample contour instead of a file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--thin",
        type=float,
        metavar="MIN_LENGTH",
        help="Merge segments shorter than MIN_LENGTH",
    )
    parser.add_argument(
        "--round",
        type=float,
        metavar="RADIUS",
        help="Round vertices with RADIUS (thins with RADIUS/2 first)",
    )
    parser.add_argument(
        "--rule",
        choices=ROUNDING_RULES,
        default="all",
        help="Which turns to round (default: all)",
    )
    parser.add_argument(
        "--analyze",
        type=float,
        metavar="MIN_LENGTH",
        help="Report segments not longer than MIN_LENGTH in the input",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=3,
        help="Decimal places in the printed path data (default: 3)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the result to the given path",
    )
    args = parser.parse_args(argv)
    if not args.path and not args.shape:
        parser.error("either a path data file or --shape is required")

    _configure_logging(args.log_level)

    path = _load_path(args)
    logger.info(
        "Loaded %d sub-path(s) with %d segment(s)",
        len(path.subpaths),
        len(path.segments()),
    )

    if args.analyze is not None:
        print("Analysis:")
        print(format_analysis(path, args.analyze), end="")

    if args.thin is not None:
        path = thin_path(path, args.thin)
        logger.info("Thinned to %d segment(s)", len(path.segments()))

    warnings: List[RoundingWarning] = []
    if args.round is not None:
        path, warnings = round_path(path, args.round, args.rule)
        for warning in warnings:
            logger.warning("Sub-path %d not rounded: %s", warning.subpath, warning)

    print(print_path_data(path, args.precision))
    if warnings:
        print("Warnings:")
        for warning in warnings:
            print(f"  - sub-path {warning.subpath}: {warning}")

    if args.tikz_output_path:
        output_path = FilePath(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(generate_tikz_document(path), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
