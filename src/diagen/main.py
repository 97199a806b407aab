"""Main entry point for diagen."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .core.checks import run_self_checks
from .core.color import Color
from .core.diagram import Diagram, describe, iter_nodes, node_count
from .export import save_image
from .layout import DiagramLoader, DiagramLoadError, size
from .samples import SAMPLES


def _parse_resolution(value: str) -> tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid resolution {value!r}, expected WxH") from e
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"resolution must be positive, got {value!r}")
    return width, height


def _parse_color(value: str) -> Color:
    try:
        return Color.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Diagen - Declarative Diagram Composition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-s", "--sample",
        choices=list(SAMPLES.keys()),
        default="sample_diagram_2",
        help="Sample diagram to use (default: sample_diagram_2)",
    )
    source.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Load the diagram from a YAML definition file",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render the diagram to an image file",
    )
    parser.add_argument(
        "--resolution",
        metavar="WxH",
        type=_parse_resolution,
        default="1200x1200",
        help="Render resolution (default: 1200x1200)",
    )
    parser.add_argument(
        "--background",
        metavar="COLOR",
        type=_parse_color,
        default="white",
        help="Background color name or #rrggbb[aa] (default: white)",
    )
    parser.add_argument(
        "--self-check",
        action="store_true",
        help="Run the geometry self checks and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def print_tree(diagram: Diagram) -> None:
    """Print the diagram tree, indented by depth."""
    for depth, node in iter_nodes(diagram):
        print(f"{'  ' * depth}- {describe(node)}")


def main(argv: list[str] | None = None) -> int:
    """Run the diagen command line tool."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.self_check:
        failures = run_self_checks()
        return 1 if failures else 0

    try:
        if args.file:
            diagram = DiagramLoader().load(args.file)
            title = args.file
        else:
            diagram = SAMPLES[args.sample]()
            title = args.sample
    except (DiagramLoadError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    virtual = size(diagram)
    print("Diagen - Declarative Diagram Composition")
    print("=" * 40)
    print(f"{title}: {node_count(diagram)} nodes, size {virtual.width:g}x{virtual.height:g}")
    print_tree(diagram)

    if args.render:
        width, height = args.resolution
        output_path = Path(args.render)
        print(f"\nRendering to {output_path} ({width}x{height})...")
        try:
            save_image(diagram, output_path, width, height, background=args.background)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Saved render to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
