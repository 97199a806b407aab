"""Sample diagrams."""

from typing import Callable

from .core.color import Color
from .core.diagram import Diagram, circle, rectangle, square


def blue_square() -> Diagram:
    return square(1).fill(Color.BLUE)


def red_square() -> Diagram:
    return square(2).fill(Color.RED)


def green_circle() -> Diagram:
    return circle(0.5).fill(Color.GREEN)


def blue_beside_green() -> Diagram:
    return blue_square() | green_circle()


def red_above_blue() -> Diagram:
    return red_square() / blue_square()


def red_gap_blue() -> Diagram:
    """Red square over blue, separated by a small transparent spacer."""
    return red_square() / square(0.1).fill(Color.CLEAR) / blue_square()


def red_above_blue_right() -> Diagram:
    return red_square() / blue_square().align_right()


def red_above_blue_right_aligned() -> Diagram:
    return (red_square() / blue_square().align_right()).align_right()


def sample_diagram_1a() -> Diagram:
    return blue_square() | red_square()


def sample_diagram_1b() -> Diagram:
    return blue_square() | green_circle() | red_square()


def sample_diagram_2() -> Diagram:
    """Three shapes standing on a magenta bar."""
    return sample_diagram_1b().align_bottom() / rectangle(10, 0.2).fill(Color.MAGENTA).align_top()


# Maps sample names to factory functions
SAMPLES: dict[str, Callable[[], Diagram]] = {
    "blue_square": blue_square,
    "red_square": red_square,
    "green_circle": green_circle,
    "blue_beside_green": blue_beside_green,
    "red_above_blue": red_above_blue,
    "red_gap_blue": red_gap_blue,
    "red_above_blue_right": red_above_blue_right,
    "red_above_blue_right_aligned": red_above_blue_right_aligned,
    "sample_diagram_1a": sample_diagram_1a,
    "sample_diagram_1b": sample_diagram_1b,
    "sample_diagram_2": sample_diagram_2,
}
