"""YAML loader for diagram definitions."""

from pathlib import Path
from typing import Any, Callable

import yaml

from ..core.diagram import Diagram, circle, hcat, rectangle, square, vcat

# Named alignments accepted by the ``align`` modifier, as (x, y) anchors
ALIGNMENTS: dict[str, tuple[float, float]] = {
    "center": (0.5, 0.5),
    "right": (1.0, 0.5),
    "top": (0.5, 1.0),
    "bottom": (0.5, 0.0),
}

SHAPE_KEYS = ("square", "circle", "rectangle", "beside", "below")
MODIFIER_KEYS = ("fill", "align")


class DiagramLoadError(ValueError):
    """Raised when a diagram definition is malformed."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def _number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DiagramLoadError(path, f"expected a number, got {value!r}")
    return float(value)


class DiagramLoader:
    """Loads diagram definitions from YAML files.

    YAML format:
        name: sample              # Optional
        diagram:
          below:
            - beside:             # Left fold: a | b | c
                - square: 1
                  fill: blue
                - circle: 0.5
                  fill: "#00ff00"
                - square: 2
                  fill: red
              align: bottom
            - rectangle: [10, 0.2]
              fill: magenta
              align: top

    Each node has exactly one of ``square`` (side), ``circle`` (radius),
    ``rectangle`` ([width, height]), ``beside`` or ``below`` (lists of nodes).
    Optional modifiers are applied ``fill`` first, then ``align`` (one of
    center, right, top, bottom, or an [x, y] anchor).
    """

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[Any, str], Diagram]] = {
            "square": self._build_square,
            "circle": self._build_circle,
            "rectangle": self._build_rectangle,
            "beside": self._build_beside,
            "below": self._build_below,
        }

    def load(self, path: str | Path) -> Diagram:
        """Load a diagram from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The diagram described by the file
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise DiagramLoadError("<root>", f"{path} is not valid UTF-8: {e}") from e
        return self.load_string(text)

    def load_string(self, yaml_string: str) -> Diagram:
        """Load a diagram from a YAML string."""
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise DiagramLoadError("<root>", f"invalid YAML: {e}") from e
        return self.build(data)

    def build(self, data: Any) -> Diagram:
        """Build a diagram from parsed YAML data.

        The data is either a node, or a mapping with a ``diagram`` node and an
        optional ``name``.
        """
        if isinstance(data, dict) and "diagram" in data:
            unknown = set(data) - {"diagram", "name"}
            if unknown:
                raise DiagramLoadError("<root>", f"unknown keys {sorted(unknown, key=str)}")
            return self._build_node(data["diagram"], "diagram")
        return self._build_node(data, "diagram")

    def _build_node(self, node: Any, path: str) -> Diagram:
        if not isinstance(node, dict):
            raise DiagramLoadError(path, f"expected a mapping, got {node!r}")

        unknown = set(node) - set(SHAPE_KEYS) - set(MODIFIER_KEYS)
        if unknown:
            raise DiagramLoadError(path, f"unknown keys {sorted(unknown, key=str)}")

        shape_keys = [key for key in SHAPE_KEYS if key in node]
        if len(shape_keys) != 1:
            raise DiagramLoadError(
                path, f"expected exactly one of {list(SHAPE_KEYS)}, got {shape_keys}"
            )
        key = shape_keys[0]

        try:
            diagram = self._builders[key](node[key], f"{path}.{key}")
            if "fill" in node:
                diagram = diagram.fill(node["fill"])
            if "align" in node:
                diagram = diagram.align(*self._parse_align(node["align"], f"{path}.align"))
        except DiagramLoadError:
            raise
        except ValueError as e:
            raise DiagramLoadError(path, str(e)) from e

        return diagram

    def _build_square(self, value: Any, path: str) -> Diagram:
        return square(_number(value, path))

    def _build_circle(self, value: Any, path: str) -> Diagram:
        return circle(_number(value, path))

    def _build_rectangle(self, value: Any, path: str) -> Diagram:
        if not isinstance(value, list) or len(value) != 2:
            raise DiagramLoadError(path, f"expected [width, height], got {value!r}")
        return rectangle(_number(value[0], f"{path}[0]"), _number(value[1], f"{path}[1]"))

    def _build_children(self, value: Any, path: str) -> list[Diagram]:
        if not isinstance(value, list) or not value:
            raise DiagramLoadError(path, f"expected a non-empty list of nodes, got {value!r}")
        return [self._build_node(item, f"{path}[{i}]") for i, item in enumerate(value)]

    def _build_beside(self, value: Any, path: str) -> Diagram:
        return hcat(*self._build_children(value, path))

    def _build_below(self, value: Any, path: str) -> Diagram:
        return vcat(*self._build_children(value, path))

    def _parse_align(self, value: Any, path: str) -> tuple[float, float]:
        if isinstance(value, str):
            anchor = ALIGNMENTS.get(value)
            if anchor is None:
                raise DiagramLoadError(
                    path, f"unknown alignment {value!r}, expected one of {list(ALIGNMENTS)}"
                )
            return anchor
        if isinstance(value, list) and len(value) == 2:
            return _number(value[0], f"{path}[0]"), _number(value[1], f"{path}[1]")
        raise DiagramLoadError(path, f"expected an alignment name or [x, y], got {value!r}")
