"""Tests for loading diagrams from YAML definitions."""

import pytest

from diagen.core.color import Color
from diagen.core.diagram import circle, rectangle, square
from diagen.layout import DiagramLoader, DiagramLoadError
from diagen.samples import sample_diagram_2

SAMPLE_YAML = """
name: sample_diagram_2
diagram:
  below:
    - beside:
        - square: 1
          fill: blue
        - circle: 0.5
          fill: green
        - square: 2
          fill: red
      align: bottom
    - rectangle: [10, 0.2]
      fill: magenta
      align: top
"""


@pytest.fixture
def loader() -> DiagramLoader:
    return DiagramLoader()


def test_load_string_matches_combinators(loader):
    assert loader.load_string(SAMPLE_YAML) == sample_diagram_2()


def test_load_file(loader, tmp_path):
    path = tmp_path / "sample.yaml"
    path.write_text(SAMPLE_YAML)
    assert loader.load(path) == sample_diagram_2()


def test_bare_node_document(loader):
    assert loader.load_string("circle: 2") == circle(2)


def test_modifier_order_is_fill_then_align(loader):
    d = loader.load_string("square: 1\nfill: '#0000ff'\nalign: [0.25, 0.75]")
    assert d == square(1).fill(Color.BLUE).align(0.25, 0.75)


def test_beside_with_single_item(loader):
    assert loader.load_string("beside: [{rectangle: [2, 3]}]") == rectangle(2, 3)


@pytest.mark.parametrize(
    "text,path",
    [
        ("[1, 2]", "diagram"),
        ("{}", "diagram"),
        ("square: 1\ncircle: 1", "diagram"),
        ("square: 1\ncolour: red", "diagram"),
        ("square: big", "diagram.square"),
        ("square: -1", "diagram"),
        ("rectangle: [1]", "diagram.rectangle"),
        ("beside: []", "diagram.beside"),
        ("below: [{square: 1}, {circle: true}]", "diagram.below[1].circle"),
        ("square: 1\nfill: chartreuse-ish", "diagram"),
        ("square: 1\nalign: left", "diagram.align"),
        ("square: 1\nalign: [2, 0]", "diagram"),
        ("diagram: {square: 1}\nextra: 1", "<root>"),
        ("square: 1\n1: 2\nfoo: 3", "diagram"),
        ("beside: [{square: 1}", "<root>"),
        ("square: [1, 2\n  fill: red", "<root>"),
    ],
)
def test_invalid_definitions(loader, text, path):
    with pytest.raises(DiagramLoadError) as exc_info:
        loader.load_string(text)
    assert exc_info.value.path == path


def test_load_error_is_value_error():
    assert issubclass(DiagramLoadError, ValueError)


def test_load_rejects_non_utf8_file(loader, tmp_path):
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"\xff\xfesquare: 1\n")
    with pytest.raises(DiagramLoadError) as exc_info:
        loader.load(path)
    assert exc_info.value.path == "<root>"


def test_load_reports_yaml_syntax_errors_from_file(loader, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("beside: [{square: 1}\n")
    with pytest.raises(DiagramLoadError, match="invalid YAML"):
        loader.load(path)
