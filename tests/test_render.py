"""Tests for the layout and render engine, using a recording surface."""

import pytest

from diagen.core.color import Color
from diagen.core.diagram import circle, rectangle, square
from diagen.core.geometry import Rect
from diagen.layout import draw, fill_color
from diagen.samples import SAMPLES
from diagen.surfaces import FillColorStack, RecordingSurface, Surface, SurfaceStateError


def rect(x: float, y: float, w: float, h: float) -> Rect:
    return Rect.from_xywh(x, y, w, h)


def render(diagram, bounds=rect(0, 0, 300, 300)) -> RecordingSurface:
    surface = RecordingSurface()
    draw(diagram, surface, bounds)
    return surface


def shapes(surface: RecordingSurface) -> list[tuple[str, tuple, Color]]:
    return [(c.operation, c.rect.as_tuple(), c.color) for c in surface.shapes()]


class ExplodingSurface(RecordingSurface):
    """Fails on the first ellipse it is asked to draw."""

    def fill_ellipse(self, rect: Rect) -> None:
        raise RuntimeError("boom")


def test_recording_surface_satisfies_protocol():
    assert isinstance(RecordingSurface(), Surface)


def test_primitive_is_centered():
    surface = render(rectangle(2, 1), rect(0, 0, 100, 100))
    assert shapes(surface) == [("fill_rectangle", (0, 25, 100, 50), Color.BLACK)]


def test_circle_draws_ellipse():
    surface = render(circle(1), rect(0, 0, 200, 100))
    assert shapes(surface) == [("fill_ellipse", (50, 0, 100, 100), Color.BLACK)]


def test_beside_splits_by_width():
    surface = render(square(1) | square(2), rect(0, 0, 300, 200))
    calls = shapes(surface)
    assert calls[0][1] == pytest.approx((0, 50, 100, 100))
    assert calls[1][1] == pytest.approx((100, 0, 200, 200))


def test_below_draws_top_first():
    surface = render(square(1) / square(2), rect(0, 0, 300, 300))
    calls = shapes(surface)
    # top share is 1/3 of the height and sits above the bottom part
    assert calls[0][1] == pytest.approx((100, 200, 100, 100))
    assert calls[1][1] == pytest.approx((50, 0, 200, 200))


def test_alignment_refits_child():
    # The 4x2 column is scaled to 800x400 and pushed to the right edge of 1000x400
    diagram = (square(1) / rectangle(4, 1)).align_right()
    surface = render(diagram, rect(0, 0, 1000, 400))
    calls = shapes(surface)
    assert calls[0][1] == pytest.approx((500, 200, 200, 200))
    assert calls[1][1] == pytest.approx((200, 0, 800, 200))


def test_alignment_moves_narrow_child():
    diagram = square(1).align_right() / rectangle(4, 1)
    calls = shapes(render(diagram, rect(0, 0, 800, 400)))
    assert calls[0][1] == pytest.approx((600, 200, 200, 200))


def test_fill_color_applies_to_subtree():
    diagram = square(1).fill(Color.BLUE) | square(1)
    calls = shapes(render(diagram))
    assert [c[2] for c in calls] == [Color.BLUE, Color.BLACK]


def test_nested_fill_colors_restore_enclosing_color():
    inner = (square(1).fill(Color.RED) | circle(0.5)) / square(1).fill(Color.GREEN)
    diagram = (inner | square(1)).fill(Color.BLUE) | square(1)
    surface = render(diagram)
    assert [c[2] for c in shapes(surface)] == [
        Color.RED,
        Color.BLUE,
        Color.GREEN,
        Color.BLUE,
        Color.BLACK,
    ]
    assert surface.fill_color == Color.BLACK
    assert surface.depth == 0


def test_fill_color_restored_when_child_fails():
    surface = ExplodingSurface()
    diagram = (square(1) | circle(1).fill(Color.RED)).fill(Color.BLUE)
    with pytest.raises(RuntimeError, match="boom"):
        draw(diagram, surface, rect(0, 0, 100, 100))
    assert surface.fill_color == Color.BLACK
    assert surface.depth == 0
    assert [c.operation for c in surface.calls][-2:] == ["pop_fill_color", "pop_fill_color"]


def test_fill_color_context_manager():
    surface = RecordingSurface()
    with fill_color(surface, Color.CYAN):
        assert surface.fill_color == Color.CYAN
    assert surface.fill_color == Color.BLACK


def test_unbalanced_pop_raises():
    with pytest.raises(SurfaceStateError):
        RecordingSurface().pop_fill_color()


def test_fill_color_stack_is_abstract():
    with pytest.raises(TypeError):
        FillColorStack()


@pytest.mark.parametrize("name", list(SAMPLES))
def test_rendering_is_idempotent(name):
    diagram = SAMPLES[name]()
    bounds = rect(0, 0, 1200, 1200)
    assert render(diagram, bounds).calls == render(diagram, bounds).calls


@pytest.mark.parametrize("name", list(SAMPLES))
def test_shapes_stay_inside_bounds(name):
    bounds = rect(0, 0, 640, 480)
    for call in render(SAMPLES[name](), bounds).shapes():
        assert bounds.contains(call.rect, tolerance=1e-6)


def test_zero_sized_children_do_not_produce_nan():
    diagram = rectangle(0, 0) | rectangle(0, 0)
    for call in render(diagram, rect(0, 0, 100, 100)).shapes():
        assert all(v == v for v in call.rect.as_tuple())


def test_draw_rejects_non_diagrams():
    with pytest.raises(TypeError):
        draw(object(), RecordingSurface(), rect(0, 0, 1, 1))


def test_recording_surface_can_be_reused_after_clear():
    surface = RecordingSurface()
    diagram = SAMPLES["sample_diagram_1b"]()
    bounds = rect(0, 0, 300, 100)
    draw(diagram, surface, bounds)
    first = list(surface.calls)

    surface.clear()
    assert surface.calls == []
    draw(diagram, surface, bounds)
    assert surface.calls == first
