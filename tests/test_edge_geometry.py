import math

import pytest

from edge_geometry import (
    ARROW_OFFSET,
    ARROW_SIZE,
    HIGHLIGHT_STYLE,
    NORMAL_STYLE,
    build_edge_drawing,
    label_offset,
)
from step_interpreter import FlowEdge


def test_horizontal_edge():
    edge = FlowEdge("S", "T", 10, 4)
    positions = {"S": (50, 200), "T": (350, 200)}

    drawing = build_edge_drawing(edge, positions, False)

    assert drawing.line_start == (50, 200)
    assert drawing.line_end == pytest.approx((340, 200))
    assert drawing.label_position == pytest.approx((200, 200))
    assert drawing.label_text == "4/10"
    # dx > 0, dy == 0 -> label above the line
    assert drawing.label_offset == -5
    assert drawing.label_anchor == pytest.approx((200, 195))


def test_arrowhead_points():
    edge = FlowEdge("S", "T", 1, 0)
    drawing = build_edge_drawing(edge, {"S": (0, 0), "T": (100, 0)}, False)

    tip, left, right = drawing.arrowhead
    assert tip == pytest.approx((100 - ARROW_OFFSET, 0))
    back = ARROW_SIZE * math.cos(math.pi / 4)
    assert left == pytest.approx((tip[0] - back, back))
    assert right == pytest.approx((tip[0] - back, -back))


def test_line_stops_short_along_direction():
    edge = FlowEdge("A", "B", 3, 1)
    drawing = build_edge_drawing(edge, {"A": (0, 0), "B": (30, 40)}, False)

    assert drawing.line_end == pytest.approx((30 - 6, 40 - 8))
    assert drawing.label_position == pytest.approx((15, 20))
    assert drawing.label_offset == 15


@pytest.mark.parametrize(
    "dx, dy, expected",
    [
        (0, 10, -5),
        (0, -10, 15),
        (10, 10, 15),
        (-10, 10, 15),
        (10, -10, -5),
        (10, 0, -5),
    ],
)
def test_label_offset(dx, dy, expected):
    assert label_offset(dx, dy) == expected


def test_highlight_applies_to_line_arrow_and_label():
    edge = FlowEdge("S", "A", 10, 4)
    positions = {"S": (50, 200), "A": (300, 200)}

    normal = build_edge_drawing(edge, positions, False)
    highlighted = build_edge_drawing(edge, positions, True)

    assert (normal.color, normal.label_color, normal.width) == NORMAL_STYLE
    assert (highlighted.color, highlighted.label_color, highlighted.width) == HIGHLIGHT_STYLE
    assert highlighted.width > normal.width
    # Geometry does not depend on highlighting
    assert highlighted.arrowhead == normal.arrowhead
    assert highlighted.line_end == normal.line_end


def test_positions_from_node_list():
    edge = FlowEdge("S", "T", 5, 5)
    drawing = build_edge_drawing(edge, ["S", "A", "T"], True)
    assert drawing.line_start == (50, 200)
    assert drawing.line_end == pytest.approx((340, 200))
