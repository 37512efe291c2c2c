import numpy as np

from flow_layout import CENTER, node_position

ARROW_OFFSET = 10    # Line stops this far short of the target node center
ARROW_SIZE = 5       # Length of the two arrowhead barbs
LABEL_OFFSET_BELOW = 15
LABEL_OFFSET_ABOVE = -5

# Presentation attributes: (line/arrow color, label color, stroke width)
NORMAL_STYLE = ('#4b5563', '#1f2937', 2)
HIGHLIGHT_STYLE = ('#f59e0b', '#b45309', 3)

class EdgeDrawing:
    """Drawable primitives for one directed edge"""
    def __init__(self, line_start, line_end, arrowhead, label_position,
                 label_offset, label_text, highlighted):
        self.line_start = line_start
        self.line_end = line_end
        self.arrowhead = arrowhead
        self.label_position = label_position
        self.label_offset = label_offset
        self.label_text = label_text
        self.highlighted = highlighted

        style = HIGHLIGHT_STYLE if highlighted else NORMAL_STYLE
        self.color, self.label_color, self.width = style

    def __repr__(self):
        return (f"EdgeDrawing({self.line_start} -> {self.line_end}, "
                f"'{self.label_text}', highlighted={self.highlighted})")

    @property
    def label_anchor(self):
        """Label position with the vertical offset applied"""
        x, y = self.label_position
        return (x, y + self.label_offset)

def label_offset(dx, dy):
    """
    Vertical offset for the flow/capacity label so it does not sit on the line.
    Canvas y grows downwards, so a positive offset moves the label down.
    """
    if dx == 0:
        return LABEL_OFFSET_ABOVE if dy > 0 else LABEL_OFFSET_BELOW
    return LABEL_OFFSET_BELOW if dy > 0 else LABEL_OFFSET_ABOVE

def arrowhead_points(tip, angle):
    """Triangle with its point at tip and barbs rotated +-45 degrees back along angle"""
    tip = np.asarray(tip, dtype=float)
    points = [tip]
    for rotation in (-np.pi / 4, np.pi / 4):
        barb = np.array([np.cos(angle + rotation), np.sin(angle + rotation)])
        points.append(tip - ARROW_SIZE * barb)
    return [(float(x), float(y)) for x, y in points]

def build_edge_drawing(edge, positions, is_highlighted):
    """
    Compute the line, arrowhead and label placement for an edge.

    Args:
        edge: FlowEdge with from_node, to_node, capacity and flow
        positions: Dict of node -> (x, y), or the ordered node list to lay out
        is_highlighted: Whether the edge lies on the augmenting path

    Returns:
        EdgeDrawing
    """
    if isinstance(positions, dict):
        pos_u = np.asarray(positions.get(edge.from_node, CENTER), dtype=float)
        pos_v = np.asarray(positions.get(edge.to_node, CENTER), dtype=float)
    else:
        pos_u = np.asarray(node_position(edge.from_node, positions), dtype=float)
        pos_v = np.asarray(node_position(edge.to_node, positions), dtype=float)

    dx, dy = pos_v - pos_u
    angle = np.arctan2(dy, dx)
    direction = np.array([np.cos(angle), np.sin(angle)])

    tip = pos_v - ARROW_OFFSET * direction
    mid = (pos_u + pos_v) / 2

    return EdgeDrawing(
        line_start=(float(pos_u[0]), float(pos_u[1])),
        line_end=(float(tip[0]), float(tip[1])),
        arrowhead=arrowhead_points(tip, angle),
        label_position=(float(mid[0]), float(mid[1])),
        label_offset=label_offset(dx, dy),
        label_text=f"{edge.flow}/{edge.capacity}",
        highlighted=is_highlighted
    )
