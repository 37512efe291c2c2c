import numpy as np

# Canvas is CANVAS_SIZE x CANVAS_SIZE, y grows downwards
CANVAS_SIZE = 400

SOURCE = 'S'
SINK = 'T'

SOURCE_POS = (50, 200)
SINK_POS = (350, 200)
CENTER = (200, 200)
RADIUS = 100

def intermediate_nodes(all_nodes):
    """Nodes other than the source and sink, in their original order"""
    return [n for n in all_nodes if n != SOURCE and n != SINK]

def node_position(node, all_nodes):
    """
    Get the canvas position of a node.

    The source and sink are pinned to the left and right anchors. Every other
    node is placed on a circle around the center, spaced evenly by its index
    among the intermediate nodes.

    Args:
        node: Node identifier
        all_nodes: Ordered list of all node identifiers in the step

    Returns:
        (x, y) tuple of floats
    """
    if node == SOURCE:
        return SOURCE_POS
    if node == SINK:
        return SINK_POS

    intermediate = intermediate_nodes(all_nodes)
    if node not in intermediate:
        return CENTER  # Fallback for unknown nodes

    index = intermediate.index(node)
    angle = 2 * np.pi * index / len(intermediate)
    x = CENTER[0] + RADIUS * np.cos(angle)
    y = CENTER[1] + RADIUS * np.sin(angle)
    return (float(x), float(y))

def node_positions(all_nodes):
    """Map every node of the step to its canvas position"""
    return {node: node_position(node, all_nodes) for node in all_nodes}
