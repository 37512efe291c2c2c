import os
from datetime import datetime

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Patch, Polygon, Rectangle

from edge_geometry import build_edge_drawing
from flow_layout import CANVAS_SIZE, SINK, SOURCE, node_positions

NODE_RADIUS = 20
NODE_OUTLINE = '#1e293b'

NODE_COLORS = {
    'min_cut': '#dc2626',
    'source': '#10b981',
    'sink': '#ef4444',
    'intermediate': '#3b82f6'
}

PLACEHOLDER_TEXT = 'Enter step parameters and click "Visualize Step" to see the flow network'

def node_color(node, view_state):
    if node in view_state.min_cut:
        return NODE_COLORS['min_cut']
    if node == SOURCE:
        return NODE_COLORS['source']
    if node == SINK:
        return NODE_COLORS['sink']
    return NODE_COLORS['intermediate']

def build_save_path(filename, subfolder=None, image_dir="images_2d", timestamp=None):
    """Timestamped path under image_dir (and subfolder), creating the folders"""
    if timestamp is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    save_dir = os.path.join(image_dir, subfolder) if subfolder else image_dir
    os.makedirs(save_dir, exist_ok=True)

    base_name = os.path.splitext(filename)[0]
    ext = os.path.splitext(filename)[1] or ".png"
    return os.path.join(save_dir, f"{base_name}_{timestamp}{ext}")

def draw_placeholder(ax):
    ax.add_patch(Rectangle((10, 10), CANVAS_SIZE - 20, CANVAS_SIZE - 20, fill=False,
                           edgecolor='#d1d5db', linestyle='--', linewidth=2))
    ax.text(CANVAS_SIZE / 2, CANVAS_SIZE / 2, PLACEHOLDER_TEXT, ha='center', va='center',
            color='#9ca3af', fontsize=9, wrap=True)

def draw_edges(ax, view_state, positions):
    drawings = []
    for edge in view_state.edges:
        drawing = build_edge_drawing(edge, positions, view_state.is_highlighted(edge))
        (x1, y1), (x2, y2) = drawing.line_start, drawing.line_end

        ax.plot([x1, x2], [y1, y2], color=drawing.color, linewidth=drawing.width, zorder=1)
        ax.add_patch(Polygon(drawing.arrowhead, closed=True, facecolor=drawing.color,
                             edgecolor=drawing.color, zorder=2))

        label_x, label_y = drawing.label_anchor
        ax.text(label_x, label_y, drawing.label_text, color=drawing.label_color, fontsize=12,
                ha='center', va='baseline', fontweight='bold', zorder=3)
        drawings.append(drawing)
    return drawings

def draw_nodes(ax, view_state, positions):
    for node in view_state.nodes:
        x, y = positions[node]
        ax.add_patch(Circle((x, y), NODE_RADIUS, facecolor=node_color(node, view_state),
                            edgecolor=NODE_OUTLINE, linewidth=3, zorder=4))
        ax.text(x, y, node, color='white', fontsize=16, fontweight='bold',
                ha='center', va='center', zorder=5)

def add_legend(ax, view_state):
    handles = [
        Patch(color=NODE_COLORS['source'], label='Source (S)'),
        Patch(color=NODE_COLORS['sink'], label='Sink (T) / Min-Cut S-Set'),
        Patch(color=NODE_COLORS['intermediate'], label='Intermediate Node'),
        Line2D([0], [0], color='#f59e0b', linewidth=3, label='Augmenting Path')
    ]
    ax.legend(handles=handles, loc='upper center', bbox_to_anchor=(0.5, -0.02),
              ncol=2, fontsize=8, frameon=False)
    ax.set_xlabel(f"Total Max Flow: {view_state.flow}", fontsize=12, fontweight='bold',
                  color='#9333ea', labelpad=40)

def visualize_step(view_state, title=None, filename=None, subfolder=None, show=True,
                   image_dir="images_2d"):
    """
    Draw the flow network of a view state on a 400x400 canvas.

    Args:
        view_state: ViewState to draw; an empty one shows the placeholder
        title: Figure title, defaults to the current step number
        filename: Save the figure under image_dir when given
        subfolder: Optional folder below image_dir
        show: Call plt.show() after drawing

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(6, 7))
    ax.set_xlim(0, CANVAS_SIZE)
    ax.set_ylim(CANVAS_SIZE, 0)  # Canvas coordinates: y grows downwards
    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])

    if view_state.is_empty:
        draw_placeholder(ax)
    else:
        positions = node_positions(view_state.nodes)
        draw_edges(ax, view_state, positions)
        draw_nodes(ax, view_state, positions)

    add_legend(ax, view_state)

    if title is None:
        title = "Current Flow Network"
        if view_state.step is not None:
            title = f"{title} (Step {view_state.step.step})"
    ax.set_title(title)
    plt.tight_layout()

    if filename:
        save_path = build_save_path(filename, subfolder, image_dir)
        plt.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Saved step visualization to: {save_path}")

    if show:
        plt.show()

    return fig
