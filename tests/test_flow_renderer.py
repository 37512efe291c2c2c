import os

from matplotlib.patches import Circle, Polygon

from flow_renderer import (
    NODE_COLORS,
    PLACEHOLDER_TEXT,
    build_save_path,
    node_color,
    visualize_step,
)
from step_configs import step1, step3
from step_interpreter import Step, ViewState, build_view_state


def _texts(fig):
    return [t.get_text() for t in fig.axes[0].texts]


def test_draws_nodes_and_edges():
    state = build_view_state(Step.from_dict(step1.payload))
    fig = visualize_step(state, show=False)
    ax = fig.axes[0]

    circles = [p for p in ax.patches if isinstance(p, Circle)]
    arrows = [p for p in ax.patches if isinstance(p, Polygon)]
    assert len(circles) == 4
    assert len(arrows) == 5
    assert len(ax.lines) == 5

    texts = _texts(fig)
    assert "4/10" in texts
    assert "0/15" in texts
    for node in ("S", "A", "B", "T"):
        assert node in texts
    assert ax.get_title() == "Current Flow Network (Step 1)"
    assert "Total Max Flow: 4" in ax.get_xlabel()


def test_canvas_uses_downward_y():
    state = build_view_state(Step.from_dict(step1.payload))
    ax = visualize_step(state, show=False).axes[0]
    assert ax.get_xlim() == (0, 400)
    assert ax.get_ylim() == (400, 0)


def test_empty_view_state_shows_placeholder():
    fig = visualize_step(ViewState.empty(), show=False)
    assert PLACEHOLDER_TEXT in _texts(fig)
    assert fig.axes[0].get_title() == "Current Flow Network"


def test_legend_entries():
    fig = visualize_step(ViewState.empty(), show=False)
    labels = [t.get_text() for t in fig.axes[0].get_legend().get_texts()]
    assert labels == [
        "Source (S)",
        "Sink (T) / Min-Cut S-Set",
        "Intermediate Node",
        "Augmenting Path",
    ]


def test_node_colors():
    state = build_view_state(Step.from_dict(step1.payload))
    assert node_color("S", state) == NODE_COLORS["source"]
    assert node_color("T", state) == NODE_COLORS["sink"]
    assert node_color("A", state) == NODE_COLORS["intermediate"]

    final = build_view_state(Step.from_dict(dict(step3.payload, sSet=["S", "A"])))
    assert node_color("S", final) == NODE_COLORS["min_cut"]
    assert node_color("A", final) == NODE_COLORS["min_cut"]
    assert node_color("B", final) == NODE_COLORS["intermediate"]


def test_build_save_path(tmp_path):
    path = build_save_path("flow.svg", "steps", str(tmp_path), timestamp="20240101_120000")
    assert path == os.path.join(str(tmp_path), "steps", "flow_20240101_120000.svg")
    assert os.path.isdir(os.path.join(str(tmp_path), "steps"))

    default_ext = build_save_path("flow", image_dir=str(tmp_path), timestamp="t")
    assert default_ext == os.path.join(str(tmp_path), "flow_t.png")


def test_saves_image(tmp_path, capsys):
    state = build_view_state(Step.from_dict(step3.payload))
    visualize_step(state, filename="step_3.png", subfolder="steps", show=False,
                   image_dir=str(tmp_path))

    saved = os.listdir(os.path.join(str(tmp_path), "steps"))
    assert len(saved) == 1
    assert saved[0].startswith("step_3_") and saved[0].endswith(".png")
    assert "Saved step visualization to:" in capsys.readouterr().out
