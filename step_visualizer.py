import sys

import matplotlib.pyplot as plt

from flow_graph import print_flow_results
from flow_renderer import visualize_step
from step_configs import EXAMPLE_STEPS
from step_interpreter import ViewState, build_view_state, parse_step, step_details

class StepVisualizer:
    """
    Holds the current view state and handles submit/reset, the way the page
    around the flow network would. Each accepted submission swaps in a brand
    new ViewState; rejected input leaves the previous one in place.
    """
    def __init__(self, image_dir="images_2d"):
        self.image_dir = image_dir
        self.step_text = ''
        self.error = ''
        self.view_state = ViewState.empty()

    @property
    def explanation(self):
        return self.view_state.explanation

    @property
    def current_step(self):
        return self.view_state.step

    def load_example(self, index):
        """Fill the input text with one of the example steps"""
        self.step_text = EXAMPLE_STEPS[index].to_json()
        return self.step_text

    def submit(self, text=None):
        """
        Parse the input text and, when valid, replace the view state.

        Returns:
            ParseResult from the interpreter
        """
        if text is not None:
            self.step_text = text

        self.error = ''
        result = parse_step(self.step_text)
        if result.ok:
            self.view_state = build_view_state(result.step)
        else:
            self.error = result.error.message
        return result

    def reset(self):
        self.step_text = ''
        self.error = ''
        self.view_state = ViewState.empty()

    def report(self):
        """Print the explanation, step details and per-edge flow"""
        print(self.explanation)
        step = self.current_step
        if step is None:
            return

        print("\nCurrent Step Details:")
        for label, value in step_details(step):
            print(f"  {label}: {value}")
        print_flow_results(step)

    def render(self, **kwargs):
        kwargs.setdefault('image_dir', self.image_dir)
        return visualize_step(self.view_state, **kwargs)

def run_examples(visualizer, show=False):
    """Visualize every example step in order"""
    for index, example in enumerate(EXAMPLE_STEPS):
        print(f"\n--- {example.label.upper()} ---")
        print(example.summary)
        visualizer.reset()
        visualizer.load_example(index)
        visualizer.submit()
        visualizer.report()
        fig = visualizer.render(filename=example.filename, subfolder="steps", show=show)
        plt.close(fig)

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    visualizer = StepVisualizer()

    if not argv:
        run_examples(visualizer)
        return 0

    with open(argv[0], encoding="utf-8") as f:
        result = visualizer.submit(f.read())
    if not result.ok:
        print(f"Error: {visualizer.error}")
        return 1

    visualizer.report()
    visualizer.render(filename=f"step_{result.step.step}.png", subfolder="steps")
    return 0

# Example usage
if __name__ == "__main__":
    sys.exit(main())
