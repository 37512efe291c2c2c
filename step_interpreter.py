import json
from enum import Enum

REQUIRED_FIELDS = ['step', 'nodes', 'edges', 'maxFlow', 'augmentingPath']

DEFAULT_EXPLANATION = ("Enter a Max-Flow step in JSON format to see the residual graph "
                       "and flow augmentation.")

class ErrorKind(Enum):
    """Ways a submitted step can be rejected"""
    MALFORMED_INPUT = 1   # Text is not valid JSON
    MISSING_FIELD = 2     # A required top-level field is absent
    MALFORMED_EDGE = 3    # An edge lacks from/to/capacity/flow

ERROR_MESSAGES = {
    ErrorKind.MALFORMED_INPUT: "Invalid JSON format. Please check your input.",
    ErrorKind.MISSING_FIELD: "Missing required fields: " + ", ".join(REQUIRED_FIELDS),
    ErrorKind.MALFORMED_EDGE: "Each edge must have { from, to, capacity, flow } fields.",
}

class StepValidationError(ValueError):
    def __init__(self, kind):
        super().__init__(ERROR_MESSAGES[kind])
        self.kind = kind

    @property
    def message(self):
        return self.args[0]

class PathSegment:
    """One directed hop of an augmenting path"""
    def __init__(self, from_node, to_node):
        self.from_node = from_node
        self.to_node = to_node

    def __repr__(self):
        return f"PathSegment({self.from_node} -> {self.to_node})"

    def __eq__(self, other):
        if not isinstance(other, PathSegment):
            return NotImplemented
        return (self.from_node, self.to_node) == (other.from_node, other.to_node)

    @property
    def key(self):
        return f"{self.from_node}-{self.to_node}"

    def to_dict(self):
        return {'from': self.from_node, 'to': self.to_node}

class FlowEdge(PathSegment):
    """Directed edge carrying its capacity and current flow"""
    def __init__(self, from_node, to_node, capacity, flow):
        super().__init__(from_node, to_node)
        self.capacity = capacity
        self.flow = flow

    def __repr__(self):
        return f"FlowEdge({self.from_node} -> {self.to_node}, {self.flow}/{self.capacity})"

    def __eq__(self, other):
        if not isinstance(other, FlowEdge):
            return NotImplemented
        return (self.from_node, self.to_node, self.capacity, self.flow) == \
               (other.from_node, other.to_node, other.capacity, other.flow)

    def to_dict(self):
        return {'from': self.from_node, 'to': self.to_node,
                'capacity': self.capacity, 'flow': self.flow}

class Step:
    """A single Edmonds-Karp step as supplied by the user"""
    def __init__(self, step, max_flow, path_capacity, augmenting_path, nodes, edges,
                 s_set=None):
        self.step = step
        self.max_flow = max_flow
        self.path_capacity = path_capacity
        self.augmenting_path = list(augmenting_path)
        self.nodes = list(nodes)
        self.edges = list(edges)
        self.s_set = list(s_set) if s_set is not None else None

    def __repr__(self):
        return f"Step({self.step}, max_flow={self.max_flow}, path_capacity={self.path_capacity})"

    def __eq__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def is_final(self):
        """True once no augmenting path remains"""
        return self.path_capacity == 0

    @classmethod
    def from_dict(cls, data):
        """Build a Step from an already validated payload"""
        return cls(
            step=data['step'],
            max_flow=data['maxFlow'],
            path_capacity=data.get('pathCapacity'),
            augmenting_path=[PathSegment(s.get('from'), s.get('to'))
                             for s in data['augmentingPath']],
            nodes=data['nodes'],
            edges=[FlowEdge(e['from'], e['to'], e['capacity'], e['flow'])
                   for e in data['edges']],
            s_set=data.get('sSet')
        )

    def to_dict(self):
        data = {
            'step': self.step,
            'maxFlow': self.max_flow,
            'augmentingPath': [s.to_dict() for s in self.augmenting_path],
            'nodes': list(self.nodes),
            'edges': [e.to_dict() for e in self.edges],
        }
        if self.path_capacity is not None:
            data['pathCapacity'] = self.path_capacity
        if self.s_set is not None:
            data['sSet'] = list(self.s_set)
        return data

class ParseResult:
    """Outcome of parse_step: either a step or an error, never both"""
    def __init__(self, step=None, error=None):
        self.step = step
        self.error = error

    def __repr__(self):
        if self.ok:
            return f"ParseResult(ok, {self.step!r})"
        return f"ParseResult(error={self.error.kind.name})"

    @property
    def ok(self):
        return self.error is None

def is_present(value):
    """Absent, null, 0, false and "" count as missing; lists and objects do not, even empty"""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)

def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def validate_fields(data):
    """
    Check that every required top-level field is present. maxFlow only has
    to be defined, since a flow of 0 is legal.
    """
    if not isinstance(data, dict):
        raise StepValidationError(ErrorKind.MISSING_FIELD)
    for field in REQUIRED_FIELDS:
        if field == 'maxFlow':
            if data.get(field) is None:
                raise StepValidationError(ErrorKind.MISSING_FIELD)
        elif not is_present(data.get(field)):
            raise StepValidationError(ErrorKind.MISSING_FIELD)

def validate_shapes(data):
    """nodes, augmentingPath and sSet must be lists the renderer can walk"""
    if not isinstance(data['nodes'], list) or not isinstance(data['augmentingPath'], list):
        raise StepValidationError(ErrorKind.MALFORMED_INPUT)
    if not all(isinstance(n, str) for n in data['nodes']):
        raise StepValidationError(ErrorKind.MALFORMED_INPUT)
    if not all(isinstance(s, dict) for s in data['augmentingPath']):
        raise StepValidationError(ErrorKind.MALFORMED_INPUT)

    s_set = data.get('sSet')
    if s_set is not None:
        if not isinstance(s_set, list) or not all(isinstance(n, str) for n in s_set):
            raise StepValidationError(ErrorKind.MALFORMED_INPUT)

def validate_edges(edges):
    """Each edge needs non-empty string endpoints and a numeric capacity and flow"""
    if not isinstance(edges, list):
        raise StepValidationError(ErrorKind.MALFORMED_EDGE)
    for edge in edges:
        if not isinstance(edge, dict):
            raise StepValidationError(ErrorKind.MALFORMED_EDGE)
        for end in ('from', 'to'):
            if not isinstance(edge.get(end), str) or not edge[end]:
                raise StepValidationError(ErrorKind.MALFORMED_EDGE)
        if not is_number(edge.get('capacity')) or not is_number(edge.get('flow')):
            raise StepValidationError(ErrorKind.MALFORMED_EDGE)

def parse_step(raw_text):
    """
    Parse and validate a step payload.

    Args:
        raw_text: JSON text describing one step

    Returns:
        ParseResult holding the Step, or the StepValidationError that rejected it
    """
    try:
        data = json.loads(raw_text)
    except (ValueError, TypeError, RecursionError):
        return ParseResult(error=StepValidationError(ErrorKind.MALFORMED_INPUT))

    try:
        validate_fields(data)
        validate_edges(data['edges'])
        validate_shapes(data)
    except StepValidationError as e:
        return ParseResult(error=e)

    return ParseResult(step=Step.from_dict(data))

def format_path(segments, separator=' → '):
    return separator.join(f"{s.from_node}→{s.to_node}" for s in segments)

def describe_step(step):
    """Plain-language explanation of what happened in this step"""
    if step.path_capacity == 0:
        return (f"Final Step {step.step}: No more augmenting paths (a path with available "
                f"residual capacity) could be found from S to T in the residual graph. "
                f"The maximum flow is **{step.max_flow}**. The Min-Cut is now determined by "
                f"the set of nodes reachable from S in the final residual graph.")

    path_str = format_path(step.augmenting_path)
    return (f"Step {step.step}: An **augmenting path** was found via BFS: **{path_str}**. "
            f"The bottleneck capacity of this path is **{step.path_capacity}**. The total "
            f"flow is augmented (increased) by this amount, bringing the total flow to "
            f"**{step.max_flow}**. The residual graph is now updated.")

def highlighted_edges(step):
    """Keys ("from-to") of the edges on the augmenting path"""
    return frozenset(segment.key for segment in step.augmenting_path)

def step_details(step):
    """Rows of the current step details panel as (label, value) pairs"""
    if step.augmenting_path:
        path = format_path(step.augmenting_path, separator=', ')
    else:
        path = 'None Found'

    if step.is_final:
        status = '✓ Max Flow Found / Min Cut Established'
    else:
        status = '⟳ Augmenting Flow'

    return [
        ('Step Number', step.step),
        ('Augmenting Path', path),
        ('Path Capacity', step.path_capacity),
        ('New Max Flow', step.max_flow),
        ('Status', status),
    ]

class ViewState:
    """
    Everything the renderer needs for one step. Never mutated: a new
    ViewState replaces the old one on each accepted submission.
    """
    def __init__(self, nodes=(), edges=(), flow=0, highlighted=frozenset(),
                 explanation=DEFAULT_EXPLANATION, step=None, min_cut=frozenset()):
        self.nodes = tuple(nodes)
        self.edges = tuple(edges)
        self.flow = flow
        self.highlighted = frozenset(highlighted)
        self.explanation = explanation
        self.step = step
        self.min_cut = frozenset(min_cut)

    def __repr__(self):
        return f"ViewState({len(self.nodes)} nodes, {len(self.edges)} edges, flow={self.flow})"

    def __eq__(self, other):
        if not isinstance(other, ViewState):
            return NotImplemented
        return (self.nodes, self.edges, self.flow, self.highlighted, self.explanation,
                self.step, self.min_cut) == \
               (other.nodes, other.edges, other.flow, other.highlighted, other.explanation,
                other.step, other.min_cut)

    @classmethod
    def empty(cls):
        return cls()

    @property
    def is_empty(self):
        return len(self.nodes) == 0

    def is_highlighted(self, edge):
        return edge.key in self.highlighted

def min_cut_nodes(step):
    """Source side of the min cut, known only on the final step when sSet is given"""
    if step.is_final and step.s_set:
        return frozenset(step.s_set)
    return frozenset()

def build_view_state(step):
    return ViewState(
        nodes=step.nodes,
        edges=step.edges,
        flow=step.max_flow,
        highlighted=highlighted_edges(step),
        explanation=describe_step(step),
        step=step,
        min_cut=min_cut_nodes(step)
    )
