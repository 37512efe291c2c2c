import json

class ExampleStep:
    def __init__(self, payload):
        self.payload = payload
        self.step = payload['step']
        self.label = f"Step {payload['step']}"
        self.summary = f"Max Flow: {payload['maxFlow']} (Path Capacity: {payload['pathCapacity']})"
        self.filename = f"step_{payload['step']}.png"

    def to_json(self):
        return json.dumps(self.payload, indent=2, ensure_ascii=False)

# First augmenting path S -> A -> T
step1 = ExampleStep({
    'step': 1,
    'maxFlow': 4,
    'pathCapacity': 4,
    'augmentingPath': [{'from': 'S', 'to': 'A'}, {'from': 'A', 'to': 'T'}],
    'nodes': ['S', 'A', 'B', 'T'],
    'edges': [
        {'from': 'S', 'to': 'A', 'capacity': 10, 'flow': 4},
        {'from': 'S', 'to': 'B', 'capacity': 5, 'flow': 0},
        {'from': 'A', 'to': 'B', 'capacity': 15, 'flow': 0},
        {'from': 'A', 'to': 'T', 'capacity': 4, 'flow': 4},
        {'from': 'B', 'to': 'T', 'capacity': 10, 'flow': 0}
    ]
})

# Second augmenting path S -> B -> T
step2 = ExampleStep({
    'step': 2,
    'maxFlow': 9,
    'pathCapacity': 5,
    'augmentingPath': [{'from': 'S', 'to': 'B'}, {'from': 'B', 'to': 'T'}],
    'nodes': ['S', 'A', 'B', 'T'],
    'edges': [
        {'from': 'S', 'to': 'A', 'capacity': 10, 'flow': 4},
        {'from': 'S', 'to': 'B', 'capacity': 5, 'flow': 5},   # Flow updated
        {'from': 'A', 'to': 'B', 'capacity': 15, 'flow': 0},
        {'from': 'A', 'to': 'T', 'capacity': 4, 'flow': 4},
        {'from': 'B', 'to': 'T', 'capacity': 10, 'flow': 5}   # Flow updated
    ]
})

# No path left, max flow reached
step3 = ExampleStep({
    'step': 3,
    'maxFlow': 9,
    'pathCapacity': 0,
    'augmentingPath': [],
    'nodes': ['S', 'A', 'B', 'T'],
    'edges': [
        {'from': 'S', 'to': 'A', 'capacity': 10, 'flow': 4},
        {'from': 'S', 'to': 'B', 'capacity': 5, 'flow': 5},
        {'from': 'A', 'to': 'B', 'capacity': 15, 'flow': 0},
        {'from': 'A', 'to': 'T', 'capacity': 4, 'flow': 4},   # Edge saturated
        {'from': 'B', 'to': 'T', 'capacity': 10, 'flow': 5}
    ]
})

EXAMPLE_STEPS = [step1, step2, step3]

INPUT_FORMAT = """{
  "step": 1,
  "maxFlow": 4,
  "pathCapacity": 4,
  "augmentingPath": [
    {"from": "S", "to": "A"},
    {"from": "A", "to": "T"}
  ],
  "nodes": ["S", "A", "B", "T"],
  "edges": [
    {"from": "S", "to": "A", "capacity": 10, "flow": 4},
    {"from": "S", "to": "B", "capacity": 5, "flow": 0},
    // ... all edges with current flow
  ]
}"""
