import networkx as nx

def build_flow_graph(step):
    """
    Build a networkx view of the step. Parallel edges between the same
    pair of nodes are kept, so a MultiDiGraph is used.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(step.nodes)

    for edge in step.edges:
        G.add_edge(edge.from_node, edge.to_node, capacity=edge.capacity, flow=edge.flow)

    return G

def saturated_edges(step):
    """
    Edges whose flow has reached their capacity. These are the bottlenecks
    that stop further augmenting paths through them.

    Returns:
        List of (u, v, data) tuples in graph order
    """
    G = build_flow_graph(step)
    saturated = []
    for u, v, data in G.edges(data=True):
        if data['capacity'] > 0 and data['flow'] >= data['capacity']:
            saturated.append((u, v, data))
    return saturated

def print_flow_results(step):
    print(f"\nMaximum flow: {step.max_flow}")
    print("\nFlow on each edge:")
    for edge in step.edges:
        print(f"{edge.from_node} -> {edge.to_node}: {edge.flow}/{edge.capacity}")

    saturated = saturated_edges(step)
    if saturated:
        print("\nSaturated edges:")
        for u, v, data in saturated:
            print(f"{u} -> {v}: {data['flow']}/{data['capacity']}")
