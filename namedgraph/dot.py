from namedgraph.graph import DirectedGraph

import graphviz
import pydot

# Names pydot reports for default-attribute statements like `node [shape=box]`.
# A quoted ID such as "node" is an ordinary node and keeps its quotes here.
_DEFAULT_STATEMENTS = ("node", "edge", "graph")

def _unquote(identifier):
    if len(identifier) >= 2 and identifier[0] == identifier[-1] == '"':
        return identifier[1:-1].replace('\\"', '"')
    return identifier

def _endpoint_names(endpoint):
    """
    Return the vertex names an edge endpoint stands for. An endpoint is either
    a node ID or a node group like {b c}, which pydot hands back as a dict
    (or a Subgraph) holding its nodes.
    """
    if isinstance(endpoint, pydot.Subgraph):
        names = []
        _collect_nodes(endpoint, names)
        return names
    if isinstance(endpoint, dict):
        names = [_unquote(name) for name in endpoint.get("nodes", {})
                 if name not in _DEFAULT_STATEMENTS]
        for subgraph in endpoint.get("subgraphs", {}).values():
            for entry in subgraph:
                names.extend(_endpoint_names(entry))
        return names
    return [_unquote(str(endpoint))]

def _collect_nodes(pydot_graph, names):
    for node in pydot_graph.get_nodes():
        if node.get_name() not in _DEFAULT_STATEMENTS:
            names.append(_unquote(node.get_name()))
    for edge in pydot_graph.get_edges():
        names.extend(_endpoint_names(edge.get_source()))
        names.extend(_endpoint_names(edge.get_destination()))
    for subgraph in pydot_graph.get_subgraph_list():
        _collect_nodes(subgraph, names)

def _add_statements(pydot_graph, graph):
    # declared nodes first, then edges, then the same for nested subgraphs
    for node in pydot_graph.get_nodes():
        if node.get_name() in _DEFAULT_STATEMENTS:
            continue
        graph.add_vertex(_unquote(node.get_name()))

    for edge in pydot_graph.get_edges():
        for source in _endpoint_names(edge.get_source()):
            for target in _endpoint_names(edge.get_destination()):
                graph.add_edge(source, target)

    for subgraph in pydot_graph.get_subgraph_list():
        _add_statements(subgraph, graph)

def to_digraph(graph, name=None):
    """
    Build a graphviz drawing of the given graph: an ellipse for each vertex and
    an arrow for each edge.

    Args:
        graph: the DirectedGraph to draw
        name: optional name of the resulting digraph

    Returns:
        dot: a graphviz.Digraph
    """
    assert isinstance(graph, DirectedGraph)
    dot = graphviz.Digraph(name=name)
    dot.attr("node", shape="ellipse")

    for vertex in graph.vertices():
        dot.node(vertex.name, label=vertex.name)
    for source, target in graph.edges():
        dot.edge(source, target)

    return dot

def visualize(graph, filename="/tmp/namedgraph.gv", view=True):
    """
    Render the graph to a jpg with graphviz, and optionally open it.

    Returns:
        path: the path of the rendered file
    """
    return to_digraph(graph).render(filename, format="jpg", view=view)

def from_dot(dot_string):
    """
    Construct a DirectedGraph from a graph in DOT format. Every edge in the
    file becomes an edge of the graph and every declared node a vertex,
    including those inside subgraphs and clusters. An edge to or from a node
    group like {b c} becomes one edge per node in the group. Attributes are
    ignored, as are self-loops.

    Args:
        dot_string: string holding a single graph in DOT format

    Returns:
        graph: the corresponding DirectedGraph
    """
    pydot_graphs = pydot.graph_from_dot_data(dot_string)
    assert pydot_graphs is not None and len(pydot_graphs) == 1, \
            "DOT string must hold exactly one graph"

    graph = DirectedGraph()
    _add_statements(pydot_graphs[0], graph)
    return graph
