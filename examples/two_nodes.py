from namedgraph.graph import DirectedGraph
from namedgraph.dot import visualize

# The smallest interesting picture: two vertices joined by a single edge
g = DirectedGraph()
g.add_edge("A", "B")

print(g)
for vertex in g.vertices():
    print(f"    {vertex} -> ", ", ".join(str(w) for w in g.neighbors(vertex.name)))

visualize(g, filename="/tmp/two_nodes.gv")
