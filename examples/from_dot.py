from namedgraph.dot import from_dot, visualize

import sys

# Load a graph from a DOT file (or use a small built-in one) and redraw it
if len(sys.argv) > 1:
    with open(sys.argv[1]) as f:
        dot_string = f.read()
else:
    dot_string = """
        digraph deps {
            app -> lib;
            app -> utils;
            lib -> utils;
            utils -> utils;
        }
    """

g = from_dot(dot_string)
print(g)
for source, target in g.edges():
    print(f"    {source} -> {target}")

visualize(g, filename="/tmp/from_dot.gv")
