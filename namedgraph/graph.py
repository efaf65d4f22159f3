from collections import namedtuple
from functools import total_ordering

@total_ordering
class Vertex:
    """
    A vertex of a directed graph, identified by its name. Vertices compare
    (and sort) by name only.
    """
    __slots__ = ("_name",)

    def __init__(self, name):
        assert isinstance(name, str), "vertex name must be a string"
        self._name = name

    @property
    def name(self):
        return self._name

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._name == other._name

    def __lt__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._name < other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return f"Vertex({self._name!r})"

    def __str__(self):
        return self._name

# Result of DirectedGraph.insert_vertex: the vertex stored under the name, and
# whether the call is what put it there.
VertexInsertion = namedtuple("VertexInsertion", ["vertex", "inserted"])

class DirectedGraph:
    """
    A simple directed graph with string-named vertices.

    Vertices and edges can only be added, never removed. Adding a vertex or an
    edge that is already present does nothing, and adding an edge creates any
    endpoint that doesn't exist yet. Multi-edges and self-loops are not
    allowed.
    """
    def __init__(self, vertices=(), edges=()):
        """
        Create a directed graph, optionally from the given vertices and edges.

        Args:
            vertices: an iterable of vertex names
            edges: an iterable of (source name, target name) pairs. Endpoints
                   don't need to be listed in vertices.
        """
        self._vertices = {}    # name -> Vertex
        self._adjacency = {}   # Vertex -> set of neighbor Vertex

        self._nv = 0
        self._ne = 0

        for name in vertices:
            self.add_vertex(name)
        for edge in edges:
            assert isinstance(edge, (tuple, list)) and len(edge) == 2, \
                    "edges must be (source, target) pairs"
            self.add_edge(edge[0], edge[1])

    def _insert(self, vertex):
        w = self._vertices.get(vertex.name)
        if w is not None:
            return VertexInsertion(w, False)

        self._vertices[vertex.name] = vertex
        self._adjacency[vertex] = set()
        self._nv += 1
        return VertexInsertion(vertex, True)

    def add_vertex(self, name):
        """
        Add a vertex without neighbors, unless one with this name exists.

        Args:
            name: string name of the vertex

        Returns:
            vertex: the new vertex, or the one already in the graph
        """
        assert isinstance(name, str), "vertex name must be a string"
        w = self._vertices.get(name)
        if w is not None:
            return w
        return self._insert(Vertex(name)).vertex

    def insert_vertex(self, vertex):
        """
        Add the given vertex, unless one with the same name exists. An
        existing vertex is never replaced by the caller's instance.

        Args:
            vertex: the Vertex to add

        Returns:
            insertion: VertexInsertion(vertex, inserted), where vertex is the
                       one stored in the graph and inserted tells whether it
                       was added by this call
        """
        assert isinstance(vertex, Vertex), "expected a Vertex"
        return self._insert(vertex)

    def get_vertex(self, name):
        """
        Return the vertex with the given name, or None if there isn't one.
        """
        assert isinstance(name, str), "vertex name must be a string"
        return self._vertices.get(name)

    def has_vertex(self, name):
        assert isinstance(name, str), "vertex name must be a string"
        return name in self._vertices

    def add_edge(self, from_name, to_name):
        """
        Add the edge from_name -> to_name, creating missing vertices. Existing
        edges and self-loops are ignored.

        Args:
            from_name: name of the source vertex
            to_name: name of the target vertex

        Returns:
            added: True if a new edge was added
        """
        assert isinstance(from_name, str), "vertex name must be a string"
        assert isinstance(to_name, str), "vertex name must be a string"

        # loops are not allowed, and nothing gets created for them
        if from_name == to_name:
            return False
        if self.has_edge(from_name, to_name):
            return False

        v = self.add_vertex(from_name)
        w = self.add_vertex(to_name)

        self._adjacency[v].add(w)
        self._ne += 1
        return True

    def has_edge(self, from_name, to_name):
        """
        Check whether the edge from_name -> to_name exists. An unknown source
        vertex simply has no edges.
        """
        assert isinstance(from_name, str), "vertex name must be a string"
        assert isinstance(to_name, str), "vertex name must be a string"

        v = self._vertices.get(from_name)
        if v is None:
            return False
        return Vertex(to_name) in self._adjacency[v]

    def vertices(self):
        """
        Return a list of all vertices, sorted by name
        """
        return sorted(self._adjacency)

    def neighbors(self, name):
        """
        Return the vertices that the named vertex has edges to, sorted by
        name. Unknown vertices have no neighbors.
        """
        assert isinstance(name, str), "vertex name must be a string"
        v = self._vertices.get(name)
        if v is None:
            return []
        return sorted(self._adjacency[v])

    def edges(self):
        """
        Return a list of (source name, target name) pairs for every edge
        """
        return [(v.name, w.name)
                for v in self.vertices()
                for w in sorted(self._adjacency[v])]

    def nv(self):
        """
        Return the number of vertices in this graph
        """
        return self._nv

    def ne(self):
        """
        Return the number of edges in this graph
        """
        return self._ne

    def __len__(self):
        return self._nv

    def __contains__(self, name):
        return self.has_vertex(name)

    def __str__(self):
        return f"directed graph with {self.nv()} vertices and {self.ne()} edges."
