"""Edge-labelled undirected graph for graphic matroid representations.

Each edge carries the integer matroid element it represents under the
``matroid_element`` attribute. Parallel edges are allowed, so the graph is a
``networkx.MultiGraph``.
"""

from typing import Iterator, Tuple

import networkx as nx

MATROID_ELEMENT = "matroid_element"


class MatroidGraph:
    def __init__(self, num_vertices: int = 0):
        self.graph = nx.MultiGraph()
        self.graph.add_nodes_from(range(num_vertices))

    @property
    def number_of_vertices(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def add_vertex(self) -> int:
        vertex = self.number_of_vertices
        self.graph.add_node(vertex)
        return vertex

    def add_edge(self, u: int, v: int, element: int) -> int:
        """Add an edge labelled with ``element`` and return its key."""
        for vertex in (u, v):
            if vertex not in self.graph:
                raise ValueError(f"Unknown vertex {vertex}")
        return self.graph.add_edge(u, v, **{MATROID_ELEMENT: element})

    def element_of(self, u: int, v: int, key: int = 0) -> int:
        return self.graph.edges[u, v, key][MATROID_ELEMENT]

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        for u, v, element in self.graph.edges(data=MATROID_ELEMENT):
            yield u, v, element

    def __str__(self) -> str:
        lines = [f"Graph with {self.number_of_vertices} nodes and {self.number_of_edges} edges:"]
        for u, v, element in self.edges():
            lines.append(f"  {u} <-> {v} : {element}")
        return "\n".join(lines)
