# graph.py
# Directed precedence graph over alphabet symbols.

from typing import Dict, List, Sequence, Tuple

from utils import WARNING, ERROR, resolve_sink


class Vertex:
    """One symbol plus its outgoing edges (insertion ordered, no duplicates)."""

    __slots__ = ("symbol", "is_root", "ends")

    def __init__(self, symbol: str):
        self.symbol = symbol
        # Flips to False on the first incoming edge and never back.
        self.is_root = True
        self.ends: List[str] = []


class PrecedenceGraph:
    """
    Directed graph where an edge a -> b means symbol a precedes symbol b.
      - add_vertices(symbols) -> int
      - create_edge(start, end) -> bool
      - create_daisy_chain_edges(symbols) -> int
      - get_paths() -> List[List[str]], shortest first
    Structural mistakes (self loops, unknown vertices, duplicates) never
    raise; they are reported to the sink and leave the graph unchanged.
    """

    __slots__ = ("_vertices", "_sink")

    def __init__(self, sink=None):
        self._vertices: Dict[str, Vertex] = {}
        self._sink = resolve_sink(sink)

    def __len__(self):
        return len(self._vertices)

    # ---------- Queries ----------
    def has_vertex(self, vertex) -> bool:
        return isinstance(vertex, str) and vertex in self._vertices

    def has_edge(self, start, end) -> bool:
        if not (isinstance(start, str) and isinstance(end, str)):
            self._sink(WARNING, "PrecedenceGraph.has_edge - Input starting and ending vertices are not strings.")
            return False
        if self.has_vertex(start) and self.has_vertex(end):
            return end in self._vertices[start].ends
        return False

    def is_root_vertex(self, vertex) -> bool:
        if self.has_vertex(vertex):
            return self._vertices[vertex].is_root
        return False

    def is_leaf_vertex(self, vertex) -> bool:
        if self.has_vertex(vertex):
            node = self._vertices[vertex]
            return not node.is_root and len(node.ends) == 0
        return False

    def is_branch_vertex(self, vertex) -> bool:
        if self.has_vertex(vertex):
            node = self._vertices[vertex]
            return not node.is_root and len(node.ends) > 1
        return False

    def is_fully_connected(self) -> bool:
        """True when exactly one vertex is a root."""
        if not self._vertices:
            return False
        return sum(1 for node in self._vertices.values() if node.is_root) == 1

    def get_loop_count(self) -> int:
        return count_loops(self.get_paths())

    # ---------- Mutation ----------
    def add_vertices(self, vertices: Sequence[str]) -> int:
        """Add a root vertex per new symbol. Returns how many were added."""
        if not (isinstance(vertices, (list, tuple)) and vertices
                and all(isinstance(v, str) for v in vertices)):
            self._sink(WARNING, "PrecedenceGraph.add_vertices - Input vertices are not strings or invalid.")
            return 0
        added = 0
        for vertex in vertices:
            if vertex in self._vertices:
                self._sink(ERROR, f"PrecedenceGraph.add_vertices - Vertex {vertex} is already added.")
                continue
            self._vertices[vertex] = Vertex(vertex)
            added += 1
        return added

    def create_edge(self, start, end) -> bool:
        if not (isinstance(start, str) and isinstance(end, str)):
            self._sink(WARNING, "PrecedenceGraph.create_edge - Input starting and ending vertices are not strings.")
            return False
        if start == end:
            self._sink(ERROR, f"PrecedenceGraph.create_edge - Cannot connect vertex {start} to itself.")
        elif not self.has_vertex(start):
            self._sink(ERROR, f"PrecedenceGraph.create_edge - Starting vertex {start} is not found.")
        elif not self.has_vertex(end):
            self._sink(ERROR, f"PrecedenceGraph.create_edge - Ending vertex {end} is not found.")
        elif self.has_edge(start, end):
            self._sink(ERROR, f"PrecedenceGraph.create_edge - Vertices {start} and {end} are already connected.")
        else:
            self._vertices[start].ends.append(end)
            self._vertices[end].is_root = False
            return True
        return False

    def create_daisy_chain_edges(self, vertices: Sequence[str]) -> int:
        """Connect each consecutive pair left to right; a failed pair does not stop the rest."""
        if not (isinstance(vertices, (list, tuple)) and vertices
                and all(isinstance(v, str) for v in vertices)):
            self._sink(WARNING, "PrecedenceGraph.create_daisy_chain_edges - Input vertices are not strings or invalid.")
            return 0
        created = 0
        for start, end in zip(vertices, vertices[1:]):
            if self.create_edge(start, end):
                created += 1
        return created

    # ---------- Traversal ----------
    def get_paths(self) -> List[List[str]]:
        """
        Every path from each root to where traversal stops, shortest first.

        Example, edges a-b-c-d, c-f-g and a lone vertex e:
            [['e'], ['a', 'b', 'c', 'd'], ['a', 'b', 'c', 'f', 'g']]

        A path stops at a vertex with no outgoing edges, or right after
        stepping onto a symbol it already contains (a loop). The repeated
        symbol is kept so loops stay visible in the result.
        """
        paths: List[List[str]] = []
        for symbol, node in self._vertices.items():
            if node.is_root:
                paths.extend(self._traverse(symbol))
        paths.sort(key=len)
        return paths

    # ---------- Helpers ----------
    def _traverse(self, root: str) -> List[List[str]]:
        collected: List[List[str]] = []
        # Stack entries: (symbol, path so far, closes_loop). Each fork owns its tuple.
        stack: List[Tuple[str, Tuple[str, ...], bool]] = [(root, (root,), False)]
        while stack:
            symbol, path, closes_loop = stack.pop()
            if closes_loop:
                self._sink(WARNING, f"PrecedenceGraph.get_paths - Detecting a loop going from vertex {path[-2]} to vertex {symbol}.")
                collected.append(list(path))
                continue
            ends = self._vertices[symbol].ends
            if not ends:
                collected.append(list(path))
                continue
            # Reversed so children are explored in edge insertion order.
            for end in reversed(ends):
                stack.append((end, path + (end,), end in path))
        return collected


def count_loops(paths: List[List[str]]) -> int:
    """Number of paths that repeat a symbol."""
    return sum(1 for path in paths if len(set(path)) != len(path))
