"""
Implicit seam graph over the pixel grid.

Every pixel is a node, numbered row by row: node = row * width + col.
Edges run from a pixel to its three neighbors in the row below
(down-left, down, down-right), and the weight of an edge is the energy
of the pixel it enters. Because every edge increases the row by one the
graph is a DAG, so shortest paths come from a single relaxation pass in
topological order.

Nothing is materialized: adjacency is index arithmetic on the grid size,
and a new SeamGraph is built whenever the grid changes shape.
"""

from typing import Iterator, List, Tuple

from .errors import OutOfRangeError


class SeamGraph:
    """
    Downward 8-connected DAG over a width x height grid.

    Only the two dimensions are stored.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        return self.width * self.height

    def node(self, col: int, row: int) -> int:
        """Node id of pixel (col, row)."""
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise OutOfRangeError(f"Pixel ({col}, {row}) outside {self.width} x {self.height} grid")
        return row * self.width + col

    def col(self, node: int) -> int:
        return node % self.width

    def row(self, node: int) -> int:
        return node // self.width

    def adjacency(self, node: int) -> List[int]:
        """
        Nodes reachable from node in one step, left to right.

        Args:
            node: Node id in [0, size)

        Returns:
            Up to three node ids in the next row; empty for the last row
        """
        if not 0 <= node < self.size:
            raise OutOfRangeError(f"Node {node} outside graph of {self.size} nodes")

        col, row = self.col(node), self.row(node)
        if row == self.height - 1:
            return []

        below = node + self.width
        neighbors = []
        if col > 0:
            neighbors.append(below - 1)
        neighbors.append(below)
        if col < self.width - 1:
            neighbors.append(below + 1)
        return neighbors

    def edges(self) -> Iterator[Tuple[int, int]]:
        """All (from, to) edges in node order."""
        for node in range(self.size):
            for neighbor in self.adjacency(node):
                yield node, neighbor

    def topological_order(self) -> List[int]:
        """
        Reverse DFS post-order over all nodes.

        Every node is finished only after all of its descendants, so
        reversing the finish order puts each edge's source before its
        target. Iterative, so tall images don't hit the recursion limit.

        Returns:
            List of all node ids, each exactly once
        """
        marked = [False] * self.size
        postorder = []

        for start in range(self.size):
            if marked[start]:
                continue
            marked[start] = True
            stack = [(start, iter(self.adjacency(start)))]

            while stack:
                node, children = stack[-1]
                for child in children:
                    if not marked[child]:
                        marked[child] = True
                        stack.append((child, iter(self.adjacency(child))))
                        break
                else:
                    stack.pop()
                    postorder.append(node)

        postorder.reverse()
        return postorder

    def row_order(self) -> List[int]:
        """Nodes row by row. Also topological, since edges only go down."""
        return list(range(self.size))

    def __repr__(self):
        return f"SeamGraph(width={self.width}, height={self.height})"
