"""
Read-only queries over a built graph.

These walk `down` links back toward the root. Nothing here constructs nodes:
asking about a value that has not been generated raises NotGenerated, and
the caller decides whether to build it and retry.

Every function takes the graph's NodeStore and root handle, so the graph
only hands over its structure, never its construction methods.
"""

from collections import deque
from typing import Iterator

from .errors import NotGenerated
from .store import NodeData, NodeStore


def require(store: NodeStore, value: int) -> int:
    """Handle for a stored value, or NotGenerated."""
    handle = store.get(value)
    if handle is None:
        raise NotGenerated(value)
    return handle


def get_depth(store: NodeStore, value: int) -> int:
    return store[require(store, value)].data.depth


def find_common_ancestor(store: NodeStore, a: int, b: int) -> int:
    """
    Lowest common ancestor of a and b under the down relation.

    The deeper endpoint walks down until both sit at the same depth, then
    both walk down in lock-step until they meet.
    """
    node_a = store[require(store, a)]
    node_b = store[require(store, b)]

    while node_a.data.depth < node_b.data.depth:
        node_b = store[node_b.down]
    while node_a.data.depth > node_b.data.depth:
        node_a = store[node_a.down]
    while node_a.data.value != node_b.data.value:
        node_a = store[node_a.down]
        node_b = store[node_b.down]
    return node_a.data.value


class Orbit:
    """
    The descending path from a value to the root, root excluded.

    Iterating twice walks the path twice; nothing is cached.
    """

    def __init__(self, store: NodeStore, value: int):
        self.store = store
        self.start = require(store, value)

    def __iter__(self) -> Iterator[NodeData]:
        node = self.store[self.start]
        while node.down is not None:
            yield node.data
            node = self.store[node.down]

    def values(self):
        return [data.value for data in self]

    def __repr__(self):
        return f"Orbit({self.store[self.start].data.value})"


def iter_orbit(store: NodeStore, value: int) -> Orbit:
    return Orbit(store, value)


def iter_breadth_first(store: NodeStore, root: int) -> Iterator[NodeData]:
    """Every node once, level by level from the root, up1 before up2."""
    queue = deque([root])
    while queue:
        node = store[queue.popleft()]
        queue.extend(node.children)
        yield node.data
