"""
Node storage: an arena of nodes addressed by integer handles.

A handle is the node's index in the arena. Nodes are never removed, so a
handle stays valid for as long as the store exists. Neighbor links
(down, up1, up2) are handles too, or None when the slot is empty.
"""

from dataclasses import dataclass, field
from typing import Optional

from .errors import DuplicateCreate


@dataclass
class NodeData:
    """The per-node record handed out by traversals."""
    value: int
    depth: int = 0
    highest_point: int = 0

    def as_tuple(self):
        return (self.depth, self.value, self.highest_point)

    def __repr__(self):
        return f"NodeData(depth={self.depth}, value={self.value}, highest_point={self.highest_point})"


@dataclass
class Node:
    data: NodeData
    down: Optional[int] = None
    up1: Optional[int] = None
    up2: Optional[int] = None

    @property
    def value(self):
        return self.data.value

    @property
    def children(self):
        return [h for h in (self.up1, self.up2) if h is not None]

    def __repr__(self):
        return f"Node({self.data.depth}, {self.data.value})"


@dataclass
class NodeStore:
    nodes: list = field(default_factory=list)
    index: dict = field(default_factory=dict)

    def create(self, value: int) -> int:
        """Allocate a fresh node. Callers check membership first."""
        if value in self.index:
            raise DuplicateCreate(value)
        handle = len(self.nodes)
        self.nodes.append(Node(NodeData(value)))
        self.index[value] = handle
        return handle

    def get(self, value: int) -> Optional[int]:
        return self.index.get(value)

    def contains(self, value: int) -> bool:
        return value in self.index

    def node(self, handle: int) -> Node:
        return self.nodes[handle]

    def values(self):
        return self.index.keys()

    def __getitem__(self, handle: int) -> Node:
        return self.nodes[handle]

    def __contains__(self, value):
        return value in self.index

    def __len__(self):
        return len(self.nodes)
