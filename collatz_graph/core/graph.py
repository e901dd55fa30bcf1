"""
The trajectory graph: every visited value merged into one tree rooted at 1.

Each node has exactly one `down` edge (its successor under the variant's
reduction) and up to two `up` edges (the predecessors that have been
materialized so far). Two ways to grow it:

    generate_down       follow the reduction from n until it lands on a
                        known value, then splice the new chain in
    generate_up         walk away from the root, creating predecessors,
                        a bounded batch of expansions per call

Depth and highest point are annotated as nodes are attached, so every
query afterwards is a walk over stored records.
"""

from typing import Optional

from .query import (
    require, get_depth, find_common_ancestor, iter_orbit, iter_breadth_first,
)
from .step import MAX_VALUE, step_function
from .store import NodeData, NodeStore
from .variant import ReductionVariant, parse_variant


DEFAULT_UP_BATCH_SIZE = 10


class TrajectoryGraph:
    """
    One variant, one root, one store.

    `filled_end` marks the dense prefix: after generate_fill_down(max),
    every in-domain value below filled_end is known to be stored, so
    contains() answers for it without a lookup. That shortcut trusts the
    caller to ask only about in-domain values.
    """

    def __init__(self, variant=ReductionVariant.FULL,
                 up_batch_size: int = DEFAULT_UP_BATCH_SIZE):
        self.variant = parse_variant(variant)
        self.step = step_function(self.variant)
        self.up_batch_size = up_batch_size
        self.store = NodeStore()
        self.root = self.store.create(1)
        self.store[self.root].data.highest_point = 1
        self.filled_end = 2

    # ── Membership ──────────────────────────────────────────────────────

    def contains(self, value: int) -> bool:
        if 1 <= value < self.filled_end:
            return True
        return self.store.contains(value)

    def __contains__(self, value):
        return self.contains(value)

    def __len__(self):
        return len(self.store)

    # ── Descending construction ─────────────────────────────────────────

    def generate_down(self, n: int):
        """
        Make sure n and its whole descent are in the graph.

        New nodes form a chain linked through up1; the first known value
        reached is the merge point. After the splice, the chain is walked
        back from the merge point to fill in depth and highest point.
        """
        self.step.check(n)
        if self.contains(n):
            return

        # compute the whole descent first so a step that leaves the
        # domain raises before any node is created
        chain = []
        while not self.contains(n):
            chain.append(n)
            n = self.step.down(n)

        store = self.store
        merge = require(store, n)
        prev = None
        for value in chain:
            handle = store.create(value)
            if prev is not None:
                store[prev].down = handle
                store[handle].up1 = prev
            prev = handle

        merge_node = store[merge]
        store[prev].down = merge
        if merge_node.up1 is None:
            merge_node.up1 = prev
        elif merge_node.up2 is None:
            merge_node.up2 = prev

        depth = merge_node.data.depth
        highest_point = merge_node.data.highest_point
        while prev is not None:
            node = store[prev]
            depth += 1
            highest_point = max(highest_point, node.data.value)
            node.data.depth = depth
            node.data.highest_point = highest_point
            prev = node.up1

    def generate_fill_down(self, max_value: int):
        """
        Build every in-domain value up to max_value.

        Values are visited from the top down so most chains merge into
        structure built moments earlier.
        """
        for n in range(max_value, self.filled_end - 1, -1):
            if not self.step.in_domain(n):
                continue
            self.generate_down(n)
        self.filled_end = max(self.filled_end, max_value + 1)

    # ── Ascending construction ──────────────────────────────────────────

    def generate_up(self, max_value: int, batch_size: Optional[int] = None):
        """
        Grow predecessors of the existing tree, values capped at max_value.

        A depth-first walk from the root that stops after batch_size
        expansions (default: self.up_batch_size). Only a node that gains
        at least one new predecessor counts as an expansion; complete
        nodes are walked through for free, so each call resumes at the
        frontier the previous call left behind.
        """
        limit = self.up_batch_size if batch_size is None else batch_size
        max_value = min(max_value, MAX_VALUE)
        stack = [self.root]
        expanded = 0
        while stack and expanded < limit:
            handle = stack.pop()
            if self._expand_up(handle, max_value, stack):
                expanded += 1

    def _expand_up(self, handle: int, max_value: int, stack: list) -> int:
        """Attach missing predecessors of one node; returns how many."""
        store = self.store
        node = store[handle]
        attached = 0

        if node.up1 is None:
            up1, up2 = self.step.up(node.data.value)
            if self._admits(up1, max_value):
                stack.append(self._attach_up(handle, up1))
                attached += 1
            if up2 is not None and self._admits(up2, max_value):
                stack.append(self._attach_up(handle, up2))
                attached += 1

        elif node.up2 is None:
            existing = node.up1
            stack.append(existing)
            up1, up2 = self.step.up(node.data.value)
            if store[existing].data.value != up1:
                # the stored child came through the 3n+1 branch
                if self._admits(up1, max_value):
                    stack.append(self._attach_up(handle, up1))
                    attached += 1
            elif up2 is not None and self._admits(up2, max_value):
                stack.append(self._attach_up(handle, up2))
                attached += 1

        else:
            stack.append(node.up1)
            stack.append(node.up2)

        return attached

    def _admits(self, value, max_value):
        return value <= max_value and value != 1 and not self.store.contains(value)

    def _attach_up(self, parent: int, value: int) -> int:
        store = self.store
        handle = store.create(value)
        parent_node = store[parent]
        child = store[handle]
        child.data.depth = parent_node.data.depth + 1
        child.data.highest_point = max(value, parent_node.data.highest_point)
        child.down = parent
        if parent_node.up1 is None:
            parent_node.up1 = handle
        else:
            parent_node.up2 = handle
        return handle

    # ── Queries ─────────────────────────────────────────────────────────

    def get_node_data(self, value: int) -> NodeData:
        return self.store[require(self.store, value)].data

    def get_depth(self, value: int) -> int:
        return get_depth(self.store, value)

    def find_common_ancestor(self, a: int, b: int) -> int:
        return find_common_ancestor(self.store, a, b)

    def iter_orbit(self, n: int):
        return iter_orbit(self.store, n)

    def iter(self):
        return iter_breadth_first(self.store, self.root)

    def __iter__(self):
        return self.iter()

    def __repr__(self):
        return (f"TrajectoryGraph({self.variant.name}, nodes={len(self)}, "
                f"filled_end={self.filled_end})")

