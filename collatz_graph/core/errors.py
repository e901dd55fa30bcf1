"""
Failure conditions raised by the graph and its step functions.
"""


class CollatzGraphError(Exception):
    """Base class for everything this package raises on purpose."""


class NotGenerated(CollatzGraphError, LookupError):
    """A query referenced a value whose node has not been constructed yet."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"node {value} has not been generated")


class InvalidDomain(CollatzGraphError, ValueError):
    """A value lies outside the residue domain of the active variant."""

    def __init__(self, variant, value):
        self.variant = variant
        self.value = value
        name = getattr(variant, "name", variant)
        super().__init__(f"{value} is outside the {name} domain")


class DuplicateCreate(CollatzGraphError, RuntimeError):
    """
    A node was created twice for the same value.

    Construction checks membership before creating, so this means the
    graph logic itself is broken.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"node {value} already exists")
