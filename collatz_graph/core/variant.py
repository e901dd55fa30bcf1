"""
Reduction variants: which acceleration of the 3n+1 rule a graph uses.

    FULL     n/2 or 3n+1
    SHORT    n/2 or (3n+1)/2
    ODD      odd values only; several elementary steps per jump
    COMPACT  values coprime to 6 only; up to five elementary steps per jump

The integer values are the numbering hosts use to pick a variant.
"""

from enum import IntEnum


class ReductionVariant(IntEnum):
    FULL = 0
    SHORT = 1
    ODD = 2
    COMPACT = 3


def parse_variant(value) -> ReductionVariant:
    """
    Accept a ReductionVariant, its integer value, or its name
    (case-insensitive, e.g. "compact").
    """
    if isinstance(value, ReductionVariant):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in ReductionVariant.__members__:
            return ReductionVariant[key]
        if key.isdigit():
            value = int(key)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return ReductionVariant(value)
        except ValueError:
            pass
    raise ValueError(
        f"Unknown variant: {value!r}. "
        f"Choose from: {[v.name.lower() for v in ReductionVariant]}"
    )
