"""
Step functions: one deterministic move down, one or two moves up.

Each variant is a small strategy object. `down` is the forward reduction
toward 1; `up` inverts it and returns (always, optional):

    always    the predecessor every value has (2n, 4n+1 or 16n+5)
    optional  the predecessor through the 3n+1 branch, present only when
              n's residue class admits an integer solution

The residue tables for ODD and COMPACT come from solving the forward
formulas for each residue class. For COMPACT:

    (24m + 5)  / 4       -> 6m + 1      so 4n + 1 inverts when n = 1 mod 6
    (96m + 85) / 16      -> 6m + 5      so 16n + 5 inverts when n = 5 mod 6
    (3(12m + 7)  + 1)/2  -> 18m + 11
    (3(12m + 11) + 1)/2  -> 18m + 17
    (3(24m + 1)  + 1)/4  -> 18m + 1
    (3(24m + 17) + 1)/4  -> 18m + 13
    (3(48m + 13) + 1)/8  -> 18m + 5
    (3(96m + 37) + 1)/16 -> 18m + 7

Values are bounded by the unsigned 64-bit range; anything outside a
variant's domain raises InvalidDomain instead of producing garbage.
"""

from typing import Optional, Tuple

from .errors import InvalidDomain
from .variant import ReductionVariant


MAX_VALUE = 2 ** 64 - 1


class StepFunction:
    """Base strategy. Subclasses fill in the residue arithmetic."""

    variant: ReductionVariant

    def in_domain(self, n: int) -> bool:
        return 1 <= n <= MAX_VALUE

    def check(self, n: int) -> int:
        if not self.in_domain(n):
            raise InvalidDomain(self.variant, n)
        return n

    def down(self, n: int) -> int:
        raise NotImplementedError

    def up(self, n: int) -> Tuple[int, Optional[int]]:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class FullStep(StepFunction):
    variant = ReductionVariant.FULL

    def down(self, n):
        self.check(n)
        if n % 2 == 0:
            return n // 2
        return 3 * n + 1

    def up(self, n):
        self.check(n)
        # 3(2m + 1) + 1 = 6m + 4
        if n % 6 == 4:
            return 2 * n, n // 3
        return 2 * n, None


class ShortStep(StepFunction):
    variant = ReductionVariant.SHORT

    def down(self, n):
        self.check(n)
        if n % 2 == 0:
            return n // 2
        return (3 * n + 1) // 2

    def up(self, n):
        self.check(n)
        # (3(2m + 1) + 1) / 2 = 3m + 2
        if n % 3 == 2:
            return 2 * n, 2 * n // 3
        return 2 * n, None


class OddStep(StepFunction):
    variant = ReductionVariant.ODD

    def in_domain(self, n):
        return super().in_domain(n) and n % 2 == 1

    def down(self, n):
        self.check(n)
        r = n % 8
        if r == 5:
            return n // 4
        if r == 1:
            return (3 * n + 1) // 4
        return (3 * n + 1) // 2

    def up(self, n):
        self.check(n)
        r = n % 12
        if r in (1, 7):
            return 4 * n + 1, 4 * n // 3
        if r in (5, 11):
            return 4 * n + 1, 2 * n // 3
        return 4 * n + 1, None


_QUARTER = frozenset({5, 29, 53, 77})
_SIXTEENTH = frozenset({85})
_LIFT_HALF = frozenset({7, 11, 19, 23, 31, 35, 43, 47,
                        55, 59, 67, 71, 79, 83, 91, 95})
_LIFT_QUARTER = frozenset({1, 17, 25, 41, 49, 65, 73, 89})
_LIFT_EIGHTH = frozenset({13, 61})
_LIFT_SIXTEENTH = frozenset({37})


class CompactStep(StepFunction):
    variant = ReductionVariant.COMPACT

    def in_domain(self, n):
        return super().in_domain(n) and n % 2 == 1 and n % 3 != 0

    def down(self, n):
        self.check(n)
        r = n % 96
        if r in _QUARTER:
            return n // 4
        if r in _SIXTEENTH:
            return n // 16
        if r in _LIFT_HALF:
            return (3 * n + 1) // 2
        if r in _LIFT_QUARTER:
            return (3 * n + 1) // 4
        if r in _LIFT_EIGHTH:
            return (3 * n + 1) // 8
        if r in _LIFT_SIXTEENTH:
            return (3 * n + 1) // 16
        raise InvalidDomain(self.variant, n)

    def up(self, n):
        self.check(n)
        r = n % 18
        if r in (11, 17):
            return 16 * n + 5, 2 * n // 3
        if r in (1, 13):
            return 4 * n + 1, 4 * n // 3
        if r == 5:
            return 16 * n + 5, 8 * n // 3
        if r == 7:
            return 4 * n + 1, 16 * n // 3
        raise InvalidDomain(self.variant, n)


STEP_FUNCTIONS = {
    ReductionVariant.FULL: FullStep(),
    ReductionVariant.SHORT: ShortStep(),
    ReductionVariant.ODD: OddStep(),
    ReductionVariant.COMPACT: CompactStep(),
}


def step_function(variant: ReductionVariant) -> StepFunction:
    """The shared, stateless strategy for a variant."""
    return STEP_FUNCTIONS[ReductionVariant(variant)]


def down(variant: ReductionVariant, n: int) -> int:
    return step_function(variant).down(n)


def up(variant: ReductionVariant, n: int) -> Tuple[int, Optional[int]]:
    return step_function(variant).up(n)
