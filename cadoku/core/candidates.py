"""Candidate digit sets backed by a 9-bit mask."""

from __future__ import annotations
import random
from typing import Iterator, Optional

_FULL_MASK = 0b111111111


class InvalidStateError(RuntimeError):
    """Raised when an operation is attempted on a set that cannot support it."""


class CandidateSet:
    """
    Immutable subset of the digits 1-9.

    Bit ``d - 1`` is set when digit ``d`` is a candidate, so cardinality,
    subset and disjointness tests are single integer operations.
    """

    __slots__ = ("mask",)

    def __init__(self, mask: int = 0):
        if mask < 0 or mask > _FULL_MASK:
            raise ValueError(f"Mask must be within 0-{_FULL_MASK}, got {mask}")
        self.mask = mask

    @classmethod
    def full(cls) -> CandidateSet:
        return FULL

    @classmethod
    def singleton(cls, digit: int) -> CandidateSet:
        if digit < 1 or digit > 9:
            raise ValueError(f"Digit must be 1-9, got {digit}")
        return DIGITS[digit - 1]

    def is_singleton(self) -> bool:
        return self.mask != 0 and self.mask & (self.mask - 1) == 0

    def to_digit(self) -> Optional[int]:
        """Return the digit if this is a singleton, otherwise None."""
        if self.is_singleton():
            return self.mask.bit_length()
        return None

    def cardinality(self) -> int:
        return bin(self.mask).count("1")

    def contains(self, other: CandidateSet) -> bool:
        """True if ``other`` is a subset of this set."""
        return self.mask & other.mask == other.mask

    def excludes(self, other: CandidateSet) -> bool:
        """True if ``other`` shares no digit with this set."""
        return self.mask & other.mask == 0

    def subtract(self, other: CandidateSet) -> CandidateSet:
        return CandidateSet(self.mask & ~other.mask)

    def is_empty(self) -> bool:
        return self.mask == 0

    def select_random(self, rng: Optional[random.Random] = None) -> CandidateSet:
        """
        Pick one member uniformly at random.

        Returns:
            A singleton set holding the chosen digit.

        Raises:
            InvalidStateError: if the set is empty.
        """
        if self.mask == 0:
            raise InvalidStateError("Cannot select a digit from an empty candidate set")
        rng = rng or random
        members = [d for d in DIGITS if self.contains(d)]
        return members[rng.randrange(len(members))]

    def digits(self) -> Iterator[int]:
        for d in range(1, 10):
            if self.mask & (1 << (d - 1)):
                yield d

    def __sub__(self, other: CandidateSet) -> CandidateSet:
        return self.subtract(other)

    def __len__(self) -> int:
        return self.cardinality()

    def __iter__(self) -> Iterator[int]:
        return self.digits()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self.mask == other.mask

    def __hash__(self) -> int:
        return hash(self.mask)

    def __repr__(self) -> str:
        return f"CandidateSet({{{', '.join(str(d) for d in self.digits())}}})"


EMPTY = CandidateSet(0)
FULL = CandidateSet(_FULL_MASK)
DIGITS = tuple(CandidateSet(1 << i) for i in range(9))
