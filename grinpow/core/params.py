"""Cuckoo variant parameters and input checks shared by hashing and verification."""
from __future__ import annotations

from enum import IntEnum
from typing import Any, List, Sequence

from .exceptions import InvalidParameterError, InvalidSolutionError

PROOF_SIZE = 42
U32_LIMIT = 1 << 32


class EdgeBits(IntEnum):
    """Graph size parameter; each value selects one verifier and digest variant."""

    CUCKAROO29 = 29
    CUCKATOO31 = 31

    @property
    def edge_mask(self) -> int:
        return (1 << int(self)) - 1

    @property
    def packed_size(self) -> int:
        """Bytes needed to bit-pack a full proof at this edge size."""
        return (PROOF_SIZE * int(self) + 7) // 8


def resolve_edge_bits(value: Any) -> EdgeBits:
    """Return the EdgeBits member for ``value`` or raise InvalidParameterError."""
    if isinstance(value, EdgeBits):
        return value
    # bool is an int subclass but never a graph size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(value)
    try:
        return EdgeBits(value)
    except ValueError:
        raise InvalidParameterError(value) from None


def check_solution(solution: Sequence[int]) -> List[int]:
    """Validate a proof and return it as a plain list of ints."""
    try:
        edges = list(solution)
    except TypeError:
        raise InvalidSolutionError(f"expected a sequence, got {type(solution).__name__}") from None

    if len(edges) != PROOF_SIZE:
        raise InvalidSolutionError(f"expected {PROOF_SIZE} edges, got {len(edges)}")

    for pos, edge in enumerate(edges):
        if isinstance(edge, bool) or not isinstance(edge, int):
            raise InvalidSolutionError(f"edge {pos} is not an integer: {edge!r}")
        if edge < 0 or edge >= U32_LIMIT:
            raise InvalidSolutionError(f"edge {pos} out of u32 range: {edge}")
    return edges
