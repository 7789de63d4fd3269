"""Verifier result codes and the cycle walk shared by both cuckoo variants."""

from enum import IntEnum
from typing import Callable, List

from ..core.params import PROOF_SIZE


class VerifyCode(IntEnum):
    """Result of a proof verification; only POW_OK means the proof is valid."""

    POW_OK = 0
    POW_HEADER_LENGTH = 1
    POW_TOO_BIG = 2
    POW_TOO_SMALL = 3
    POW_NON_MATCHING = 4
    POW_BRANCH = 5
    POW_DEAD_END = 6
    POW_SHORT_CYCLE = 7

    @property
    def ok(self) -> bool:
        return self is VerifyCode.POW_OK


def follow_cycle(
    uvs: List[int],
    same_node: Callable[[int, int], bool],
    reject_identical: bool = False,
    proof_size: int = PROOF_SIZE,
) -> VerifyCode:
    """
    Walk the endpoint list ``uvs`` (u and v of each edge, interleaved).

    From each endpoint, exactly one endpoint of another edge on the same side
    must match it; the walk then hops to that edge's other endpoint. A proof
    is a single cycle through all ``proof_size`` edges back to the start.

    Args:
        uvs: 2 * proof_size endpoints, uvs[2n] = u(edge n), uvs[2n+1] = v(edge n).
        same_node: Predicate deciding whether two endpoint values match.
        reject_identical: Treat a match with an identical value as a dead end
            (cuckatoo pairs nodes that differ only in the lowest bit).
        proof_size: Number of edges in the proof.
    """
    size = 2 * proof_size
    n = 0
    i = 0
    while True:
        j = i
        k = (i + 2) % size
        while k != i:
            if same_node(uvs[k], uvs[i]):
                if j != i:
                    return VerifyCode.POW_BRANCH
                j = k
            k = (k + 2) % size
        if j == i or (reject_identical and uvs[j] == uvs[i]):
            return VerifyCode.POW_DEAD_END
        i = j ^ 1
        n += 1
        if i == 0:
            break
    return VerifyCode.POW_OK if n == proof_size else VerifyCode.POW_SHORT_CYCLE
