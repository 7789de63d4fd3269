"""Cuckaroo29 proof verification."""

from typing import List, Sequence

from ..core.params import PROOF_SIZE, EdgeBits, check_solution
from ..core.siphash import SipHashKeys, sipblock
from .cycle import VerifyCode, follow_cycle

EDGE_BITS = EdgeBits.CUCKAROO29
EDGE_MASK = EDGE_BITS.edge_mask


def edge_endpoints(keys: SipHashKeys, edges: Sequence[int]) -> List[int]:
    uvs: List[int] = []
    for edge in edges:
        value = sipblock(keys, edge)
        uvs.append(value & EDGE_MASK)
        uvs.append((value >> 32) & EDGE_MASK)
    return uvs


def verify_cuckaroo(header: bytes, solution: Sequence[int]) -> VerifyCode:
    """Check that ``solution`` is a 42-cycle in the cuckaroo29 graph of ``header``."""
    edges = check_solution(solution)
    keys = SipHashKeys.from_header(header)

    for n, edge in enumerate(edges):
        if edge > EDGE_MASK:
            return VerifyCode.POW_TOO_BIG
        if n and edge <= edges[n - 1]:
            return VerifyCode.POW_TOO_SMALL

    uvs = edge_endpoints(keys, edges)
    xor0 = xor1 = 0
    for n in range(PROOF_SIZE):
        xor0 ^= uvs[2 * n]
        xor1 ^= uvs[2 * n + 1]
    if xor0 | xor1:
        return VerifyCode.POW_NON_MATCHING

    return follow_cycle(uvs, lambda a, b: a == b)
