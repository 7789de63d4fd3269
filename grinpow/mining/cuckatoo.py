"""Cuckatoo31 proof verification."""

from typing import List, Sequence

from ..core.params import PROOF_SIZE, EdgeBits, check_solution
from ..core.siphash import SipHashKeys, sipnode
from .cycle import VerifyCode, follow_cycle

EDGE_BITS = EdgeBits.CUCKATOO31
EDGE_MASK = EDGE_BITS.edge_mask


def edge_endpoints(keys: SipHashKeys, edges: Sequence[int]) -> List[int]:
    uvs: List[int] = []
    for edge in edges:
        uvs.append(sipnode(keys, edge, 0, EDGE_MASK))
        uvs.append(sipnode(keys, edge, 1, EDGE_MASK))
    return uvs


def verify_cuckatoo(header: bytes, solution: Sequence[int]) -> VerifyCode:
    """Check that ``solution`` is a 42-cycle in the cuckatoo31 graph of ``header``."""
    edges = check_solution(solution)
    keys = SipHashKeys.from_header(header)

    for n, edge in enumerate(edges):
        if edge > EDGE_MASK:
            return VerifyCode.POW_TOO_BIG
        if n and edge <= edges[n - 1]:
            return VerifyCode.POW_TOO_SMALL

    uvs = edge_endpoints(keys, edges)
    # endpoints carry no partition bit, so a cycle xors to (PROOF_SIZE/2) & 1
    xor0 = xor1 = (PROOF_SIZE // 2) & 1
    for n in range(PROOF_SIZE):
        xor0 ^= uvs[2 * n]
        xor1 ^= uvs[2 * n + 1]
    if xor0 | xor1:
        return VerifyCode.POW_NON_MATCHING

    return follow_cycle(uvs, lambda a, b: a >> 1 == b >> 1, reject_identical=True)
