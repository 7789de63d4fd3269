"""
Cycle hash: the 32-byte digest of a proof that difficulty is scored from.

The proof's edge indices are bit-packed, least significant bit first, using
only the low ``edge_bits`` bits of each edge, then hashed with BLAKE2b-256.
The digest is returned byte-reversed, which is the native little-endian form
that the difficulty scaler expects.
"""

from __future__ import annotations

import hashlib
from typing import Any, Sequence

from .params import EdgeBits, check_solution, resolve_edge_bits

DIGEST_SIZE = 32


def pack_solution(edge_bits: EdgeBits, edges: Sequence[int]) -> bytes:
    """Bit-pack the low ``edge_bits`` bits of every edge into a byte string."""
    mask = edge_bits.edge_mask
    width = int(edge_bits)
    packed = 0
    for pos, edge in enumerate(edges):
        packed |= (edge & mask) << (pos * width)
    return packed.to_bytes(edge_bits.packed_size, "little")


def cycle_hash(edge_bits: Any, solution: Sequence[int]) -> bytes:
    """BLAKE2b-256 of the packed solution, returned in reversed byte order."""
    bits = resolve_edge_bits(edge_bits)
    edges = check_solution(solution)
    digest = hashlib.blake2b(pack_solution(bits, edges), digest_size=DIGEST_SIZE).digest()
    return digest[::-1]
