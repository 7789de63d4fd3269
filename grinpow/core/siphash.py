"""
SipHash-2-4 as used by the cuckoo cycle graphs.

The four 64-bit keys are the BLAKE2b-256 digest of the block header read as
little-endian words, loaded directly as the SipHash state (no IV constants).
"""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass
from typing import List, Optional

MASK64 = 0xFFFFFFFFFFFFFFFF

EDGE_BLOCK_BITS = 6
EDGE_BLOCK_SIZE = 1 << EDGE_BLOCK_BITS
EDGE_BLOCK_MASK = EDGE_BLOCK_SIZE - 1


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & MASK64


@dataclass(frozen=True)
class SipHashKeys:
    k0: int
    k1: int
    k2: int
    k3: int

    @classmethod
    def from_bytes(cls, keybuf: bytes) -> "SipHashKeys":
        k0, k1, k2, k3 = struct.unpack("<4Q", bytes(keybuf[:32]))
        return cls(k0, k1, k2, k3)

    @classmethod
    def from_header(cls, header: bytes) -> "SipHashKeys":
        if not isinstance(header, (bytes, bytearray, memoryview)):
            raise TypeError(f"header must be bytes, got {type(header).__name__}")
        return cls.from_bytes(hashlib.blake2b(bytes(header), digest_size=32).digest())


class SipHashState:
    """
    SipHash-2-4 state loaded from the keys.

    ``hash24`` mutates the state; cuckaroo feeds a whole edge block through
    one state, while cuckatoo starts from the keys for every endpoint.
    """

    def __init__(self, keys: SipHashKeys):
        self.v0 = keys.k0
        self.v1 = keys.k1
        self.v2 = keys.k2
        self.v3 = keys.k3

    def _round(self) -> None:
        v0, v1, v2, v3 = self.v0, self.v1, self.v2, self.v3
        v0 = (v0 + v1) & MASK64
        v2 = (v2 + v3) & MASK64
        v1 = _rotl(v1, 13)
        v3 = _rotl(v3, 16)
        v1 ^= v0
        v3 ^= v2
        v0 = _rotl(v0, 32)
        v2 = (v2 + v1) & MASK64
        v0 = (v0 + v3) & MASK64
        v1 = _rotl(v1, 17)
        v3 = _rotl(v3, 21)
        v1 ^= v2
        v3 ^= v0
        v2 = _rotl(v2, 32)
        self.v0, self.v1, self.v2, self.v3 = v0, v1, v2, v3

    def hash24(self, nonce: int) -> None:
        nonce &= MASK64
        self.v3 ^= nonce
        self._round()
        self._round()
        self.v0 ^= nonce
        self.v2 ^= 0xFF
        for _ in range(4):
            self._round()

    def xor_lanes(self) -> int:
        return (self.v0 ^ self.v1) ^ (self.v2 ^ self.v3)


def siphash24(keys: SipHashKeys, nonce: int) -> int:
    """SipHash-2-4 of a single 64-bit nonce from a fresh state, as the xor of all lanes."""
    state = SipHashState(keys)
    state.hash24(nonce)
    return state.xor_lanes()


def sipnode(keys: SipHashKeys, edge: int, uorv: int, edge_mask: int) -> int:
    """Endpoint of ``edge`` on side ``uorv`` in a cuckatoo graph."""
    # the native code computes 2*edge + uorv in 32-bit arithmetic
    return siphash24(keys, (2 * edge + uorv) & 0xFFFFFFFF) & edge_mask


def sipblock(keys: SipHashKeys, edge: int, buf: Optional[List[int]] = None) -> int:
    """
    Hash the 64-edge block containing ``edge`` and return the value for ``edge``.

    One SipHash state runs through the whole block, and every entry but the
    last is xored with the last one, so no edge of a block can be computed
    without hashing the whole block.
    """
    edge0 = edge & ~EDGE_BLOCK_MASK
    state = SipHashState(keys)
    block = []
    for i in range(EDGE_BLOCK_SIZE):
        state.hash24(edge0 + i)
        block.append(state.xor_lanes())
    last = block[EDGE_BLOCK_MASK]
    for i in range(EDGE_BLOCK_MASK):
        block[i] ^= last
    if buf is not None:
        buf[:] = block
    return block[edge & EDGE_BLOCK_MASK]
