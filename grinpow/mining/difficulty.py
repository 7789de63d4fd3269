"""
Difficulty scoring of cuckoo cycle proofs.

difficulty = floor((2^256 - scale) / H), where H is the proof's cycle hash
byte-reversed and read as a big-endian integer. The exact quotient is returned
as a float; precision loss for large values is expected by consumers that
compare difficulties, so it is kept.
"""

from typing import Any, Optional, Sequence

from ..core.cyclehash import DIGEST_SIZE, cycle_hash
from ..core.exceptions import DifficultyError
from ..core.params import EdgeBits, resolve_edge_bits

DEFAULT_SCALE = 1
CUCKATOO31_SCALE = 7936
MAX_TARGET = 1 << 256


def digest_to_int(digest: bytes) -> int:
    """Interpret a native (little-endian) cycle hash as an unsigned integer."""
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return int.from_bytes(bytes(reversed(digest)), "big")


def difficulty_from_digest(digest: bytes, scale: int = DEFAULT_SCALE) -> float:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise TypeError(f"scale must be an integer, got {type(scale).__name__}")
    if scale < 0 or scale >= MAX_TARGET:
        raise DifficultyError(f"scale {scale} outside [0, 2^256)", value=scale)

    hash_num = digest_to_int(digest)
    if hash_num == 0:
        raise DifficultyError("cycle hash is zero", value=hash_num)
    return float((MAX_TARGET - scale) // hash_num)


def unscaled_diff(edge_bits: Any, solution: Sequence[int], scale: int = DEFAULT_SCALE) -> float:
    """
    Difficulty of ``solution`` with an explicit scale constant.

    Args:
        edge_bits: 29 (cuckaroo) or 31 (cuckatoo).
        solution: The 42 edge indices of the proof.
        scale: Subtracted from 2^256 before dividing. Defaults to 1.

    Raises:
        InvalidParameterError: Unknown edge bits.
        InvalidSolutionError: Malformed proof.
        DifficultyError: Zero cycle hash or scale outside [0, 2^256).
    """
    bits = resolve_edge_bits(edge_bits)
    return difficulty_from_digest(cycle_hash(bits, solution), scale)


def effective_scale(edge_bits: Any, alt_scale: Optional[int] = None) -> int:
    """Scale used by scaled_diff: fixed for cuckatoo31, ``alt_scale`` otherwise."""
    bits = resolve_edge_bits(edge_bits)
    if bits is EdgeBits.CUCKATOO31:
        return CUCKATOO31_SCALE
    return DEFAULT_SCALE if alt_scale is None else alt_scale


def scaled_diff(edge_bits: Any, solution: Sequence[int], alt_scale: Optional[int] = None) -> float:
    """Difficulty with the variant's scale; cuckatoo31 ignores ``alt_scale``."""
    return unscaled_diff(edge_bits, solution, effective_scale(edge_bits, alt_scale))


def meets_difficulty(
    edge_bits: Any,
    solution: Sequence[int],
    target: float,
    alt_scale: Optional[int] = None,
) -> bool:
    return scaled_diff(edge_bits, solution, alt_scale) >= target
