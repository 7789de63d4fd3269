"""
Public entry points: proof verification routed by edge bits, and difficulty scoring.
"""

from typing import Any, Sequence

from .core.cyclehash import cycle_hash
from .core.exceptions import InvalidParameterError
from .core.params import EdgeBits, resolve_edge_bits
from .mining.cuckaroo import verify_cuckaroo
from .mining.cuckatoo import verify_cuckatoo
from .mining.cycle import VerifyCode
from .mining.difficulty import meets_difficulty, scaled_diff, unscaled_diff


def verify_code(header: bytes, solution: Sequence[int], edge_bits: Any) -> VerifyCode:
    """Run the verifier for ``edge_bits`` and return its detailed result code."""
    bits = resolve_edge_bits(edge_bits)
    if bits is EdgeBits.CUCKATOO31:
        return verify_cuckatoo(header, solution)
    if bits is EdgeBits.CUCKAROO29:
        return verify_cuckaroo(header, solution)
    raise InvalidParameterError(edge_bits)


def verify(header: bytes, solution: Sequence[int], edge_bits: Any) -> bool:
    """True if ``solution`` is a valid cycle for ``header`` under the selected variant."""
    return verify_code(header, solution, edge_bits) is VerifyCode.POW_OK


__all__ = [
    'verify',
    'verify_code',
    'unscaled_diff',
    'scaled_diff',
    'meets_difficulty',
    'cycle_hash',
]
