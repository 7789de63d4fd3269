from .exceptions import GrinPowError, InvalidParameterError, InvalidSolutionError, DifficultyError
from .params import PROOF_SIZE, EdgeBits, resolve_edge_bits, check_solution
from .cyclehash import cycle_hash

__all__ = [
    'GrinPowError',
    'InvalidParameterError',
    'InvalidSolutionError',
    'DifficultyError',
    'PROOF_SIZE',
    'EdgeBits',
    'resolve_edge_bits',
    'check_solution',
    'cycle_hash',
]
