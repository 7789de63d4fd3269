"""
grinpow - Cuckoo cycle proof verification and difficulty scoring
"""

from .api import verify, verify_code, unscaled_diff, scaled_diff, meets_difficulty, cycle_hash
from .core.exceptions import GrinPowError, InvalidParameterError, InvalidSolutionError, DifficultyError
from .core.params import PROOF_SIZE, EdgeBits
from .mining.cycle import VerifyCode
from .mining.pool import SolutionScore, SolutionScorer, score_solutions

__version__ = "1.0.0"
__all__ = [
    'verify',
    'verify_code',
    'unscaled_diff',
    'scaled_diff',
    'meets_difficulty',
    'cycle_hash',
    'score_solutions',
    'SolutionScore',
    'SolutionScorer',
    'EdgeBits',
    'VerifyCode',
    'PROOF_SIZE',
    'GrinPowError',
    'InvalidParameterError',
    'InvalidSolutionError',
    'DifficultyError',
]
