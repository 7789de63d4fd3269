from .cycle import VerifyCode
from .cuckatoo import verify_cuckatoo
from .cuckaroo import verify_cuckaroo
from .difficulty import (
    DEFAULT_SCALE,
    CUCKATOO31_SCALE,
    difficulty_from_digest,
    digest_to_int,
    meets_difficulty,
    scaled_diff,
    unscaled_diff,
)
from .pool import SolutionScore, SolutionScorer, score_solutions

__all__ = [
    'VerifyCode',
    'verify_cuckatoo',
    'verify_cuckaroo',
    'DEFAULT_SCALE',
    'CUCKATOO31_SCALE',
    'difficulty_from_digest',
    'digest_to_int',
    'meets_difficulty',
    'scaled_diff',
    'unscaled_diff',
    'SolutionScore',
    'SolutionScorer',
    'score_solutions',
]
