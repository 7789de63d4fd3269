"""
Batch verification and scoring of independent candidate proofs.

Each candidate is verified and scored on its own worker; nothing is shared
between tasks. A zero cycle hash or a malformed proof only skips that
candidate, while an unknown edge bits value aborts the whole batch.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..core.exceptions import DifficultyError, InvalidSolutionError
from ..core.params import EdgeBits, resolve_edge_bits
from .cycle import VerifyCode
from .difficulty import scaled_diff

logger = logging.getLogger(__name__)

Candidate = Tuple[bytes, Sequence[int], Any]


@dataclass(frozen=True)
class SolutionScore:
    index: int
    edge_bits: EdgeBits
    valid: bool
    code: Optional[VerifyCode]
    difficulty: Optional[float]
    error: Optional[str] = None


class SolutionScorer:
    """Verify and score candidate proofs, optionally across a thread pool."""

    def __init__(self, alt_scale: Optional[int] = None, max_workers: Optional[int] = None):
        if max_workers is None:
            from ..config import get_settings
            max_workers = get_settings().workers
        self.alt_scale = alt_scale
        self.max_workers = max(1, int(max_workers))

    def score(self, index: int, header: bytes, solution: Sequence[int], edge_bits: Any) -> SolutionScore:
        # imported here so tests can patch the facade
        from ..api import verify_code

        bits = resolve_edge_bits(edge_bits)
        try:
            code = verify_code(header, solution, bits)
            difficulty = scaled_diff(bits, solution, self.alt_scale)
        except (DifficultyError, InvalidSolutionError) as exc:
            logger.warning("Skipping candidate %d (C%d): %s", index, int(bits), exc)
            return SolutionScore(index, bits, False, None, None, str(exc))
        return SolutionScore(index, bits, code is VerifyCode.POW_OK, code, difficulty)

    def score_all(self, candidates: Iterable[Candidate]) -> List[SolutionScore]:
        items = list(candidates)
        if not items:
            return []

        # fail fast on configuration errors before any work is scheduled
        for _, _, edge_bits in items:
            resolve_edge_bits(edge_bits)

        if self.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                futures = [
                    pool.submit(self.score, i, header, solution, edge_bits)
                    for i, (header, solution, edge_bits) in enumerate(items)
                ]
                results = [future.result() for future in futures]
        else:
            results = [
                self.score(i, header, solution, edge_bits)
                for i, (header, solution, edge_bits) in enumerate(items)
            ]

        skipped = sum(1 for result in results if result.error)
        logger.debug("Scored %d candidates (%d skipped)", len(results), skipped)
        return results

    def rank(self, candidates: Iterable[Candidate]) -> List[SolutionScore]:
        """Valid candidates only, strongest difficulty first."""
        scored = [s for s in self.score_all(candidates) if s.valid and s.difficulty is not None]
        return sorted(scored, key=lambda s: (-s.difficulty, s.index))


def score_solutions(
    candidates: Iterable[Candidate],
    alt_scale: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> List[SolutionScore]:
    return SolutionScorer(alt_scale=alt_scale, max_workers=max_workers).score_all(candidates)
