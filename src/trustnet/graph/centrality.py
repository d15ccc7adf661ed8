"""Eigenvector centrality via power iteration over the adjacency matrix."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from trustnet.core import CentralityError, get_logger
from trustnet.graph.builder import build_adjacency_matrix
from trustnet.graph.model import TrustGraph

logger = get_logger(__name__)


@dataclass(frozen=True)
class CentralityResult:
    """Outcome of one power-iteration run."""

    scores: dict[int, float] = field(default_factory=dict)
    iterations: int = 0
    converged: bool = False
    halted_on_zero_norm: bool = False


class EigenvectorCentralityCalculator:
    """Approximate the dominant eigenvector of a trust graph's adjacency matrix.

    This is raw power iteration: no deflation and no sign normalization, so
    scores on graphs with negative weights may come out with either sign.
    Convergence is not guaranteed (for example when the dominant eigenvalues
    form a cyclic pair); the last estimate is returned in that case.
    """

    DEFAULT_MAX_ITER = 100
    DEFAULT_TOL = 1e-06

    def __init__(
        self,
        max_iter: int = DEFAULT_MAX_ITER,
        tol: float = DEFAULT_TOL,
    ) -> None:
        """Initialize the calculator.

        Args:
            max_iter: Maximum number of iterations, must be positive.
            tol: Convergence tolerance on the step difference, must be positive.

        Raises:
            CentralityError: If a parameter is out of range.
        """
        if isinstance(max_iter, bool) or not isinstance(max_iter, int) or max_iter < 1:
            raise CentralityError(
                f"max_iter must be a positive integer, got {max_iter!r}",
                max_iterations=max_iter,
                tolerance=tol,
            )
        if not tol > 0:
            raise CentralityError(
                f"tol must be a positive number, got {tol!r}",
                max_iterations=max_iter,
                tolerance=tol,
            )
        self._max_iter = max_iter
        self._tol = float(tol)

    @property
    def max_iter(self) -> int:
        return self._max_iter

    @property
    def tol(self) -> float:
        return self._tol

    def run(self, graph: TrustGraph) -> CentralityResult:
        """Run power iteration and report how it terminated.

        Args:
            graph: Trust graph.

        Returns:
            CentralityResult with one score per participant.
        """
        matrix = build_adjacency_matrix(graph)
        n = matrix.shape[0]

        if n == 0:
            logger.warning("Empty graph provided for eigenvector centrality")
            return CentralityResult()

        estimate = np.full(n, 1.0 / n, dtype=np.float64)
        iterations = 0
        converged = False
        halted = False

        for iterations in range(1, self._max_iter + 1):
            next_vector = matrix @ estimate
            norm = float(np.linalg.norm(next_vector))

            if norm == 0.0:
                # Sink-only or edgeless graphs; keep the previous estimate.
                halted = True
                break

            normalized = next_vector / norm
            delta = float(np.linalg.norm(normalized - estimate))
            estimate = normalized

            if delta < self._tol:
                converged = True
                break

        scores = {
            participant: float(estimate[graph.index_of(participant)])
            for participant in graph.nodes
        }

        if halted:
            logger.warning(f"Power iteration halted on zero norm after {iterations} iterations")
        elif not converged:
            logger.warning(
                f"Eigenvector centrality did not converge within {self._max_iter} iterations"
            )
        else:
            logger.info(f"Eigenvector centrality converged after {iterations} iterations")

        return CentralityResult(
            scores=scores,
            iterations=iterations,
            converged=converged,
            halted_on_zero_norm=halted,
        )

    def compute(self, graph: TrustGraph) -> dict[int, float]:
        """Compute eigenvector centrality for all participants.

        Returns:
            Dictionary mapping participant ID to centrality score.
        """
        return self.run(graph).scores

    def get_top_k(
        self,
        scores: dict[int, float],
        k: int = 10,
    ) -> list[tuple[int, float]]:
        """Get the top k participants by centrality score, highest first."""
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        return ranked[:k]

    def normalize_scores(self, scores: dict[int, float]) -> dict[int, float]:
        """Normalize scores to range [0, 1].

        Returns:
            New dictionary with min-max normalized scores. If every score is
            equal, all participants get 1.0.
        """
        if not scores:
            return {}

        max_score = max(scores.values())
        min_score = min(scores.values())
        score_range = max_score - min_score

        if score_range == 0:
            return {participant: 1.0 for participant in scores}

        return {
            participant: (score - min_score) / score_range
            for participant, score in scores.items()
        }


def compute_eigenvector_centrality(
    graph: TrustGraph,
    max_iterations: int = EigenvectorCentralityCalculator.DEFAULT_MAX_ITER,
    tolerance: float = EigenvectorCentralityCalculator.DEFAULT_TOL,
) -> dict[int, float]:
    """Compute eigenvector centrality of ``graph`` by power iteration.

    Args:
        graph: Trust graph.
        max_iterations: Iteration cap, must be positive.
        tolerance: Convergence threshold, must be positive.

    Returns:
        Dictionary mapping every participant to its score; empty for an
        empty graph.
    """
    calculator = EigenvectorCentralityCalculator(max_iter=max_iterations, tol=tolerance)
    return calculator.compute(graph)
