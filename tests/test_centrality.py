"""
Unit Tests for trustnet.graph.centrality

Tests for:
    - power iteration termination (convergence, zero norm, iteration cap)
    - score layout and determinism
    - parameter validation, top-k and normalization helpers
"""

import math

import numpy as np
import pytest

from trustnet.core import CentralityError
from trustnet.graph import (
    EigenvectorCentralityCalculator,
    TrustGraph,
    TrustRelation,
    build_trust_graph,
    compute_eigenvector_centrality,
)


class TestPowerIteration:

    def test_empty_graph_returns_empty_map(self):
        result = EigenvectorCentralityCalculator().run(TrustGraph())
        assert result.scores == {}
        assert result.iterations == 0
        assert compute_eigenvector_centrality(TrustGraph(), 100, 1e-6) == {}

    def test_isolated_participant_keeps_uniform_score(self):
        graph = TrustGraph()
        graph.add_participant(42)

        result = EigenvectorCentralityCalculator(max_iter=100, tol=1e-6).run(graph)

        assert result.halted_on_zero_norm
        assert not result.converged
        assert result.iterations == 1
        assert result.scores == {42: 1.0}

    def test_single_directed_edge(self):
        graph = build_trust_graph([TrustRelation(1, 2, 5)])

        result = EigenvectorCentralityCalculator(max_iter=100, tol=1e-6).run(graph)

        # [0.5, 0.5] -> [1, 0] -> zero vector
        assert set(result.scores) == {1, 2}
        assert result.halted_on_zero_norm
        assert result.iterations == 2
        assert result.scores[1] == pytest.approx(1.0)
        assert result.scores[2] == pytest.approx(0.0)

    def test_two_cycle_converges(self):
        graph = build_trust_graph([TrustRelation(1, 2, 1), TrustRelation(2, 1, 1)])

        result = EigenvectorCentralityCalculator(max_iter=100, tol=1e-6).run(graph)

        assert result.converged
        assert result.iterations == 2
        assert result.scores[1] == pytest.approx(1 / math.sqrt(2))
        assert result.scores[2] == pytest.approx(1 / math.sqrt(2))

    def test_strongly_connected_graph_reaches_perron_vector(self, strongly_connected_graph):
        # Dominant eigenvalue 2 with eigenvector proportional to [1, 1, 0.5].
        scores = compute_eigenvector_centrality(strongly_connected_graph, 1000, 1e-10)

        assert scores[1] == pytest.approx(2 / 3, abs=1e-6)
        assert scores[2] == pytest.approx(2 / 3, abs=1e-6)
        assert scores[3] == pytest.approx(1 / 3, abs=1e-6)

    def test_final_step_difference_is_below_tolerance(self, strongly_connected_graph):
        tol = 1e-8
        final = EigenvectorCentralityCalculator(max_iter=1000, tol=tol).run(strongly_connected_graph)
        assert final.converged
        assert final.iterations >= 2

        previous = EigenvectorCentralityCalculator(
            max_iter=final.iterations - 1, tol=tol
        ).run(strongly_connected_graph)

        nodes = strongly_connected_graph.nodes
        delta = np.array([final.scores[n] - previous.scores[n] for n in nodes])
        assert np.linalg.norm(delta) < tol

    def test_oscillating_graph_exhausts_iterations(self):
        # Eigenvalues +2 and -2: the estimate flips between two vectors.
        graph = build_trust_graph([TrustRelation(1, 2, 1), TrustRelation(2, 1, 4)])

        result = EigenvectorCentralityCalculator(max_iter=50, tol=1e-6).run(graph)

        assert not result.converged
        assert not result.halted_on_zero_norm
        assert result.iterations == 50
        assert len(result.scores) == 2

    def test_keys_match_node_set(self, relations_csv):
        from trustnet.ingest import load_trust_graph

        graph = load_trust_graph(relations_csv)
        scores = compute_eigenvector_centrality(graph, 100, 1e-6)
        assert set(scores) == set(graph.nodes)

    def test_negative_weights_stay_finite(self):
        graph = build_trust_graph([
            TrustRelation(1, 2, -3),
            TrustRelation(2, 3, 4),
            TrustRelation(3, 1, -1),
            TrustRelation(3, 2, 2),
        ])
        scores = compute_eigenvector_centrality(graph, 200, 1e-6)
        assert len(scores) == 3
        assert all(math.isfinite(score) for score in scores.values())

    def test_deterministic(self, strongly_connected_graph):
        first = compute_eigenvector_centrality(strongly_connected_graph, 100, 1e-6)
        second = compute_eigenvector_centrality(strongly_connected_graph, 100, 1e-6)
        assert first == second

    def test_triangle_scenario(self, triangle_graph):
        scores = compute_eigenvector_centrality(triangle_graph, 100, 1e-6)
        assert set(scores) == {1, 2, 3}
        assert not any(math.isnan(score) for score in scores.values())


class TestParameters:

    @pytest.mark.parametrize("max_iter", [0, -5, True, 2.5])
    def test_invalid_max_iter(self, max_iter):
        with pytest.raises(CentralityError):
            EigenvectorCentralityCalculator(max_iter=max_iter)

    @pytest.mark.parametrize("tol", [0.0, -1e-6, float("nan")])
    def test_invalid_tolerance(self, tol):
        with pytest.raises(CentralityError):
            EigenvectorCentralityCalculator(tol=tol)

    def test_error_carries_parameters(self):
        with pytest.raises(CentralityError) as exc_info:
            compute_eigenvector_centrality(TrustGraph(), 0, 1e-6)
        assert exc_info.value.details["max_iterations"] == 0
        assert exc_info.value.details["tolerance"] == 1e-6

    def test_defaults(self):
        calculator = EigenvectorCentralityCalculator()
        assert calculator.max_iter == 100
        assert calculator.tol == 1e-6


class TestHelpers:

    def test_get_top_k(self):
        calculator = EigenvectorCentralityCalculator()
        scores = {1: 0.1, 2: 0.7, 3: 0.4}
        assert calculator.get_top_k(scores, k=2) == [(2, 0.7), (3, 0.4)]

    def test_normalize_scores(self):
        calculator = EigenvectorCentralityCalculator()
        normalized = calculator.normalize_scores({1: -0.5, 2: 0.5, 3: 0.0})
        assert normalized == {1: 0.0, 2: 1.0, 3: 0.5}

    def test_normalize_equal_scores(self):
        calculator = EigenvectorCentralityCalculator()
        assert calculator.normalize_scores({1: 0.3, 2: 0.3}) == {1: 1.0, 2: 1.0}

    def test_normalize_empty(self):
        assert EigenvectorCentralityCalculator().normalize_scores({}) == {}
