"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the trustnet test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -k "centrality"    # Run only centrality tests
"""

from pathlib import Path

import pytest
import structlog

from trustnet.core.config import get_settings
from trustnet.graph import TrustGraph, TrustRelation, build_trust_graph


# =============================================================================
# Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep settings and logging configuration from leaking between tests."""
    for name in (
        "TRUSTNET_DATA_FILE",
        "TRUSTNET_LOG_LEVEL",
        "TRUSTNET_LOG_FORMAT",
        "TRUSTNET_CENTRALITY_MAX_ITERATIONS",
        "TRUSTNET_CENTRALITY_TOLERANCE",
        "TRUSTNET_TOP_K",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def triangle_relations():
    """1 rates 2 and 3, 2 rates 3."""
    return [
        TrustRelation(1, 2, 10),
        TrustRelation(2, 3, 20),
        TrustRelation(1, 3, 15),
    ]


@pytest.fixture
def triangle_graph(triangle_relations) -> TrustGraph:
    return build_trust_graph(triangle_relations)


@pytest.fixture
def fork_graph() -> TrustGraph:
    """1 rates 2 and 3, which do not rate each other."""
    return build_trust_graph([TrustRelation(1, 2, 10), TrustRelation(1, 3, 15)])


@pytest.fixture
def strongly_connected_graph() -> TrustGraph:
    """Small aperiodic, strongly connected graph with positive weights."""
    return build_trust_graph([
        TrustRelation(1, 2, 1),
        TrustRelation(2, 1, 1),
        TrustRelation(2, 3, 2),
        TrustRelation(3, 1, 1),
        TrustRelation(1, 1, 1),
    ])


# =============================================================================
# Dataset Fixtures
# =============================================================================

@pytest.fixture
def relations_csv(tmp_path) -> Path:
    """Relation file in the rater,ratee,weight,timestamp layout."""
    path = tmp_path / "relations.csv"
    path.write_text(
        "rater,ratee,weight,time\n"
        "7188,1,10,1407470400\n"
        "430,1,1,1376539200\n"
        "3134,1,10,1369713600\n"
        "7188,430,-2,1407470400\n"
        "1,7188,5,1407470400\n",
        encoding="utf-8",
    )
    return path
