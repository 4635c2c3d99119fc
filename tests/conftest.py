"""Global pytest configuration and shared graph fixtures."""

from __future__ import annotations

import pytest

from mstage.graph.builder import MultistageGraph, build_graph
from mstage.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give every test a freshly configured ``mstage`` root logger."""
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()


@pytest.fixture
def diamond4() -> MultistageGraph:
    # Weights:
    #        [1]       [6]
    #    1 ──────► 2 ──────► 4
    #    │         │[2]      ▲
    #    │ [4]     ▼         │ [3]
    #    └───────► 3 ────────┘
    return build_graph(
        "4",
        "1 2 1\n1 3 4\n2 3 2\n2 4 6\n3 4 3",
        "1\n2 3\n4",
    )


@pytest.fixture
def five_stage() -> MultistageGraph:
    # Stages: [1] [2 3 4 5] [6 7 8] [9 10 11] [12]
    # Two minimum routes of cost 16: 1-2-7-10-12 and 1-3-6-10-12.
    edges = """
    1 2 9
    1 3 7
    1 4 3
    1 5 2
    2 6 4
    2 7 2
    2 8 1
    3 6 2
    3 7 7
    4 8 11
    5 7 11
    5 8 8
    6 9 6
    6 10 5
    7 9 4
    7 10 3
    8 10 5
    8 11 6
    9 12 4
    10 12 2
    11 12 5
    """
    return build_graph(12, edges, "1\n2 3 4 5\n6 7 8\n9 10 11\n12")


@pytest.fixture
def split_graph() -> MultistageGraph:
    # Two disconnected chains: 1 -> 2 -> 3 and 4 -> 5.
    return build_graph("5", "1 2 1\n2 3 1\n4 5 1", "1 4\n2 5\n3")
