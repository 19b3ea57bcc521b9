"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def graph():
    """Fresh TypedGraph instance."""
    from citegraph.graph import TypedGraph

    return TypedGraph()


@pytest.fixture
def recording_graph():
    """Graph collaborator that records add_vertex/add_edge calls."""
    from tests.core.graph_test_helpers import RecordingGraph

    return RecordingGraph()


@pytest.fixture
def two_paper_dataset():
    """Two complete records; the second cites the first."""
    from tests.core.graph_test_helpers import make_record

    return make_record(
        "Graph Mining",
        index="p1",
        authors=["Ada Lovelace", "Alan Turing"],
        year="2001",
        venue="KDD",
        citations=3,
    ) + make_record(
        "Citation Networks",
        index="p2",
        authors=["Grace Hopper"],
        year="2005",
        venue="WWW",
        references=["p1"],
    )
