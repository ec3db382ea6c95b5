import pytest

from tests.helpers import make_node


@pytest.fixture
def sample_nodes():
    return [
        make_node(("Go", 500), ("HTML", 50)),
        make_node(("Go", 300), ("Rust", 150)),
        make_node(("Python", 10_000), archived=True),
    ]
