"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from learning_commons.graph.loader import GraphLoader
from learning_commons.graph.models import LearningComponent, Subject
from learning_commons.graph.resolver import PrerequisiteResolver
from learning_commons.graph.store import GraphStore


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP API)")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def make_component(uuid: str, prerequisites=(), grade: str = "3", **kwargs) -> LearningComponent:
    """Build a minimal math component for hand-made graphs."""
    return LearningComponent(
        uuid=uuid,
        identifier=kwargs.pop("identifier", uuid.upper()),
        label=kwargs.pop("label", uuid),
        description=kwargs.pop("description", f"Skill {uuid}"),
        subject=Subject.MATH,
        grade_levels=(grade,),
        prerequisites=tuple(prerequisites),
        **kwargs,
    )


@pytest.fixture
def store():
    """A freshly loaded store holding the sample math components."""
    graph_store = GraphStore()
    GraphLoader(graph_store).load()
    return graph_store


@pytest.fixture
def resolver(store):
    return PrerequisiteResolver(store)


@pytest.fixture
def cyclic_resolver():
    """A -> B -> A cycle plus a self-referencing component C."""
    graph_store = GraphStore()
    components = [
        make_component("a", prerequisites=["b"]),
        make_component("b", prerequisites=["a"]),
        make_component("c", prerequisites=["c"], grade="4"),
    ]
    GraphLoader(graph_store, components=components, frameworks=[]).load()
    return PrerequisiteResolver(graph_store)


@pytest.fixture
def sample_text():
    """Short instructional passage with growth and achievability language."""
    return (
        "Let's start with the first step. You already know how to add small numbers. "
        "Because regrouping helps you add bigger numbers, we will practice it together. "
        "If you make a mistake, try again. Mistakes help us grow!"
    )
