import pytest

from minihpo import InMemoryStorage, RandomSampler, Study, StudyConfig


@pytest.fixture
def storage():
    """A fresh in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def study():
    """A seeded study with quiet logging."""
    return Study(
        storage=InMemoryStorage(),
        sampler=RandomSampler(seed=42),
        config=StudyConfig(seed=42, verbose=False),
    )
