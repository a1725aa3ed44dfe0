"""Mock providers for testing."""

from .persistence import (
    FailingCommitPersistenceProvider,
    FailingCommitVoteRepository,
    MockPersistenceProvider,
)
from .container import build_test_container

__all__ = [
    "FailingCommitPersistenceProvider",
    "FailingCommitVoteRepository",
    "MockPersistenceProvider",
    "build_test_container",
]
