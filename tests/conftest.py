"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from voteledger.domain.value import ContentRef, UserId

# Keep test output quiet; spans still run so instrumentation is exercised
logfire.configure(send_to_logfire=False, console=False)


def make_ref(kind: str = "post", content_id: int = 7) -> ContentRef:
    """Build a content reference for tests."""
    return ContentRef.of(kind, content_id)


def new_user() -> UserId:
    """A fresh voter identity."""
    return UserId(uuid4())


@pytest.fixture
def post_7() -> ContentRef:
    """Post #7, the item used in the example scenarios."""
    return make_ref("post", 7)
