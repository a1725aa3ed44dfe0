"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from voteledger.domain.model import Vote
from voteledger.domain.value import ContentRef, UserId, VoteDirection, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        voter_id=UserId(_uuid(row["user_id"])),
        target=ContentRef(kind=row["content_kind"], id=row["content_id"]),
        direction=VoteDirection(row["direction"]),
        cast_at=row["cast_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": vote.id,
        "user_id": vote.voter_id,
        "content_kind": vote.target.kind.value,
        "content_id": vote.target.id,
        "direction": int(vote.direction),
        "cast_at": vote.cast_at,
    }
