"""Vote entity.

A vote is one user's current opinion on one content item.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import Field, field_validator

from voteledger.domain.model.common import DomainModel
from voteledger.domain.value import ContentRef, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (voter, kind, id), enforced by a unique constraint
    - Direction is UP or DOWN; a neutral opinion is the absence of a row
    - Only the voter can change or remove their own vote
    """

    id: VoteId
    voter_id: UserId
    target: ContentRef
    direction: VoteDirection
    cast_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, v: Any) -> VoteDirection:
        """Only UP and DOWN can be stored."""
        return VoteDirection.castable(v)

    def flipped(self, cast_at: datetime) -> "Vote":
        """Return this vote pointing the other way."""
        return self.model_copy(
            update={"direction": self.direction.opposite, "cast_at": cast_at}
        )
