"""Domain value objects for the vote ledger.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules, so an unknown content kind or an
out-of-range direction is rejected before anything reaches storage.
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import field_validator

from voteledger.domain.error import (
    InvalidContentIdError,
    InvalidContentKindError,
    InvalidDirectionError,
)
from voteledger.domain.value.common import ValueObject
from voteledger.domain.value.identifiers import ContentId

# content_id is stored as BIGINT
MAX_CONTENT_ID = 2**63 - 1


class ContentKind(str, Enum):
    """Kind of content that can be voted on.

    The ids of each kind live in their own namespace: post #7 and
    comment #7 are unrelated items.
    """

    POST = "post"
    COMMENT = "comment"
    ARTICLE = "article"
    ARTICLE_COMMENT = "article_comment"

    @classmethod
    def parse(cls, value: Any) -> "ContentKind":
        """Parse a content kind, rejecting anything outside the closed set.

        Raises:
            InvalidContentKindError: If the value is not a known kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidContentKindError(value) from None


class VoteDirection(IntEnum):
    """Direction of a user's opinion on an item.

    NEUTRAL is never stored: it is what a user has when no vote row exists.
    """

    UP = 1
    DOWN = -1
    NEUTRAL = 0

    @classmethod
    def castable(cls, value: Any) -> "VoteDirection":
        """Parse a direction that may be cast or stored (UP or DOWN only).

        Raises:
            InvalidDirectionError: If the value is not +1 or -1
        """
        # bool is an int subclass, True would otherwise be accepted as UP
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDirectionError(value)
        if value == cls.UP:
            return cls.UP
        if value == cls.DOWN:
            return cls.DOWN
        raise InvalidDirectionError(value)

    @property
    def opposite(self) -> "VoteDirection":
        """The direction a flip moves to."""
        return VoteDirection(-self.value)


def parse_content_id(value: Any) -> ContentId:
    """Parse a content id.

    Accepts positive integers and strings of digits.

    Raises:
        InvalidContentIdError: If the value is not a positive integer
    """
    if isinstance(value, str) and value.isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidContentIdError(value)
    if value <= 0 or value > MAX_CONTENT_ID:
        raise InvalidContentIdError(value)
    return ContentId(value)


class ContentRef(ValueObject):
    """Reference to one votable item owned by another part of the system.

    Examples: ContentRef(kind="post", id=7), ContentRef(kind="article_comment", id=12)
    """

    kind: ContentKind
    id: ContentId

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Any) -> ContentKind:
        """Reject unknown kinds with a domain error."""
        return ContentKind.parse(v)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> ContentId:
        """Reject ids that are not positive integers."""
        return parse_content_id(v)

    @classmethod
    def of(cls, kind: Any, content_id: Any) -> "ContentRef":
        """Build a reference from raw kind and id values."""
        return cls(kind=kind, id=content_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"
