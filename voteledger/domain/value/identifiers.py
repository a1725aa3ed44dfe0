"""Strongly typed identifiers for vote ledger entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Issued by the marketplace auth service, carried in the JWT
UserId = NewType("UserId", UUID)
VoteId = NewType("VoteId", UUID)

# Content ids are numeric and only meaningful within their own kind
ContentId = NewType("ContentId", int)
