"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before any storage access, so no state has changed.
    """

    pass


class InvalidContentKindError(ValidationError):
    """Raised when a content kind is outside the closed set."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid content type: {value!r}")


class InvalidDirectionError(ValidationError):
    """Raised when a vote direction is not +1 or -1."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Vote type must be 1 (upvote) or -1 (downvote), got {value!r}"
        )


class InvalidContentIdError(ValidationError):
    """Raised when a content id is not a positive integer."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Content ID must be a positive integer, got {value!r}")


class VoteConflictError(DomainError):
    """Raised when a cast keeps losing races against the same voter.

    Only concurrent casts by one voter on one item can cause this.
    """

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Vote could not be applied after {attempts} attempts")
