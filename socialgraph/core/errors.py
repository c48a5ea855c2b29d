from __future__ import annotations


class SocialGraphError(Exception):
    """Base class for failures raised by the social graph core."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(SocialGraphError):
    kind = "validation"


class NotFoundError(SocialGraphError):
    kind = "not_found"


class ConflictError(SocialGraphError):
    kind = "conflict"
