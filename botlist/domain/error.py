"""Domain layer errors."""

from datetime import datetime


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an actor lacks permission for a mutation."""

    def __init__(self, action: str, resource_id: str, user_id: str):
        self.action = action
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource_id}"
        )


class CooldownActiveError(DomainError):
    """Raised when a user votes again before the cooldown window elapsed.

    ``next_eligible_at`` is the earliest instant the vote will be accepted.
    """

    def __init__(self, bot_id: str, user_id: str, next_eligible_at: datetime):
        self.bot_id = bot_id
        self.user_id = user_id
        self.next_eligible_at = next_eligible_at
        super().__init__(
            f"User {user_id} must wait until {next_eligible_at.isoformat()} "
            f"to vote for bot {bot_id} again"
        )


class StoreError(DomainError):
    """Raised by repository implementations when the backing store fails."""

    pass


class InternalError(DomainError):
    """Raised when an operation fails for reasons outside the caller's control."""

    pass
