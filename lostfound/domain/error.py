"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        return f"Not authorized to {self.action} this {self.resource}"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        return f"{self.resource} not found"
