"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Request carries no valid credentials."""

    pass


class ForbiddenError(InterfaceError):
    """Authenticated caller tried to act on behalf of another user."""

    pass
