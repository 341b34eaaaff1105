"""Marker base for domain services."""


class Service:
    """Holds comment rules that span comments, users and items.

    Services log through logfire and raise domain errors; mapping those
    errors to HTTP statuses is left to the interface layer.
    """
