"""Base class for domain services."""


class Service:
    """Base class for domain services.

    A service owns the rules of one component (invites, friend requests,
    the update bus, the inbox, conversations) and reaches storage only
    through repository ports.
    """

    pass
