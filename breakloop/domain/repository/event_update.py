"""Event update repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from breakloop.domain.model.event_update import EventUpdate


class EventUpdateRepository(ABC):
    """Repository for the append-only event update log.

    Entries are never removed; the only in-place change is flipping
    ``resolved`` to True.
    """

    @abstractmethod
    async def find_all(self) -> list[EventUpdate]:
        """Return the full log in append order."""
        pass

    @abstractmethod
    async def append(self, update: EventUpdate) -> list[EventUpdate]:
        """Append an update.

        Returns:
            The full log after the append
        """
        pass

    @abstractmethod
    async def resolve_matching(self, match: Callable[[EventUpdate], bool]) -> int:
        """Mark every unresolved update accepted by ``match`` as resolved.

        Returns:
            Number of updates newly resolved
        """
        pass
