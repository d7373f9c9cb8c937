"""Organizer identity and privileged-operation gate."""
from event_registry.models.participant import ParticipantID
from event_registry.utils.exceptions import Unauthorized


class AccessControl:
    """Holds the organizer fixed at registry creation."""

    def __init__(self, organizer: ParticipantID):
        self._organizer = organizer

    @property
    def organizer(self) -> ParticipantID:
        return self._organizer

    def require_organizer(self, caller: ParticipantID) -> None:
        """
        Gate a privileged operation.

        Raises:
            Unauthorized: If caller is not the organizer
        """
        if caller != self._organizer:
            raise Unauthorized(f"Only the organizer may perform this operation: {caller!r}")
