"""Per-participant record map and first-registration order."""
import dataclasses
from typing import Dict, List, Tuple

from event_registry.models.participant import ParticipantID, ParticipantRecord
from event_registry.utils.exceptions import CapacityExceeded, NotFound

DEFAULT_CAPACITY = 1000


class RecordStore:
    """
    Owns ``records`` and ``order``.

    Not thread-safe on its own; the registry serializes writers.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError("Capacity must be a positive integer")
        self._capacity = capacity
        self._records: Dict[ParticipantID, ParticipantRecord] = {}
        self._order: List[ParticipantID] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._order)

    def is_full(self) -> bool:
        """Check if no further first-time registrants fit."""
        return len(self._order) >= self._capacity

    def is_registered(self, participant_id: ParticipantID) -> bool:
        record = self._records.get(participant_id)
        return record is not None and record.registered

    def upsert(self, caller: ParticipantID, record: ParticipantRecord) -> bool:
        """
        Insert or wholly replace the caller's record.

        Args:
            caller: Participant identifier
            record: Complete new record; its age must already be validated

        Returns:
            True for a new registration, False for an update

        Raises:
            CapacityExceeded: If caller is new and the store is full

        Behavior:
            - Updates skip the capacity check, even at full capacity
            - No field of a previous record is retained
        """
        is_new = not self.is_registered(caller)
        if is_new and self.is_full():
            raise CapacityExceeded(
                f"Registry is full ({self._capacity} participants)"
            )

        stored = record if record.registered else dataclasses.replace(record, registered=True)
        self._records[caller] = stored
        if is_new:
            self._order.append(caller)
        return is_new

    def get(self, participant_id: ParticipantID) -> ParticipantRecord:
        """
        Return the record for a registered participant.

        Records are frozen, so the returned value cannot alter stored state.

        Raises:
            NotFound: If participant_id never registered
        """
        if not self.is_registered(participant_id):
            raise NotFound(f"Participant not registered: {participant_id!r}")
        return self._records[participant_id]

    def registered_ids(self) -> Tuple[ParticipantID, ...]:
        """Participant IDs in first-registration order."""
        return tuple(self._order)

    def iter_records(self):
        """Yield ``(participant_id, record)`` pairs in first-registration order."""
        for participant_id in self._order:
            yield participant_id, self._records[participant_id]
