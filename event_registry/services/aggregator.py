"""Derived counts over the record store.

Every count is recomputed by scanning the store; with capacity bounded at a
thousand participants this stays cheap and cannot drift from the records.
"""
from typing import Dict

from event_registry.models.participant import (
    DietaryRestriction,
    ParticipationType,
    Skillset,
)
from event_registry.services.record_store import RecordStore


class Aggregator:
    """Read-only counting over a RecordStore."""

    def __init__(self, store: RecordStore):
        self._store = store

    def total(self) -> int:
        return len(self._store)

    def count_by_participation_type(self, participation_type: ParticipationType) -> int:
        """
        Count registered participants attending a given way.

        Raises:
            ValueError: If participation_type is not a ParticipationType value
        """
        target = ParticipationType(participation_type)
        return sum(
            1 for _, record in self._store.iter_records()
            if record.participation_type is target
        )

    def participation_breakdown(self) -> Dict[ParticipationType, int]:
        """Counts for every participation type, zero included."""
        counts = {participation_type: 0 for participation_type in ParticipationType}
        for _, record in self._store.iter_records():
            counts[record.participation_type] += 1
        return counts

    def count_by_skillset(self, skillset: Skillset) -> int:
        target = Skillset(skillset)
        return sum(1 for _, record in self._store.iter_records() if record.skillset is target)

    def skillset_breakdown(self) -> Dict[Skillset, int]:
        counts = {skillset: 0 for skillset in Skillset}
        for _, record in self._store.iter_records():
            counts[record.skillset] += 1
        return counts

    def dietary_breakdown(self) -> Dict[DietaryRestriction, int]:
        counts = {restriction: 0 for restriction in DietaryRestriction}
        for _, record in self._store.iter_records():
            counts[record.dietary_restriction] += 1
        return counts

    def count_needing_lodging(self) -> int:
        return sum(1 for _, record in self._store.iter_records() if record.needs_lodging)
