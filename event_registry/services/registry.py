"""Participant registry for a capacity-bounded event.

The registry composes four parts:

- AccessControl: organizer identity, gates set_minimum_age
- AgeValidator: eligibility floor and age bounds
- RecordStore: records and first-registration order
- Aggregator: counts derived from the store

Mutating calls hold the exclusive side of a ReadWriteLock for their whole
check-then-act sequence; queries hold the shared side. Notifications are
published after the exclusive lock is released.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from event_registry.models.participant import (
    DietaryRestriction,
    ParticipantID,
    ParticipantRecord,
    ParticipationType,
    Skillset,
)
from event_registry.services.access_control import AccessControl
from event_registry.services.age_validator import (
    ABSOLUTE_MINIMUM_AGE,
    DEFAULT_MINIMUM_AGE,
    MAXIMUM_AGE,
    AgeValidator,
)
from event_registry.services.aggregator import Aggregator
from event_registry.services.notification_service import (
    Notification,
    NotificationKind,
    Notifier,
)
from event_registry.services.record_store import DEFAULT_CAPACITY, RecordStore
from event_registry.utils.exceptions import InvalidAge, RegistryError
from event_registry.utils.locking import ReadWriteLock

logger = logging.getLogger(__name__)

REGISTRATION_MESSAGE = "Registration successful"
UPDATE_MESSAGE = "Registration updated"


class Registry:
    """Admits participants, stores their profiles and answers counts."""

    def __init__(
        self,
        organizer: ParticipantID,
        capacity: int = DEFAULT_CAPACITY,
        minimum_age: int = DEFAULT_MINIMUM_AGE,
        notifier: Optional[Notifier] = None,
    ):
        self._access = AccessControl(organizer)
        self._ages = AgeValidator(minimum_age)
        self._store = RecordStore(capacity)
        self._aggregator = Aggregator(self._store)
        self._lock = ReadWriteLock()
        self.notifier = notifier or Notifier()

    @classmethod
    def create(cls, caller: ParticipantID, notifier: Optional[Notifier] = None) -> "Registry":
        """Create a registry owned by ``caller`` with the default floor and capacity."""
        registry = cls(organizer=caller, notifier=notifier)
        logger.info(
            f"Registry created by {caller} "
            f"(capacity={registry.capacity}, minimum_age={registry.minimum_age})"
        )
        return registry

    # ------------------------------------------------------------------ #
    # Read-only state
    # ------------------------------------------------------------------ #

    @property
    def organizer(self) -> ParticipantID:
        return self._access.organizer

    @property
    def capacity(self) -> int:
        return self._store.capacity

    @property
    def minimum_age(self) -> int:
        with self._lock.read_locked():
            return self._ages.minimum_age

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #

    def set_minimum_age(self, caller: ParticipantID, new_floor: int) -> None:
        """
        Change the eligibility floor.

        Raises:
            Unauthorized: If caller is not the organizer
            InvalidAge: If new_floor < ABSOLUTE_MINIMUM_AGE
        """
        with self._lock.write_locked():
            try:
                self._access.require_organizer(caller)
                self._ages.set_floor(new_floor)
            except RegistryError as e:
                logger.warning(f"set_minimum_age rejected for {caller}: {e}")
                raise
        logger.info(f"Minimum age set to {new_floor} by {caller}")

    def register_or_update(
        self,
        caller: ParticipantID,
        name: str,
        age: int,
        email: str,
        skillset: Skillset,
        participation_type: ParticipationType,
        needs_lodging: bool,
        dietary_restriction: DietaryRestriction,
    ) -> Notification:
        """
        Register the caller, or replace every field of their existing record.

        Args:
            caller: Participant identifier
            name, age, email, skillset, participation_type, needs_lodging,
            dietary_restriction: Complete profile

        Returns:
            The notification published for this call

        Raises:
            InvalidAge: If age is outside [minimum_age, 100)
            CapacityExceeded: If caller is new and the registry is full
            ValueError: If a categorical field is outside its closed set

        Behavior:
            - Failed calls leave state untouched
            - Updates are allowed at full capacity
            - Publishes RegistrationAttempt for a first registration and
              RegistrationUpdate afterwards
        """
        with self._lock.write_locked():
            try:
                self._ages.validate(age)
                record = ParticipantRecord(
                    name=name,
                    age=age,
                    email=email,
                    skillset=skillset,
                    participation_type=participation_type,
                    needs_lodging=needs_lodging,
                    dietary_restriction=dietary_restriction,
                )
                is_new = self._store.upsert(caller, record)
            except RegistryError as e:
                logger.warning(f"Registration rejected for {caller}: {e}")
                raise

        if is_new:
            notification = Notification(
                kind=NotificationKind.REGISTRATION_ATTEMPT,
                caller=caller,
                success=True,
                message=REGISTRATION_MESSAGE,
            )
            logger.info(f"Registered {caller}")
        else:
            notification = Notification(
                kind=NotificationKind.REGISTRATION_UPDATE,
                caller=caller,
                success=True,
                message=UPDATE_MESSAGE,
            )
            logger.info(f"Updated registration for {caller}")

        self.notifier.publish(notification)
        return notification

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def get(self, participant_id: ParticipantID) -> ParticipantRecord:
        """
        Raises:
            NotFound: If participant_id never registered
        """
        with self._lock.read_locked():
            return self._store.get(participant_id)

    def is_registered(self, participant_id: ParticipantID) -> bool:
        with self._lock.read_locked():
            return self._store.is_registered(participant_id)

    def total(self) -> int:
        with self._lock.read_locked():
            return self._aggregator.total()

    def count_by_participation_type(self, participation_type: ParticipationType) -> int:
        with self._lock.read_locked():
            return self._aggregator.count_by_participation_type(participation_type)

    def registered_ids(self) -> Tuple[ParticipantID, ...]:
        with self._lock.read_locked():
            return self._store.registered_ids()

    def statistics(self) -> Dict[str, Any]:
        """
        Aggregate view for dashboards, taken under a single read lock.

        Returns:
            dict with total, capacity, minimum_age, lodging and per-category counts
        """
        with self._lock.read_locked():
            return {
                "total": self._aggregator.total(),
                "capacity": self._store.capacity,
                "minimum_age": self._ages.minimum_age,
                "needs_lodging": self._aggregator.count_needing_lodging(),
                "participation": self._aggregator.participation_breakdown(),
                "skillset": self._aggregator.skillset_breakdown(),
                "dietary": self._aggregator.dietary_breakdown(),
            }

    # ------------------------------------------------------------------ #
    # Snapshots
    # ------------------------------------------------------------------ #

    def snapshot(self) -> Dict[str, Any]:
        """Logical state as a JSON-compatible dictionary."""
        with self._lock.read_locked():
            return {
                "organizer": self._access.organizer,
                "capacity": self._store.capacity,
                "minimum_age": self._ages.minimum_age,
                "order": list(self._store.registered_ids()),
                "records": {
                    participant_id: record.to_dict()
                    for participant_id, record in self._store.iter_records()
                },
            }

    @classmethod
    def from_snapshot(
        cls, data: Dict[str, Any], notifier: Optional[Notifier] = None
    ) -> "Registry":
        """
        Rebuild a registry from ``snapshot()`` output.

        Raises:
            ValueError: If the snapshot is incomplete or breaks an invariant
        """
        if not isinstance(data, dict):
            raise ValueError("Registry snapshot must be a dictionary")

        for field_name in ["organizer", "capacity", "minimum_age", "order", "records"]:
            if field_name not in data:
                raise ValueError(f"Missing required snapshot field: {field_name}")

        order = data["order"]
        records = data["records"]
        if not isinstance(order, list) or not isinstance(records, dict):
            raise ValueError("Snapshot order must be a list and records a dictionary")

        if len(set(order)) != len(order):
            raise ValueError("Snapshot order contains duplicate participant IDs")

        if set(order) != set(records):
            raise ValueError("Snapshot order and records must list the same participants")

        if data["capacity"] != DEFAULT_CAPACITY:
            raise ValueError(
                f"Snapshot capacity must be {DEFAULT_CAPACITY}, got: {data['capacity']!r}"
            )

        try:
            registry = cls(
                organizer=data["organizer"],
                capacity=data["capacity"],
                minimum_age=data["minimum_age"],
                notifier=notifier,
            )
        except InvalidAge as e:
            raise ValueError(
                f"Snapshot minimum_age must be an integer of at least {ABSOLUTE_MINIMUM_AGE}"
            ) from e

        if len(order) > registry.capacity:
            raise ValueError(
                f"Snapshot holds {len(order)} participants, capacity is {registry.capacity}"
            )

        for participant_id in order:
            record = ParticipantRecord.from_dict(records[participant_id])
            if not record.registered:
                raise ValueError(f"Snapshot record not registered: {participant_id}")
            if record.age >= MAXIMUM_AGE:
                raise ValueError(
                    f"Snapshot record age {record.age} for {participant_id} "
                    f"must be below {MAXIMUM_AGE}"
                )
            registry._store.upsert(participant_id, record)

        return registry
