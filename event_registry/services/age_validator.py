"""Admission eligibility rule based on participant age."""
from event_registry.utils.exceptions import InvalidAge

ABSOLUTE_MINIMUM_AGE = 13
DEFAULT_MINIMUM_AGE = 18
# Exclusive upper bound, not configurable
MAXIMUM_AGE = 100


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AgeValidator:
    """Enforces ``minimum_age <= age < MAXIMUM_AGE``."""

    def __init__(self, minimum_age: int = DEFAULT_MINIMUM_AGE):
        self._minimum_age = DEFAULT_MINIMUM_AGE
        self.set_floor(minimum_age)

    @property
    def minimum_age(self) -> int:
        return self._minimum_age

    def set_floor(self, new_floor: int) -> None:
        """
        Replace the eligibility floor.

        Raises:
            InvalidAge: If new_floor is not an integer or is below ABSOLUTE_MINIMUM_AGE
        """
        if not _is_int(new_floor):
            raise InvalidAge(f"Minimum age must be an integer, got: {new_floor!r}")
        if new_floor < ABSOLUTE_MINIMUM_AGE:
            raise InvalidAge(
                f"Minimum age ({new_floor}) cannot be below {ABSOLUTE_MINIMUM_AGE}"
            )
        self._minimum_age = new_floor

    def validate(self, age: int) -> None:
        """
        Check an applicant's age against the current floor.

        Raises:
            InvalidAge: Unless minimum_age <= age < MAXIMUM_AGE
        """
        if not _is_int(age):
            raise InvalidAge(f"Age must be an integer, got: {age!r}")
        if age < self._minimum_age or age >= MAXIMUM_AGE:
            raise InvalidAge(
                f"Age {age} outside permitted range "
                f"[{self._minimum_age}, {MAXIMUM_AGE})"
            )
