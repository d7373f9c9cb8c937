"""Participant data model for event registration."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

# Opaque caller identity; compared by equality only.
ParticipantID = str


class Skillset(str, Enum):
    """Primary skill a participant brings to the event."""

    DEVELOPER = "Developer"
    DESIGNER = "Designer"
    WRITER = "Writer"
    PRESENTER = "Presenter"


class ParticipationType(str, Enum):
    """How the participant attends."""

    IN_PERSON = "InPerson"
    ONLINE = "Online"


class DietaryRestriction(str, Enum):
    """Dietary restriction declared at registration."""

    NONE = "None"
    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    GLUTEN_FREE = "GlutenFree"
    NUT_FREE = "NutFree"
    DAIRY_FREE = "DairyFree"
    OTHER = "Other"


def _coerce(enum_cls, value, field_name: str):
    """Convert a raw value into a member of ``enum_cls``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = [member.value for member in enum_cls]
        raise ValueError(f"{field_name} must be one of {allowed}, got: {value!r}") from e


@dataclass(frozen=True)
class ParticipantRecord:
    """Profile data stored for one registered participant.

    Records are immutable; an update replaces the whole record.
    """

    name: str
    age: int
    email: str
    skillset: Skillset
    participation_type: ParticipationType
    needs_lodging: bool
    dietary_restriction: DietaryRestriction
    registered: bool = True

    def __post_init__(self):
        """Normalize categorical fields into their enumerations."""
        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "skillset", _coerce(Skillset, self.skillset, "Skillset"))
        object.__setattr__(
            self,
            "participation_type",
            _coerce(ParticipationType, self.participation_type, "Participation type"),
        )
        object.__setattr__(
            self,
            "dietary_restriction",
            _coerce(DietaryRestriction, self.dietary_restriction, "Dietary restriction"),
        )

        if not isinstance(self.age, int) or isinstance(self.age, bool) or self.age < 0:
            raise ValueError(f"Age must be a non-negative integer, got: {self.age!r}")

        if not isinstance(self.needs_lodging, bool):
            raise ValueError("needs_lodging must be a boolean")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "name": self.name,
            "age": self.age,
            "email": self.email,
            "skillset": self.skillset.value,
            "participation_type": self.participation_type.value,
            "needs_lodging": self.needs_lodging,
            "dietary_restriction": self.dietary_restriction.value,
            "registered": self.registered,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParticipantRecord":
        """
        Build a record from its dictionary form.

        Raises:
            ValueError: If a required field is missing or a value is invalid
        """
        if not isinstance(data, dict):
            raise ValueError("Participant data must be a dictionary")

        required_fields = [
            "name", "age", "email", "skillset", "participation_type",
            "needs_lodging", "dietary_restriction"
        ]
        for field_name in required_fields:
            if field_name not in data:
                raise ValueError(f"Missing required participant field: {field_name}")

        return cls(
            name=data["name"],
            age=data["age"],
            email=data["email"],
            skillset=data["skillset"],
            participation_type=data["participation_type"],
            needs_lodging=data["needs_lodging"],
            dietary_restriction=data["dietary_restriction"],
            registered=data.get("registered", True),
        )
