"""Tests for ParticipantRecord model."""
import dataclasses

import pytest

from event_registry.models.participant import (
    DietaryRestriction,
    ParticipantRecord,
    ParticipationType,
    Skillset,
)


@pytest.fixture
def record_data():
    """Dictionary form of a valid record."""
    return {
        "name": "Ann",
        "age": 20,
        "email": "ann@example.com",
        "skillset": "Developer",
        "participation_type": "InPerson",
        "needs_lodging": True,
        "dietary_restriction": "None",
        "registered": True,
    }


class TestParticipantRecord:
    """Tests for record construction and coercion."""

    def test_string_values_coerced_to_enums(self, record_data):
        """Raw strings should become enumeration members."""
        record = ParticipantRecord.from_dict(record_data)

        assert record.skillset is Skillset.DEVELOPER
        assert record.participation_type is ParticipationType.IN_PERSON
        assert record.dietary_restriction is DietaryRestriction.NONE

    def test_enum_values_accepted(self):
        """Enumeration members should pass through unchanged."""
        record = ParticipantRecord(
            name="Bo",
            age=30,
            email="bo@example.com",
            skillset=Skillset.WRITER,
            participation_type=ParticipationType.ONLINE,
            needs_lodging=False,
            dietary_restriction=DietaryRestriction.GLUTEN_FREE,
        )
        assert record.skillset is Skillset.WRITER
        assert record.registered is True

    def test_unknown_skillset_raises_error(self, record_data):
        """Values outside the closed set should raise ValueError."""
        record_data["skillset"] = "Juggler"
        with pytest.raises(ValueError, match="Skillset must be one of"):
            ParticipantRecord.from_dict(record_data)

    def test_unknown_participation_type_raises_error(self, record_data):
        record_data["participation_type"] = "Hybrid"
        with pytest.raises(ValueError, match="Participation type"):
            ParticipantRecord.from_dict(record_data)

    def test_non_boolean_lodging_raises_error(self, record_data):
        record_data["needs_lodging"] = "yes"
        with pytest.raises(ValueError, match="needs_lodging"):
            ParticipantRecord.from_dict(record_data)

    def test_missing_field_raises_error(self, record_data):
        del record_data["email"]
        with pytest.raises(ValueError, match="Missing required participant field: email"):
            ParticipantRecord.from_dict(record_data)

    def test_record_is_immutable(self, record_data):
        """Stored records cannot be changed in place."""
        record = ParticipantRecord.from_dict(record_data)
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.age = 50

    def test_to_dict_uses_enum_values(self, record_data):
        """Serialized form should match the input dictionary."""
        record = ParticipantRecord.from_dict(record_data)
        assert record.to_dict() == record_data
