"""Unit tests for AccessControl."""
import pytest

from event_registry.services.access_control import AccessControl
from event_registry.utils.exceptions import Unauthorized


class TestAccessControl:
    """Test organizer gating."""

    def test_organizer_passes(self):
        access = AccessControl("organizer")
        access.require_organizer("organizer")

    def test_other_caller_rejected(self):
        access = AccessControl("organizer")
        with pytest.raises(Unauthorized):
            access.require_organizer("mallory")

    def test_organizer_is_read_only(self):
        """Organizer cannot be reassigned after creation."""
        access = AccessControl("organizer")
        with pytest.raises(AttributeError):
            access.organizer = "mallory"
        assert access.organizer == "organizer"
