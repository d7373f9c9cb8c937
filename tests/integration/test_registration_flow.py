"""Integration tests for the registration flow with persistence."""
import json
import threading
import time
from unittest.mock import patch

import pytest

from event_registry.models.participant import ParticipationType
from event_registry.services import registry_repository
from event_registry.services.notification_service import NotificationKind, Notifier
from event_registry.services.registration_service import (
    change_minimum_age,
    lookup_registration,
    submit_registration,
)
from event_registry.services.registry_repository import load_or_create


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "data" / "registry.json")


def form(**overrides):
    data = {
        "name": "Ann",
        "age": 20,
        "email": "ann@example.com",
        "skillset": "Developer",
        "participation_type": "InPerson",
        "needs_lodging": True,
        "dietary_restriction": "None",
    }
    data.update(overrides)
    return data


class TestRegistrationFlow:
    """End-to-end flows across services, registry and storage."""

    def test_register_update_and_reload(self, data_file):
        received = []
        notifier = Notifier()
        notifier.subscribe(received.append)
        registry = load_or_create(data_file, "O", notifier=notifier)

        # Step 1: 首次報名
        assert submit_registration(registry, "a@example.com", form(), data_file=data_file) == (True, "報名成功")

        # Step 2: 以相同代號更新，改為線上參加
        success, message = submit_registration(
            registry, "a@example.com", form(participation_type="Online"), data_file=data_file
        )
        assert (success, message) == (True, "報名資料已更新")

        # Step 3: 年齡不足者被拒
        success, _ = submit_registration(registry, "b@example.com", form(age=16), data_file=data_file)
        assert success is False

        assert [n.kind for n in received] == [
            NotificationKind.REGISTRATION_ATTEMPT,
            NotificationKind.REGISTRATION_UPDATE,
        ]

        # Step 4: 重新載入，資料保持一致
        reloaded = load_or_create(data_file, "O")
        assert reloaded.total() == 1
        assert reloaded.count_by_participation_type(ParticipationType.ONLINE) == 1
        assert reloaded.count_by_participation_type(ParticipationType.IN_PERSON) == 0

    def test_floor_change_persists_and_admits_younger_participants(self, data_file):
        registry = load_or_create(data_file, "O")

        assert change_minimum_age(registry, "O", 15, data_file=data_file)[0] is True
        assert submit_registration(registry, "teen@example.com", form(age=15), data_file=data_file)[0] is True

        saved = json.loads(open(data_file, encoding="utf-8").read())
        assert saved["minimum_age"] == 15

        reloaded = load_or_create(data_file, "O")
        found, record = lookup_registration(reloaded, "teen@example.com")
        assert found is True
        assert record.age == 15

    def test_backup_written_on_second_save(self, data_file):
        registry = load_or_create(data_file, "O")
        submit_registration(registry, "a@example.com", form(), data_file=data_file)
        submit_registration(registry, "b@example.com", form(), data_file=data_file)

        backup = json.loads(open(f"{data_file}.backup", encoding="utf-8").read())
        assert backup["order"] == ["a@example.com"]

    def test_slow_save_does_not_overwrite_newer_state(self, data_file):
        registry = load_or_create(data_file, "O")
        real_save = registry_repository.save_json
        started = threading.Event()
        calls = []

        def slow_save(file_path, data, backup=True):
            calls.append(list(data["order"]))
            if len(calls) == 1:
                started.set()
                time.sleep(0.3)
            real_save(file_path, data, backup=backup)

        results = {}

        def submit_first():
            results["a"] = submit_registration(registry, "a@example.com", form(), data_file=data_file)

        with patch("event_registry.services.registry_repository.save_json", side_effect=slow_save):
            worker = threading.Thread(target=submit_first)
            worker.start()
            assert started.wait(timeout=5)
            results["b"] = submit_registration(
                registry, "b@example.com", form(name="Bob"), data_file=data_file
            )
            worker.join(timeout=5)

        assert results == {"a": (True, "報名成功"), "b": (True, "報名成功")}
        assert calls == [["a@example.com"], ["a@example.com", "b@example.com"]]

        saved = json.loads(open(data_file, encoding="utf-8").read())
        assert saved["order"] == ["a@example.com", "b@example.com"]
        assert load_or_create(data_file, "O").registered_ids() == ("a@example.com", "b@example.com")
