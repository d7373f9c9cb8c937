"""Unit tests for storage_service."""
import json
import os
import threading

import pytest

from event_registry.services.storage_service import load_json, lock_file, save_json


class TestLoadJson:
    """Test load_json function."""

    def test_load_valid_json(self, tmp_path):
        file_path = tmp_path / "registry.json"
        file_path.write_text(json.dumps({"organizer": "O", "capacity": 1000}), encoding="utf-8")

        data = load_json(str(file_path))

        assert data == {"organizer": "O", "capacity": 1000}

    def test_load_json_with_utf8(self, tmp_path):
        """Test loading JSON with UTF-8 Chinese characters."""
        file_path = tmp_path / "chinese.json"
        file_path.write_text(json.dumps({"name": "張三"}, ensure_ascii=False), encoding="utf-8")

        assert load_json(str(file_path))["name"] == "張三"

    def test_load_nonexistent_file_raises_error(self):
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_json("/nonexistent/path/registry.json")

    def test_load_malformed_json_raises_error(self, tmp_path):
        file_path = tmp_path / "malformed.json"
        file_path.write_text("{invalid json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError, match="Malformed JSON"):
            load_json(str(file_path))


class TestSaveJson:
    """Test save_json function."""

    def test_save_creates_directory(self, tmp_path):
        file_path = tmp_path / "data" / "registry.json"

        save_json(str(file_path), {"order": []}, backup=False)

        assert json.loads(file_path.read_text(encoding="utf-8")) == {"order": []}

    def test_save_keeps_utf8_readable(self, tmp_path):
        file_path = tmp_path / "registry.json"

        save_json(str(file_path), {"name": "張三"}, backup=False)

        assert "張三" in file_path.read_text(encoding="utf-8")

    def test_save_with_backup(self, tmp_path):
        file_path = tmp_path / "registry.json"
        save_json(str(file_path), {"version": 1}, backup=False)

        save_json(str(file_path), {"version": 2}, backup=True)

        backup = json.loads((tmp_path / "registry.json.backup").read_text(encoding="utf-8"))
        assert backup == {"version": 1}
        assert load_json(str(file_path)) == {"version": 2}

    def test_save_leaves_no_temp_files(self, tmp_path):
        file_path = tmp_path / "registry.json"

        save_json(str(file_path), {"version": 1}, backup=False)

        assert [name for name in os.listdir(tmp_path) if name.startswith(".tmp_")] == []

    def test_unserializable_data_raises_ioerror(self, tmp_path):
        file_path = tmp_path / "registry.json"

        with pytest.raises(IOError, match="Failed to write file"):
            save_json(str(file_path), {"bad": object()}, backup=False)

        assert not file_path.exists()
        assert [name for name in os.listdir(tmp_path) if name.startswith(".tmp_")] == []


class TestLockFile:
    """Test lock_file context manager."""

    def test_creates_lock_file_beside_target(self, tmp_path):
        file_path = tmp_path / "data" / "registry.json"

        with lock_file(str(file_path)):
            assert (tmp_path / "data" / "registry.json.lock").exists()

    def test_second_holder_times_out(self, tmp_path):
        file_path = str(tmp_path / "registry.json")
        errors = []

        def contend():
            try:
                with lock_file(file_path, timeout=0.1):
                    pass
            except TimeoutError as e:
                errors.append(e)

        with lock_file(file_path):
            worker = threading.Thread(target=contend)
            worker.start()
            worker.join(timeout=5)

        assert len(errors) == 1
        assert "Could not acquire lock" in str(errors[0])

    def test_lock_released_after_block(self, tmp_path):
        file_path = str(tmp_path / "registry.json")

        with lock_file(file_path):
            save_json(file_path, {"version": 1}, backup=False)

        with lock_file(file_path, timeout=0.1):
            assert load_json(file_path) == {"version": 1}
