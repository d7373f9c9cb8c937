"""JSON snapshot files: reading, atomic writing and writer locking."""
import json
import os
import shutil
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl


def load_json(file_path: str, retry_count: int = 3, retry_delay: float = 0.1) -> Dict[str, Any]:
    """
    Read a snapshot file.

    Args:
        file_path: Path to JSON file
        retry_count: Attempts made while the file is not readable (default: 3)
        retry_delay: Seconds between attempts (default: 0.1)

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        PermissionError: If file not readable after retries
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    for attempt in range(retry_count):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except PermissionError:
            if attempt < retry_count - 1:
                time.sleep(retry_delay)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(f"Malformed JSON in {file_path}: {e.msg}", e.doc, e.pos)

    raise PermissionError(f"Cannot read file after {retry_count} attempts: {file_path}")


def _write_temp(dir_path: str, data: Dict[str, Any]) -> str:
    """Serialize ``data`` into a fsynced temp file beside the target; return its path."""
    temp_fd, temp_path = tempfile.mkstemp(dir=dir_path or ".", prefix=".tmp_", suffix=".json")
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
    except Exception:
        os.remove(temp_path)
        raise
    return temp_path


def save_json(file_path: str, data: Dict[str, Any], backup: bool = True) -> None:
    """
    Replace ``file_path`` with ``data`` in one rename.

    Args:
        file_path: Snapshot path; parent directories are created
        data: JSON-compatible dictionary
        backup: Keep the previous contents as ``<file_path>.backup``

    Raises:
        IOError: If serialization, backup or replacement fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    try:
        temp_path = _write_temp(dir_path, data)
    except Exception as e:
        raise IOError(f"Failed to write file {file_path}: {e}")

    try:
        if backup and os.path.exists(file_path):
            shutil.copy2(file_path, f"{file_path}.backup")
        os.replace(temp_path, file_path)
    except OSError as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise IOError(f"Failed to write file {file_path}: {e}")


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Hold an exclusive lock on ``<file_path>.lock`` across processes.

    The sidecar lock file means the snapshot itself need not exist yet and
    is never held open while it is being replaced.

    Usage:
        with lock_file("data/registry.json"):
            save_json("data/registry.json", registry.snapshot())

    Raises:
        TimeoutError: If the lock is not acquired within ``timeout`` seconds
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    lock_fd = open(lock_path, "a+")
    lock_fd.seek(0)
    deadline = time.time() + timeout
    try:
        while True:
            try:
                if sys.platform == "win32":
                    msvcrt.locking(lock_fd.fileno(), msvcrt.LK_NBLCK, 1)
                else:
                    fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except OSError:
                if time.time() > deadline:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)

        try:
            yield
        finally:
            if sys.platform == "win32":
                lock_fd.seek(0)
                msvcrt.locking(lock_fd.fileno(), msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
    finally:
        lock_fd.close()
