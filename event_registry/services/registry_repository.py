"""Persist and restore registry snapshots as JSON files."""
import logging
import os
import threading
from typing import Optional

from event_registry.models.participant import ParticipantID
from event_registry.services.notification_service import Notifier
from event_registry.services.registry import Registry
from event_registry.services.storage_service import load_json, lock_file, save_json

logger = logging.getLogger(__name__)

# Serializes snapshot-then-write within this process; lock_file covers other processes
_SAVE_LOCK = threading.Lock()


def save_registry(registry: Registry, file_path: str) -> None:
    """
    Write the registry's logical state to ``file_path``.

    The snapshot is taken while the save lock is held, so concurrent savers
    write in the order they snapshot and the newest state lands last.

    Raises:
        IOError: If the file cannot be written
        TimeoutError: If another process holds the file lock too long
    """
    with _SAVE_LOCK, lock_file(file_path):
        save_json(file_path, registry.snapshot(), backup=True)
    logger.debug(f"Saved registry snapshot to {file_path}")


def load_registry(file_path: str, notifier: Optional[Notifier] = None) -> Registry:
    """
    Rebuild a registry from a snapshot file.

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If the snapshot breaks a registry invariant
    """
    registry = Registry.from_snapshot(load_json(file_path), notifier=notifier)
    logger.info(f"Loaded {registry.total()} participants from {file_path}")
    return registry


def load_or_create(
    file_path: str,
    organizer: ParticipantID,
    notifier: Optional[Notifier] = None,
) -> Registry:
    """
    Load the registry stored at ``file_path`` or create a fresh one.

    Args:
        file_path: Snapshot path; empty string means no persistence
        organizer: Organizer for a freshly created registry
        notifier: Notifier shared with the caller

    Returns:
        Registry: the loaded registry, or a new one owned by ``organizer``

    Behavior:
        - A stored registry keeps its own organizer; a mismatch is logged
    """
    if not file_path or not os.path.exists(file_path):
        return Registry.create(organizer, notifier=notifier)

    registry = load_registry(file_path, notifier=notifier)
    if registry.organizer != organizer:
        logger.warning(
            f"Stored registry organizer {registry.organizer!r} differs from "
            f"configured organizer {organizer!r}; keeping stored value"
        )
    return registry
