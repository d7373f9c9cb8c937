"""User-facing registration actions returning (success, message) tuples."""
import logging
from typing import Any, Dict, Optional, Tuple

from event_registry.services.age_validator import ABSOLUTE_MINIMUM_AGE, MAXIMUM_AGE
from event_registry.services.notification_service import NotificationKind
from event_registry.services.registry import Registry
from event_registry.services.registry_repository import save_registry
from event_registry.utils.exceptions import (
    CapacityExceeded,
    InvalidAge,
    NotFound,
    Unauthorized,
)
from event_registry.utils.validation import (
    normalize_participant_id,
    validate_email,
    validate_name,
    validate_participant_id,
)

logger = logging.getLogger(__name__)

PERSIST_WARNING = "（資料儲存失敗，請通知主辦人）"


def _persist(registry: Registry, data_file: Optional[str]) -> bool:
    """Save a snapshot if persistence is configured; report success."""
    if not data_file:
        return True
    try:
        save_registry(registry, data_file)
        return True
    except IOError as e:
        logger.error(f"Failed to persist registry to {data_file}: {e}")
        return False


def submit_registration(
    registry: Registry,
    participant_id: str,
    form: Dict[str, Any],
    data_file: Optional[str] = None,
) -> Tuple[bool, str]:
    """
    Register a participant, or overwrite their existing registration.

    Args:
        registry: Target registry
        participant_id: Caller identity as typed in the form
        form: Dictionary with name, age, email, skillset, participation_type,
            needs_lodging, dietary_restriction
        data_file: Snapshot path to save after a successful call (optional)

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "報名成功") on first registration
        - (True, "報名資料已更新") on update
        - (False, error_message) on validation or business rule failure

    Behavior:
        - Validates ID, name and email before reaching the registry
        - Every field is replaced on update; nothing is merged
        - A failed save is logged; the registration itself stands
        - The message follows the notification the registry emitted, so
          racing first submissions for one ID report one registration
    """
    is_valid, error_msg = validate_participant_id(participant_id)
    if not is_valid:
        return False, error_msg

    is_valid, error_msg = validate_name(form.get("name", ""))
    if not is_valid:
        return False, error_msg

    is_valid, error_msg = validate_email(form.get("email", ""))
    if not is_valid:
        return False, error_msg

    caller = normalize_participant_id(participant_id)

    try:
        notification = registry.register_or_update(
            caller,
            name=form["name"].strip(),
            age=form.get("age"),
            email=form["email"].strip(),
            skillset=form.get("skillset"),
            participation_type=form.get("participation_type"),
            needs_lodging=bool(form.get("needs_lodging", False)),
            dietary_restriction=form.get("dietary_restriction"),
        )
    except InvalidAge:
        return False, f"年齡不符合報名資格（需介於 {registry.minimum_age} 與 {MAXIMUM_AGE - 1} 歲之間）"
    except CapacityExceeded:
        return False, "報名人數已額滿"
    except ValueError as e:
        logger.warning(f"Rejected registration form for {caller}: {e}")
        return False, "報名資料格式錯誤"
    except Exception as e:
        logger.error(f"Unexpected error during registration: {e}")
        return False, "發生未預期的錯誤"

    if notification.kind is NotificationKind.REGISTRATION_UPDATE:
        message = "報名資料已更新"
    else:
        message = "報名成功"
    if not _persist(registry, data_file):
        message += PERSIST_WARNING
    return True, message


def change_minimum_age(
    registry: Registry,
    caller: str,
    new_floor: int,
    data_file: Optional[str] = None,
) -> Tuple[bool, str]:
    """
    Change the eligibility floor on behalf of ``caller``.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "最低年齡已更新為 N 歲") on success
        - (False, "僅主辦人可變更最低年齡") if caller is not the organizer
        - (False, "最低年齡不可低於 13 歲") if new_floor is too low
    """
    try:
        registry.set_minimum_age(caller, new_floor)
    except Unauthorized:
        return False, "僅主辦人可變更最低年齡"
    except InvalidAge:
        return False, f"最低年齡不可低於 {ABSOLUTE_MINIMUM_AGE} 歲"
    except Exception as e:
        logger.error(f"Unexpected error while changing minimum age: {e}")
        return False, "發生未預期的錯誤"

    message = f"最低年齡已更新為 {new_floor} 歲"
    if not _persist(registry, data_file):
        message += PERSIST_WARNING
    return True, message


def lookup_registration(registry: Registry, participant_id: str) -> Tuple[bool, Any]:
    """
    Find a participant's record.

    Returns:
        Tuple of (found: bool, record or error message)
    """
    is_valid, error_msg = validate_participant_id(participant_id)
    if not is_valid:
        return False, error_msg

    try:
        return True, registry.get(normalize_participant_id(participant_id))
    except NotFound:
        return False, "查無報名紀錄"
