"""Form validation utilities applied before calling the registry."""
import re
from typing import Tuple

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_name(name: str) -> Tuple[bool, str]:
    """
    Validate participant name.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "姓名不可為空") if empty
        - (False, "姓名長度不可超過 50 字元") if too long
    """
    if not name or not name.strip():
        return False, "姓名不可為空"
    if len(name) > 50:
        return False, "姓名長度不可超過 50 字元"
    return True, ""


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate contact email.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "Email 不可為空") if empty
        - (False, "Email 格式錯誤") if not shaped like local@domain.tld
    """
    if not email or not email.strip():
        return False, "Email 不可為空"
    if not EMAIL_PATTERN.match(email.strip()):
        return False, "Email 格式錯誤"
    return True, ""


def normalize_participant_id(participant_id: str) -> str:
    """
    Normalize a participant ID typed into a form.

    Behavior:
        - Trims leading/trailing whitespace
        - Converts to lowercase (IDs are usually email addresses)
        - Example: " Ann@Example.com " → "ann@example.com"
    """
    return participant_id.strip().lower()


def validate_participant_id(participant_id: str) -> Tuple[bool, str]:
    """
    Validate participant ID.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "參加者代號不可為空") if empty
        - (False, "參加者代號長度不可超過 100 字元") if too long
    """
    if not participant_id or not participant_id.strip():
        return False, "參加者代號不可為空"
    if len(participant_id.strip()) > 100:
        return False, "參加者代號長度不可超過 100 字元"
    return True, ""
