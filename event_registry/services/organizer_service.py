"""Organizer sign-in and session state management."""
import streamlit as st
from typing import Tuple

from event_registry.utils.settings import get_settings


def authenticate_organizer(username: str, password: str) -> bool:
    """
    Authenticate organizer credentials.

    Args:
        username: Organizer ID
        password: Organizer password

    Returns:
        True if credentials valid, False otherwise

    Behavior:
        - Compares with REGISTRY_ORGANIZER_ID / ORGANIZER_PASSWORD
        - Sign-in is disabled while ORGANIZER_PASSWORD is empty
    """
    settings = get_settings()

    if not settings.organizer_password:
        return False

    return username == settings.organizer_id and password == settings.organizer_password


def is_organizer_authenticated() -> bool:
    """
    Check if the organizer is signed in for the current browser session.

    Returns:
        True if st.session_state['organizer_authenticated'] is True
    """
    return st.session_state.get("organizer_authenticated", False)


def current_organizer_id() -> str:
    """Organizer ID stored at sign-in, or empty string."""
    return st.session_state.get("organizer_id", "")


def login_organizer(username: str, password: str) -> Tuple[bool, str]:
    """
    Sign in as organizer.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "登入成功") on success
        - (False, "帳號或密碼錯誤") on failure
    """
    if authenticate_organizer(username, password):
        st.session_state["organizer_authenticated"] = True
        st.session_state["organizer_id"] = username
        return True, "登入成功"
    return False, "帳號或密碼錯誤"


def logout_organizer() -> None:
    """Clear organizer sign-in state."""
    for key in ("organizer_authenticated", "organizer_id"):
        if key in st.session_state:
            del st.session_state[key]
