"""Organizer panel UI component."""
import logging
import traceback

import streamlit as st

from event_registry.services.age_validator import ABSOLUTE_MINIMUM_AGE, MAXIMUM_AGE
from event_registry.services.organizer_service import (
    current_organizer_id,
    is_organizer_authenticated,
    login_organizer,
    logout_organizer,
)
from event_registry.services.registration_service import change_minimum_age
from event_registry.services.registry import Registry
from event_registry.ui.registration_form import record_summary

logger = logging.getLogger(__name__)


def _show_admin_exception(error: Exception, context: str) -> None:
    """Display error details in UI and log full traceback."""
    logger.exception("Organizer panel error during %s", context)

    st.error(f"❌ {context}失敗：{error}")
    with st.expander("🔍 錯誤詳情"):
        st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)))


def _render_login_form() -> None:
    """Render organizer sign-in form."""
    st.markdown("## 🔐 主辦人登入")
    with st.form("organizer_login"):
        username = st.text_input("主辦人代號")
        password = st.text_input("密碼", type="password")
        submitted = st.form_submit_button("登入", type="primary")

    if submitted:
        success, message = login_organizer(username, password)
        if success:
            st.success(message)
            st.rerun()
        else:
            st.error(message)


def _render_minimum_age_section(registry: Registry, data_file: str) -> None:
    st.markdown("### 🎂 最低報名年齡")
    st.caption(f"目前：{registry.minimum_age} 歲（不可低於 {ABSOLUTE_MINIMUM_AGE} 歲）")

    new_floor = st.number_input(
        "新的最低年齡",
        min_value=0,
        max_value=MAXIMUM_AGE - 1,
        value=registry.minimum_age,
        step=1,
        key="organizer_new_floor",
    )
    if st.button("更新最低年齡", type="primary", key="organizer_update_floor"):
        success, message = change_minimum_age(
            registry, current_organizer_id(), int(new_floor), data_file=data_file
        )
        if success:
            st.success(message)
        else:
            st.error(message)


def _render_participant_table(registry: Registry) -> None:
    st.markdown("### 👥 報名名單")
    participant_ids = registry.registered_ids()
    if not participant_ids:
        st.info("目前尚無人報名")
        return

    rows = []
    for index, participant_id in enumerate(participant_ids, start=1):
        row = {"#": index, "參加者代號": participant_id}
        row.update(record_summary(registry.get(participant_id)))
        rows.append(row)
    st.dataframe(rows, use_container_width=True, hide_index=True)


def render_admin_panel(registry: Registry, data_file: str = "") -> None:
    """Render the organizer panel, or the sign-in form when signed out."""
    if not is_organizer_authenticated():
        _render_login_form()
        return

    header_col, logout_col = st.columns([4, 1])
    with header_col:
        st.markdown(f"## 🛠️ 主辦人面板 · {current_organizer_id()}")
    with logout_col:
        if st.button("登出", use_container_width=True, key="organizer_logout"):
            logout_organizer()
            st.rerun()

    try:
        _render_minimum_age_section(registry, data_file)
        st.divider()
        _render_participant_table(registry)
    except Exception as error:
        _show_admin_exception(error, "載入主辦人面板")
