"""Registration form and lookup UI."""
import streamlit as st

from event_registry.models.participant import (
    DietaryRestriction,
    ParticipantRecord,
    ParticipationType,
    Skillset,
)
from event_registry.services.age_validator import MAXIMUM_AGE
from event_registry.services.registration_service import (
    lookup_registration,
    submit_registration,
)
from event_registry.services.registry import Registry
from event_registry.ui.labels import DIETARY_LABELS, PARTICIPATION_LABELS, SKILLSET_LABELS

REG_FEEDBACK = "registration_feedback"


def record_summary(record: ParticipantRecord) -> dict:
    """Display-ready mapping of a participant record."""
    return {
        "姓名": record.name,
        "年齡": record.age,
        "Email": record.email,
        "專長": SKILLSET_LABELS[record.skillset],
        "參加方式": PARTICIPATION_LABELS[record.participation_type],
        "需要住宿": "是" if record.needs_lodging else "否",
        "飲食需求": DIETARY_LABELS[record.dietary_restriction],
    }


def _render_feedback() -> None:
    feedback = st.session_state.pop(REG_FEEDBACK, None)
    if not feedback:
        return
    if feedback["type"] == "success":
        st.success(feedback["message"])
    else:
        st.error(feedback["message"])


def render_registration_page(registry: Registry, data_file: str = "") -> None:
    """
    Render the registration form.

    Submitting again with the same participant ID replaces every field of
    the earlier registration.
    """
    st.markdown("## 📝 活動報名")
    st.caption(
        f"報名資格：{registry.minimum_age} 至 {MAXIMUM_AGE - 1} 歲 · "
        f"已報名 {registry.total()}/{registry.capacity} 人"
    )
    st.info("以相同的參加者代號再次送出，將以新資料完整覆蓋先前的報名內容。")

    _render_feedback()

    with st.form("registration_form", clear_on_submit=False):
        participant_id = st.text_input(
            "參加者代號",
            placeholder="建議使用 Email",
            max_chars=100,
        )
        name = st.text_input("姓名", placeholder="請輸入您的姓名（1-50字元）", max_chars=50)
        age = st.number_input("年齡", min_value=0, max_value=150, value=registry.minimum_age, step=1)
        email = st.text_input("Email", placeholder="name@example.com")

        skillset = st.selectbox(
            "專長",
            options=list(Skillset),
            format_func=lambda s: SKILLSET_LABELS[s],
        )
        participation_type = st.radio(
            "參加方式",
            options=list(ParticipationType),
            format_func=lambda p: PARTICIPATION_LABELS[p],
            horizontal=True,
        )
        needs_lodging = st.checkbox("需要住宿")
        dietary_restriction = st.selectbox(
            "飲食需求",
            options=list(DietaryRestriction),
            format_func=lambda d: DIETARY_LABELS[d],
        )

        submitted = st.form_submit_button("送出報名", type="primary", use_container_width=True)

    if submitted:
        success, message = submit_registration(
            registry,
            participant_id,
            {
                "name": name,
                "age": int(age),
                "email": email,
                "skillset": skillset,
                "participation_type": participation_type,
                "needs_lodging": needs_lodging,
                "dietary_restriction": dietary_restriction,
            },
            data_file=data_file,
        )
        if success:
            st.toast(f"🎉 {message}")
            st.session_state[REG_FEEDBACK] = {"type": "success", "message": f"✅ {message}"}
            st.rerun()
        else:
            st.error(f"❌ {message}")

    st.divider()
    render_lookup(registry)


def render_lookup(registry: Registry) -> None:
    """Render the participant lookup section."""
    st.markdown("### 🔍 查詢報名資料")
    lookup_id = st.text_input("參加者代號", key="lookup_participant_id")
    if st.button("查詢", key="lookup_submit"):
        found, result = lookup_registration(registry, lookup_id)
        if found:
            st.table([record_summary(result)])
        else:
            st.warning(result)
