"""
活動報名系統主應用程式
Event Participant Registry
"""
import logging
import streamlit as st

from event_registry.services.notification_service import Notifier, log_notification
from event_registry.services.registry import Registry
from event_registry.services.registry_repository import load_or_create
from event_registry.ui.admin_panel import render_admin_panel
from event_registry.ui.dashboard import render_dashboard
from event_registry.ui.registration_form import render_registration_page
from event_registry.utils.logging_config import setup_logging
from event_registry.utils.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()
setup_logging(settings.log_level)

# Streamlit 頁面配置
st.set_page_config(
    page_title="活動報名系統",
    page_icon="📝",
    layout="wide",
    initial_sidebar_state="collapsed"
)


@st.cache_resource
def get_registry() -> Registry:
    """建立（或載入）整個伺服器共用的報名系統實例。"""
    notifier = Notifier()
    notifier.subscribe(log_notification)
    return load_or_create(settings.data_file, settings.organizer_id, notifier=notifier)


def initialize_session_state():
    """初始化 session state 預設值。"""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "dashboard"

    if "organizer_authenticated" not in st.session_state:
        st.session_state.organizer_authenticated = False


def apply_custom_css():
    """套用自訂 CSS 樣式。"""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
            border: none;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }

        .stTextInput > div > div > input,
        .stNumberInput > div > div > input {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 8px;
            color: #f1f5f9;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """渲染導航選單。"""
    nav_col1, nav_col2, nav_col3 = st.columns(3, gap="small")

    with nav_col1:
        if st.button("🏠 概況", use_container_width=True, key="nav_home"):
            st.session_state.current_page = "dashboard"

    with nav_col2:
        if st.button("📝 報名", use_container_width=True, key="nav_register"):
            st.session_state.current_page = "register"

    with nav_col3:
        if st.button("👤 主辦人", use_container_width=True, key="nav_admin"):
            st.session_state.current_page = "admin"


def render_current_page(registry: Registry):
    """根據當前頁面狀態渲染對應內容。"""
    try:
        if st.session_state.current_page == "dashboard":
            render_dashboard(registry)

        elif st.session_state.current_page == "register":
            render_registration_page(registry, data_file=settings.data_file)

        elif st.session_state.current_page == "admin":
            render_admin_panel(registry, data_file=settings.data_file)

        else:
            st.error(f"未知的頁面：{st.session_state.current_page}")
            if st.button("返回首頁"):
                st.session_state.current_page = "dashboard"
                st.rerun()

    except Exception as e:
        # 錯誤邊界
        logger.exception("Unhandled exception while rendering page")
        st.error("發生錯誤，請稍後再試")

        with st.expander("🔍 錯誤詳情"):
            st.code(str(e))


def main():
    """主應用程式入口。"""
    try:
        initialize_session_state()
        apply_custom_css()

        registry = get_registry()

        render_navigation()
        render_current_page(registry)
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("應用程式發生錯誤，請重新整理頁面")
        st.code(str(e))

        if st.button("🔄 重新整理"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
