"""Dashboard UI component showing registration totals."""
from typing import Dict, Mapping

import streamlit as st

from event_registry.models.participant import ParticipationType
from event_registry.services.registry import Registry
from event_registry.ui.html_utils import escape, html_block
from event_registry.ui.labels import (
    DIETARY_LABELS,
    PARTICIPATION_COLORS,
    PARTICIPATION_LABELS,
    SKILLSET_LABELS,
)


def _stat_card_html(label: str, value, accent: str = "#667eea") -> str:
    """產生統計卡片的 HTML。"""
    return html_block(
        f"""
        <div class="stat-card" style="border-top: 4px solid {accent};">
            <div class="stat-card__value">{escape(value)}</div>
            <div class="stat-card__label">{escape(label)}</div>
        </div>
        """
    )


def _capacity_bar_html(total: int, capacity: int) -> str:
    """
    Build the capacity progress bar.

    Args:
        total: Registered participants
        capacity: Registry capacity

    Returns:
        HTML string; the bar turns red once the registry is full
    """
    percentage = (total / capacity) * 100.0 if capacity else 0.0
    color = "#f87171" if total >= capacity else "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"
    status = "已額滿" if total >= capacity else "開放報名中"

    return html_block(
        f"""
        <div class="capacity">
            <div class="capacity__track">
                <div class="capacity__fill" style="width: {percentage:.1f}%; background: {color};"></div>
            </div>
            <div class="capacity__text">{total}/{capacity} 人 · {status}</div>
        </div>
        """
    )


def _breakdown_html(title: str, counts: Mapping, labels: Dict) -> str:
    """Render one category breakdown as a list, every category included."""
    rows = "".join(
        f'<li><span>{escape(labels.get(key, key))}</span><strong>{value}</strong></li>'
        for key, value in counts.items()
    )
    return html_block(
        f"""
        <div class="breakdown">
            <h4>{escape(title)}</h4>
            <ul>{rows}</ul>
        </div>
        """
    )


def _inject_dashboard_styles():
    """注入儀表板專用 CSS。"""
    st.markdown(
        html_block(
            """
            <style>
            .stat-card {
                background: rgba(15, 17, 40, 0.96);
                border-radius: 16px;
                padding: 20px;
                text-align: center;
            }
            .stat-card__value { font-size: 2.2rem; font-weight: 700; color: #f1f5f9; }
            .stat-card__label { color: #94a3b8; }
            .capacity__track {
                background: #1e293b;
                border-radius: 999px;
                height: 12px;
                overflow: hidden;
            }
            .capacity__fill { height: 100%; }
            .capacity__text { margin-top: 8px; color: #cbd5f5; }
            .breakdown ul { list-style: none; padding: 0; }
            .breakdown li {
                display: flex;
                justify-content: space-between;
                padding: 6px 0;
                border-bottom: 1px solid #2d3748;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def render_dashboard(registry: Registry) -> None:
    """Render registration totals and per-category breakdowns."""
    _inject_dashboard_styles()

    stats = registry.statistics()

    st.markdown("## 📊 報名概況")
    st.markdown(_capacity_bar_html(stats["total"], stats["capacity"]), unsafe_allow_html=True)

    cols = st.columns(4, gap="small")
    cards = [
        ("總報名人數", stats["total"], "#667eea"),
        (
            PARTICIPATION_LABELS[ParticipationType.IN_PERSON],
            stats["participation"][ParticipationType.IN_PERSON],
            PARTICIPATION_COLORS[ParticipationType.IN_PERSON],
        ),
        (
            PARTICIPATION_LABELS[ParticipationType.ONLINE],
            stats["participation"][ParticipationType.ONLINE],
            PARTICIPATION_COLORS[ParticipationType.ONLINE],
        ),
        ("需要住宿", stats["needs_lodging"], "#fbbf24"),
    ]
    for col, (label, value, accent) in zip(cols, cards):
        with col:
            st.markdown(_stat_card_html(label, value, accent), unsafe_allow_html=True)

    st.caption(f"最低報名年齡：{stats['minimum_age']} 歲")

    left, right = st.columns(2, gap="large")
    with left:
        st.markdown(
            _breakdown_html("專長分布", stats["skillset"], SKILLSET_LABELS),
            unsafe_allow_html=True,
        )
    with right:
        st.markdown(
            _breakdown_html("飲食需求", stats["dietary"], DIETARY_LABELS),
            unsafe_allow_html=True,
        )
