"""Planner Board Component.

Kanban-style board with Idea, Tomorrow and Special columns. Cards can be
moved between columns, nudged up and down, prioritised and deleted.
"""

import logging
from typing import List

import streamlit as st

from src.config.dashboard_config import DashboardConfig
from src.dashboard.services.planner_service import (
    PlannerError, PlannerItem, PlannerService, fallback_thumbnail, group_by_stage
)

logger = logging.getLogger(__name__)

PRIORITY_CHOICES = [None] + list(range(DashboardConfig.PRIORITY_MIN, DashboardConfig.PRIORITY_MAX + 1))

PLATFORM_ICONS = {
    'instagram': '📸',
    'youtube': '▶️',
    'tiktok': '🎵',
}


def _swap(service: PlannerService, column: List[PlannerItem], index: int, offset: int):
    """Swap a card with its neighbour and rewrite the column's positions."""
    target = index + offset
    if target < 0 or target >= len(column):
        return
    ids = [item.id for item in column]
    ids[index], ids[target] = ids[target], ids[index]
    service.reorder(column[index].stage, ids)


def _render_card(service: PlannerService, item: PlannerItem, column: List[PlannerItem], index: int):
    stages = list(DashboardConfig.PLANNER_STAGES)
    with st.container(border=True):
        thumbnail = item.thumbnail or fallback_thumbnail(item.link)
        if thumbnail:
            st.image(thumbnail, use_container_width=True)
        icon = PLATFORM_ICONS.get(item.platform, '🔗')
        st.markdown(f"{icon} [{item.title or item.link}]({item.link})")

        priority = st.selectbox(
            "Priority",
            options=PRIORITY_CHOICES,
            index=PRIORITY_CHOICES.index(item.priority) if item.priority in PRIORITY_CHOICES else 0,
            format_func=lambda p: '-' if p is None else str(p),
            key=f"priority_{item.id}",
        )
        if priority != item.priority:
            service.set_priority(item.id, priority)
            st.rerun()

        stage = st.selectbox(
            "Column",
            options=stages,
            index=stages.index(item.stage) if item.stage in stages else 0,
            format_func=lambda s: DashboardConfig.PLANNER_STAGES[s],
            key=f"stage_{item.id}",
        )
        if stage != item.stage:
            service.move_item(item.id, stage, 0)
            st.rerun()

        up, down, delete = st.columns(3)
        if up.button("↑", key=f"up_{item.id}"):
            _swap(service, column, index, -1)
            st.rerun()
        if down.button("↓", key=f"down_{item.id}"):
            _swap(service, column, index, 1)
            st.rerun()
        if delete.button("🗑", key=f"delete_{item.id}"):
            service.delete_item(item.id)
            st.rerun()


def render_planner(service: PlannerService, board: str):
    """Render the add form and the board's columns.

    Args:
        service: PlannerService bound to Supabase
        board: 'senbo' or 'senne'
    """
    with st.form(f"add_{board}", clear_on_submit=True):
        link = st.text_input("Add a link", placeholder="Instagram, YouTube or TikTok URL")
        title = st.text_input("Title (optional)")
        if st.form_submit_button("Add idea"):
            try:
                service.add_item(link, board, thumbnail=fallback_thumbnail(link), title=title or None)
                st.success("Added to Idea")
            except PlannerError as e:
                st.error(str(e))

    items = service.list_items(board)
    columns = group_by_stage(items)
    ui_columns = st.columns(len(DashboardConfig.PLANNER_STAGES))
    for ui_column, (stage, label) in zip(ui_columns, DashboardConfig.PLANNER_STAGES.items()):
        stage_items = columns.get(stage, [])
        with ui_column:
            st.subheader(f"{label} ({len(stage_items)})")
            for index, item in enumerate(stage_items):
                _render_card(service, item, stage_items, index)
