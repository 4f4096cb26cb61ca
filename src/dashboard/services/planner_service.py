"""Service for managing the planner board.

The board is a small Kanban of content links stored in the
``planner_items`` table: one row per link, grouped by ``board`` and
``stage`` and ordered by ``position``.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from src.config.dashboard_config import DashboardConfig
from src.data_processing.content.parsing import extract_video_id
from .supabase import get_supabase_client

logger = logging.getLogger(__name__)


class PlannerError(Exception):
    """Raised for invalid planner operations or failed writes."""
    pass


def detect_platform(url: str) -> Optional[str]:
    """Detect the platform a link belongs to.

    Args:
        url: Link pasted into the planner

    Returns:
        'instagram', 'youtube', 'tiktok' or None
    """
    url = (url or '').lower()
    if 'instagram.com' in url or 'instagr.am' in url:
        return 'instagram'
    if 'youtube.com' in url or 'youtu.be' in url:
        return 'youtube'
    if 'tiktok.com' in url:
        return 'tiktok'
    return None


def fallback_thumbnail(url: str) -> Optional[str]:
    """Static YouTube thumbnail for a link, without calling oEmbed."""
    if detect_platform(url) != 'youtube':
        return None
    video_id = extract_video_id(url)
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg" if video_id else None


@dataclass
class PlannerItem:
    """A planner card."""
    id: str
    link: str
    stage: str
    position: int
    board: str = 'senbo'
    created_at: Optional[str] = None
    thumbnail: Optional[str] = None
    title: Optional[str] = None
    priority: Optional[int] = None

    @property
    def platform(self) -> Optional[str]:
        return detect_platform(self.link)

    @classmethod
    def from_record(cls, record: dict) -> 'PlannerItem':
        return cls(
            id=record['id'],
            link=record['link'],
            stage=record.get('stage', 'idea'),
            position=record.get('position', 0),
            board=record.get('board', 'senbo'),
            created_at=record.get('created_at'),
            thumbnail=record.get('thumbnail'),
            title=record.get('title'),
            priority=record.get('priority'),
        )


def _validate_board(board: str) -> None:
    if board not in DashboardConfig.PLANNER_BOARDS:
        raise PlannerError(f"Unknown board: {board}")


def _validate_stage(stage: str) -> None:
    if stage not in DashboardConfig.PLANNER_STAGES:
        raise PlannerError(f"Unknown stage: {stage}")


class PlannerService:
    """CRUD operations on the planner board."""

    def __init__(self, client=None):
        self.client = client or get_supabase_client()

    @property
    def table(self):
        return self.client.table(DashboardConfig.PLANNER_TABLE)

    def list_items(self, board: str) -> List[PlannerItem]:
        """Get every item on a board ordered by position.

        Args:
            board: 'senbo' or 'senne'

        Returns:
            List of planner items
        """
        _validate_board(board)
        result = self.table.select('*').eq('board', board).order('position').execute()
        return [PlannerItem.from_record(r) for r in result.data]

    def add_item(self, link: str, board: str, thumbnail: Optional[str] = None,
                 title: Optional[str] = None) -> PlannerItem:
        """Add a link to the end of the board's Idea column.

        Args:
            link: Instagram, YouTube or TikTok URL
            board: Board to add to
            thumbnail: Optional thumbnail URL
            title: Optional title

        Returns:
            The created planner item
        """
        link = (link or '').strip()
        _validate_board(board)
        if not link:
            raise PlannerError("Link is empty")
        if detect_platform(link) is None:
            raise PlannerError("Please enter a valid Instagram, YouTube, or TikTok link")

        ideas = [item for item in self.list_items(board) if item.stage == 'idea']
        max_position = max([0] + [item.position for item in ideas])

        result = self.table.insert({
            'link': link,
            'stage': 'idea',
            'position': max_position + 1,
            'thumbnail': thumbnail,
            'title': title,
            'board': board,
        }).execute()
        if not result.data:
            raise PlannerError("Failed to add item")

        logger.info(f"Added planner item to {board}: {link}")
        return PlannerItem.from_record(result.data[0])

    def move_item(self, item_id: str, stage: str, position: int) -> PlannerItem:
        """Move an item to a stage and position.

        Args:
            item_id: ID of the item to move
            stage: Target stage
            position: Target position within the stage

        Returns:
            The updated planner item
        """
        _validate_stage(stage)
        result = self.table.update({
            'stage': stage,
            'position': position
        }).eq('id', item_id).execute()
        if not result.data:
            raise PlannerError(f"Planner item not found: {item_id}")
        return PlannerItem.from_record(result.data[0])

    def reorder(self, stage: str, ordered_ids: List[str]) -> None:
        """Rewrite positions in a stage to follow ``ordered_ids``.

        Args:
            stage: Stage being reordered
            ordered_ids: Item ids in their new order
        """
        _validate_stage(stage)
        for position, item_id in enumerate(ordered_ids):
            self.table.update({
                'stage': stage,
                'position': position
            }).eq('id', item_id).execute()

    def set_priority(self, item_id: str, priority: Optional[int]) -> PlannerItem:
        """Set or clear an item's priority.

        Args:
            item_id: ID of the item
            priority: 1-10, or None to clear

        Returns:
            The updated planner item
        """
        if priority is not None and not (DashboardConfig.PRIORITY_MIN <= priority <= DashboardConfig.PRIORITY_MAX):
            raise PlannerError(
                f"Priority must be between {DashboardConfig.PRIORITY_MIN} and {DashboardConfig.PRIORITY_MAX}"
            )
        result = self.table.update({'priority': priority}).eq('id', item_id).execute()
        if not result.data:
            raise PlannerError(f"Planner item not found: {item_id}")
        return PlannerItem.from_record(result.data[0])

    def delete_item(self, item_id: str) -> None:
        """Delete an item.

        Args:
            item_id: ID of the item to delete
        """
        self.table.delete().eq('id', item_id).execute()
        logger.info(f"Deleted planner item {item_id}")


def group_by_stage(items: List[PlannerItem]) -> dict:
    """Group items into the board's columns, each ordered by position."""
    columns = {stage: [] for stage in DashboardConfig.PLANNER_STAGES}
    for item in sorted(items, key=lambda i: i.position):
        columns.setdefault(item.stage, []).append(item)
    return columns
