from typing import List, Optional

from pydantic import BaseModel

from ..auth.dtos import UserInfo
from ..common import Pagination


class UserCounts(BaseModel):
    total: int


class ClubCounts(BaseModel):
    total: int
    active: int
    inactive: int
    suspended: int


class EventCounts(BaseModel):
    total: int
    upcoming: int


class MembershipCounts(BaseModel):
    approved: int
    pending: int
    rejected: int


class DashboardResponse(BaseModel):
    """Platform overview for the admin dashboard"""

    users: UserCounts
    clubs: ClubCounts
    memberships: MembershipCounts
    events: EventCounts
    recent_users: List[UserInfo]


class ActivityItem(BaseModel):
    """One notification in the platform activity log"""

    id: str
    user_id: str
    user_name: Optional[str] = None
    title: str
    message: str
    type: str
    link: Optional[str] = None
    is_read: bool
    created_at: str


class ActivityLogResponse(BaseModel):
    """Response for activity log use case"""

    activity: List[ActivityItem]
    pagination: Pagination
