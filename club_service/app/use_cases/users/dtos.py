"""
User Administration DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from ..auth.dtos import UserInfo
from ..common import Pagination


class UserListResponse(BaseModel):
    """Response for list users use case"""

    users: List[UserInfo]
    pagination: Pagination


class ChangeRoleCommand(BaseModel):
    """Role change; club_id names the club a new CLUB_LEADER takes over"""

    role: str
    club_id: Optional[str] = None


class ChangeRoleResponse(BaseModel):
    """Response for change role use case"""

    message: str
    user: UserInfo


class ToggleStatusResponse(BaseModel):
    """Response for toggle user status use case"""

    message: str
    user: UserInfo
    sessions_revoked: int
