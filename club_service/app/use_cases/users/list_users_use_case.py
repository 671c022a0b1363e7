from typing import Optional

from club_service.libs.result import Error, Result, Return
from club_service.app.services.unit_of_work import UnitOfWork
from club_service.domain.entities import UserRole

from ..auth.dtos import UserInfo
from ..common import Pagination
from .dtos import UserListResponse


class ListUsersUseCase:
    """Paginated user directory for admins (search on name and email)."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        role: Optional[str] = None,
    ) -> Result[UserListResponse]:
        try:
            user_role = UserRole(role) if role else None
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {role}. Must be one of: ADMIN, CLUB_LEADER, MEMBER",
                )
            )

        async with self.uow:
            users, total = await self.uow.users.list_paginated(
                page, limit, search=search, role=user_role
            )
            return Return.ok(
                UserListResponse(
                    users=[UserInfo.from_entity(user) for user in users],
                    pagination=Pagination.build(page, limit, total),
                )
            )
