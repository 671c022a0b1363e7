"""
Authorization Guard

Single place where role and club ownership capabilities are decided.
Use cases look up the target entity first (NotFound) and only then ask
the guard (Forbidden), so error precedence is the same everywhere.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from club_service.libs.result import Error
from club_service.domain.entities import Club, UserRole


class Actor(BaseModel):
    """Authenticated identity attached to a request"""

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: UserRole
    club_id: Optional[UUID] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin


class AuthorizationGuard:
    """
    Capability checks.

    Tiers:
    - ADMIN bypasses every ownership check
    - CLUB_LEADER may manage only the club matching their club affiliation
    - MEMBER has no elevated capability

    Each check returns None when allowed, or a FORBIDDEN Error.
    """

    @staticmethod
    def require_role(actor: Actor, *roles: UserRole) -> Optional[Error]:
        if actor.role not in roles:
            return Error(
                "FORBIDDEN", "You do not have permission to perform this action"
            )
        return None

    @staticmethod
    def is_club_manager(actor: Actor, club: Club) -> bool:
        if actor.role == UserRole.admin:
            return True
        return actor.role == UserRole.club_leader and actor.club_id == club.id

    @classmethod
    def require_club_manager(cls, actor: Actor, club: Club) -> Optional[Error]:
        if cls.is_club_manager(actor, club):
            return None
        if actor.role == UserRole.club_leader:
            return Error("FORBIDDEN", "You can only manage your own club")
        return Error("FORBIDDEN", "Only club leaders can manage this club")

    @staticmethod
    def require_owner(actor: Actor, owner_id: UUID) -> Optional[Error]:
        if actor.id != owner_id:
            return Error("FORBIDDEN", "You do not have access to this resource")
        return None
