from uuid import UUID

from fastapi import status

from club_service.api.error import ClientError
from club_service.libs.result import Error


def parse_uuid(value: str, label: str) -> UUID:
    """Parse a path parameter as UUID, 400 INVALID_ID otherwise"""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error("INVALID_ID", f"Invalid {label} ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
