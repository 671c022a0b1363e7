from fastapi import status
from club_service.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error codes shared by several routes, by HTTP status
BAD_REQUEST_CODES = ("INVALID_ID", "INVALID_STATUS", "INVALID_ROLE")
FORBIDDEN_CODES = ("FORBIDDEN",)


def raise_for_error(error: Error, status_by_code: dict) -> None:
    """
    Translate a use case Error into ClientError/ServerError.

    Codes not listed in status_by_code fall back to the shared tables
    above; anything else is a server error.
    """
    if error.code in status_by_code:
        raise ClientError(error, status_code=status_by_code[error.code])
    if error.code in BAD_REQUEST_CODES:
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    if error.code in FORBIDDEN_CODES:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    raise ServerError(error)
