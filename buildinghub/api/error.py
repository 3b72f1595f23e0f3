from uuid import UUID

from fastapi import status

from buildinghub.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error code -> HTTP status for use case failures
ERROR_STATUS = {
    "UNAUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BUILDING_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "UNIT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBERSHIP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "UNIT_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "MEMBERSHIP_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_TRANSITION": status.HTTP_409_CONFLICT,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ID": status.HTTP_400_BAD_REQUEST,
    "NO_UNITS": status.HTTP_400_BAD_REQUEST,
}


def raise_for_error(error: Error):
    """Raise the API exception matching a use case error code"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


def parse_uuid(value: str, field: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error("INVALID_ID", f"Invalid {field} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
