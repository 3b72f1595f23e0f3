"""
Client error taxonomy.

Every failure reported by the service is raised as one of these, carrying
the service's error code and message verbatim.
"""

from typing import Optional

import httpx


class BuildingHubError(Exception):
    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{code}: {message}")


class ApiError(BuildingHubError):
    """Any error returned by the service or raised while talking to it"""


class Unauthenticated(ApiError):
    """No session, or the service rejected the token"""


class Forbidden(ApiError):
    """The actor's role does not allow the action"""


class NotFound(ApiError):
    pass


class Conflict(ApiError):
    """Duplicate request, e.g. an open membership already exists"""


class InvalidTransition(ApiError):
    """The membership is already decided"""


class SubmissionInProgress(BuildingHubError):
    """The same mutation is already in flight; nothing was sent"""

    def __init__(self, key: str):
        self.key = key
        super().__init__("SUBMISSION_IN_PROGRESS", f"{key} is already in progress")


CODE_ERRORS = {
    "UNAUTHENTICATED": Unauthenticated,
    "INVALID_TOKEN": Unauthenticated,
    "INVALID_CREDENTIALS": Unauthenticated,
    "INSUFFICIENT_ROLE": Forbidden,
    "INVALID_TRANSITION": InvalidTransition,
    "MEMBERSHIP_ALREADY_EXISTS": Conflict,
    "EMAIL_ALREADY_EXISTS": Conflict,
    "UNIT_ALREADY_EXISTS": Conflict,
}

STATUS_ERRORS = {
    401: Unauthenticated,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
}


def error_from_response(response: httpx.Response) -> ApiError:
    """Build the matching ApiError from an error response body"""
    code = f"HTTP_{response.status_code}"
    message = response.reason_phrase or "Request failed"

    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        if isinstance(body.get("error"), dict):
            code = body["error"].get("code", code)
            message = body["error"].get("message", message)
        elif "detail" in body:
            # FastAPI request validation errors
            code = "VALIDATION_ERROR" if response.status_code == 422 else code
            message = str(body["detail"])

    error_class = CODE_ERRORS.get(code)
    if error_class is None and code.endswith("_NOT_FOUND"):
        error_class = NotFound
    if error_class is None:
        error_class = STATUS_ERRORS.get(response.status_code, ApiError)

    return error_class(code, message, status_code=response.status_code)
