"""Custom exceptions and error codes.

Every failed use case surfaces exactly one of these kinds:

* not found (404) - the prayer item or update id does not resolve
* forbidden (403) - membership, authorship or admin role is missing
* conflict (409) - the user already prayed for the item today

Anything else reaching the API boundary is reported as an internal error.
"""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    NOT_A_GROUP_MEMBER = "NOT_A_GROUP_MEMBER"

    # Not found errors (404)
    PRAYER_ITEM_NOT_FOUND = "PRAYER_ITEM_NOT_FOUND"
    PRAYER_UPDATE_NOT_FOUND = "PRAYER_UPDATE_NOT_FOUND"

    # Validation errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    ALREADY_PRAYED_TODAY = "ALREADY_PRAYED_TODAY"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """The actor is not allowed to perform this action on the resource."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class NotAGroupMemberError(AppException):
    """The actor has no membership in the resource's group.

    Carries no details so callers cannot probe group structure.
    """

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_A_GROUP_MEMBER,
            message="You are not a member of this group",
            status_code=403,
        )


class PrayerItemNotFoundError(AppException):
    """Prayer item not found."""

    def __init__(self, prayer_item_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PRAYER_ITEM_NOT_FOUND,
            message="Prayer item not found",
            status_code=404,
            details={"prayer_item_id": prayer_item_id},
        )


class PrayerUpdateNotFoundError(AppException):
    """Prayer update not found."""

    def __init__(self, update_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PRAYER_UPDATE_NOT_FOUND,
            message="Prayer update not found",
            status_code=404,
            details={"update_id": update_id},
        )


class AlreadyReactedError(AppException):
    """The user already prayed for this item within the current day."""

    def __init__(self, prayer_item_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_PRAYED_TODAY,
            message="Already prayed for this item today",
            status_code=409,
            details={"prayer_item_id": prayer_item_id},
        )
