# roster_api/core/errors.py
from fastapi import status


class RosterAPIError(Exception):
    """
    Base class for errors that are turned into a JSON `{"error": ...}` body.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCredentials(RosterAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class Unauthorized(RosterAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized. Admin access required."


class Forbidden(RosterAPIError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid or expired access token for this class."


class NotFound(RosterAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ClassNotFound(NotFound):
    message = "Class not found"


class DuplicateStudentId(RosterAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Student ID already exists"


class SessionError(RosterAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Failed to logout"
