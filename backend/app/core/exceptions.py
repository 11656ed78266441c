"""
Business errors raised by the service layer.

Routers never build HTTP responses for these themselves: ``main.py``
registers one handler per class and maps it to a status code.
"""

from fastapi import status


class ExploreError(Exception):
    """Base class for all service-level errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    reason: str = "Internal server error."

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(ExploreError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    reason = "The required object was not found."


class ConflictError(ExploreError):
    """Business rule or state transition violated."""

    status_code = status.HTTP_409_CONFLICT
    reason = "For the requested operation the conditions are not met."


class ValidationError(ExploreError):
    """Malformed input that passed schema validation but is still unusable."""

    status_code = status.HTTP_400_BAD_REQUEST
    reason = "Incorrectly made request."
