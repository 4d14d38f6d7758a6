from typing import Any, Optional

from fastapi import HTTPException, status


class CredentialsException(HTTPException):
    """Exception for invalid credentials."""

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFoundException(HTTPException):
    """Exception for resource not found."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )


class BadRequestException(HTTPException):
    """Exception for bad request."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class ConflictException(HTTPException):
    """Exception for resource conflict."""

    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )


class ForbiddenException(HTTPException):
    """Exception for forbidden access."""

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )


# Domain errors raised by the store services


class DuplicateEmailException(ConflictException):
    """A user with this email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email address already in use: {email}")


class DuplicateSubscriptionException(ConflictException):
    """The email is already subscribed to the newsletter."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email is already subscribed: {email}")


class AuthenticationFailedException(CredentialsException):
    """Login failed: unknown user or rejected password."""

    def __init__(self, detail: str = "User not found or password incorrect"):
        super().__init__(detail)


class EntityNotFoundException(NotFoundException):
    """A referenced entity (claim, review, clinic, user, submission) is missing."""

    def __init__(self, entity: str, entity_id: Optional[Any] = None):
        self.entity = entity
        self.entity_id = entity_id
        detail = f"{entity.capitalize()} not found"
        if entity_id is not None:
            detail = f"{detail}: {entity_id}"
        super().__init__(detail)


class ValidationFailedException(BadRequestException):
    """Input violates a field constraint enforced by the store."""

    def __init__(self, detail: str = "Validation failed"):
        super().__init__(detail)
