from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials do not match any user."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AccessDenied(AuthorizationError):
    """A teacher tried to act on a student outside their assigned grade."""

    def __init__(self, assigned_grade: Optional[str], student_grade: str):
        self.assigned_grade = assigned_grade
        self.student_grade = student_grade
        super().__init__(
            f"RESTRICTED: You are assigned to {assigned_grade or 'no grade'}. "
            f"This student is in {student_grade}."
        )


class UnknownStudent(DomainError):
    """Raised when a scanned or typed identifier matches no student."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Invalid Student ID: {identifier}")


class ProviderUnavailable(DomainError):
    """Raised when the scanner hardware or the AI provider fails."""
