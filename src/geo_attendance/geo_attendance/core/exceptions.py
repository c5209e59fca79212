from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is malformed."""


class ValidationRejected(DomainError):
    """Raised when a leave submission fails a policy rule.

    The message is the rule's reason text and is meant to be shown verbatim.
    """

    def __init__(self, reason: str, *, code: str = "rejected"):
        super().__init__(reason)
        self.reason = reason
        self.code = code


class InvalidTransition(DomainError):
    """Raised when a leave status change is not allowed from the current state."""


class NotFound(DomainError):
    """Raised when an employee or request id is unknown."""


class AuthorizationError(DomainError):
    """Raised when an employee lacks permission for an action."""
