"""Agent error taxonomy."""

from typing import Any, Optional


class AgentError(Exception):
    """Base class for failures reported back to the caller as a message."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        # partial result describing state at the time of failure
        self.details = details

    def __str__(self) -> str:
        return self.message


class ExecutionError(AgentError):
    """An external command could not run or exited non-zero."""


class NotFoundError(AgentError):
    """A lookup matched no entities."""


class InvalidArgumentError(AgentError):
    """A required argument was empty or missing."""


class ParseError(AgentError):
    """Command output was not in the expected form."""


class InvalidTokenError(AgentError):
    """The request token does not match the process token."""
