"""Errors raised by the rule engine.

Only malformed requests raise. A well-formed move that the rules do not
allow right now is a silent no-op.
"""


class UpAndDownError(Exception):
    """Base class for rule engine errors."""


class NoActiveGameError(UpAndDownError, RuntimeError):
    """Raised when a query or action runs without a started game."""

    def __init__(self, message: str = "No game currently running"):
        super().__init__(message)


class InvalidStackIdError(UpAndDownError, ValueError):
    """Raised when a center pile selector is not 0 or 1."""

    def __init__(self, stack_id: object):
        self.stack_id = stack_id
        super().__init__(f"Invalid stack id: {stack_id!r}")


class InvalidPlayerNameError(UpAndDownError, ValueError):
    """Raised when player names fail setup validation."""
