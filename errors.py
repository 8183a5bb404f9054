"""Error kinds raised by the user data accessor.

Each kind carries the exact message text existing callers match on, exposed
both as ``str(error)`` and as ``error.message``.
"""

from __future__ import annotations

from typing import Optional


class UserDataError(Exception):
    default_message = ""

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class LoadError(UserDataError):
    """The users source could not be fetched or returned an unusable body."""

    prefix = "Failed to load users data: "

    @classmethod
    def from_cause(cls, cause: object) -> "LoadError":
        return cls(f"{cls.prefix}{cause}")


class EmptyDataError(UserDataError):
    default_message = "No users loaded!"


class InvalidArgumentError(UserDataError):
    # Spelling is part of the interface
    default_message = "No search parameters provoded!"


class NoMatchError(UserDataError):
    default_message = "No matching users found!"


class TransportError(Exception):
    """Raised by the HTTP client; ``str()`` is the underlying cause, possibly empty."""
