"""Port for the external authentication backend."""

from typing import Protocol


class AuthPort(Protocol):
    """Port exposing the only session operation the application needs."""

    def sign_out(self) -> None:
        """End the current user session."""


__all__ = ["AuthPort"]
