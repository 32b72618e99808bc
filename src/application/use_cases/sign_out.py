"""Use case ending the user session."""

from src.application.ports.auth import AuthPort
from src.infrastructure.logging.logger import get_app_logger


class SignOutUseCase:
    """Sign the user out and return the page to redirect to.

    The redirect happens whether or not the backend call succeeds, so a
    failed sign-out never leaves the user on an authenticated page.
    """

    def __init__(self, auth: AuthPort, login_url: str, logger=None) -> None:
        """Initialize the use case.

        Args:
            auth: Port ending the session.
            login_url: Page shown after sign-out.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._auth = auth
        self._login_url = login_url
        self._logger = logger or get_app_logger()

    def execute(self) -> str:
        try:
            self._auth.sign_out()
        except Exception as exc:
            self._logger.error(f"Sign-out failed: {exc}")
        else:
            self._logger.info("User signed out")
        return self._login_url


__all__ = ["SignOutUseCase"]
