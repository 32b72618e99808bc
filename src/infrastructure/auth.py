"""Session-based authentication adapter.

Sign-in is handled by the hosting platform in front of the dashboard; the
application only owns the per-browser session state and clears it on
sign-out.
"""

from collections.abc import MutableMapping
from typing import Any

from src.application.ports.auth import AuthPort


class SessionStateAuthAdapter(AuthPort):
    """AuthPort implementation clearing a Streamlit-like session state."""

    def __init__(self, session_state: MutableMapping[str, Any]) -> None:
        """Initialize the adapter.

        Args:
            session_state: Mapping holding the per-session values.
        """
        self._session_state = session_state

    def sign_out(self) -> None:
        for key in list(self._session_state.keys()):
            del self._session_state[key]


__all__ = ["SessionStateAuthAdapter"]
