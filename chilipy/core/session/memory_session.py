"""
In-memory session storage implementation.

Keeps a ChRIS login for the lifetime of the process only.
"""
from typing import Optional

from .protocols import SessionStorage
from .models import SessionData


class MemorySession(SessionStorage):
    """
    In-memory session storage.

    Holds the url, username and token of one ChRIS login.
    Nothing is written to disk; the token is gone once the object is.

    Used by ChrisClient when no session name is given, and in tests.

    Example:
        >>> session = MemorySession()
        >>> session.save(SessionData(url=url, username='chris', token=token))
        >>> session.load().username
        'chris'
    """

    def __init__(self):
        """Start with no stored login."""
        self._data: Optional[SessionData] = None

    def load(self) -> Optional[SessionData]:
        """
        Return the stored login.

        Returns:
            SessionData if a login was saved, None otherwise
        """
        return self._data

    def save(self, data: SessionData) -> None:
        """
        Store a login, refreshing its ``updated_at`` stamp.

        Args:
            data: Login to keep
        """
        data.update_timestamp()
        self._data = data

    def delete(self) -> None:
        """Forget the stored login."""
        self._data = None

    def exists(self) -> bool:
        """True if a login is stored."""
        return self._data is not None

    def close(self) -> None:
        """Nothing to release."""
        pass

    def __enter__(self) -> 'MemorySession':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
