"""
Session storage protocols.

Defines the interface for session storage implementations.
"""
from typing import Protocol, Optional, runtime_checkable
from .models import SessionData


@runtime_checkable
class SessionStorage(Protocol):
    """
    Protocol for session storage implementations.
    
    Implementations can use SQLite, JSON, or any other storage backend.
    """
    
    def load(self) -> Optional[SessionData]:
        """
        Load session data from storage.
        
        Returns:
            SessionData if session exists, None otherwise
        """
        ...
    
    def save(self, data: SessionData) -> None:
        """
        Save session data to storage.
        
        Args:
            data: Session data to save
        """
        ...
    
    def delete(self) -> None:
        """Delete session data from storage."""
        ...
    
    def exists(self) -> bool:
        """Check if session exists in storage."""
        ...
    
    def close(self) -> None:
        """Close storage connection and release resources."""
        ...
