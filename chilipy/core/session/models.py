"""
Session data models.

Contains data classes for session information.
"""
from dataclasses import dataclass, field
from datetime import datetime
import json


@dataclass
class SessionData:
    """
    Stored ChRIS login.
    
    Contains all information needed to talk to a ChRIS instance
    without re-entering credentials.
    
    Attributes:
        url: API root of the ChRIS instance
        username: Account name
        token: Authentication token
        created_at: Session creation timestamp
        updated_at: Last update timestamp
    """
    url: str
    username: str
    token: str
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    
    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.
        
        Returns:
            Dictionary representation
        """
        return {
            'url': self.url,
            'username': self.username,
            'token': self.token,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> 'SessionData':
        """
        Create from dictionary.
        
        Args:
            data: Dictionary with session data
            
        Returns:
            SessionData instance
        """
        return cls(
            url=data['url'],
            username=data['username'],
            token=data['token'],
            created_at=datetime.fromisoformat(data['created_at']) if data.get('created_at') else datetime.now(),
            updated_at=datetime.fromisoformat(data['updated_at']) if data.get('updated_at') else datetime.now(),
        )
    
    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict())
    
    @classmethod
    def from_json(cls, json_str: str) -> 'SessionData':
        """Create from JSON string."""
        return cls.from_dict(json.loads(json_str))
    
    def is_valid(self) -> bool:
        """
        Check if session data is valid.
        
        Returns:
            True if all required fields are present
        """
        return bool(self.url and self.username and self.token)
    
    def update_timestamp(self) -> None:
        """Update the updated_at timestamp to now."""
        self.updated_at = datetime.now()
