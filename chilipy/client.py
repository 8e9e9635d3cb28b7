"""
ChrisClient - High-level async client for ChRIS.

Example:
    >>> async with ChrisClient("chris") as chris:
    ...     result = await chris.resolve('/home/user/public/feed_4')
    ...     print(result.value)
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core.api import AsyncAPIClient, APIConfig
from .core.exceptions import ChrisAuthError
from .core.logging import get_logger
from .core.path import CacheStats, PathMapper
from .core.result import Result
from .core.session import SessionStorage, SessionData, SQLiteSession, MemorySession


class ChrisClient:
    """
    High-level async client for ChRIS with session support.
    
    Owns one API client and one PathMapper, so every path resolved
    through the same client shares a cache.
    
    Supports two modes:
    
    1. Session mode:
        >>> client = ChrisClient("chris")
        >>> await client.start()  # resumes the stored token
    
    2. Direct token mode:
        >>> async with ChrisClient(url="https://cube.example.org/api/v1/", token="abc") as chris:
        ...     links = await chris.list_links('/home/user')
    """
    
    def __init__(
        self,
        session: Optional[Union[str, SessionStorage]] = None,
        *,
        config: Optional[APIConfig] = None,
        base_path: Optional[Path] = None,
        url: Optional[str] = None,
        token: Optional[str] = None
    ):
        """
        Initialize ChRIS client.
        
        Args:
            session: Session name (creates .session file) or custom storage
            config: Optional API configuration
            base_path: Base path for session files
            url: API root (overrides config and stored session)
            token: Authentication token (overrides stored session)
        """
        self._config = config or APIConfig.from_env()
        if url:
            self._config.url = url if url.endswith('/') else url + '/'
        self._explicit_url = bool(url)
        self._token = token
        self._logger = get_logger('chilipy.client')
        
        if session is None:
            self._session: SessionStorage = MemorySession()
        elif isinstance(session, str):
            self._session = SQLiteSession(session, base_path)
        else:
            self._session = session
        
        self._api = AsyncAPIClient(self._config, token=token)
        self._paths = PathMapper(self._api, ttl=self._config.cache_ttl)
        self._username: Optional[str] = None
    
    @property
    def api(self) -> AsyncAPIClient:
        return self._api
    
    @property
    def paths(self) -> PathMapper:
        """Path mapper shared by every operation of this client."""
        return self._paths
    
    @property
    def config(self) -> APIConfig:
        return self._config
    
    @property
    def username(self) -> Optional[str]:
        return self._username
    
    @property
    def is_authenticated(self) -> bool:
        return bool(self._api.token)
    
    # =========================================================================
    # Session management
    # =========================================================================
    
    async def start(self) -> 'ChrisClient':
        """
        Start the client, resuming a stored session when no token was given.
        
        Returns:
            Self for chaining
        """
        await self._api.__aenter__()
        
        if self._token is None and self._session.exists():
            data = self._session.load()
            if data and data.is_valid():
                if not self._explicit_url:
                    self._config.url = data.url
                self._api.token = data.token
                self._username = data.username
                self._logger.info(f"Session resumed for {data.username} at {data.url}")
        
        return self
    
    async def login(self, username: str, password: str) -> SessionData:
        """
        Obtain a token for the configured ChRIS instance and store it.
        
        Args:
            username: Account name
            password: Account password
            
        Returns:
            The stored session data
            
        Raises:
            ChrisAuthError: If the credentials are rejected
        """
        token = await self._api.get_auth_token(username, password)
        data = SessionData(url=self._config.url, username=username, token=token)
        self._session.save(data)
        self._username = username
        self._paths.clear()
        self._logger.info(f"Logged in as {username} at {self._config.url}")
        return data
    
    def logout(self) -> bool:
        """
        Forget the stored token.
        
        Returns:
            True if a session was stored
        """
        existed = self._session.exists()
        self._session.delete()
        self._api.token = None
        self._username = None
        self._paths.clear()
        return existed
    
    async def get_user_info(self) -> Dict[str, Any]:
        """Get the authenticated user's resource."""
        if not self.is_authenticated:
            raise ChrisAuthError("Not logged in")
        return await self._api.get_user_info()
    
    async def close(self) -> None:
        """Close the API client and session storage."""
        await self._api.close()
        self._session.close()
    
    async def __aenter__(self) -> 'ChrisClient':
        return await self.start()
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
    
    # =========================================================================
    # Paths
    # =========================================================================
    
    async def resolve(self, path: str) -> Result[str]:
        """Resolve a logical path to its physical location."""
        return await self._paths.resolve(path)
    
    def invalidate(self, prefix: str) -> int:
        """Drop cached mappings under a logical path after a link changed."""
        return self._paths.invalidate(prefix)
    
    def cache_stats(self) -> CacheStats:
        return self._paths.statistics()
    
    async def list_links(self, directory: str) -> List[Dict[str, Any]]:
        """
        List link records of a logical directory.
        
        The directory is resolved first, so links inside linked folders
        are found at their physical location.
        
        Args:
            directory: Logical directory path
            
        Returns:
            List of {'name': ..., 'target': ...} mappings
        """
        physical = (await self._paths.resolve(directory)).unwrap()
        return await self._api.list_links(physical)
