"""
Async ChRIS API client.

Fully asynchronous REST client with configuration support. Serves as
the link-listing service for the path resolver.
"""
import json
import asyncio
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

import aiohttp

from .config import APIConfig
from .errors import ChrisAPIError
from ..exceptions import ChrisAuthError, ChrisRequestError
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous ChRIS API client.
    
    Features:
    - Full async/await support
    - Configurable SSL, timeouts, page size
    - Automatic retry with exponential backoff
    - Transparent pagination of collections
    
    Example:
        >>> config = APIConfig(url='https://cube.chrisproject.org/api/v1/')
        >>> async with AsyncAPIClient(config, token='abc') as client:
        ...     links = await client.list_links('/home/user')
    """
    
    def __init__(
        self,
        config: Optional[APIConfig] = None,
        token: Optional[str] = None
    ):
        """
        Initialize async API client.
        
        Args:
            config: API configuration (uses defaults if not provided)
            token: Authentication token (optional until login)
        """
        self._config = config or APIConfig.default()
        self._token = token
        self._session: Optional[aiohttp.ClientSession] = None
        self._connector: Optional[aiohttp.TCPConnector] = None
        self._closed = False
        
        self._logger = get_logger('chilipy.api')
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)
    
    @property
    def token(self) -> Optional[str]:
        """Get authentication token."""
        return self._token
    
    @token.setter
    def token(self, value: Optional[str]):
        """Set authentication token."""
        self._token = value
    
    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config
    
    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
    
    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=self._connector,
                **self._config.get_session_kwargs()
            )
            self._closed = False
        return self._session
    
    async def close(self):
        """Close client and release resources."""
        self._closed = True
        
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
        
        if self._connector and not self._connector.closed:
            await self._connector.close()
            self._connector = None
    
    def _auth_headers(self) -> Dict[str, str]:
        if self._token:
            return {'Authorization': f"Token {self._token}"}
        return {}
    
    @staticmethod
    def _extract_detail(text: str) -> Optional[str]:
        """Pull the server's error explanation out of a response body."""
        try:
            body = json.loads(text)
        except ValueError:
            return text[:200] or None
        if isinstance(body, dict):
            detail = body.get('detail') or body.get('non_field_errors')
            if isinstance(detail, list):
                detail = '; '.join(str(item) for item in detail)
            return str(detail) if detail else None
        return None
    
    async def _request_json(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
        retry_count: int = 0
    ) -> Any:
        """
        Make a request and decode the JSON response.
        
        Args:
            method: HTTP method
            url: Absolute URL or path relative to the API root
            params: Query string parameters
            payload: JSON body
            retry_count: Current retry attempt (internal use)
            
        Returns:
            Decoded response body (None for empty bodies)
            
        Raises:
            ChrisAPIError: If the server answers with an error status
            ChrisRequestError: On network failure after all retries
        """
        if self._closed:
            raise ChrisRequestError("Client is closed")
        
        session = await self._ensure_session()
        url = self._config.endpoint(url)
        
        self._logger.debug(f"{method} {url} params={params}")
        
        try:
            async with session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=self._auth_headers()
            ) as response:
                if self._config.retry.should_retry(response.status, retry_count):
                    delay = self._config.retry.calculate_delay(retry_count)
                    self._logger.warning(
                        f"Retrying {method} {url} after HTTP {response.status}, "
                        f"attempt {retry_count + 1}"
                    )
                    await asyncio.sleep(delay)
                    return await self._request_json(
                        method, url,
                        params=params, payload=payload,
                        retry_count=retry_count + 1
                    )
                
                text = await response.text()
                self._logger.debug(f"Response data: {text[:1000] if len(text) > 1000 else text}")
                
                if response.status >= 400:
                    raise ChrisAPIError(response.status, self._extract_detail(text))
                
                if not text:
                    return None
                try:
                    return json.loads(text)
                except ValueError:
                    raise ChrisRequestError(f"Invalid JSON response from {url}")
                
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {e}")
            
            if retry_count < self._config.retry.max_retries:
                delay = self._config.retry.calculate_delay(retry_count)
                await asyncio.sleep(delay)
                return await self._request_json(
                    method, url,
                    params=params, payload=payload,
                    retry_count=retry_count + 1
                )
            
            raise ChrisRequestError(f"Network error: {e}")
    
    async def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a resource and return its decoded JSON."""
        return await self._request_json('GET', url, params=params)
    
    async def paginate(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None
    ) -> AsyncIterator[Dict[str, Any]]:
        """
        Iterate over every item of a paginated collection.
        
        Follows the ``next`` links of ``{count, next, results}`` pages.
        
        Args:
            url: Collection URL
            params: Extra query parameters for the first page
        """
        query = {'limit': self._config.page_limit, 'offset': 0, **(params or {})}
        page = await self.get(url, params=query)
        
        while page:
            if isinstance(page, list):
                for item in page:
                    yield item
                return
            
            for item in page.get('results') or []:
                yield item
            
            next_url = page.get('next')
            if not next_url:
                return
            page = await self.get(next_url)
    
    async def get_auth_token(self, username: str, password: str) -> str:
        """
        Exchange credentials for an authentication token.
        
        The token is also stored on the client for later requests.
        
        Raises:
            ChrisAuthError: If the credentials are rejected
        """
        try:
            body = await self._request_json(
                'POST', 'auth-token/',
                payload={'username': username, 'password': password}
            )
        except ChrisAPIError as e:
            if e.status in (400, 401, 403):
                raise ChrisAuthError(f"Login failed for {username}: {e}", e.status)
            raise
        
        token = body.get('token') if isinstance(body, dict) else None
        if not token:
            raise ChrisAuthError(f"No token received for {username}")
        
        self._token = token
        return token
    
    async def get_user_info(self) -> Dict[str, Any]:
        """Get the authenticated user's resource."""
        body = await self.get('user/')
        if isinstance(body, dict) and 'results' in body:
            results = body.get('results') or []
            return results[0] if results else {}
        return body or {}
    
    async def get_folder(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Find the filebrowser folder resource for a physical path.
        
        Args:
            path: Absolute physical directory path
            
        Returns:
            Folder resource, or None if no such folder exists
        """
        relative = path.strip('/')
        if relative:
            url, params = 'filebrowser/search/', {'path': relative}
        else:
            url, params = 'filebrowser/', None
        
        try:
            body = await self.get(url, params=params)
        except ChrisAPIError as e:
            if e.status == 404:
                return None
            raise
        
        if isinstance(body, dict) and 'results' in body:
            results = body.get('results') or []
            return results[0] if results else None
        return body or None
    
    async def list_links(self, directory: str) -> List[Dict[str, Any]]:
        """
        List the link records of a physical directory.
        
        Args:
            directory: Absolute physical directory path
            
        Returns:
            List of {'name': ..., 'target': ...} mappings
        """
        folder = await self.get_folder(directory)
        if not folder or not folder.get('link_files'):
            return []
        
        links = []
        async for item in self.paginate(folder['link_files']):
            links.append({'name': item.get('fname'), 'target': item.get('path')})
        
        self._logger.debug(f"{len(links)} link(s) in {directory}")
        return links
