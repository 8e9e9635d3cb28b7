"""ChRIS API module."""
from .errors import ChrisAPIError, HTTPStatusMessages
from .config import APIConfig, SSLConfig, TimeoutConfig, RetryConfig, DEFAULT_URL
from .async_client import AsyncAPIClient

__all__ = [
    # Async client
    'AsyncAPIClient',
    
    # Configuration
    'APIConfig',
    'SSLConfig',
    'TimeoutConfig',
    'RetryConfig',
    'DEFAULT_URL',
    
    # Errors
    'ChrisAPIError',
    'HTTPStatusMessages',
]
