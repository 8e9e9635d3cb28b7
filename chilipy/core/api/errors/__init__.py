"""ChRIS API errors and exceptions."""
from .api_errors import ChrisAPIError, HTTPStatusMessages

__all__ = [
    'ChrisAPIError',
    'HTTPStatusMessages',
]
