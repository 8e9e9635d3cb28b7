"""
chilipy - Async Python client for the ChRIS virtual filesystem.

Usage:
    >>> from chilipy import ChrisClient
    >>> 
    >>> async with ChrisClient("chris") as chris:
    ...     result = await chris.resolve('/home/user/public/feed_4')
    ...     print(result.value)
"""
import logging
from .client import ChrisClient

# Configuration
from .core.api import (
    APIConfig,
    SSLConfig,
    TimeoutConfig,
    RetryConfig,
    AsyncAPIClient,
    ChrisAPIError,
)

# Session management
from .core.session import (
    SessionStorage,
    SessionData,
    SQLiteSession,
    MemorySession
)

# Path resolution
from .core.path import PathMapper, PathCache, CacheStats, normalize_path
from .core.result import Ok, Err, Result
from .core.exceptions import (
    ChrisException,
    ChrisAuthError,
    ChrisRequestError,
    InvalidPathError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for chilipy modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'chilipy',
        'chilipy.client',
        'chilipy.api',
        'chilipy.path',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'ChrisClient',
    'SessionStorage',
    'SessionData',
    'SQLiteSession',
    'MemorySession',
    'APIConfig',
    'SSLConfig',
    'TimeoutConfig',
    'RetryConfig',
    'AsyncAPIClient',
    'ChrisAPIError',
    'PathMapper',
    'PathCache',
    'CacheStats',
    'normalize_path',
    'Ok',
    'Err',
    'Result',
    'ChrisException',
    'ChrisAuthError',
    'ChrisRequestError',
    'InvalidPathError',
    'setup_logging',
]
