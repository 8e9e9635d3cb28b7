"""
Custom exceptions for ChRIS operations.

This module defines exception classes raised by the API client, the
session layer and the path resolver.
"""
from typing import Optional


class ChrisException(Exception):
    """Base exception for all ChRIS-related errors."""
    
    def __init__(self, message: str, status: Optional[int] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            status: HTTP status code (if available)
        """
        self.status = status
        super().__init__(message)


class ChrisAuthError(ChrisException):
    """Exception raised for authentication-related errors."""
    pass


class ChrisRequestError(ChrisException):
    """Exception raised for API request errors."""
    pass


class InvalidPathError(ChrisException):
    """Exception raised when a path is empty or not a string."""
    
    def __init__(self, message: str, path: object = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            path: The offending value as received
        """
        self.path = path
        super().__init__(message)
