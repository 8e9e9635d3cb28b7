"""ChRIS API HTTP errors."""
from typing import Dict, Optional

from ...exceptions import ChrisRequestError


class HTTPStatusMessages:
    """Readable descriptions of HTTP statuses returned by the ChRIS API."""
    
    MESSAGES: Dict[int, str] = {
        400: 'Bad Request: the server rejected the request parameters',
        401: 'Unauthorized: missing or invalid authentication token, please login again',
        403: 'Forbidden: you do not have permission to access this resource',
        404: 'Not Found: the requested resource does not exist',
        405: 'Method Not Allowed',
        409: 'Conflict: the resource already exists or is in use',
        429: 'Too Many Requests: please wait a few seconds, then try again',
        500: 'Internal Server Error',
        502: 'Bad Gateway',
        503: 'Service Unavailable: the server is temporarily unable to handle the request',
        504: 'Gateway Timeout',
    }
    
    @classmethod
    def get_message(cls, status: int) -> str:
        """Gets message for HTTP status."""
        return cls.MESSAGES.get(status, f"Unexpected HTTP status: {status}")


class ChrisAPIError(ChrisRequestError):
    """Exception raised for non-success responses from the ChRIS API."""
    
    def __init__(self, status: int, detail: Optional[str] = None):
        self.detail = detail
        message = HTTPStatusMessages.get_message(status)
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, status)
