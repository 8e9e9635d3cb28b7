"""
API configuration module.

Provides configuration for the ChRIS API client and the path cache.
Open for extension through custom configurations.
"""
import os
import ssl
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

DEFAULT_URL = 'http://localhost:8000/api/v1/'


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.
    
    Allows customization of SSL behavior for security requirements.
    """
    verify: bool = True
    cert_file: Optional[str] = None
    key_file: Optional[str] = None
    ca_file: Optional[str] = None
    check_hostname: bool = True
    
    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False  # aiohttp: disable verification
        
        context = ssl.create_default_context()
        
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        
        if self.cert_file:
            context.load_cert_chain(
                self.cert_file,
                keyfile=self.key_file
            )
        
        context.check_hostname = self.check_hostname
        
        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.
    
    Granular control over different timeout types.
    """
    total: float = 120.0  # Total request timeout
    connect: float = 30.0  # Connection timeout
    sock_read: float = 60.0  # Socket read timeout
    sock_connect: float = 30.0  # Socket connect timeout
    
    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class RetryConfig:
    """
    Retry configuration.
    
    Controls retry behavior for failed requests.
    """
    max_retries: int = 4
    base_delay: float = 0.25
    max_delay: float = 16.0
    exponential_base: float = 2.0
    retry_on_status: tuple = (429, 502, 503, 504)  # HTTP statuses to retry
    
    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay for given attempt number."""
        delay = self.base_delay * (self.exponential_base ** attempt)
        return min(delay, self.max_delay)
    
    def should_retry(self, status: int, attempt: int) -> bool:
        """Check whether a response status warrants another attempt."""
        return status in self.retry_on_status and attempt < self.max_retries


@dataclass
class APIConfig:
    """
    Complete API configuration.
    
    Centralizes all configuration options for the ChRIS API client.
    """
    # API root, e.g. https://cube.chrisproject.org/api/v1/
    url: str = DEFAULT_URL
    
    # User agent
    user_agent: str = 'chilipy/1.0.0'
    
    # Sub-configurations
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    
    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)
    
    # Logging
    log_level: int = 30  # logging.WARNING
    
    # Page size for collection listings
    page_limit: int = 1000
    
    # Lifetime of cached path mappings, in seconds
    cache_ttl: float = 30.0
    
    # Connection pool settings
    limit_per_host: int = 10
    limit: int = 100
    
    def __post_init__(self):
        if not self.url.endswith('/'):
            self.url += '/'
    
    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()
    
    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )
    
    @classmethod
    def from_env(cls, **kwargs) -> 'APIConfig':
        """
        Create configuration from environment variables.
        
        Reads CHRIS_URL, CHILI_CACHE_TTL and CHILI_PAGE_LIMIT; explicit
        keyword arguments take precedence.
        """
        env: Dict[str, Any] = {}
        if os.environ.get('CHRIS_URL'):
            env['url'] = os.environ['CHRIS_URL']
        if os.environ.get('CHILI_CACHE_TTL'):
            env['cache_ttl'] = float(os.environ['CHILI_CACHE_TTL'])
        if os.environ.get('CHILI_PAGE_LIMIT'):
            env['page_limit'] = int(os.environ['CHILI_PAGE_LIMIT'])
        env.update(kwargs)
        return cls(**env)
    
    def endpoint(self, relative: str) -> str:
        """Absolute URL for a path relative to the API root."""
        if relative.startswith(('http://', 'https://')):
            return relative
        return self.url + relative.lstrip('/')
    
    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'limit': self.limit,
            'limit_per_host': self.limit_per_host,
            'ssl': self.ssl.create_ssl_context(),
        }
    
    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/json',
            **self.extra_headers
        }
        
        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
