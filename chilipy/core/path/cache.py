"""
TTL-bounded cache of logical to physical path mappings.

Keys are normalized logical paths, values are physical paths. Entries
expire passively: an entry whose age exceeds its TTL is deleted by the
lookup that discovers it.
"""
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

DEFAULT_TTL = 30.0


@dataclass
class CacheEntry:
    """
    Cached mapping with TTL metadata.
    
    Attributes:
        physical_path: Backend location for the logical key
        created_at: Clock reading when the entry was written
        ttl: Lifetime in seconds
    """
    physical_path: str
    created_at: float
    ttl: float
    
    def is_expired(self, now: float) -> bool:
        """Check whether the entry has outlived its TTL."""
        return now - self.created_at > self.ttl


@dataclass
class CacheStats:
    """Cache performance counters."""
    hits: int = 0
    misses: int = 0
    size: int = 0
    
    @property
    def hit_rate(self) -> float:
        """Fraction of lookups served from cache (0 when none happened)."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total
    
    def to_dict(self) -> dict:
        return {
            'hits': self.hits,
            'misses': self.misses,
            'size': self.size,
            'hit_rate': self.hit_rate,
        }


class PathCache:
    """
    In-memory store of path mappings.
    
    Example:
        >>> cache = PathCache(ttl=30)
        >>> cache.set('/home/user/public', '/SHARED')
        >>> cache.get('/home/user/public')
        '/SHARED'
    """
    
    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the cache.
        
        Args:
            ttl: Default lifetime of entries in seconds
            clock: Monotonic time source in seconds
        """
        self._entries: Dict[str, CacheEntry] = {}
        self._default_ttl = ttl
        self._clock = clock
        self._hits = 0
        self._misses = 0
    
    @property
    def default_ttl(self) -> float:
        return self._default_ttl
    
    def get(self, logical_path: str) -> Optional[str]:
        """
        Look up a logical path.
        
        Args:
            logical_path: Normalized logical path
            
        Returns:
            Physical path, or None if absent or expired
        """
        entry = self._entries.get(logical_path)
        if entry is None:
            return None
        
        if entry.is_expired(self._clock()):
            del self._entries[logical_path]
            return None
        
        return entry.physical_path
    
    def set(
        self,
        logical_path: str,
        physical_path: str,
        ttl: Optional[float] = None
    ) -> None:
        """
        Store or overwrite a mapping.
        
        Args:
            logical_path: Normalized logical path
            physical_path: Resolved physical path
            ttl: Lifetime in seconds (defaults to the cache TTL)
        """
        self._entries[logical_path] = CacheEntry(
            physical_path=physical_path,
            created_at=self._clock(),
            ttl=self._default_ttl if ttl is None else ttl
        )
    
    def invalidate(self, prefix: str) -> int:
        """
        Remove a logical path and everything below it.

        Invalidating the root ``/`` removes every entry.

        Args:
            prefix: Normalized logical path
            
        Returns:
            Number of entries removed
        """
        below = prefix.rstrip('/') + '/'
        doomed = [
            key for key in self._entries
            if key == prefix or key.startswith(below)
        ]
        for key in doomed:
            del self._entries[key]
        return len(doomed)
    
    def prune(self) -> int:
        """Drop every expired entry and return how many were removed."""
        now = self._clock()
        expired = [
            key for key, entry in self._entries.items()
            if entry.is_expired(now)
        ]
        for key in expired:
            del self._entries[key]
        return len(expired)
    
    def clear(self) -> None:
        """Remove all entries and reset counters."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0
    
    def record_hit(self) -> None:
        self._hits += 1
    
    def record_miss(self) -> None:
        self._misses += 1
    
    def stats(self) -> CacheStats:
        """Snapshot of the current counters."""
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            size=len(self._entries)
        )
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __contains__(self, logical_path: str) -> bool:
        return self.get(logical_path) is not None
