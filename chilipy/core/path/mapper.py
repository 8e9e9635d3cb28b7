"""
Logical to physical path resolution with prefix reuse.

Example:
    - First call: '/home/user/public/feed_4' resolves every component and
      caches '/home/user/public' -> '/SHARED' along the way
    - Second call: '/home/user/public/feed_5' reuses '/home/user/public'
      and only probes 'feed_5'
"""
import time
from typing import Callable

from ..exceptions import InvalidPathError
from ..logging import get_logger
from ..result import Err, Ok, Result
from .cache import DEFAULT_TTL, CacheStats, PathCache
from .links import LinkLister, LinkProbe
from .normalizer import normalize_path
from .prefix import PrefixMatcher
from .walker import SuffixWalker

logger = get_logger('chilipy.path')


class PathMapper:
    """
    Resolves logical ChRIS paths to physical storage paths.
    
    One mapper is meant to live for a single CLI invocation; callers must
    call invalidate() whenever a link is created, deleted or retargeted.
    
    Example:
        >>> mapper = PathMapper(api_client)
        >>> result = await mapper.resolve('/home/user/public/feed_4')
        >>> result.value
        '/SHARED/feed_4'
        >>> mapper.statistics().misses
        1
    """
    
    def __init__(
        self,
        lister: LinkLister,
        *,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the mapper.
        
        Args:
            lister: Service that lists link records of a physical directory
            ttl: Lifetime of cached mappings in seconds
            clock: Monotonic time source in seconds
        """
        self._cache = PathCache(ttl=ttl, clock=clock)
        self._matcher = PrefixMatcher(self._cache)
        self._walker = SuffixWalker(self._cache, LinkProbe(lister))
    
    @property
    def cache(self) -> PathCache:
        return self._cache
    
    async def resolve(self, logical_path: str) -> Result[str]:
        """
        Resolve a logical path to its physical location.
        
        Only the part of the path below the longest cached ancestor is
        walked. Never raises; malformed input yields an Err.
        
        Args:
            logical_path: Path in the user-facing namespace
            
        Returns:
            Ok with the physical path, or Err(InvalidPathError)
        """
        if not isinstance(logical_path, str) or not logical_path:
            return Err(InvalidPathError(
                'Invalid path: path must be a non-empty string',
                path=logical_path
            ))
        
        path = normalize_path(logical_path)
        
        cached = self._cache.get(path)
        if cached is not None:
            self._cache.record_hit()
            return Ok(cached)
        
        match = self._matcher.find(path)
        logger.debug(
            f"Resolving {path}: cached prefix {match.logical} -> "
            f"{match.physical}, {len(match.suffix)} component(s) left"
        )
        physical = await self._walker.walk(
            match.suffix, match.physical, match.logical
        )
        
        self._cache.set(path, physical)
        self._cache.record_miss()
        return Ok(physical)
    
    def invalidate(self, prefix: str) -> int:
        """
        Drop cached mappings for a logical path and all its descendants.
        
        Args:
            prefix: Logical path whose subtree changed
            
        Returns:
            Number of entries removed
        """
        removed = self._cache.invalidate(normalize_path(prefix))
        logger.debug(f"Invalidated {removed} cached mapping(s) under {prefix}")
        return removed
    
    def clear(self) -> None:
        """Drop all cached mappings and reset statistics."""
        self._cache.clear()
    
    def statistics(self) -> CacheStats:
        """Cache hits, misses, size and hit rate."""
        return self._cache.stats()
