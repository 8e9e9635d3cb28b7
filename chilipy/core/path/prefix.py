"""Longest cached ancestor lookup."""
from dataclasses import dataclass
from typing import List

from .cache import PathCache
from .normalizer import ROOT, split_path


@dataclass(frozen=True)
class PrefixMatch:
    """
    Deepest cached ancestor of a logical path.
    
    Attributes:
        logical: Cached logical prefix
        physical: Physical path the prefix maps to
        suffix: Components below the prefix still to resolve
    """
    logical: str
    physical: str
    suffix: List[str]


class PrefixMatcher:
    """Finds the deepest unexpired cached ancestor of a path."""
    
    def __init__(self, cache: PathCache):
        self._cache = cache
    
    def find(self, logical_path: str) -> PrefixMatch:
        """
        Walk candidate prefixes from the full path up to root.
        
        Args:
            logical_path: Normalized logical path
            
        Returns:
            PrefixMatch for the longest cached prefix; root mapped to
            root with the whole path as suffix if nothing is cached
            
        Example:
            >>> cache.set('/home/user/public', '/SHARED')
            >>> PrefixMatcher(cache).find('/home/user/public/feed_4/data')
            PrefixMatch(logical='/home/user/public', physical='/SHARED', suffix=['feed_4', 'data'])
        """
        parts = split_path(logical_path)
        
        for depth in range(len(parts), -1, -1):
            candidate = ROOT + '/'.join(parts[:depth])
            cached = self._cache.get(candidate)
            if cached is not None:
                return PrefixMatch(
                    logical=candidate,
                    physical=cached,
                    suffix=parts[depth:]
                )
        
        return PrefixMatch(logical=ROOT, physical=ROOT, suffix=parts)
