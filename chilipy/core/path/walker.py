"""Component-by-component resolution of an uncached path suffix."""
from typing import Sequence

from .cache import PathCache
from .links import LinkProbe
from .normalizer import join_path


class SuffixWalker:
    """
    Resolves the components below a cached prefix.
    
    Each step probes the candidate physical path for a link and jumps to
    the link target when one exists. Every intermediate logical path is
    cached so sibling resolutions can start from it later.
    """
    
    def __init__(self, cache: PathCache, probe: LinkProbe):
        self._cache = cache
        self._probe = probe
    
    async def walk(
        self,
        suffix: Sequence[str],
        physical_base: str,
        logical_base: str
    ) -> str:
        """
        Resolve suffix components starting from a known mapping.
        
        Args:
            suffix: Components still to resolve, in order
            physical_base: Physical path of the starting point
            logical_base: Logical path of the starting point
            
        Returns:
            Physical path of the final component
        """
        physical = physical_base
        logical = logical_base
        
        for component in suffix:
            candidate = join_path(physical, component)
            target = await self._probe.probe(candidate)
            
            physical = target if target is not None else candidate
            logical = join_path(logical, component)
            self._cache.set(logical, physical)
        
        return physical
