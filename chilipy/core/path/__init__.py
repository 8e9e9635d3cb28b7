"""Logical to physical path resolution for the ChRIS filesystem."""
from .normalizer import ROOT, normalize_path, join_path, parent_path, split_path
from .cache import PathCache, CacheEntry, CacheStats, DEFAULT_TTL
from .prefix import PrefixMatcher, PrefixMatch
from .links import LinkProbe, LinkRecord, LinkLister, LINK_SUFFIX
from .walker import SuffixWalker
from .mapper import PathMapper

__all__ = [
    'ROOT',
    'normalize_path',
    'join_path',
    'parent_path',
    'split_path',
    'PathCache',
    'CacheEntry',
    'CacheStats',
    'DEFAULT_TTL',
    'PrefixMatcher',
    'PrefixMatch',
    'LinkProbe',
    'LinkRecord',
    'LinkLister',
    'LINK_SUFFIX',
    'SuffixWalker',
    'PathMapper',
]
