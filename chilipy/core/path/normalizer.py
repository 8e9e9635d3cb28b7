"""Canonical form for slash-delimited ChRIS paths."""
from typing import List

ROOT = '/'


def split_path(path: str) -> List[str]:
    """Split a path into its non-empty components."""
    return [part for part in path.split('/') if part]


def normalize_path(path: str) -> str:
    """
    Canonicalize a path.
    
    Ensures a leading slash, collapses repeated slashes and drops any
    trailing slash. A path made only of slashes becomes the root.
    
    Args:
        path: Caller-supplied path, absolute or relative to root
        
    Returns:
        Normalized absolute path
        
    Example:
        >>> normalize_path('//home//user/')
        '/home/user'
    """
    return ROOT + '/'.join(split_path(path))


def join_path(base: str, component: str) -> str:
    """Append a single component to an absolute path."""
    if base == ROOT:
        return f"/{component}"
    return f"{base}/{component}"


def parent_path(path: str) -> str:
    """Return the parent directory of an absolute path (root for top level)."""
    parts = split_path(path)
    return ROOT + '/'.join(parts[:-1])
