"""
Link detection.

A link is a specially marked entry in a directory's ``links`` collection.
Its name is the logical path it stands for plus the ``.chrislink`` marker;
its target is the physical path it redirects to.
"""
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Protocol, runtime_checkable

from ..logging import get_logger
from .normalizer import normalize_path, parent_path

LINK_SUFFIX = '.chrislink'

logger = get_logger('chilipy.path')


@runtime_checkable
class LinkLister(Protocol):
    """
    Anything that can list the link records of a physical directory.
    
    Each record is a mapping with ``name`` and ``target`` keys.
    """
    
    async def list_links(self, directory: str) -> List[Mapping[str, Any]]:
        ...


@dataclass(frozen=True)
class LinkRecord:
    """A well-formed link entry."""
    name: str
    target: str
    
    @classmethod
    def from_raw(cls, raw: Any) -> Optional['LinkRecord']:
        """
        Build a record from a listing entry.
        
        Returns:
            LinkRecord, or None when the entry lacks a usable name or target
        """
        if not isinstance(raw, Mapping):
            return None
        name = raw.get('name')
        target = raw.get('target')
        if not isinstance(name, str) or not isinstance(target, str):
            return None
        if not name or not target:
            return None
        return cls(name=name, target=target)
    
    @property
    def logical_path(self) -> Optional[str]:
        """Path the link stands for, or None if the name lacks the marker."""
        name = self.name if self.name.startswith('/') else f"/{self.name}"
        if not name.endswith(LINK_SUFFIX):
            return None
        return name[:-len(LINK_SUFFIX)]
    
    @property
    def target_path(self) -> str:
        return normalize_path(self.target)


class LinkProbe:
    """Asks the link-listing service whether a physical path is a link."""
    
    def __init__(self, lister: LinkLister):
        self._lister = lister
    
    async def probe(self, candidate: str) -> Optional[str]:
        """
        Check a candidate physical path for a link.
        
        Listing failures are logged and reported as "not a link" so that
        resolution can continue with the plain path.
        
        Args:
            candidate: Absolute physical path
            
        Returns:
            The link target, or None if the candidate is not a link
        """
        candidate = candidate if candidate.startswith('/') else f"/{candidate}"
        directory = parent_path(candidate)
        
        try:
            records = await self._lister.list_links(directory)
        except Exception as e:
            logger.warning(
                f"Failed to check if '{candidate}' is a link: {e}. "
                f"Treating as regular path."
            )
            return None

        if records is None:
            return None
        if not isinstance(records, (list, tuple)):
            logger.warning(
                f"Unexpected link listing for '{directory}' "
                f"({type(records).__name__}). Treating '{candidate}' as regular path."
            )
            return None

        for raw in records:
            record = LinkRecord.from_raw(raw)
            if record is None:
                continue
            if record.logical_path == candidate:
                logger.debug(f"Link {candidate} -> {record.target_path}")
                return record.target_path
        
        return None
