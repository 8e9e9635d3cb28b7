"""Tests for the TTL path cache."""
import pytest

from chilipy.core.path import PathCache, CacheEntry, CacheStats, DEFAULT_TTL


class TestPathCache:
    """Test suite for PathCache."""
    
    @pytest.fixture
    def cache(self, clock):
        """Cache with a 30s TTL on the fake clock."""
        return PathCache(ttl=30.0, clock=clock)
    
    def test_default_ttl(self):
        """Test that the default lifetime is 30 seconds."""
        assert DEFAULT_TTL == 30.0
        assert PathCache().default_ttl == 30.0
    
    def test_get_missing(self, cache):
        assert cache.get("/home") is None
    
    def test_set_and_get(self, cache):
        cache.set("/home/user/public", "/SHARED")
        
        assert cache.get("/home/user/public") == "/SHARED"
        assert "/home/user/public" in cache
        assert len(cache) == 1
    
    def test_set_overwrites(self, cache):
        cache.set("/a", "/A")
        cache.set("/a", "/B")
        
        assert cache.get("/a") == "/B"
        assert len(cache) == 1
    
    def test_entry_served_before_expiry(self, cache, clock):
        """Test that an entry is still served within its TTL."""
        cache.set("/a", "/A")
        clock.advance(30.0)
        
        assert cache.get("/a") == "/A"
    
    def test_expired_entry_deleted_on_read(self, cache, clock):
        """Test that reading an expired entry removes it."""
        cache.set("/a", "/A")
        clock.advance(31.0)
        
        assert len(cache) == 1
        assert cache.get("/a") is None
        assert len(cache) == 0
    
    def test_per_entry_ttl(self, cache, clock):
        """Test overriding the TTL for a single entry."""
        cache.set("/short", "/S", ttl=5.0)
        cache.set("/long", "/L")
        clock.advance(10.0)
        
        assert cache.get("/short") is None
        assert cache.get("/long") == "/L"
    
    def test_invalidate_subtree(self, cache):
        """Test that invalidation removes the prefix and its descendants only."""
        cache.set("/a/b", "/B")
        cache.set("/a/b/c", "/B/c")
        cache.set("/a/b/c/d", "/B/c/d")
        cache.set("/a/z", "/A/z")
        cache.set("/a/bc", "/A/bc")
        
        removed = cache.invalidate("/a/b")
        
        assert removed == 3
        assert cache.get("/a/b") is None
        assert cache.get("/a/b/c") is None
        assert cache.get("/a/z") == "/A/z"
        assert cache.get("/a/bc") == "/A/bc"
    
    def test_invalidate_root_removes_everything(self, cache):
        cache.set("/", "/")
        cache.set("/a", "/A")
        cache.set("/a/b", "/A/b")
        
        assert cache.invalidate("/") == 3
        assert len(cache) == 0
    
    def test_invalidate_unknown_prefix(self, cache):
        cache.set("/a", "/A")
        
        assert cache.invalidate("/x") == 0
        assert len(cache) == 1
    
    def test_prune(self, cache, clock):
        """Test dropping expired entries in bulk."""
        cache.set("/old", "/O", ttl=1.0)
        cache.set("/new", "/N")
        clock.advance(2.0)
        
        assert cache.prune() == 1
        assert len(cache) == 1
        assert cache.get("/new") == "/N"
    
    def test_clear_resets_counters(self, cache):
        cache.set("/a", "/A")
        cache.record_hit()
        cache.record_miss()
        
        cache.clear()
        stats = cache.stats()
        
        assert stats.size == 0
        assert stats.hits == 0
        assert stats.misses == 0
    
    def test_get_does_not_count(self, cache):
        """Test that plain lookups leave the counters alone."""
        cache.set("/a", "/A")
        cache.get("/a")
        cache.get("/missing")
        
        stats = cache.stats()
        assert stats.hits == 0
        assert stats.misses == 0


class TestCacheEntry:
    """Test suite for CacheEntry."""
    
    def test_expiry_is_strictly_after_ttl(self):
        entry = CacheEntry(physical_path="/A", created_at=100.0, ttl=30.0)
        
        assert entry.is_expired(130.0) is False
        assert entry.is_expired(130.5) is True


class TestCacheStats:
    """Test suite for CacheStats."""
    
    def test_hit_rate_without_lookups(self):
        """Test that no lookups give a zero hit rate."""
        assert CacheStats().hit_rate == 0.0
    
    def test_hit_rate(self):
        stats = CacheStats(hits=3, misses=1, size=4)
        
        assert stats.hit_rate == 0.75
    
    def test_to_dict(self):
        stats = CacheStats(hits=1, misses=1, size=2)
        
        assert stats.to_dict() == {
            'hits': 1,
            'misses': 1,
            'size': 2,
            'hit_rate': 0.5,
        }
