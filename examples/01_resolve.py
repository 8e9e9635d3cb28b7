"""
Basic usage - Resolve logical paths through links
"""
import asyncio
from chilipy import ChrisClient


async def main():
    # Session mode (reuses the token saved by `chili login`)
    async with ChrisClient("session") as chris:
        
        # First call walks every component
        result = await chris.resolve("/home/chris/public/feed_4")
        print(f"feed_4 -> {result.value}")
        
        # Second call reuses the cached '/home/chris/public' prefix
        result = await chris.resolve("/home/chris/public/feed_5")
        print(f"feed_5 -> {result.value}")
        
        stats = chris.cache_stats()
        print(f"\nCache: {stats.hits} hits, {stats.misses} misses, {stats.size} entries")


if __name__ == "__main__":
    asyncio.run(main())
