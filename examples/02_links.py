"""
Links - List links and invalidate the cache after changing one
"""
import asyncio
from chilipy import ChrisClient


async def main():
    async with ChrisClient(
        url="http://localhost:8000/api/v1/",
        token="your-token"
    ) as chris:
        
        print("Links in /home/chris:")
        for record in await chris.list_links("/home/chris"):
            print(f"  {record['name']} -> {record['target']}")
        
        # After creating, deleting or retargeting a link below /home/chris/public
        removed = chris.invalidate("/home/chris/public")
        print(f"\nDropped {removed} cached mapping(s)")
        
        # Invalid input never raises from resolve()
        result = await chris.resolve("")
        if not result.ok:
            print(f"Error: {result.error}")


if __name__ == "__main__":
    asyncio.run(main())
