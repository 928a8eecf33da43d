"""Image service - primary thumbnail checks and Wikimedia fallback images."""

from typing import Optional
import httpx

from adapters import http_adapter
from adapters.wikimedia_adapter import WikimediaAdapter
from app.config import settings
from core.base.base_service import BaseService


class ImageService(BaseService):
    """
    Picks the image shown for a recipe.

    The primary thumbnail is kept when it answers a HEAD probe. Otherwise a
    Wikimedia Commons search on the recipe name is tried, and the original
    thumbnail is kept when that finds nothing.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        wikimedia: Optional[WikimediaAdapter] = None,
    ):
        super().__init__("mealmuse.images")
        self.client = client
        self.wikimedia = wikimedia or WikimediaAdapter(client)

    async def is_reachable(self, url: Optional[str]) -> bool:
        if not url:
            return False
        return await http_adapter.probe(self.client, url)

    async def resolve_image(self, search_term: str) -> Optional[str]:
        """
        Find a direct image URL on Wikimedia Commons for a search term.

        Never raises; any failure yields None.
        """
        query = f"{search_term}{settings.image_search_suffix}"
        self.log_info("Searching Wikimedia", query=query)
        try:
            titles = await self.wikimedia.search_files(
                query, limit=settings.image_search_limit
            )
            if not titles:
                self.log_info("No Wikimedia results", query=query)
                return None

            url = await self.wikimedia.file_url(titles[0])
            if url is None:
                self.log_info("Wikimedia file has no URL", title=titles[0])
                return None
        except Exception as e:
            self.logger.exception("Error fetching Wikimedia image: %s", e)
            return None

        self.log_info("Found Wikimedia image", url=url)
        return url

    async def resolve_display_image(self, thumbnail: Optional[str], search_term: str) -> str:
        """Return the thumbnail if reachable, else a fallback, else the thumbnail."""
        if await self.is_reachable(thumbnail):
            return thumbnail

        self.log_info("Original image not accessible, trying Wikimedia", thumbnail=thumbnail)
        fallback = await self.resolve_image(search_term)
        return fallback or thumbnail or ""
