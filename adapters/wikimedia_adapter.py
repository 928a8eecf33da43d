"""Wikimedia Commons adapter for fallback recipe images.
"""

from typing import List, Optional
import logging
import httpx

from adapters import http_adapter
from app.config import settings

logger = logging.getLogger("mealmuse.wikimedia")

# Commons "File:" namespace
FILE_NAMESPACE = 6


class WikimediaAdapter:
    """Queries the Commons action API for image files."""

    def __init__(self, client: httpx.AsyncClient, api_url: Optional[str] = None):
        self.client = client
        self.api_url = api_url or settings.wikimedia_api_url

    async def search_files(self, query: str, limit: int = 5) -> List[str]:
        """Search the File namespace and return the hit titles in rank order."""
        data = await http_adapter.get_json(
            self.client,
            self.api_url,
            params={
                "action": "query",
                "list": "search",
                "srsearch": query,
                "srnamespace": FILE_NAMESPACE,
                "srlimit": limit,
                "format": "json",
                "origin": "*",
            },
        )
        hits = ((data or {}).get("query") or {}).get("search") or []
        return [hit["title"] for hit in hits if hit.get("title")]

    async def file_url(self, title: str) -> Optional[str]:
        """Resolve a "File:..." title to the direct URL of the original upload."""
        data = await http_adapter.get_json(
            self.client,
            self.api_url,
            params={
                "action": "query",
                "titles": title,
                "prop": "imageinfo",
                "iiprop": "url",
                "format": "json",
                "origin": "*",
            },
        )
        pages = ((data or {}).get("query") or {}).get("pages") or {}
        if not pages:
            return None
        page = next(iter(pages.values()))
        image_info = (page.get("imageinfo") or [None])[0] or {}
        return image_info.get("url") or None
