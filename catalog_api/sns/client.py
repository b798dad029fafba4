import asyncio
import logging

import aiohttp

from catalog_api.config import settings
from catalog_api.errors import MissingCredentials, UpstreamUnavailable, snippet
from catalog_api.normalizer.tree import RawNode, tree_from_json

logger = logging.getLogger(__name__)

API_VERSION = "v2"


class SnsClient:
    def __init__(self, api_key=None, base_url=None, timeout=None):
        # Use provided params or fall back to settings
        self.api_key = api_key or settings.SNS_API_KEY
        self.base_url = (base_url or settings.SNS_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

    def _url(self, endpoint: str) -> str:
        # endpoint examples: "products", "styles/"
        if endpoint.startswith("/"):
            endpoint = endpoint[1:]
        return f"{self.base_url}/{API_VERSION}/{endpoint}"

    async def get(self, endpoint: str, params: dict | None = None) -> RawNode:
        """
        GET a JSON resource and return the decoded tree.

        A 404 means "nothing matched" on this API and comes back as an empty list.
        """
        if not self.api_key:
            raise MissingCredentials("Missing S&S API key env var.")

        url = self._url(endpoint)
        auth = aiohttp.BasicAuth(self.api_key, "")
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=params, auth=auth) as resp:
                    text = await resp.text()
                    status = resp.status
        except asyncio.TimeoutError as e:
            logger.error(f"S&S request timed out after {self.timeout}s")
            raise UpstreamUnavailable("S&S request timed out", payload={"timeout": self.timeout}, timed_out=True) from e
        except aiohttp.ClientError as e:
            logger.error(f"S&S request failed: {e}")
            raise UpstreamUnavailable("S&S API request failed", payload={"error": str(e)}) from e

        if status == 404:
            logger.info(f"S&S GET {endpoint} → 404, treating as no results")
            return []
        if status >= 400:
            logger.error(f"S&S GET Error {status}: {snippet(text, 500)}")
            raise UpstreamUnavailable("S&S API request failed", payload={"status": status, "body": snippet(text)})

        return tree_from_json(text)

    async def get_products(self, search: str) -> RawNode:
        return await self.get("products", params={"search": search})
