import asyncio
import logging

from catalog_api.config import settings
from catalog_api.errors import UpstreamUnavailable
from catalog_api.models import CanonicalProduct
from catalog_api.normalizer.mapper import SANMAR_ALIASES
from catalog_api.normalizer.pipeline import normalize_response
from catalog_api.sanmar.client import SanMarClient

logger = logging.getLogger(__name__)

PROVIDER = "sanmar"


async def fetch_sanmar_products(
    query: str = "",
    partnumber: str = "",
    styleid: str = "",
    sanmar_client: SanMarClient | None = None,
) -> list[CanonicalProduct]:
    """
    Fetch SanMar products for a style query (plus optional part number / style id
    filters) and normalize them. The SOAP call is blocking, so it runs in a worker thread.
    """
    if sanmar_client is None:
        sanmar_client = SanMarClient()

    # requests' timeout only bounds each socket read; this bounds the whole call.
    budget = settings.UPSTREAM_TIMEOUT_SECONDS
    try:
        tree = await asyncio.wait_for(
            asyncio.to_thread(sanmar_client.get_products, query, partnumber, styleid),
            budget,
        )
    except asyncio.TimeoutError as e:
        logger.error(f"SanMar call exceeded {budget}s budget")
        raise UpstreamUnavailable("SanMar request timed out", payload={"timeout": budget}, timed_out=True) from e

    return normalize_response(tree, PROVIDER, SANMAR_ALIASES, path=settings.SANMAR_PRODUCT_PATH)
