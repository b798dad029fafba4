from catalog_api.models import CanonicalProduct
from catalog_api.normalizer.mapper import SNS_ALIASES
from catalog_api.normalizer.pipeline import normalize_response
from catalog_api.sns.client import SnsClient

PROVIDER = "sns"


async def fetch_sns_products(query: str = "", sns_client: SnsClient | None = None) -> list[CanonicalProduct]:
    if sns_client is None:
        sns_client = SnsClient()

    tree = await sns_client.get_products(query)
    return normalize_response(tree, PROVIDER, SNS_ALIASES)
