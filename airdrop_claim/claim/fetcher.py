import asyncio
import logging
from typing import Dict, Iterable, Optional

from .classifier import classify
from .models import ClaimError, ClaimFailure, ClaimResult
from .. import services
from ..providers.api_client_interface import AbstractAirdropAPIClient

logger = logging.getLogger(__name__)

NETWORK_ERROR = ClaimError("network_error", "Network error. Please try again later.")


async def fetch_airdrop_claim(airdrop_id: str,
                              address: str,
                              testnet: bool = False,
                              api_client: Optional[AbstractAirdropAPIClient] = None) -> ClaimResult:
    """
    Fetches airdrop claim data for one address with the v2 API.

    :param airdrop_id: The unique identifier of the airdrop.
    :param address: The wallet address to check for claims.
    :param testnet: Use the testnet API instead of mainnet.
    :param api_client: Transport to use. When omitted, a client for the selected
                       network is created for this call and closed afterwards.
    :return: ClaimSuccess or ClaimFailure. Transport failures of any kind become
             a `network_error` failure without info; nothing is raised.
    """
    try:
        if api_client is not None:
            status, data = await api_client.get_claim(airdrop_id, address)
        else:
            async with services.create_airdrop_api_client(testnet) as client:
                status, data = await client.get_claim(airdrop_id, address)
    except Exception:
        logger.debug(f"Claim request for {address} (airdrop {airdrop_id}) failed", exc_info=True)
        return ClaimFailure(error=NETWORK_ERROR)

    return classify(status, data)


async def fetch_airdrop_claims(airdrop_id: str,
                               addresses: Iterable[str],
                               testnet: bool = False,
                               api_client: Optional[AbstractAirdropAPIClient] = None) -> Dict[str, ClaimResult]:
    """
    Fetches claims for several addresses concurrently, one independent request each.
    Results are keyed by address, in input order.
    """
    addresses = list(addresses)
    tasks = [fetch_airdrop_claim(airdrop_id, a, testnet=testnet, api_client=api_client) for a in addresses]
    results = await asyncio.gather(*tasks)
    return dict(zip(addresses, results))
