import json
import logging
import httpx
from typing import Any, Optional, Tuple

from .api_client_interface import AbstractAirdropAPIClient

logger = logging.getLogger(__name__)


class TonapiAirdropAPIError(Exception):
    """Raised for every transport-level failure of the tonapi airdrop API."""
    pass


def build_claim_url(base_url: str, airdrop_id: str, address: str) -> str:
    """
    Builds the v2 claim endpoint URL.
    Address and airdrop id are inserted as given, callers must pass valid identifiers.
    """
    return f"{base_url.rstrip('/')}/v2/airdrop/claim/{address}?id={airdrop_id}"


class TonapiAirdropClient(AbstractAirdropAPIClient):
    """
    API client for the tonapi airdrop service (mainnet-airdrop / testnet-airdrop).
    """
    def __init__(self,
                 base_url: str,
                 timeout: int = 15,
                 proxy_url: Optional[str] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):

        self._base_url = base_url.rstrip('/')
        self._timeout = timeout

        proxy = proxy_url or None
        self._client = httpx.AsyncClient(timeout=timeout, proxy=proxy, transport=transport)
        logger.info(f"TonapiAirdropClient initialized for {self._base_url}.")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get_claim(self, airdrop_id: str, address: str) -> Tuple[int, Any]:
        """
        Performs a single GET to the claim endpoint.
        Non-2xx statuses are returned to the caller, they carry a JSON body as well.
        """
        url = build_claim_url(self._base_url, airdrop_id, address)
        try:
            response = await self._client.get(url)
            data = response.json()
            logger.debug(f"Claim request for {address} (airdrop {airdrop_id}) returned {response.status_code}")
            return response.status_code, data

        except httpx.RequestError as e:
            logger.error(f"Network error for {url}: {e}")
            raise TonapiAirdropAPIError(f"Network error: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to decode airdrop API JSON response from {url}: {e}")
            raise TonapiAirdropAPIError(f"JSON decode error: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "TonapiAirdropClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
