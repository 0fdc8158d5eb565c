from . import config

from .providers.tonapi_airdrop_client import TonapiAirdropClient

"""
This file acts as a Service Locator.
It builds configured API clients for the rest of the application.
httpx connection pools are bound to the event loop that first uses them,
so every caller gets its own client and is responsible for closing it.
"""


def create_airdrop_api_client(testnet: bool = False) -> TonapiAirdropClient:
    # --- Airdrop claim API client (testnet or mainnet) ---
    return TonapiAirdropClient(
        base_url=config.AIRDROP_TESTNET_API_URL if testnet else config.AIRDROP_MAINNET_API_URL,
        timeout=config.AIRDROP_API_TIMEOUT,
        proxy_url=config.AIRDROP_API_PROXY_URL
    )
