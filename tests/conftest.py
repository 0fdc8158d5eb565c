import httpx
import pytest

from airdrop_claim.providers.tonapi_airdrop_client import TonapiAirdropClient

BASE_URL = "https://mainnet-airdrop.tonapi.io"


@pytest.fixture
def claim_body():
    return {
        "jetton": "kQABcHP_oXkYNCx3HHKd4rxL371RRl-O6IwgwqYZ7IT6Ha-u",
        "available_jetton_amount": "597968399",
        "total_jetton_amount": "597968399",
        "claimed_jetton_amount": "0",
        "claim_message": {
            "mode": 3,
            "address": "kQABcHP_oXkYNCx3HHKd4rxL371RRl-O6IwgwqYZ7IT6Ha-u",
            "state_init": "te6cckEBAQEAAgAAAEysuc0=",
            "payload": "te6cckEBAQEADgAAGAAAAAAAAAAAAAAAAK6bgPs=",
            "amount": "50000000",
        },
    }


@pytest.fixture
def make_client():
    """Builds a TonapiAirdropClient whose requests are answered by `handler`."""
    def _make(handler, base_url=BASE_URL):
        return TonapiAirdropClient(base_url=base_url, transport=httpx.MockTransport(handler))
    return _make

