from abc import ABC, abstractmethod
from typing import Any, Tuple


class AbstractAirdropAPIClient(ABC):
    """
    Interface of the airdrop claim API transport.
    Any concrete client (tonapi, a mock in tests, a proxying gateway)
    must implement it so the fetcher does not depend on a particular host.
    """

    @abstractmethod
    async def get_claim(self, airdrop_id: str, address: str) -> Tuple[int, Any]:
        """
        Request claim data for one (airdrop, address) pair.

        :param airdrop_id: Airdrop identifier.
        :param address: Claim destination address.
        :return: HTTP status code and the decoded JSON body, for any status.
        :raises Exception: when the exchange itself fails (connection, timeout, non-JSON body).
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release network resources held by the client."""
        pass
