from types import MappingProxyType
from typing import Any, Mapping

from .models import ClaimError, ClaimFailure, ClaimResult, ClaimSuccess

# HTTP status -> error returned by the claim API for a non-200 response
STATUS_ERRORS: Mapping[int, ClaimError] = MappingProxyType({
    404: ClaimError("not_found", "Airdrop not found or not processed yet"),
    425: ClaimError("too_early", "The nearest vesting date has not arrived yet"),
    409: ClaimError("already_claimed", "All Jettons have already been claimed"),
    423: ClaimError("locked", "Airdrop is locked by admin"),
    429: ClaimError("blockchain_overload", "Blockchain is currently overloaded"),
})

UNKNOWN_ERROR = ClaimError("unknown_error", "Unknown error occurred")


def classify(status: int, data: Any) -> ClaimResult:
    """
    Maps an API status code and decoded body to a claim result.
    Never raises. The body is passed through as `info` for every status.
    """
    if status == 200:
        return ClaimSuccess(info=data, claim=data)

    return ClaimFailure(error=STATUS_ERRORS.get(status, UNKNOWN_ERROR), info=data)
