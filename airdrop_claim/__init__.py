"""
Client for the tonapi jetton airdrop claim API.

Fetches the claim state of an address, maps API statuses to typed results
and turns a successful claim into a wallet transaction request.
"""

__version__ = "2.0.0"

from .claim import (
    NO_INFO,
    STATUS_ERRORS,
    NETWORK_ERROR,
    UNKNOWN_ERROR,
    TRANSACTION_VALIDITY_SECONDS,
    Claim,
    ClaimError,
    ClaimFailure,
    ClaimInfo,
    ClaimResult,
    ClaimSuccess,
    TransactionDescriptor,
    TransactionMessage,
    TransferMessage,
    VestingParameters,
    build_transaction,
    classify,
    fetch_airdrop_claim,
    fetch_airdrop_claims,
)

__all__ = [
    "NO_INFO",
    "STATUS_ERRORS",
    "NETWORK_ERROR",
    "UNKNOWN_ERROR",
    "TRANSACTION_VALIDITY_SECONDS",
    "Claim",
    "ClaimError",
    "ClaimFailure",
    "ClaimInfo",
    "ClaimResult",
    "ClaimSuccess",
    "TransactionDescriptor",
    "TransactionMessage",
    "TransferMessage",
    "VestingParameters",
    "build_transaction",
    "classify",
    "fetch_airdrop_claim",
    "fetch_airdrop_claims",
]
