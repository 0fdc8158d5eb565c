from .classifier import STATUS_ERRORS, UNKNOWN_ERROR, classify
from .fetcher import NETWORK_ERROR, fetch_airdrop_claim, fetch_airdrop_claims
from .models import (
    NO_INFO,
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
)
from .transaction import TRANSACTION_VALIDITY_SECONDS, build_transaction

__all__ = [
    "NO_INFO",
    "STATUS_ERRORS",
    "UNKNOWN_ERROR",
    "NETWORK_ERROR",
    "TRANSACTION_VALIDITY_SECONDS",
    "classify",
    "fetch_airdrop_claim",
    "fetch_airdrop_claims",
    "build_transaction",
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
]
