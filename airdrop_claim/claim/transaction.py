import math
import time
from typing import Any, Mapping, Optional, Union

from .models import Claim, TransactionDescriptor, TransactionMessage

TRANSACTION_VALIDITY_SECONDS = 300  # 5 minutes


def build_transaction(claim: Union[Claim, Mapping[str, Any]],
                      now: Optional[float] = None) -> TransactionDescriptor:
    """
    Creates a wallet transaction request from a claim.

    :param claim: Claim, or the raw claim object returned by the API.
    :param now: Unix time in seconds, defaults to the current time.
    :return: TransactionDescriptor with one message, valid for 5 minutes.
    """
    if not isinstance(claim, Claim):
        claim = Claim.from_dict(claim)
    if now is None:
        now = time.time()

    message = claim.claim_message
    return TransactionDescriptor(
        valid_until=math.floor(now) + TRANSACTION_VALIDITY_SECONDS,
        messages=[
            TransactionMessage(
                address=message.address,
                amount=message.amount,
                payload=message.payload,
                state_init=message.state_init,
            )
        ],
    )
