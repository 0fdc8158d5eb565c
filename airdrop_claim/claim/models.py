"""
Value types of the airdrop claim API.

Amounts are kept as decimal strings exactly as the API sends them
(smallest jetton / nanoton units) and are only ever parsed with int().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass(frozen=True)
class VestingParameters:
    """Placeholder, the API does not define vesting fields yet."""
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["VestingParameters"]:
        if data is None:
            return None
        return cls(extra=dict(data))


@dataclass(frozen=True)
class TransferMessage:
    """
    Internal message to send in order to claim.

    :param mode: Message sending mode, e.g. 3.
    :param address: Destination in user-friendly form with bounce flag.
    :param payload: Message body, base64.
    :param amount: Attached TON amount in nanotons, decimal string.
    :param state_init: Optional state init, base64.
    """
    mode: int
    address: str
    payload: str
    amount: str
    state_init: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransferMessage":
        return cls(
            mode=data["mode"],
            address=data["address"],
            payload=data["payload"],
            amount=data["amount"],
            state_init=data.get("state_init"),
        )


@dataclass(frozen=True)
class ClaimInfo:
    """Claimable jetton state for one (airdrop, address) pair at query time."""
    jetton: str
    available_jetton_amount: str
    total_jetton_amount: str
    claimed_jetton_amount: str
    vesting_parameters: Optional[VestingParameters] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClaimInfo":
        return cls(**_claim_info_fields(data))

    @property
    def available_amount(self) -> int:
        return int(self.available_jetton_amount)

    @property
    def total_amount(self) -> int:
        return int(self.total_jetton_amount)

    @property
    def claimed_amount(self) -> int:
        return int(self.claimed_jetton_amount)


@dataclass(frozen=True)
class Claim(ClaimInfo):
    """ClaimInfo plus the ready-to-send claim message."""
    claim_message: TransferMessage = field(kw_only=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Claim":
        return cls(
            claim_message=TransferMessage.from_dict(data["claim_message"]),
            **_claim_info_fields(data),
        )


def _claim_info_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "jetton": data["jetton"],
        "available_jetton_amount": data["available_jetton_amount"],
        "total_jetton_amount": data["total_jetton_amount"],
        "claimed_jetton_amount": data["claimed_jetton_amount"],
        "vesting_parameters": VestingParameters.from_dict(data.get("vesting_parameters")),
    }


# --- Results ---

class _NoInfo:
    """Marks a failure that received nothing from the API (a JSON null body is still info)."""

    def __repr__(self) -> str:
        return "NO_INFO"


NO_INFO = _NoInfo()


@dataclass(frozen=True)
class ClaimError:
    code: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class ClaimSuccess:
    """
    Successful claim lookup. The API returns claim info and the claim message
    in one object, so `info` and `claim` are two views of the same payload.
    """
    info: Any
    claim: Any
    success: bool = field(default=True, init=False)

    def claim_info(self) -> ClaimInfo:
        return ClaimInfo.from_dict(self.info)

    def user_claim(self) -> Claim:
        return Claim.from_dict(self.claim)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "info": self.info, "claim": self.claim}


@dataclass(frozen=True)
class ClaimFailure:
    """Failed claim lookup. `info` is NO_INFO when nothing was received from the API."""
    error: ClaimError
    info: Any = NO_INFO
    success: bool = field(default=False, init=False)

    @property
    def has_info(self) -> bool:
        return self.info is not NO_INFO

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"success": False}
        if self.has_info:
            result["info"] = self.info
        result["error"] = self.error.to_dict()
        return result


ClaimResult = Union[ClaimSuccess, ClaimFailure]


# --- Wallet transaction ---

@dataclass(frozen=True)
class TransactionMessage:
    address: str
    amount: str
    payload: str
    state_init: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "amount": self.amount,
            "payload": self.payload,
            "stateInit": self.state_init,
        }


@dataclass(frozen=True)
class TransactionDescriptor:
    """Transaction request in the shape wallets accept: {validUntil, messages}."""
    valid_until: int
    messages: List[TransactionMessage]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "validUntil": self.valid_until,
            "messages": [m.to_dict() for m in self.messages],
        }
