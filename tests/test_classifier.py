import pytest

from airdrop_claim.claim import STATUS_ERRORS, ClaimFailure, ClaimSuccess, classify

EXPECTED = {
    404: ("not_found", "Airdrop not found or not processed yet"),
    425: ("too_early", "The nearest vesting date has not arrived yet"),
    409: ("already_claimed", "All Jettons have already been claimed"),
    423: ("locked", "Airdrop is locked by admin"),
    429: ("blockchain_overload", "Blockchain is currently overloaded"),
}


def test_success_exposes_same_payload_as_info_and_claim():
    body = {
        "jetton": "X",
        "available_jetton_amount": "100",
        "total_jetton_amount": "100",
        "claimed_jetton_amount": "0",
        "claim_message": {"mode": 3, "address": "A", "payload": "P", "amount": "100"},
    }
    result = classify(200, body)

    assert isinstance(result, ClaimSuccess)
    assert result.success is True
    assert result.info is body
    assert result.claim is body
    assert result.to_dict() == {"success": True, "info": body, "claim": body}


@pytest.mark.parametrize("status", sorted(EXPECTED))
def test_known_statuses_map_to_table(status):
    body = {"jetton": "X", "available_jetton_amount": "0"}
    result = classify(status, body)

    assert isinstance(result, ClaimFailure)
    assert result.success is False
    assert (result.error.code, result.error.message) == EXPECTED[status]
    assert result.info is body


def test_already_claimed_with_empty_body():
    assert classify(409, {}).to_dict() == {
        "success": False,
        "info": {},
        "error": {"code": "already_claimed", "message": "All Jettons have already been claimed"},
    }


@pytest.mark.parametrize("status", [201, 204, 400, 401, 403, 500, 502, 503])
def test_other_statuses_are_unknown_errors(status):
    result = classify(status, {"detail": "whatever"})

    assert result.success is False
    assert result.error.code == "unknown_error"
    assert result.error.message == "Unknown error occurred"
    assert result.info == {"detail": "whatever"}


def test_non_object_bodies_are_passed_through():
    assert classify(500, ["unexpected"]).info == ["unexpected"]
    assert classify(200, None).claim is None


def test_status_table_is_read_only():
    with pytest.raises(TypeError):
        STATUS_ERRORS[500] = STATUS_ERRORS[404]


def test_null_body_is_kept_as_info():
    result = classify(404, None)

    assert result.has_info is True
    assert result.to_dict() == {
        "success": False,
        "info": None,
        "error": {"code": "not_found", "message": "Airdrop not found or not processed yet"},
    }
