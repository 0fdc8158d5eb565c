import json

from airdrop_claim import main as cli
from airdrop_claim.claim import ClaimError, ClaimFailure, ClaimSuccess


def _fake_fetch(result, calls):
    async def _fetch(airdrop_id, address, testnet=False):
        calls.append((airdrop_id, address, testnet))
        return result
    return _fetch


def test_prints_claim_and_transaction(monkeypatch, capsys, claim_body):
    calls = []
    monkeypatch.setattr(cli, "fetch_airdrop_claim", _fake_fetch(ClaimSuccess(info=claim_body, claim=claim_body), calls))

    code = cli.main(["airdrop-1", "EQabc", "--testnet", "--transaction"])
    out = capsys.readouterr().out

    assert code == 0
    assert calls == [("airdrop-1", "EQabc", True)]
    assert '"success": true' in out
    assert '"validUntil"' in out
    assert '"stateInit"' in out


def test_failure_exits_with_one(monkeypatch, capsys):
    calls = []
    failure = ClaimFailure(error=ClaimError("locked", "Airdrop is locked by admin"), info={})
    monkeypatch.setattr(cli, "fetch_airdrop_claim", _fake_fetch(failure, calls))

    code = cli.main(["airdrop-1", "EQabc", "--transaction"])
    printed = json.loads(capsys.readouterr().out)

    assert code == 1
    assert calls == [("airdrop-1", "EQabc", False)]
    assert printed["error"] == {"code": "locked", "message": "Airdrop is locked by admin"}
