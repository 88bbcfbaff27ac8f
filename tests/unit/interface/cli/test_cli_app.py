from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

The RPC-backed client is replaced by a SocialDb over the in-memory
FakeSigner, so commands run without network access.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from near_socialdb.client import SocialDb
from near_socialdb.infra.logging import shutdown_logging
from near_socialdb.interface.cli import app as cli_app


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    shutdown_logging()


@pytest.fixture
def store(make_signer):
    return make_signer(
        account_id="alice.near",
        data={"alice.near": {"profile": {"name": "Alice"}}},
        storage={"alice.near": {"used_bytes": 900, "available_bytes": 5000}},
    )


def _run(argv, signer):
    with patch.object(cli_app, "build_client", return_value=SocialDb(signer, "social.near")):
        return cli_app.main(["--use-defaults"] + argv)


def test_get_prints_json(store, capsys):
    code = _run(["get", "alice.near/profile/**"], store)

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"alice.near": {"profile": {"name": "Alice"}}}


def test_keys_prints_one_path_per_line(store, capsys):
    store.keys_response = {"alice.near": {"profile": {"name": True, "image": {"url": True}}}}

    code = _run(["keys", "alice.near/profile/**"], store)

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "alice.near/profile/name",
        "alice.near/profile/image/url",
    ]


def test_plan_reports_diff_and_deposit(store, tmp_path: Path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps(
        {"alice.near": {"profile": {"name": "Alice", "bio": "hi"}}}
    ), encoding="utf-8")

    code = _run(["--account-id", "alice.near", "plan", str(request)], store)

    assert code == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["data"] == {"alice.near": {"profile": {"bio": "hi"}}}
    assert summary["deposit"] == "0"
    assert store.writes == []


def test_plan_for_other_account_is_usage_error(store, tmp_path: Path):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"bob.near": {"a": 1}}), encoding="utf-8")

    assert _run(["plan", str(request)], store) == 2


def test_plan_with_unreadable_file_is_usage_error(store, tmp_path: Path):
    assert _run(["plan", str(tmp_path / "missing.json")], store) == 2


def test_plan_with_malformed_json_is_usage_error(store, tmp_path: Path, caplog):
    request = tmp_path / "request.json"
    request.write_text("{not json", encoding="utf-8")

    assert _run(["plan", str(request)], store) == 2
    assert "Cannot read write request" in caplog.text


def test_unexpected_errors_outside_request_loading_propagate(store):
    with patch.object(store, "view", side_effect=ValueError("bad payload")):
        with pytest.raises(ValueError):
            _run(["get", "alice.near/**"], store)


def test_signer_failures_exit_with_one(store):
    from near_socialdb.domain.errors import TransportError

    with patch.object(store, "view", side_effect=TransportError("node down")):
        assert _run(["get", "alice.near/**"], store) == 1


def test_dump_config(capsys):
    code = cli_app.main(["--use-defaults", "--network", "testnet", "--dump-config"])

    assert code == 0
    conf = json.loads(capsys.readouterr().out)
    assert conf["contract_name"] == "v1.social08.testnet"


def test_missing_command_prints_help():
    assert cli_app.main(["--use-defaults"]) == 2
