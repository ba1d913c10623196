import json

import pytest

from equation_engine.config import DEFAULT_LEDGER_PATH, MESSAGE_TTL, load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("EQUATION_MESSAGE_TTL", raising=False)
    monkeypatch.delenv("EQUATION_LEDGER_PATH", raising=False)
    cfg = load_config()
    assert cfg.message_ttl == MESSAGE_TTL == 3.0
    assert cfg.ledger_path is None


def test_json_file_then_environment(tmp_path, monkeypatch):
    monkeypatch.delenv("EQUATION_LEDGER_PATH", raising=False)
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"message_ttl": 5, "id_prefix": "ws"}))

    monkeypatch.setenv("EQUATION_MESSAGE_TTL", "1.5")
    cfg = load_config(path)
    assert cfg.message_ttl == 1.5
    assert cfg.id_prefix == "ws"

    monkeypatch.setenv("EQUATION_MESSAGE_TTL", "soon")
    assert load_config(path).message_ttl == 5.0


def test_missing_config_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("EQUATION_MESSAGE_TTL", raising=False)
    monkeypatch.setenv("EQUATION_LEDGER_PATH", str(tmp_path / "l.jsonl"))
    cfg = load_config(tmp_path / "absent.json")
    assert cfg.message_ttl == MESSAGE_TTL
    assert cfg.ledger_path == tmp_path / "l.jsonl"


@pytest.mark.parametrize("bad", ["soon", -2, None, [1]])
def test_bad_file_ttl_uses_default(tmp_path, monkeypatch, bad):
    monkeypatch.delenv("EQUATION_MESSAGE_TTL", raising=False)
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"message_ttl": bad}))
    assert load_config(path).message_ttl == MESSAGE_TTL


def test_default_ledger_path_is_relative():
    assert not DEFAULT_LEDGER_PATH.is_absolute()
    assert DEFAULT_LEDGER_PATH.parts[-1] == "session_ledger.jsonl"
