import io
import json

from equation_engine import session_runner


def test_lines_are_committed_in_order(capsys, monkeypatch):
    monkeypatch.delenv("EQUATION_LEDGER_PATH", raising=False)
    session_runner.main(["--line", "a/b", "--line", "+", "--line", "c/d", "--graph"])
    out = capsys.readouterr().out
    assert "Canvas: a/b + c/d" in out
    assert "n0 -> n1" in out
    assert "'pattern': 'E O E'" in out


def test_json_output_and_rejection(capsys, monkeypatch):
    monkeypatch.delenv("EQUATION_LEDGER_PATH", raising=False)
    session_runner.main(["--json", "--line", "a/b", "--line", "ab"])
    lines = [json.loads(l) for l in capsys.readouterr().out.splitlines()]
    assert lines[0]["state"] == "valid"
    assert lines[1]["live_input"] == "ab"
    assert lines[1]["state"] == "invalid"
    assert lines[1]["message"].startswith("Cannot commit")


def test_stdin_commands(capsys, monkeypatch):
    monkeypatch.delenv("EQUATION_LEDGER_PATH", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO("a/b\n:reset\nx\n:quit\ny\n"))
    session_runner.main([])
    out = capsys.readouterr().out
    assert "Session reset." in out
    assert out.rstrip().endswith("Canvas: x")


def test_ledger_flag(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("EQUATION_LEDGER_PATH", raising=False)
    path = tmp_path / "ledger.jsonl"
    session_runner.main(["--ledger", str(path), "--line", "a/b"])
    assert path.is_file()
    assert "Session ledger" in capsys.readouterr().out
