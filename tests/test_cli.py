from __future__ import annotations

import pytest

import apimocker.cli as cli


def test_missing_file_exits_before_serving(tmp_path, monkeypatch, capsys):
    served = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: served.append(kw))

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--file", str(tmp_path / "nope.json")])

    assert excinfo.value.code == 1
    assert "Error:" in capsys.readouterr().err
    assert served == []


def test_malformed_file_exits(tmp_path, monkeypatch):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-f", str(bad)])
    assert excinfo.value.code == 1


def test_serves_loaded_app(data_file, monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))

    cli.main(["--file", str(data_file), "--host", "127.0.0.1", "--port", "4010"])

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4010
    assert app.state.collection_service.get_one("users", "1")["name"] == "Alice"


def test_file_flag_is_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_unknown_log_level_is_rejected(data_file, monkeypatch):
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **kw: None)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--file", str(data_file), "--log-level", "verbose"])
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive(data_file, monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kw: calls.append(kw))
    cli.main(["--file", str(data_file), "--log-level", "debug"])
    assert calls[0]["log_level"] == "debug"


def test_bad_log_level_env_falls_back_to_info(data_file, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kw: calls.append(kw))
    cli.main(["--file", str(data_file)])
    assert calls[0]["log_level"] == "info"
