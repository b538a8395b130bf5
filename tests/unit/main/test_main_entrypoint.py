from __future__ import annotations

import runpy


def test_main_module_invokes_server(monkeypatch):
    executed = {}

    def fake_main() -> None:
        executed["called"] = True

    monkeypatch.setattr("foulwatch.main.server.main", fake_main)

    runpy.run_module("foulwatch.main.__main__", run_name="__main__")

    assert executed["called"] is True


def test_server_main_runs_uvicorn_with_settings(monkeypatch):
    calls = {}

    def fake_run(app_path, **kwargs) -> None:
        calls["app"] = app_path
        calls.update(kwargs)

    monkeypatch.setenv("GE_PORT", "4100")
    monkeypatch.setattr("foulwatch.main.server.uvicorn.run", fake_run)

    from foulwatch.main.server import main

    main()

    assert calls["app"] == "foulwatch.main.app:app"
    assert calls["port"] == 4100
    assert calls["log_config"] is None
