from __future__ import annotations

import pytest

from pricesync import main as main_module


def test_show_config_prints_effective_settings(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PRICESYNC_INTEGRATION_TYPE", "marketplace")
    monkeypatch.delenv("PRICESYNC_MAX_PENDING_JOBS", raising=False)

    main_module.main(["show-config"])

    out = capsys.readouterr().out
    assert "integration_type: marketplace" in out
    assert "max_pending_jobs: 1000" in out


def test_init_db_uses_given_uri(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}

    def fake_initialise(**kwargs: object) -> str:
        captured.update(kwargs)
        return "sqlite+pysqlite:///:memory:"

    monkeypatch.setattr(main_module, "initialise_database", fake_initialise)

    main_module.main(["init-db", "--database-uri", "sqlite+pysqlite:///:memory:"])

    assert captured == {"database_uri": "sqlite+pysqlite:///:memory:"}
    assert "Database initialised" in capsys.readouterr().out


def test_configuration_error_exits_with_code_2(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("PRICESYNC_MAX_PENDING_JOBS", "lots")

    with pytest.raises(SystemExit) as exc:
        main_module.main(["show-config"])

    assert exc.value.code == 2
    assert "PRICESYNC_MAX_PENDING_JOBS" in capsys.readouterr().err


def test_unexpected_error_exits_with_code_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_initialise(**_: object) -> str:
        raise RuntimeError("disk full")

    monkeypatch.setattr(main_module, "initialise_database", failing_initialise)

    with pytest.raises(SystemExit) as exc:
        main_module.main(["init-db"])

    assert exc.value.code == 1


def test_missing_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        main_module.main([])

    assert exc.value.code == 2
