from __future__ import annotations

import pytest

from pricesync.config import (
    ConfigurationError,
    MissingConfigurationError,
    ReverseSyncConfig,
    SchedulerConfig,
    get_reverse_sync_config,
    get_scheduler_config,
    require_env_vars,
)

_SYNC_VARS = (
    "PRICESYNC_INTEGRATION_TYPE",
    "PRICESYNC_CONNECTOR_TYPE",
    "PRICESYNC_PROCESSOR_ALIAS",
    "PRICESYNC_MAX_PENDING_JOBS",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _SYNC_VARS:
        monkeypatch.delenv(name, raising=False)


def test_reverse_sync_defaults() -> None:
    assert get_reverse_sync_config() == ReverseSyncConfig(
        integration_type="commerce",
        connector_type="commerce_product_price",
        processor_alias="commerce_product_price.export",
    )


def test_reverse_sync_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRICESYNC_INTEGRATION_TYPE", " marketplace ")
    monkeypatch.setenv("PRICESYNC_CONNECTOR_TYPE", "marketplace_price")
    monkeypatch.setenv("PRICESYNC_PROCESSOR_ALIAS", "marketplace_price.export")

    config = get_reverse_sync_config()

    assert config.integration_type == "marketplace"
    assert config.connector_type == "marketplace_price"
    assert config.processor_alias == "marketplace_price.export"


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRICESYNC_INTEGRATION_TYPE", "   ")

    assert get_reverse_sync_config().integration_type == "commerce"


def test_scheduler_defaults_and_override(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_scheduler_config() == SchedulerConfig(max_pending_jobs=1000)

    monkeypatch.setenv("PRICESYNC_MAX_PENDING_JOBS", "25")

    assert get_scheduler_config().max_pending_jobs == 25


@pytest.mark.parametrize("raw", ["many", "0", "-3"])
def test_invalid_queue_size_is_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("PRICESYNC_MAX_PENDING_JOBS", raw)

    with pytest.raises(ConfigurationError, match="PRICESYNC_MAX_PENDING_JOBS"):
        get_scheduler_config()


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_lists_missing_and_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_VAR", raising=False)
    monkeypatch.setenv("BLANK_VAR", "  ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_VAR", "BLANK_VAR"])

    assert "BLANK_VAR, MISSING_VAR" in str(exc.value)
