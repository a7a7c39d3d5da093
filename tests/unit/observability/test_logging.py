"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_data.adapters.memory import ArrayDataSource
from mp_data.application.provider import DataProvider
from mp_data.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "name": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["name"] == "alice"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({field: "value" for field in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive(self) -> None:
        assert SensitiveFieldsFilter().redact({"Token": "t"})["Token"] == SensitiveFieldsFilter.REDACTED

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"ssn"}))
        result = f.redact({"ssn": "123", "password": "kept"})
        assert result == {"ssn": SensitiveFieldsFilter.REDACTED, "password": "kept"}

    def test_redact_deep(self) -> None:
        data = {"params": {"sort": "-name", "token": "abc"}, "rows": 3}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result == {"params": {"sort": "-name", "token": SensitiveFieldsFilter.REDACTED}, "rows": 3}

    def test_original_not_mutated(self) -> None:
        data = {"password": "x"}
        SensitiveFieldsFilter().redact(data)
        assert data == {"password": "x"}


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test.bound", source="users").info("hello", rows=2)
        assert logs == [{"event": "hello", "log_level": "info", "source": "users", "rows": 2}]

    def test_provider_read_emits_debug_event(self) -> None:
        provider = DataProvider(ArrayDataSource([{"id": 1}, {"id": 2}])).with_page_size(1)
        with capture_logs() as logs:
            provider.read()
        events = [e for e in logs if e["event"] == "data_provider.read"]
        assert len(events) == 1
        assert events[0]["log_level"] == "debug"
        assert events[0]["source"] == "ArrayDataSource"
        assert (events[0]["limit"], events[0]["offset"], events[0]["rows"]) == (1, 0, 1)


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_renders_json_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("test.json").info("page.served", page=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "page.served"
        assert payload["page"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "test.json"

    def test_redacts_sensitive_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(sensitive_fields=frozenset({"token"}))
        get_logger("test.redact").warning("request", token="abc", sort="-name")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["token"] == SensitiveFieldsFilter.REDACTED
        assert payload["sort"] == "-name"

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("test.level").debug("hidden")
        assert "hidden" not in capsys.readouterr().err
