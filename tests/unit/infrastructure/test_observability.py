"""Unit tests for structlog configuration and correlation IDs."""

import asyncio
import logging

import pytest
import structlog

from eventnotify.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from eventnotify.infrastructure.observability.logging import (
    _get_log_level,
    build_processors,
)


class TestCorrelation:
    def test_generated_ids_are_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()

    @pytest.mark.asyncio
    async def test_set_and_get_within_context(self) -> None:
        async def in_request() -> str:
            set_correlation_id("req-1")
            await asyncio.sleep(0)
            return get_correlation_id()

        assert await asyncio.create_task(in_request()) == "req-1"

    @pytest.mark.asyncio
    async def test_tasks_do_not_leak_ids(self) -> None:
        async def in_request() -> None:
            set_correlation_id("req-2")

        await asyncio.create_task(in_request())

        assert get_correlation_id() != "req-2"

    @pytest.mark.asyncio
    async def test_processor_adds_id_when_set(self) -> None:
        async def in_request() -> dict:
            set_correlation_id("req-3")
            return correlation_id_processor(None, "info", {"event": "x"})

        assert (await asyncio.create_task(in_request()))["correlation_id"] == "req-3"

    @pytest.mark.asyncio
    async def test_processor_keeps_explicit_id(self) -> None:
        async def in_request() -> dict:
            set_correlation_id("ctx")
            return correlation_id_processor(None, "info", {"correlation_id": "explicit"})

        assert (await asyncio.create_task(in_request()))["correlation_id"] == "explicit"

    @pytest.mark.asyncio
    async def test_processor_without_id_leaves_event_alone(self) -> None:
        async def fresh_context() -> dict:
            set_correlation_id("")
            return correlation_id_processor(None, "info", {"event": "x"})

        assert await asyncio.create_task(fresh_context()) == {"event": "x"}


class TestProcessors:
    def test_production_renders_json(self) -> None:
        processors = build_processors("production")

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert correlation_id_processor in processors

    def test_development_renders_console(self) -> None:
        assert isinstance(build_processors("development")[-1], structlog.dev.ConsoleRenderer)

    def test_log_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert _get_log_level() == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert _get_log_level() == logging.INFO
