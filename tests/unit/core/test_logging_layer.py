# =============================================================================
# tests/unit/core/test_logging_layer.py
# Unit tests for mkv_chain.core.logging_layer
# =============================================================================

from __future__ import annotations

import dataclasses

import pytest

from mkv_chain.core.logging_layer import (
    Event,
    EventFilter,
    EventLogger,
    LoggingError,
)


def _logger_with(*types: str) -> EventLogger:
    logger = EventLogger()
    for i, t in enumerate(types):
        logger.log_event(t, {"i": i})
    return logger


class TestLogEvent:
    def test_returns_sequential_ids(self) -> None:
        logger = EventLogger()
        assert logger.log_event("A", {}) == "EVT-0000000000000001"
        assert logger.log_event("A", {}) == "EVT-0000000000000002"

    def test_event_fields(self) -> None:
        logger = EventLogger()
        logger.log_event("TAKE_TO", {"steps": 3})
        (event,) = logger.query_events(EventFilter())
        assert event.seq == 1
        assert event.type == "TAKE_TO"
        assert event.data == {"steps": 3}
        assert len(event.hash) == 64

    def test_event_is_frozen(self) -> None:
        logger = _logger_with("A")
        (event,) = logger.query_events(EventFilter())
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.type = "B"  # type: ignore[misc]

    def test_empty_type_raises(self) -> None:
        with pytest.raises(LoggingError, match="non-empty"):
            EventLogger().log_event("", {})

    def test_non_dict_data_raises(self) -> None:
        with pytest.raises(LoggingError, match="dict"):
            EventLogger().log_event("A", [1, 2])  # type: ignore[arg-type]

    def test_failed_log_does_not_advance_counter(self) -> None:
        logger = EventLogger()
        with pytest.raises(LoggingError):
            logger.log_event("", {})
        assert logger.log_event("A", {}) == "EVT-0000000000000001"


class TestSanitization:
    def test_nan_and_inf_replaced(self) -> None:
        logger = EventLogger()
        logger.log_event("A", {"x": float("nan"), "y": float("inf"), "z": 1.5})
        (event,) = logger.query_events(EventFilter())
        assert event.data == {"x": "NaN_DETECTED", "y": "Inf_DETECTED", "z": 1.5}

    def test_sequences_sanitized_element_wise(self) -> None:
        logger = EventLogger()
        logger.log_event("A", {"v": (0.5, float("-inf"), float("nan"))})
        (event,) = logger.query_events(EventFilter())
        assert event.data["v"] == [0.5, "Inf_DETECTED", "NaN_DETECTED"]

    def test_caller_dict_not_mutated(self) -> None:
        data = {"x": float("inf")}
        EventLogger().log_event("A", data)
        assert data["x"] == float("inf")


class TestHash:
    def test_deterministic_across_loggers(self) -> None:
        a = _logger_with("A", "B")
        b = _logger_with("A", "B")
        assert [e.hash for e in a.iter_events()] == [e.hash for e in b.iter_events()]

    def test_independent_of_key_order(self) -> None:
        a = EventLogger()
        b = EventLogger()
        a.log_event("A", {"x": 1, "y": 2})
        b.log_event("A", {"y": 2, "x": 1})
        assert next(a.iter_events()).hash == next(b.iter_events()).hash

    def test_differs_with_payload(self) -> None:
        a = EventLogger()
        b = EventLogger()
        a.log_event("A", {"x": 0.1})
        b.log_event("A", {"x": 0.2})
        assert next(a.iter_events()).hash != next(b.iter_events()).hash


class TestQuery:
    def test_filter_by_type(self) -> None:
        logger = _logger_with("A", "B", "A")
        events = logger.query_events(EventFilter(event_type="A"))
        assert [e.seq for e in events] == [1, 3]

    def test_filter_min_seq(self) -> None:
        logger = _logger_with("A", "B", "C")
        assert [e.type for e in logger.query_events(EventFilter(min_seq=2))] == ["B", "C"]

    def test_limit_oldest_first(self) -> None:
        logger = _logger_with("A", "B", "C")
        assert [e.type for e in logger.query_events(EventFilter(limit=2))] == ["A", "B"]

    def test_none_filter_raises(self) -> None:
        with pytest.raises(LoggingError):
            EventLogger().query_events(None)  # type: ignore[arg-type]

    def test_iter_events_min_seq(self) -> None:
        logger = _logger_with("A", "B", "C")
        assert [e.type for e in logger.iter_events(3)] == ["C"]

    def test_event_count(self) -> None:
        assert _logger_with("A", "B").event_count() == 2
        assert EventLogger().event_count() == 0

    def test_event_type_is_dataclass(self) -> None:
        assert dataclasses.is_dataclass(Event)
