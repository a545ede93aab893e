# mkv_chain/core/logging_layer.py
# Logging Layer -- event-sourced, in-memory record of chain operations.
#
# Scope: sequence-numbered events with a deterministic SHA-256 digest each.
# No file IO. No global mutable state. No wall-clock time.
#
# Canonical import:
#   from mkv_chain.core.logging_layer import EventLogger, Event, EventFilter
#
# Prohibited: datetime.now(), uuid, random, file IO, global mutable state

# ===========================================================================
# SECTION 1 -- STDLIB IMPORTS
# ===========================================================================

import hashlib
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

# ===========================================================================
# SECTION 2 -- CONSTANTS
# ===========================================================================

# Logged in place of non-finite floats; the event is never dropped.
_NAN_SENTINEL: str = "NaN_DETECTED"
_INF_SENTINEL: str = "Inf_DETECTED"

_HASH_SEP: str = "|"

# Event types emitted by MarkovChain.
EVENT_CHAIN_CREATED: str = "CHAIN_CREATED"
EVENT_TRANS_REPLACED: str = "TRANS_REPLACED"
EVENT_INIT_REPLACED: str = "INIT_REPLACED"
EVENT_TAKE_TO: str = "TAKE_TO"

# ===========================================================================
# SECTION 3 -- DATACLASSES: Event, EventFilter
# ===========================================================================

@dataclass(frozen=True)
class Event:
    """
    Immutable record of a single event.

    Fields
    ------
    id   : Deterministic identifier derived from the logger's counter.
    seq  : The counter value itself (1-based, strictly increasing).
    type : Category string (CHAIN_CREATED, TAKE_TO, ...).
    data : Sanitized key-value payload. NaN/Inf replaced with sentinels.
    hash : SHA-256 hex digest over (id, type, data).
    """
    id: str
    seq: int
    type: str
    data: Dict[str, Any]
    hash: str


@dataclass
class EventFilter:
    """
    Filter specification for EventLogger.query_events().

    event_type : If set, only events of this type are returned.
    min_seq    : If set, only events with seq >= min_seq are returned.
    limit      : If set, at most this many events (oldest first).
    """
    event_type: Optional[str] = None
    min_seq: Optional[int] = None
    limit: Optional[int] = None


# ===========================================================================
# SECTION 4 -- INTERNAL HELPERS
# ===========================================================================

def _sanitize_numeric(value: Any) -> Any:
    """
    Replace float NaN or Inf with the matching sentinel string.

    Lists and tuples are sanitized element-wise and stored as lists, so a
    vector payload survives with its non-finite components marked.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return _NAN_SENTINEL
        if math.isinf(value):
            return _INF_SENTINEL
        return value
    if isinstance(value, (list, tuple)):
        return [_sanitize_numeric(v) for v in value]
    return value


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new dict with every value passed through _sanitize_numeric()."""
    return {k: _sanitize_numeric(v) for k, v in data.items()}


def _compute_hash(event_id: str, event_type: str, data: Dict[str, Any]) -> str:
    """
    Deterministic SHA-256 over event_id, event_type and the sorted payload.

    repr(sorted(data.items())) makes the digest independent of dict
    insertion order. Floats enter through repr(), which round-trips exactly.
    """
    sorted_items: str = repr(sorted(data.items()))
    preimage: str = event_id + _HASH_SEP + event_type + _HASH_SEP + sorted_items
    return hashlib.sha256(preimage.encode("ascii", errors="replace")).hexdigest()


def _make_event_id(counter: int) -> str:
    """Format: "EVT-{counter:016d}"."""
    return "EVT-{:016d}".format(counter)


# ===========================================================================
# SECTION 5 -- EventLogger
# ===========================================================================

class EventLogger:
    """
    In-memory event log.

    Each instance is independent; events are held in insertion order in
    _store. log_event() raises LoggingError rather than dropping an event.
    """

    def __init__(self) -> None:
        self._store: List[Event] = []
        self._counter: int = 0

    def log_event(self, event_type: str, data: Dict[str, Any]) -> str:
        """
        Record one event and return its ID.

        Raises
        ------
        LoggingError : If event_type is empty or data is not a dict.
        """
        if not event_type or not isinstance(event_type, str):
            raise LoggingError("event_type must be a non-empty string")
        if not isinstance(data, dict):
            raise LoggingError(
                "data must be a dict; got: {}".format(type(data))
            )

        self._counter += 1
        event_id: str = _make_event_id(self._counter)
        sanitized: Dict[str, Any] = _sanitize_data(data)

        self._store.append(Event(
            id=event_id,
            seq=self._counter,
            type=event_type,
            data=sanitized,
            hash=_compute_hash(event_id, event_type, sanitized),
        ))
        return event_id

    def query_events(self, filter: EventFilter) -> List[Event]:
        """
        Return events matching filter, oldest first.

        Filtering order: event_type, min_seq, then limit truncation.
        """
        if filter is None:
            raise LoggingError("filter must not be None")

        results: List[Event] = []
        for event in self._store:
            if filter.event_type is not None and event.type != filter.event_type:
                continue
            if filter.min_seq is not None and event.seq < filter.min_seq:
                continue
            results.append(event)

        if filter.limit is not None:
            results = results[: filter.limit]

        return results

    def iter_events(self, min_seq: int = 1) -> Iterator[Event]:
        """Yield events with seq >= min_seq in insertion order."""
        for event in self._store:
            if event.seq >= min_seq:
                yield event

    def event_count(self) -> int:
        return len(self._store)


# ===========================================================================
# SECTION 6 -- EXCEPTIONS
# ===========================================================================

class LoggingError(Exception):
    """
    Raised by EventLogger when an invariant is violated.

    Never silently swallowed; callers handle it or let it propagate.
    """
