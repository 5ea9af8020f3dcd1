"""
Trace Hooks

Optional instrumentation for the key schedule and the block cipher. A trace
hook is any callable taking ``(event, data)``; it is invoked after the
arithmetic of each traced step and receives copies of the intermediate
values. Tracing is off unless a hook is passed in.

Trace data contains key material. Only enable it for debugging.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

TRACE_KEY_PACKED = 'key_packed'
TRACE_TABLE_INITIALIZED = 'table_initialized'
TRACE_KEY_MIXED = 'key_mixed'
TRACE_ENCRYPT_ROUND = 'encrypt_round'
TRACE_DECRYPT_ROUND = 'decrypt_round'

TRACE_EVENTS = (
    TRACE_KEY_PACKED,
    TRACE_TABLE_INITIALIZED,
    TRACE_KEY_MIXED,
    TRACE_ENCRYPT_ROUND,
    TRACE_DECRYPT_ROUND,
)

TraceHook = Callable[[str, Dict[str, Any]], None]


def emit(hook: Optional[TraceHook], event: str, **data: Any) -> None:
    """Send ``event`` to ``hook`` if one is installed."""
    if hook is not None:
        hook(event, data)


class LoggingTraceHook:
    """
    Trace hook that forwards every event to a logger.

    Args:
        logger: Logger to write to (default: this module's logger)
        level: Logging level for trace records
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def __call__(self, event: str, data: Dict[str, Any]) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        self.logger.log(self.level, "%s: %s", event, _format_data(data))


class CollectingTraceHook:
    """Trace hook that records ``(event, data)`` pairs in memory."""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def __call__(self, event: str, data: Dict[str, Any]) -> None:
        self.events.append((event, dict(data)))

    def of(self, event: str) -> List[Dict[str, Any]]:
        """Return the data of every recorded occurrence of ``event``."""
        return [data for name, data in self.events if name == event]

    def clear(self) -> None:
        self.events.clear()


def _format_data(data: Dict[str, Any]) -> str:
    parts = []
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            value = '[' + ', '.join(f"{v:#x}" for v in value) + ']'
        elif isinstance(value, int) and key != 'round':
            value = f"{value:#x}"
        parts.append(f"{key}={value}")
    return ' '.join(parts)
