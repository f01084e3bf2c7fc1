"""Observability hooks injected by the host application.

The algorithms never talk to a logging or metrics backend directly; callers
hand in any object with these methods (a thin wrapper around ``logging``,
structlog, a StatsD client, a test double...).
"""

from typing import Protocol, Any

class Logger(Protocol):
    """Structured logger used by the matcher, segmenter and lookup runtime."""

    def info(self, msg: str, **kv: Any) -> None:
        """Record a routine event, e.g. a finished lookup."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Record a degraded result, e.g. a segment that could not be located."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Record a failure the caller should look at."""
        ...

class Meter(Protocol):
    """Counters and observations for match quality."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment counter ``name`` (e.g. ``tmcore.match.hit``)."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record a sample for ``name`` (e.g. ``tmcore.match.best_score``)."""
        ...
