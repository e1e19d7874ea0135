"""
Domain Events - Things that happened while reporting.

Events are immutable records published on an EventBus. The CLI
subscribes a logger to every event; tests subscribe collectors.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional
from uuid import uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class CodeMarkedUsed(DomainEvent):
    """Event: A virtual product code was marked used for the first time."""

    code: str = ""


@dataclass(frozen=True)
class ReportsStarted(DomainEvent):
    """Event: A report run started."""

    report_names: tuple = ()
    order_count: int = 0


@dataclass(frozen=True)
class ReportGenerated(DomainEvent):
    """Event: A single report produced a result."""

    report_name: str = ""
    value: Any = None


@dataclass(frozen=True)
class ReportFailed(DomainEvent):
    """Event: A single report raised an error."""

    report_name: str = ""
    error: Optional[str] = None


@dataclass(frozen=True)
class ReportsCompleted(DomainEvent):
    """Event: A report run completed."""

    reports_generated: int = 0


EventHandler = Callable[[DomainEvent], None]


class EventBus:
    """
    Dispatches events to the handlers subscribed to their exact type.

    Handlers subscribed to DomainEvent receive every event, after the
    type-specific ones.
    """

    def __init__(self):
        self._handlers: defaultdict[type, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(type(event), []):
            handler(event)
        if type(event) is not DomainEvent:
            for handler in self._handlers.get(DomainEvent, []):
                handler(event)
