"""
Event handlers for domain events.

These handlers process domain events asynchronously for side effects
like audit logging and metrics.
"""

import logging
import re

from core.domain.events import DomainEvent, EventHandler
from core.metrics import entity_writes_total
from franchises.domain.events import FranchiseCreated, FranchiseUpdated
from offices.domain.events import OfficeCreated, OfficeUpdated
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated

logger = logging.getLogger(__name__)

HIERARCHY_EVENTS = (
    FranchiseCreated,
    FranchiseUpdated,
    OfficeCreated,
    OfficeUpdated,
    ProductCreated,
    ProductUpdated,
    ProductDeleted,
)

_EVENT_NAME = re.compile(r"^(Franchise|Office|Product)(Created|Updated|Deleted)$")


class AuditLogEventHandler(EventHandler):
    """
    Event handler for audit logging.

    Writes one structured log line per domain event.
    """

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for audit logging.

        Args:
            event: Domain event to log
        """
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={"event": event.to_dict()},
        )


class WriteMetricsEventHandler(EventHandler):
    """Event handler counting persisted writes per entity and action."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for metrics.

        Args:
            event: Domain event
        """
        match = _EVENT_NAME.match(event.event_type)
        if not match:
            logger.debug("No write metric for %s", event.event_type)
            return
        entity, action = match.groups()
        entity_writes_total.labels(entity=entity.lower(), action=action.lower()).inc()


_audit_handler = AuditLogEventHandler()
_metrics_handler = WriteMetricsEventHandler()


def register_event_handlers():
    """Register all event handlers with the event bus. Safe to call twice."""
    from core.infrastructure.events import event_bus

    for event_type in HIERARCHY_EVENTS:
        event_bus.subscribe(event_type, _audit_handler)
        event_bus.subscribe(event_type, _metrics_handler)

    logger.info("Event handlers registered")
