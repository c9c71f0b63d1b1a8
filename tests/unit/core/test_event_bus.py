"""
Unit tests for the in-memory event bus and the hierarchy event handlers.
"""

import logging

import pytest
from prometheus_client import REGISTRY

from core.domain.events import EventHandler
from core.infrastructure.event_handlers import (
    HIERARCHY_EVENTS,
    AuditLogEventHandler,
    WriteMetricsEventHandler,
)
from core.infrastructure.events import InMemoryEventBus
from franchises.domain.events import FranchiseCreated
from products.domain.events import ProductDeleted


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    async def handle(self, event):
        raise RuntimeError("boom")


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_reaches_subscribers_of_that_type_only(self):
        bus = InMemoryEventBus()
        franchise_handler = RecordingHandler()
        product_handler = RecordingHandler()
        bus.subscribe(FranchiseCreated, franchise_handler)
        bus.subscribe(ProductDeleted, product_handler)

        event = FranchiseCreated(franchise_id=1, name="ACME")
        await bus.publish(event)

        assert franchise_handler.events == [event]
        assert product_handler.events == []

    async def test_subscribing_twice_delivers_once(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(FranchiseCreated, handler)
        bus.subscribe(FranchiseCreated, handler)

        await bus.publish(FranchiseCreated(franchise_id=1, name="ACME"))

        assert len(handler.events) == 1

    async def test_failing_handler_does_not_fail_publisher(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(FranchiseCreated, FailingHandler())
        bus.subscribe(FranchiseCreated, handler)

        await bus.publish(FranchiseCreated(franchise_id=1, name="ACME"))

        assert len(handler.events) == 1

    async def test_publish_without_subscribers_is_a_no_op(self):
        await InMemoryEventBus().publish(ProductDeleted(product_id=1, office_id=2))

    async def test_clear_drops_subscriptions(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(FranchiseCreated, handler)
        bus.clear()

        await bus.publish(FranchiseCreated(franchise_id=1, name="ACME"))

        assert handler.events == []


@pytest.mark.asyncio
class TestHierarchyEventHandlers:
    """Tests for the audit log and write metrics handlers."""

    async def test_audit_handler_logs_event(self, caplog):
        event = ProductDeleted(product_id=4, office_id=2)

        with caplog.at_level(logging.INFO, logger="core.infrastructure.event_handlers"):
            await AuditLogEventHandler().handle(event)

        record = next(r for r in caplog.records if r.getMessage().startswith("Audit log"))
        assert record.getMessage() == "Audit log: ProductDeleted - 4"
        assert record.event["office_id"] == 2

    async def test_metrics_handler_counts_writes(self):
        labels = {"entity": "product", "action": "deleted"}
        before = REGISTRY.get_sample_value("entity_writes_total", labels) or 0.0

        await WriteMetricsEventHandler().handle(ProductDeleted(product_id=4, office_id=2))

        assert REGISTRY.get_sample_value("entity_writes_total", labels) == before + 1

    async def test_every_write_event_is_covered(self):
        names = {event_type.__name__ for event_type in HIERARCHY_EVENTS}
        assert names == {
            "FranchiseCreated",
            "FranchiseUpdated",
            "OfficeCreated",
            "OfficeUpdated",
            "ProductCreated",
            "ProductUpdated",
            "ProductDeleted",
        }


def test_event_to_dict():
    event = FranchiseCreated(franchise_id=3, name="ACME")

    data = event.to_dict()

    assert data["event_type"] == "FranchiseCreated"
    assert data["aggregate_id"] == "3"
    assert data["name"] == "ACME"
    assert isinstance(data["event_id"], str)
