"""
Unit tests for ProductService.
"""

import pytest

from core.domain.exceptions import (
    IdentifierMismatchError,
    NameConflictError,
    OfficeNotFoundError,
    ParentReassignmentError,
    ProductNotFoundError,
)
from core.infrastructure.events import InMemoryEventBus
from offices.domain.office import Office
from products.application.services.product_service import ProductService
from products.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from products.domain.product import Product


class _Recorder:
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


@pytest.fixture
def published(monkeypatch):
    """Route service events to a private bus and collect them."""
    bus = InMemoryEventBus()
    recorder = _Recorder()
    for event_type in (ProductCreated, ProductUpdated, ProductDeleted):
        bus.subscribe(event_type, recorder)
    monkeypatch.setattr("products.application.services.product_service.event_bus", bus)
    return recorder.events


@pytest.fixture
def north(office_repo):
    return office_repo.add(Office.create(name="North", franchise_id=1))


@pytest.fixture
def service(product_repo, office_repo):
    return ProductService(product_repository=product_repo, office_repository=office_repo)


@pytest.mark.asyncio
class TestCreateProduct:
    """Tests for create_product."""

    async def test_creates_in_existing_office(self, service, product_repo, north, published):
        result = await service.create_product(
            Product.create(name="widget ", stock=3, office_id=north.id)
        )

        assert result.name == "WIDGET"
        assert product_repo.rows[result.id] == result
        assert [type(e) for e in published] == [ProductCreated]
        assert published[0].stock == 3

    async def test_missing_office_saves_nothing(self, service, product_repo):
        with pytest.raises(OfficeNotFoundError, match="Not found office 8"):
            await service.create_product(Product.create(name="Widget", stock=3, office_id=8))

        assert product_repo.calls == []

    async def test_duplicate_name(self, service, product_repo, north):
        product_repo.add(Product.create(name="Widget", stock=1, office_id=north.id))

        with pytest.raises(NameConflictError):
            await service.create_product(Product.create(name="WIDGET", stock=2, office_id=north.id))

        assert "save" not in product_repo.call_names()


@pytest.mark.asyncio
class TestUpdateProduct:
    """Tests for update_product."""

    async def test_id_mismatch_fails_before_any_io(self, service, product_repo, office_repo):
        with pytest.raises(IdentifierMismatchError):
            await service.update_product(
                5, Product.create(name="Widget", stock=1, office_id=1, product_id=7)
            )

        assert product_repo.calls == []
        assert office_repo.calls == []

    async def test_unknown_product(self, service):
        with pytest.raises(ProductNotFoundError, match="Not found product 5"):
            await service.update_product(
                5, Product.create(name="Widget", stock=1, office_id=1, product_id=5)
            )

    async def test_changes_stock(self, service, product_repo, north, published):
        widget = product_repo.add(Product.create(name="Widget", stock=1, office_id=north.id))

        result = await service.update_product(
            widget.id,
            Product.create(name="Widget", stock=50, office_id=north.id, product_id=widget.id),
        )

        assert result.stock == 50
        assert product_repo.rows[widget.id].stock == 50
        assert [type(e) for e in published] == [ProductUpdated]

    async def test_moving_to_another_office_is_rejected(self, service, product_repo, north):
        widget = product_repo.add(Product.create(name="Widget", stock=1, office_id=north.id))

        with pytest.raises(ParentReassignmentError):
            await service.update_product(
                widget.id,
                Product.create(name="Widget", stock=1, office_id=north.id + 1, product_id=widget.id),
            )

    async def test_renaming_onto_another_product_fails(self, service, product_repo, north):
        product_repo.add(Product.create(name="Widget", stock=1, office_id=north.id))
        gadget = product_repo.add(Product.create(name="Gadget", stock=1, office_id=north.id))

        with pytest.raises(NameConflictError):
            await service.update_product(
                gadget.id,
                Product.create(name="widget", stock=1, office_id=north.id, product_id=gadget.id),
            )


@pytest.mark.asyncio
class TestDeleteProduct:
    """Tests for delete_product."""

    async def test_deletes_existing(self, service, product_repo, published):
        widget = product_repo.add(Product.create(name="Widget", stock=1, office_id=2))

        await service.delete_product(widget.id)

        assert widget.id not in product_repo.rows
        assert published[0].product_id == widget.id
        assert published[0].office_id == 2

    async def test_missing_product_never_calls_delete(self, service, product_repo, published):
        with pytest.raises(ProductNotFoundError):
            await service.delete_product(404)

        assert "delete" not in product_repo.call_names()
        assert published == []


@pytest.mark.asyncio
class TestTopStock:
    """Tests for top_stock_by_franchise."""

    async def test_one_product_per_office(self, service, product_repo):
        product_repo.office_franchise.update({1: 7, 2: 7, 3: 8})
        product_repo.add(Product.create(name="P10", stock=10, office_id=1))
        p30 = product_repo.add(Product.create(name="P30", stock=30, office_id=1))
        p5 = product_repo.add(Product.create(name="P5", stock=5, office_id=2))
        product_repo.add(Product.create(name="OTHER", stock=99, office_id=3))

        result = await service.top_stock_by_franchise(7)

        assert result == [p30, p5]

    async def test_unknown_franchise_is_empty(self, service):
        assert await service.top_stock_by_franchise(123) == []


@pytest.mark.asyncio
async def test_get_product(service, product_repo):
    widget = product_repo.add(Product.create(name="Widget", stock=1, office_id=1))

    assert await service.get_product(widget.id) == widget

    with pytest.raises(ProductNotFoundError):
        await service.get_product(widget.id + 1)
