"""
Pytest configuration and shared fixtures.
"""

import itertools
from dataclasses import replace

import pytest
from asgiref.sync import async_to_sync

from core.domain.exceptions import NameConflictError
from franchises.domain.franchise import Franchise
from franchises.infrastructure.repositories.django_franchise_repository import (
    DjangoFranchiseRepository,
)
from franchises.ports.franchise_repository import FranchiseRepository
from offices.domain.office import Office
from offices.infrastructure.repositories.django_office_repository import DjangoOfficeRepository
from offices.ports.office_repository import OfficeRepository
from products.domain.product import Product
from products.domain.services import TopStockSelector
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from products.ports.product_repository import ProductRepository


class _InMemoryRepository:
    """Dict-backed storage shared by the fake repositories.

    Every call is recorded in ``calls`` so tests can assert which
    collaborators were (or were not) touched.
    """

    def __init__(self):
        self.rows = {}
        self.calls = []
        self._ids = itertools.count(1)

    def add(self, entity):
        """Seed a row without recording a call."""
        if entity.id is None:
            entity = replace(entity, id=next(self._ids))
        self.rows[entity.id] = entity
        return entity

    async def find_by_id(self, entity_id):
        self.calls.append(("find_by_id", entity_id))
        return self.rows.get(entity_id)

    async def exists_by_name(self, name):
        self.calls.append(("exists_by_name", name))
        return any(row.name == name for row in self.rows.values())

    async def find_by_name(self, name):
        self.calls.append(("find_by_name", name))
        return next((row for row in self.rows.values() if row.name == name), None)

    async def save(self, entity):
        self.calls.append(("save", entity))
        holder = next((row for row in self.rows.values() if row.name == entity.name), None)
        if holder is not None and holder.id != entity.id:
            raise NameConflictError(f"The name [{entity.name}] already exists")
        if entity.id is None:
            entity = replace(entity, id=next(self._ids))
        self.rows[entity.id] = entity
        return entity

    def call_names(self):
        return [name for name, _ in self.calls]


class InMemoryFranchiseRepository(_InMemoryRepository, FranchiseRepository):
    """Fake FranchiseRepository."""


class InMemoryOfficeRepository(_InMemoryRepository, OfficeRepository):
    """Fake OfficeRepository."""

    async def list_by_franchise_id(self, franchise_id):
        self.calls.append(("list_by_franchise_id", franchise_id))
        return [row for row in self.rows.values() if row.franchise_id == franchise_id]


class InMemoryProductRepository(_InMemoryRepository, ProductRepository):
    """Fake ProductRepository.

    ``office_franchise`` maps office ids to franchise ids for the
    top-stock query.
    """

    def __init__(self, office_franchise=None):
        super().__init__()
        self.office_franchise = office_franchise if office_franchise is not None else {}

    async def delete(self, product):
        self.calls.append(("delete", product))
        self.rows.pop(product.id, None)

    async def top_stock_by_office(self, franchise_id):
        self.calls.append(("top_stock_by_office", franchise_id))
        return TopStockSelector.select(
            row
            for row in self.rows.values()
            if self.office_franchise.get(row.office_id) == franchise_id
        )


@pytest.fixture
def franchise_repo():
    """Fixture for an in-memory FranchiseRepository."""
    return InMemoryFranchiseRepository()


@pytest.fixture
def office_repo():
    """Fixture for an in-memory OfficeRepository."""
    return InMemoryOfficeRepository()


@pytest.fixture
def product_repo():
    """Fixture for an in-memory ProductRepository."""
    return InMemoryProductRepository()


@pytest.fixture
def franchise_repository():
    """Fixture for the Django FranchiseRepository."""
    return DjangoFranchiseRepository()


@pytest.fixture
def office_repository():
    """Fixture for the Django OfficeRepository."""
    return DjangoOfficeRepository()


@pytest.fixture
def product_repository():
    """Fixture for the Django ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def db_franchise(db, franchise_repository):
    """Fixture for a Franchise saved in database."""
    return async_to_sync(franchise_repository.save)(Franchise.create(name="Acme"))


@pytest.fixture
def db_office(db, db_franchise, office_repository):
    """Fixture for an Office saved in database."""
    office = Office.create(name="Downtown", franchise_id=db_franchise.id)
    return async_to_sync(office_repository.save)(office)


@pytest.fixture
def db_product(db, db_office, product_repository):
    """Fixture for a Product saved in database."""
    product = Product.create(name="Widget", stock=10, office_id=db_office.id)
    return async_to_sync(product_repository.save)(product)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
