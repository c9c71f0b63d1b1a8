"""
Unit tests for OfficeService.
"""

import pytest

from core.domain.exceptions import (
    FranchiseNotFoundError,
    IdentifierMismatchError,
    NameConflictError,
    OfficeNotFoundError,
    ParentReassignmentError,
)
from core.infrastructure.events import InMemoryEventBus
from franchises.domain.franchise import Franchise
from offices.application.services.office_service import OfficeService
from offices.domain.events import OfficeCreated, OfficeUpdated
from offices.domain.office import Office


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
    bus.subscribe(OfficeCreated, recorder)
    bus.subscribe(OfficeUpdated, recorder)
    monkeypatch.setattr("offices.application.services.office_service.event_bus", bus)
    return recorder.events


@pytest.fixture
def acme(franchise_repo):
    return franchise_repo.add(Franchise.create(name="Acme"))


@pytest.fixture
def service(office_repo, franchise_repo):
    return OfficeService(office_repository=office_repo, franchise_repository=franchise_repo)


@pytest.mark.asyncio
class TestCreateOffice:
    """Tests for create_office."""

    async def test_creates_under_existing_franchise(self, service, office_repo, acme, published):
        result = await service.create_office(Office.create(name="north", franchise_id=acme.id))

        assert result.name == "NORTH"
        assert result.franchise_id == acme.id
        assert office_repo.rows[result.id] == result
        assert published[0].office_id == result.id
        assert published[0].franchise_id == acme.id

    async def test_missing_franchise_saves_nothing(self, service, office_repo, published):
        with pytest.raises(FranchiseNotFoundError, match="Not found franchise 999"):
            await service.create_office(Office.create(name="North", franchise_id=999))

        assert office_repo.calls == []
        assert published == []

    async def test_parent_checked_before_name(self, service, office_repo):
        office_repo.add(Office.create(name="North", franchise_id=999))

        with pytest.raises(FranchiseNotFoundError):
            await service.create_office(Office.create(name="North", franchise_id=999))

    async def test_duplicate_name(self, service, office_repo, acme):
        office_repo.add(Office.create(name="North", franchise_id=acme.id))

        with pytest.raises(NameConflictError, match=r"The office with the name \[NORTH\]"):
            await service.create_office(Office.create(name=" north", franchise_id=acme.id))


@pytest.mark.asyncio
class TestUpdateOffice:
    """Tests for update_office."""

    async def test_id_mismatch_fails_before_any_io(self, service, office_repo, franchise_repo):
        with pytest.raises(IdentifierMismatchError):
            await service.update_office(5, Office.create("North", franchise_id=1, office_id=7))

        assert office_repo.calls == []
        assert franchise_repo.calls == []

    async def test_unknown_office(self, service):
        with pytest.raises(OfficeNotFoundError):
            await service.update_office(5, Office.create("North", franchise_id=1, office_id=5))

    async def test_rename(self, service, office_repo, acme, published):
        north = office_repo.add(Office.create(name="North", franchise_id=acme.id))

        result = await service.update_office(
            north.id, Office.create("North East", franchise_id=acme.id, office_id=north.id)
        )

        assert result.name == "NORTH EAST"
        assert [type(e) for e in published] == [OfficeUpdated]

    async def test_moving_to_another_franchise_is_rejected(
        self, service, office_repo, franchise_repo, acme
    ):
        globex = franchise_repo.add(Franchise.create(name="Globex"))
        north = office_repo.add(Office.create(name="North", franchise_id=acme.id))

        with pytest.raises(ParentReassignmentError):
            await service.update_office(
                north.id, Office.create("North", franchise_id=globex.id, office_id=north.id)
            )

        assert office_repo.rows[north.id].franchise_id == acme.id

    async def test_renaming_onto_another_office_fails(self, service, office_repo, acme):
        office_repo.add(Office.create(name="North", franchise_id=acme.id))
        south = office_repo.add(Office.create(name="South", franchise_id=acme.id))

        with pytest.raises(NameConflictError, match="update the office name to an existing one"):
            await service.update_office(
                south.id, Office.create("north", franchise_id=acme.id, office_id=south.id)
            )


@pytest.mark.asyncio
async def test_get_office(service, office_repo):
    north = office_repo.add(Office.create(name="North", franchise_id=1))

    assert await service.get_office(north.id) == north

    with pytest.raises(OfficeNotFoundError, match="Not found office 99"):
        await service.get_office(99)
