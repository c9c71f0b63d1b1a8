"""
Integration tests for the admin forms.
"""

import pytest

from franchises.admin import FranchiseAdminForm
from franchises.infrastructure.models import Franchise as FranchiseModel
from offices.admin import OfficeAdminForm
from offices.infrastructure.models import Office as OfficeModel
from products.admin import ProductAdminForm

pytestmark = [pytest.mark.integration, pytest.mark.django_db]


@pytest.fixture
def acme():
    return FranchiseModel.objects.create(name="ACME")


@pytest.fixture
def downtown(acme):
    return OfficeModel.objects.create(name="DOWNTOWN", franchise=acme)


class TestFranchiseAdminForm:
    """Tests for FranchiseAdminForm."""

    def test_name_stored_normalized(self):
        form = FranchiseAdminForm(data={"name": "  globex"})

        assert form.is_valid(), form.errors
        assert form.save().name == "GLOBEX"

    def test_differently_cased_duplicate_is_a_form_error(self, acme):
        form = FranchiseAdminForm(data={"name": "acme"})

        assert not form.is_valid()
        assert "name" in form.errors
        assert FranchiseModel.objects.count() == 1

    def test_keeping_own_name_on_edit(self, acme):
        form = FranchiseAdminForm(data={"name": "acme"}, instance=acme)

        assert form.is_valid(), form.errors

    def test_blank_name(self):
        assert not FranchiseAdminForm(data={"name": "   "}).is_valid()


def test_office_duplicate_name(acme, downtown):
    form = OfficeAdminForm(data={"name": "Downtown ", "franchise": acme.id})

    assert not form.is_valid()
    assert "name" in form.errors


def test_product_duplicate_name(downtown):
    ProductAdminForm(data={"name": "widget", "stock": 1, "office": downtown.id}).save()

    form = ProductAdminForm(data={"name": "WIDGET", "stock": 2, "office": downtown.id})

    assert not form.is_valid()
    assert "name" in form.errors
