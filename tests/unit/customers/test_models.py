"""Unit tests for the Customer model."""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import patch

import pytest

from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestCustomerStr:
    def test_masks_document(self):
        customer = Customer(name="Ana", document="39053344705")
        assert str(customer) == "Ana (***4705)"
        assert "39053344705" not in str(customer)

    def test_without_document(self):
        assert str(Customer(name="Ana")) == "Ana"


class TestCustomerDefaults:
    def test_profile_fields_default_to_empty(self):
        customer = Customer.objects.create(name="Ana")
        customer.refresh_from_db()
        assert customer.email == ""
        assert customer.phone == ""
        assert customer.document == ""
        assert customer.address == ""

    def test_save_refreshes_updated_at_only(self):
        customer = Customer.objects.create(name="Ana")
        created_at = customer.created_at
        later = created_at + timedelta(minutes=5)

        with patch("django.utils.timezone.now", return_value=later):
            customer.save()

        customer.refresh_from_db()
        assert customer.created_at == created_at
        assert customer.updated_at == later

    def test_default_ordering_by_id(self):
        b = Customer.objects.create(name="B")
        a = Customer.objects.create(name="A")
        assert list(Customer.objects.all()) == [b, a]
