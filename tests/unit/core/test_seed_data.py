from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.management.commands.seed_data import SEED_CUSTOMERS
from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestSeedDataCommand:
    def test_creates_sample_customers(self):
        out = StringIO()
        call_command("seed_data", stdout=out)
        assert Customer.objects.count() == len(SEED_CUSTOMERS)
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        call_command("seed_data", stdout=StringIO())
        assert Customer.objects.count() == len(SEED_CUSTOMERS)

    def test_seeded_customers_have_names(self):
        call_command("seed_data", stdout=StringIO())
        assert not Customer.objects.filter(name="").exists()
