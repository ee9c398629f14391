"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: a missing row yields
``None`` and the Service Layer decides how to report it.  Database
errors are not caught here.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def list(self) -> List[Customer]:
        return list(Customer.objects.order_by("id"))

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or non-integer IDs.
        """
        if isinstance(id, float):
            return None
        try:
            pk = int(id)
        except (TypeError, ValueError):
            return None
        return Customer.objects.filter(pk=pk).first()

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist a customer; the instance comes back with ``id`` set."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity
