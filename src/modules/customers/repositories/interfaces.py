"""Customer repository interface.

Binds ``IRepository`` to the Customer aggregate.  No look-ups beyond
the generic contract are needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""
