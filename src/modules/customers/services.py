"""Customer service layer (Use Cases).

Orchestrates the Customer use-cases, delegating persistence to the
injected ``ICustomerRepository``.

Business rule enforced here: a customer is only saved with a
non-blank name.  Lookups that miss raise ``CustomerNotFound``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.customers.exceptions import CustomerNotFound, InvalidCustomer
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer.

        Raises:
            InvalidCustomer: if ``name`` is missing or blank.  Nothing is
                persisted in that case.
        """
        if not dto.has_name:
            logger.warning("customer.invalid", reason="blank_name")
            raise InvalidCustomer()

        customer = Customer(
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            document=dto.document,
            address=dto.address,
        )
        customer = self._repo.save(customer)
        logger.info("customer.created", customer_id=customer.id)
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        return self._repo.list()

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if customer is None:
            logger.info("customer.not_found", customer_id=id)
            raise CustomerNotFound(id)
        logger.info("customer.retrieved", customer_id=id)
        return customer
