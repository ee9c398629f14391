"""Customer domain exceptions.

Raised by the Service Layer when a request cannot be fulfilled.
Each failure kind has its own type, so the API layer (Views) can
translate it into a distinct HTTP status code.
"""

from __future__ import annotations


class CustomerError(Exception):
    """Base class for customer failures; ``code`` identifies the kind."""

    code = "error"


class CustomerNotFound(CustomerError):
    """No customer exists with the requested id."""

    code = "not_found"

    def __init__(self, id: object) -> None:
        self.id = id
        super().__init__(f"no customer exists with id: {id}")


class InvalidCustomer(CustomerError):
    """The customer failed validation (missing or blank name)."""

    code = "invalid"

    def __init__(self, message: str = "customer cannot be saved") -> None:
        super().__init__(message)
