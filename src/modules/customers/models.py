"""Customer model.

Only ``name`` carries a business rule (non-blank), and that rule is
enforced by ``CustomerService`` rather than by the storage layer.
The remaining profile fields are opaque and stored verbatim.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root.

    ``id`` is assigned by the database on first save and never changes.
    """

    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    document = models.CharField(max_length=20, blank=True, default="")
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        # CPF/CNPJ must never show up in full in logs or the admin.
        if not self.document:
            return self.name
        return f"{self.name} (***{self.document[-4:]})"
