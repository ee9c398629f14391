"""Base abstract models shared by the domain modules.

``BaseModel`` gives every table an auto-increment integer primary key
(``BigAutoField`` via ``DEFAULT_AUTO_FIELD``) plus ``created_at`` /
``updated_at`` bookkeeping.
"""

from __future__ import annotations

from django.db import models


class BaseModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
