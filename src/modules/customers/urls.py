"""Customer URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.customers.views import CustomerViewSet

urlpatterns = [
    path("clientes", CustomerViewSet.as_view({"get": "list"}), name="customer-list"),
    path(
        "clientes/salvar",
        CustomerViewSet.as_view({"post": "create"}),
        name="customer-save",
    ),
    path(
        "clientes/<int:pk>",
        CustomerViewSet.as_view({"get": "retrieve"}),
        name="customer-detail",
    ),
]
