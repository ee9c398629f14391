"""Customer API views.

Exposes ``CustomerService`` over HTTP.  Domain exceptions are caught
and re-raised as DRF exceptions (404 for ``CustomerNotFound``, 400 for
``InvalidCustomer``); the project-wide exception handler renders them
in the standardized error format.  Anything else propagates.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import CreateCustomerDTO
from modules.customers.exceptions import CustomerNotFound, InvalidCustomer
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


def _pydantic_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "non_field_errors"
        errors.setdefault(field, []).append(error["msg"])
    return errors


class CustomerViewSet(GenericViewSet):
    """Customer endpoints under ``/clientes``.

    All ORM access goes through ``CustomerService`` and
    ``CustomerDjangoRepository``; ``queryset`` is only declared so the
    schema generator can introspect the model.
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    pagination_class = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /clientes"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /clientes/{pk}"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound as exc:
            raise NotFound(str(exc), code=exc.code) from exc
        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=CustomerSerializer, responses=CustomerSerializer)
    def create(self, request: Request) -> Response:
        """POST /clientes/salvar"""
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            raise ValidationError(_pydantic_errors(exc)) from exc

        try:
            customer = self._service.save_customer(dto)
        except InvalidCustomer as exc:
            raise ValidationError(str(exc), code=exc.code) from exc

        return Response(CustomerSerializer(customer).data)
