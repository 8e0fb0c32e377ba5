"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes
through their typed kind; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.responses import (
    error_response,
    success_response,
    to_wire,
    validation_error_response,
)
from modules.customers.dtos import CustomerInputDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    queryset = Customer.objects.all()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/customers"""
        customers = self._service.list_customers(request.query_params)
        return success_response(
            "Customers retrieved successfully",
            [to_wire(c) for c in customers],
            count=len(customers),
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/customers/{pk}"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound as exc:
            return error_response(exc)
        return success_response("Customer retrieved successfully", to_wire(customer))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/customers"""
        try:
            dto = CustomerInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            return error_response(exc)

        return success_response(
            "Customer created successfully",
            to_wire(customer),
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/customers/{pk}"""
        try:
            dto = CustomerInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            customer = self._service.update_customer(pk, dto)
        except (CustomerNotFound, CustomerAlreadyExists) as exc:
            return error_response(exc)

        return success_response("Customer updated successfully", to_wire(customer))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/customers/{pk}"""
        try:
            self._service.delete_customer(pk)
        except CustomerNotFound as exc:
            return error_response(exc)
        return success_response("Customer deleted successfully")
