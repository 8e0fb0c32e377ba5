"""Employee API views.

Exposes the ``EmployeeService`` via HTTP using a DRF ViewSet; mirrors
the customer views.
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
from modules.employees.dtos import EmployeeInputDTO
from modules.employees.exceptions import EmployeeAlreadyExists, EmployeeNotFound
from modules.employees.models import Employee
from modules.employees.repositories.django_repository import EmployeeDjangoRepository
from modules.employees.services import EmployeeService


class EmployeeViewSet(GenericViewSet):
    """ViewSet for Employee CRUD operations."""

    queryset = Employee.objects.all()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = EmployeeService(repository=EmployeeDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/employees"""
        employees = self._service.list_employees(request.query_params)
        return success_response(
            "Employees retrieved successfully",
            [to_wire(e) for e in employees],
            count=len(employees),
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/employees/{pk}"""
        try:
            employee = self._service.get_employee(pk)
        except EmployeeNotFound as exc:
            return error_response(exc)
        return success_response("Employee retrieved successfully", to_wire(employee))

    def create(self, request: Request) -> Response:
        """POST /api/employees"""
        try:
            dto = EmployeeInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            employee = self._service.create_employee(dto)
        except EmployeeAlreadyExists as exc:
            return error_response(exc)

        return success_response(
            "Employee created successfully",
            to_wire(employee),
            status_code=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/employees/{pk}"""
        try:
            dto = EmployeeInputDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            employee = self._service.update_employee(pk, dto)
        except (EmployeeNotFound, EmployeeAlreadyExists) as exc:
            return error_response(exc)

        return success_response("Employee updated successfully", to_wire(employee))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/employees/{pk}"""
        try:
            self._service.delete_employee(pk)
        except EmployeeNotFound as exc:
            return error_response(exc)
        return success_response("Employee deleted successfully")
