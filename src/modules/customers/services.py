"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer resource, delegating
persistence to the injected ``ICustomerRepository`` and returning
``CustomerOutputDTO`` instances.

Business rules enforced here:
- Email must be unique across customers (create and update).
- get/update/delete on an unknown id fail with ``CustomerNotFound``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Mapping, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.customers.dtos import CustomerOutputDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerInputDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    Stateless: every call re-reads from the repository.
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CustomerInputDTO) -> CustomerOutputDTO:
        """Create a new customer after enforcing email uniqueness.

        Raises:
            CustomerAlreadyExists: if the email is already taken.
        """
        log = logger.bind(email=dto.email)

        if self._repo.exists_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists(dto.email)

        customer = Customer(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
            city=dto.city,
            state=dto.state,
            zip_code=dto.zip_code,
        )
        try:
            customer = self._repo.save(customer)
        except IntegrityError as exc:
            log.warning("customer.duplicate_email", source="constraint")
            raise CustomerAlreadyExists(dto.email) from exc

        log.info("customer.created", customer_id=customer.id)
        return CustomerOutputDTO.from_entity(customer)

    @transaction.atomic
    def update_customer(self, id: Any, dto: CustomerInputDTO) -> CustomerOutputDTO:
        """Overwrite every mutable field of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new email belongs to another customer.
        """
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise CustomerNotFound(id)

        log = logger.bind(customer_id=customer.id)

        if dto.email != customer.email and self._repo.exists_by_email(dto.email):
            log.warning("customer.duplicate_email", email=dto.email)
            raise CustomerAlreadyExists(dto.email)

        customer.first_name = dto.first_name
        customer.last_name = dto.last_name
        customer.email = dto.email
        customer.phone = dto.phone
        customer.address = dto.address
        customer.city = dto.city
        customer.state = dto.state
        customer.zip_code = dto.zip_code

        try:
            customer = self._repo.save(customer)
        except IntegrityError as exc:
            log.warning("customer.duplicate_email", email=dto.email, source="constraint")
            raise CustomerAlreadyExists(dto.email) from exc

        log.info("customer.updated")
        return CustomerOutputDTO.from_entity(customer)

    @transaction.atomic
    def delete_customer(self, id: Any) -> None:
        """Permanently remove a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.exists_by_id(id):
            raise CustomerNotFound(id)
        self._repo.delete_by_id(id)
        logger.info("customer.deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self, filters: Optional[Mapping[str, Any]] = None
    ) -> List[CustomerOutputDTO]:
        """Return every customer (ascending id), optionally filtered."""
        return [CustomerOutputDTO.from_entity(c) for c in self._repo.find_all(filters)]

    def get_customer(self, id: Any) -> CustomerOutputDTO:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise CustomerNotFound(id)
        logger.info("customer.retrieved", customer_id=customer.id)
        return CustomerOutputDTO.from_entity(customer)
