"""
Customer service layer.

All customer-related business logic resides here.
Views delegate to this service — no business logic in views.
"""

import logging

from django.db import IntegrityError, transaction

from apps.core.exceptions import BusinessError, ConflictError, ErrorKind
from apps.core.repositories import Repository
from apps.customers.models import Customer
from apps.customers.repositories import CustomerRepository

logger = logging.getLogger(__name__)

# Fields a partial update may change; cpf, email and password are fixed.
UPDATABLE_FIELDS = ('first_name', 'last_name', 'income', 'zip_code', 'street')


class CustomerService:
    """Service class for customer-related operations."""

    def __init__(self, repository: Repository[Customer]):
        self.repository = repository

    def save(self, customer: Customer) -> Customer:
        """
        Register a new customer.

        Args:
            customer: Unsaved Customer instance.

        Returns:
            The persisted Customer.

        Raises:
            ConflictError: If the cpf is already registered, or if the
                row violates any other database constraint.
        """
        try:
            customer = self.repository.save(customer)
        except IntegrityError as exc:
            # cpf is the only unique column; the database names it in the error.
            if 'cpf' in str(exc).lower():
                logger.info("Rejected customer registration: cpf already registered")
                raise ConflictError(f"Cpf {customer.cpf} already registered") from exc
            logger.warning("Rejected customer registration: %s", exc)
            raise ConflictError("Customer violates a database constraint") from exc

        logger.info(
            "Registered customer %s (ID: %s)",
            customer.full_name,
            customer.pk,
        )
        return customer

    def find_by_id(self, customer_id: int) -> Customer:
        """
        Retrieve a customer by ID.

        Raises:
            BusinessError: If no customer has this id.
        """
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            raise BusinessError(f"Id {customer_id} not found", kind=ErrorKind.NOT_FOUND)
        return customer

    @transaction.atomic
    def update(self, customer_id: int, changes: dict) -> Customer:
        """
        Apply a partial update to an existing customer.

        Only keys listed in UPDATABLE_FIELDS are applied; anything else
        in ``changes`` is ignored.
        """
        customer = self.find_by_id(customer_id)

        applied = []
        for field in UPDATABLE_FIELDS:
            if field in changes:
                setattr(customer, field, changes[field])
                applied.append(field)

        customer = self.repository.save(customer)
        logger.info("Updated customer %s: %s", customer.pk, ', '.join(applied) or 'no fields')
        return customer

    def delete(self, customer_id: int) -> None:
        """
        Delete a customer by ID.

        Raises:
            BusinessError: If no customer has this id.
            ConflictError: If credits still reference the customer.
        """
        customer = self.find_by_id(customer_id)
        try:
            self.repository.delete_by_id(customer.pk)
        except IntegrityError as exc:
            raise ConflictError(
                f"Customer {customer.pk} has credits registered"
            ) from exc
        logger.info("Deleted customer %s", customer_id)


def build_customer_service() -> CustomerService:
    """Wire a CustomerService to the ORM repository."""
    return CustomerService(CustomerRepository())
