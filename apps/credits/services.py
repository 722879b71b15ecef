"""
Credit service layer.

Validates and records credit applications and resolves credits on
behalf of the customer that owns them.
"""

import logging
import uuid
from datetime import date
from typing import List

from dateutil.relativedelta import relativedelta

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.core.exceptions import BusinessError, ConflictError, ErrorKind
from apps.credits.models import Credit, Status
from apps.credits.repositories import AbstractCreditRepository, CreditRepository
from apps.customers.services import CustomerService, build_customer_service

logger = logging.getLogger(__name__)


class CreditService:
    """Service for credit creation and retrieval operations."""

    def __init__(self, repository: AbstractCreditRepository, customer_service: CustomerService):
        self.repository = repository
        self.customer_service = customer_service

    @transaction.atomic
    def save(self, credit: Credit) -> Credit:
        """
        Record a new credit application.

        The first-installment date is checked before anything else, then
        the owning customer is resolved. Neither failure writes anything.

        Args:
            credit: Unsaved Credit whose customer_id names the applicant.

        Returns:
            The persisted Credit, with a fresh credit_code and
            status IN_PROGRESS.

        Raises:
            BusinessError: If the date is invalid or the customer is unknown.
            ConflictError: If the generated credit_code collides.
        """
        self.valid_day_first_installment(credit.day_first_installment)
        credit.customer = self.customer_service.find_by_id(credit.customer_id)
        credit.credit_code = uuid.uuid4()
        credit.status = Status.IN_PROGRESS

        try:
            credit = self.repository.save(credit)
        except IntegrityError as exc:
            raise ConflictError(
                f"Creditcode {credit.credit_code} already registered"
            ) from exc

        logger.info(
            "Credit %s created for customer %s: value=%s, installments=%s, first=%s",
            credit.credit_code,
            credit.customer_id,
            credit.credit_value,
            credit.number_of_installments,
            credit.day_first_installment,
        )
        return credit

    def valid_day_first_installment(self, day_first_installment: date) -> bool:
        """
        Check that the first installment falls within the allowed window.

        The window ends ``CREDIT_FIRST_INSTALLMENT_MAX_MONTHS`` months
        after today (inclusive), with today read at call time.

        Raises:
            BusinessError: If the date is past the window.
        """
        months = getattr(settings, 'CREDIT_FIRST_INSTALLMENT_MAX_MONTHS', 3)
        limit = date.today() + relativedelta(months=months)
        if day_first_installment <= limit:
            return True

        logger.info(
            "Rejected first installment %s: later than %s",
            day_first_installment,
            limit,
        )
        raise BusinessError("Invalid Date")

    def find_all_by_customer(self, customer_id: int) -> List[Credit]:
        """Return every credit owned by the customer, possibly none."""
        return self.repository.find_all_by_customer_id(customer_id)

    def find_by_credit_code(self, customer_id: int, credit_code: uuid.UUID) -> Credit:
        """
        Fetch a credit by its code on behalf of a customer.

        Raises:
            BusinessError: If no credit has this code, or if it belongs
                to a different customer.
        """
        credit = self.repository.find_by_credit_code(credit_code)
        if credit is None:
            raise BusinessError(
                f"Creditcode {credit_code} not found",
                kind=ErrorKind.NOT_FOUND,
            )

        if credit.customer_id != customer_id:
            logger.warning(
                "Customer %s asked for credit %s owned by customer %s",
                customer_id,
                credit_code,
                credit.customer_id,
            )
            raise BusinessError("Contact admin")

        return credit


def build_credit_service() -> CreditService:
    """Wire a CreditService to the ORM repository and customer service."""
    return CreditService(CreditRepository(), build_customer_service())
