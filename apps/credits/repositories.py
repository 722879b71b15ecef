"""
Credit repository contract and its Django ORM implementation.
"""

import uuid
from abc import abstractmethod
from typing import List, Optional

from django.db import transaction

from apps.core.repositories import Repository, is_storable_id
from apps.credits.models import Credit


class AbstractCreditRepository(Repository[Credit]):
    """Credit persistence contract: CRUD plus the two owner-aware finders."""

    @abstractmethod
    def find_all_by_customer_id(self, customer_id: int) -> List[Credit]:
        """All credits owned by the customer, possibly none."""

    @abstractmethod
    def find_by_credit_code(self, credit_code: uuid.UUID) -> Optional[Credit]:
        """The credit with this code, or None."""


class CreditRepository(AbstractCreditRepository):
    """Credit persistence backed by the Django ORM."""

    @transaction.atomic
    def save(self, entity: Credit) -> Credit:
        entity.save()
        return entity

    def find_by_id(self, id: int) -> Optional[Credit]:
        if not is_storable_id(id):
            return None
        return Credit.objects.select_related('customer').filter(pk=id).first()

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        Credit.objects.filter(pk=id).delete()

    def find_all_by_customer_id(self, customer_id: int) -> List[Credit]:
        if not is_storable_id(customer_id):
            return []
        return list(
            Credit.objects.filter(customer_id=customer_id).order_by('-created_at')
        )

    def find_by_credit_code(self, credit_code: uuid.UUID) -> Optional[Credit]:
        return (
            Credit.objects.select_related('customer')
            .filter(credit_code=credit_code)
            .first()
        )
