"""
Django ORM implementation of the customer repository.
"""

import logging
from typing import Optional

from django.db import transaction

from apps.core.repositories import Repository, is_storable_id
from apps.customers.models import Customer

logger = logging.getLogger(__name__)


class CustomerRepository(Repository[Customer]):
    """Customer persistence backed by the Django ORM."""

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """
        Persist a customer.

        Runs in its own savepoint so a unique-constraint violation on
        cpf rolls back only this insert and propagates as IntegrityError.
        """
        entity.save()
        return entity

    def find_by_id(self, id: int) -> Optional[Customer]:
        if not is_storable_id(id):
            return None
        return Customer.objects.filter(pk=id).first()

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        deleted, _ = Customer.objects.filter(pk=id).delete()
        logger.debug("Deleted %d row(s) for customer %s", deleted, id)
