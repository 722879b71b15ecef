"""
Credit model for the Credit Application System.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Status(models.TextChoices):
    IN_PROGRESS = 'IN_PROGRESS', 'In progress'
    APPROVED = 'APPROVED', 'Approved'
    REJECT = 'REJECT', 'Rejected'


class Credit(models.Model):
    """
    Represents a credit application.

    The credit_code, not the primary key, is the identifier exposed to
    API clients. A credit is always looked up together with its owner.
    """

    credit_code = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        help_text="External identifier of the credit application.",
    )
    credit_value = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Requested credit amount.",
    )
    day_first_installment = models.DateField(
        help_text="Due date of the first installment."
    )
    number_of_installments = models.PositiveIntegerField(
        default=0,
        help_text="Number of monthly installments."
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.IN_PROGRESS,
        db_index=True,
    )
    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.PROTECT,
        related_name='credits',
        db_index=True,
        help_text="The customer who owns this credit."
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'credits'
        ordering = ['-created_at']

    def __str__(self):
        return (
            f"Credit {self.credit_code} - Customer: {self.customer_id} "
            f"- Value: {self.credit_value}"
        )
