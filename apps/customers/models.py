"""
Customer model for the Credit Application System.
"""

from dataclasses import dataclass
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer record."""

    zip_code: str
    street: str


class Customer(models.Model):
    """
    Represents a customer applying for credit.

    The CPF is unique across all customers; the database constraint
    is what enforces it.
    """

    first_name = models.CharField(
        max_length=100,
        help_text="Customer's first name."
    )
    last_name = models.CharField(
        max_length=100,
        help_text="Customer's last name."
    )
    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="Brazilian taxpayer id (11 digits)."
    )
    email = models.EmailField(
        max_length=254,
        help_text="Customer's e-mail address."
    )
    income = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Customer's monthly income.",
    )
    password = models.CharField(
        max_length=128,
        help_text="Hashed password."
    )
    zip_code = models.CharField(
        max_length=20,
        help_text="Address zip code."
    )
    street = models.CharField(
        max_length=255,
        help_text="Address street."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.first_name} {self.last_name} (ID: {self.pk})"

    @property
    def full_name(self):
        """Returns the customer's full name."""
        return f"{self.first_name} {self.last_name}"

    @property
    def address(self) -> Address:
        return Address(zip_code=self.zip_code, street=self.street)

    @address.setter
    def address(self, value: Address):
        self.zip_code = value.zip_code
        self.street = value.street
