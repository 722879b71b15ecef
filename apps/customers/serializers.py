"""
Customer serializers for the Credit Application System.

Request serializers validate input; the mapping functions below turn
validated data into entities and entities into response views.
"""

import re
from decimal import Decimal

from django.contrib.auth.hashers import make_password
from rest_framework import serializers
from validate_docbr import CPF

from apps.customers.models import Customer


class RegisterCustomerSerializer(serializers.Serializer):
    """Serializer for customer registration request."""

    first_name = serializers.CharField(
        max_length=100,
        required=True,
        help_text="Customer's first name.",
    )
    last_name = serializers.CharField(
        max_length=100,
        required=True,
        help_text="Customer's last name.",
    )
    cpf = serializers.CharField(
        required=True,
        help_text="Brazilian taxpayer id, formatted or digits only.",
    )
    email = serializers.EmailField(
        required=True,
        help_text="Customer's e-mail address.",
    )
    income = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0'),
        required=True,
        help_text="Customer's monthly income.",
    )
    password = serializers.CharField(
        max_length=128,
        required=True,
        write_only=True,
        help_text="Customer's password.",
    )
    zip_code = serializers.CharField(
        max_length=20,
        required=True,
        help_text="Address zip code.",
    )
    street = serializers.CharField(
        max_length=255,
        required=True,
        help_text="Address street.",
    )

    def validate_cpf(self, value):
        """Strip punctuation and check the CPF digits."""
        digits = re.sub(r'\D', '', value)
        if not CPF().validate(digits):
            raise serializers.ValidationError("Invalid CPF.")
        return digits


class UpdateCustomerSerializer(serializers.Serializer):
    """Serializer for partial customer updates. Every field is optional."""

    first_name = serializers.CharField(max_length=100, required=False)
    last_name = serializers.CharField(max_length=100, required=False)
    income = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0'),
        required=False,
    )
    zip_code = serializers.CharField(max_length=20, required=False)
    street = serializers.CharField(max_length=255, required=False)


class CustomerIdQuerySerializer(serializers.Serializer):
    """Validates the ``customerId`` query parameter."""

    customerId = serializers.IntegerField(required=True)


class CustomerResponseSerializer(serializers.Serializer):
    """Serializer for the customer view."""

    id = serializers.IntegerField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    cpf = serializers.CharField()
    email = serializers.EmailField()
    income = serializers.DecimalField(max_digits=15, decimal_places=2)
    zip_code = serializers.CharField()
    street = serializers.CharField()


def customer_from_data(validated_data: dict) -> Customer:
    """Build an unsaved Customer from validated registration data."""
    return Customer(
        first_name=validated_data['first_name'],
        last_name=validated_data['last_name'],
        cpf=validated_data['cpf'],
        email=validated_data['email'],
        income=validated_data['income'],
        password=make_password(validated_data['password']),
        zip_code=validated_data['zip_code'],
        street=validated_data['street'],
    )


def customer_view(customer: Customer) -> dict:
    """Map a Customer to its response representation."""
    address = customer.address
    return {
        'id': customer.pk,
        'first_name': customer.first_name,
        'last_name': customer.last_name,
        'cpf': customer.cpf,
        'email': customer.email,
        'income': customer.income,
        'zip_code': address.zip_code,
        'street': address.street,
    }
