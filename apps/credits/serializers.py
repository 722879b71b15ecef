"""
Credit serializers for the Credit Application System.
"""

from datetime import date
from decimal import Decimal

from django.conf import settings
from rest_framework import serializers

from apps.credits.models import Credit


class CreateCreditSerializer(serializers.Serializer):
    """Serializer for credit application request."""

    credit_value = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=True,
        help_text="Requested credit amount.",
    )
    day_first_installment = serializers.DateField(
        required=True,
        help_text="Due date of the first installment (must be in the future).",
    )
    number_of_installments = serializers.IntegerField(
        min_value=1,
        required=True,
        help_text="Number of monthly installments.",
    )
    customer_id = serializers.IntegerField(
        min_value=1,
        required=True,
        help_text="Applicant's customer ID.",
    )

    def validate_day_first_installment(self, value):
        if value <= date.today():
            raise serializers.ValidationError("Must be a future date.")
        return value

    def validate_number_of_installments(self, value):
        maximum = getattr(settings, 'CREDIT_MAX_INSTALLMENTS', 48)
        if value > maximum:
            raise serializers.ValidationError(
                f"Ensure this value is less than or equal to {maximum}."
            )
        return value


class CreditResponseSerializer(serializers.Serializer):
    """Serializer for the credit view."""

    credit_code = serializers.UUIDField()
    credit_value = serializers.DecimalField(max_digits=15, decimal_places=2)
    number_of_installments = serializers.IntegerField()
    status = serializers.CharField()
    customer_email = serializers.EmailField()
    customer_income = serializers.DecimalField(max_digits=15, decimal_places=2)


class CreditListItemSerializer(serializers.Serializer):
    """Serializer for an item of a customer's credit list."""

    credit_code = serializers.UUIDField()
    credit_value = serializers.DecimalField(max_digits=15, decimal_places=2)
    number_of_installments = serializers.IntegerField()


def credit_from_data(validated_data: dict) -> Credit:
    """Build an unsaved Credit from validated request data."""
    return Credit(
        credit_value=validated_data['credit_value'],
        day_first_installment=validated_data['day_first_installment'],
        number_of_installments=validated_data['number_of_installments'],
        customer_id=validated_data['customer_id'],
    )


def credit_view(credit: Credit) -> dict:
    """Map a Credit to its detailed response representation."""
    return {
        'credit_code': credit.credit_code,
        'credit_value': credit.credit_value,
        'number_of_installments': credit.number_of_installments,
        'status': credit.status,
        'customer_email': credit.customer.email,
        'customer_income': credit.customer.income,
    }


def credit_list_item(credit: Credit) -> dict:
    """Map a Credit to its summary representation."""
    return {
        'credit_code': credit.credit_code,
        'credit_value': credit.credit_value,
        'number_of_installments': credit.number_of_installments,
    }
