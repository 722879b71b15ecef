"""
Credit views for the Credit Application System.

Views are thin — all business logic is in the service layer.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.credits.serializers import (
    CreateCreditSerializer,
    CreditListItemSerializer,
    CreditResponseSerializer,
    credit_from_data,
    credit_list_item,
    credit_view,
)
from apps.credits.services import build_credit_service
from apps.customers.serializers import CustomerIdQuerySerializer


def _customer_id_from_query(request) -> int:
    query = CustomerIdQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data['customerId']


class CreditView(APIView):
    """
    POST /api/credits
    GET  /api/credits?customerId=<id>
    """

    def post(self, request):
        """Handle a credit application."""
        serializer = CreateCreditSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        credit = build_credit_service().save(
            credit_from_data(serializer.validated_data)
        )

        response_serializer = CreditResponseSerializer(data=credit_view(credit))
        response_serializer.is_valid(raise_exception=True)

        return Response(
            {
                'message': (
                    f"Credit {credit.credit_code} - "
                    f"Customer {credit.customer.email} saved!"
                ),
                **response_serializer.validated_data,
            },
            status=status.HTTP_201_CREATED,
        )

    def get(self, request):
        """List every credit of a customer."""
        customer_id = _customer_id_from_query(request)
        credits = build_credit_service().find_all_by_customer(customer_id)

        serializer = CreditListItemSerializer(
            data=[credit_list_item(credit) for credit in credits],
            many=True,
        )
        serializer.is_valid(raise_exception=True)

        return Response(serializer.validated_data, status=status.HTTP_200_OK)


class CreditDetailView(APIView):
    """
    GET /api/credits/<credit_code>?customerId=<id>
    """

    def get(self, request, credit_code):
        """Fetch one credit on behalf of its owner."""
        customer_id = _customer_id_from_query(request)
        credit = build_credit_service().find_by_credit_code(customer_id, credit_code)

        response_serializer = CreditResponseSerializer(data=credit_view(credit))
        response_serializer.is_valid(raise_exception=True)

        return Response(
            response_serializer.validated_data,
            status=status.HTTP_200_OK,
        )
