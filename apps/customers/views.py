"""
Customer views for the Credit Application System.

Views are thin — all business logic is in the service layer.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.customers.serializers import (
    CustomerIdQuerySerializer,
    CustomerResponseSerializer,
    RegisterCustomerSerializer,
    UpdateCustomerSerializer,
    customer_from_data,
    customer_view,
)
from apps.customers.services import build_customer_service


def _render(customer, http_status):
    response_serializer = CustomerResponseSerializer(data=customer_view(customer))
    response_serializer.is_valid(raise_exception=True)
    return Response(response_serializer.validated_data, status=http_status)


class CustomerView(APIView):
    """
    POST  /api/customers
    PATCH /api/customers?customerId=<id>
    """

    def post(self, request):
        """Register a new customer."""
        serializer = RegisterCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = build_customer_service().save(
            customer_from_data(serializer.validated_data)
        )
        return _render(customer, status.HTTP_201_CREATED)

    def patch(self, request):
        """Partially update an existing customer."""
        query = CustomerIdQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        serializer = UpdateCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = build_customer_service().update(
            query.validated_data['customerId'],
            serializer.validated_data,
        )
        return _render(customer, status.HTTP_200_OK)


class CustomerDetailView(APIView):
    """
    GET    /api/customers/<customer_id>
    DELETE /api/customers/<customer_id>
    """

    def get(self, request, customer_id):
        """Fetch a single customer."""
        customer = build_customer_service().find_by_id(customer_id)
        return _render(customer, status.HTTP_200_OK)

    def delete(self, request, customer_id):
        """Delete a customer."""
        build_customer_service().delete(customer_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
