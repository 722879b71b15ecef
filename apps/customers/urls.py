"""
Customer URL configuration.
"""

from django.urls import path, register_converter

from apps.core.converters import SignedIntConverter
from apps.customers.views import CustomerDetailView, CustomerView

register_converter(SignedIntConverter, 'signed_int')

urlpatterns = [
    path('customers', CustomerView.as_view(), name='customers'),
    path(
        'customers/<signed_int:customer_id>',
        CustomerDetailView.as_view(),
        name='customer-detail',
    ),
]
