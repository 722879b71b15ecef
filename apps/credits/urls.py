"""
Credit URL configuration.
"""

from django.urls import path

from apps.credits.views import CreditDetailView, CreditView

urlpatterns = [
    path('credits', CreditView.as_view(), name='credits'),
    path(
        'credits/<uuid:credit_code>',
        CreditDetailView.as_view(),
        name='credit-detail',
    ),
]
