from django.contrib import admin

from apps.credits.models import Credit


@admin.register(Credit)
class CreditAdmin(admin.ModelAdmin):
    list_display = (
        'credit_code', 'customer', 'credit_value',
        'number_of_installments', 'day_first_installment',
        'status', 'created_at',
    )
    list_filter = ('status', 'day_first_installment')
    search_fields = ('credit_code', 'customer__first_name', 'customer__cpf')
    readonly_fields = ('credit_code', 'created_at')
    raw_id_fields = ('customer',)
