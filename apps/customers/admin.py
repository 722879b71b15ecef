from django.contrib import admin

from apps.customers.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = (
        'id', 'first_name', 'last_name', 'cpf',
        'email', 'income', 'zip_code', 'created_at',
    )
    list_filter = ('created_at',)
    search_fields = ('first_name', 'last_name', 'cpf', 'email')
    readonly_fields = ('created_at', 'updated_at')
    exclude = ('password',)
