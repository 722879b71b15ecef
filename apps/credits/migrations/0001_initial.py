import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Credit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('credit_code', models.UUIDField(default=uuid.uuid4, editable=False, help_text='External identifier of the credit application.', unique=True)),
                ('credit_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Requested credit amount.', max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('day_first_installment', models.DateField(help_text='Due date of the first installment.')),
                ('number_of_installments', models.PositiveIntegerField(default=0, help_text='Number of monthly installments.')),
                ('status', models.CharField(choices=[('IN_PROGRESS', 'In progress'), ('APPROVED', 'Approved'), ('REJECT', 'Rejected')], db_index=True, default='IN_PROGRESS', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('customer', models.ForeignKey(help_text='The customer who owns this credit.', on_delete=django.db.models.deletion.PROTECT, related_name='credits', to='customers.customer')),
            ],
            options={
                'db_table': 'credits',
                'ordering': ['-created_at'],
            },
        ),
    ]
