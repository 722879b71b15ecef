from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('first_name', models.CharField(help_text="Customer's first name.", max_length=100)),
                ('last_name', models.CharField(help_text="Customer's last name.", max_length=100)),
                ('cpf', models.CharField(help_text='Brazilian taxpayer id (11 digits).', max_length=11, unique=True)),
                ('email', models.EmailField(help_text="Customer's e-mail address.", max_length=254)),
                ('income', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text="Customer's monthly income.", max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('password', models.CharField(help_text='Hashed password.', max_length=128)),
                ('zip_code', models.CharField(help_text='Address zip code.', max_length=20)),
                ('street', models.CharField(help_text='Address street.', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['-created_at'],
            },
        ),
    ]
