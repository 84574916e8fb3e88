"""
Migration inicial para o domínio de Clientes.

Cria a tabela:
- customers
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CustomerModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('full_name', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Nome completo do cliente'
                )),
                ('email', models.CharField(
                    max_length=150,
                    unique=True,
                    help_text='Email único do cliente'
                )),
                ('phone', models.CharField(max_length=20, null=True, blank=True)),
                ('address', models.CharField(max_length=255, null=True, blank=True)),
                ('is_active', models.BooleanField(default=True, db_index=True)),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de cadastro'
                )),
            ],
            options={
                'verbose_name': 'Cliente',
                'verbose_name_plural': 'Clientes',
                'db_table': 'customers',
                'ordering': ['full_name', 'id'],
            },
        ),
    ]
