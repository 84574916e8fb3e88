"""
Migration inicial para o domínio de Agentes.

Cria a tabela:
- agents
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
            name='AgentModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('full_name', models.CharField(max_length=100, db_index=True)),
                ('email', models.CharField(max_length=150, unique=True)),
                ('department', models.CharField(max_length=100, null=True, blank=True)),
                ('role', models.CharField(max_length=50, default='Agent')),
                ('is_active', models.BooleanField(default=True, db_index=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Agente',
                'verbose_name_plural': 'Agentes',
                'db_table': 'agents',
                'ordering': ['full_name', 'id'],
            },
        ),
    ]
