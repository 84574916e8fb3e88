"""
Migration inicial para o domínio de Tickets.

Cria as tabelas:
- ticket_categories: Categorias de referência
- tickets: Tabela principal de tickets
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
        ('agents', '0001_initial'),
    ]

    operations = [
        # =================================================================
        # Tabela: ticket_categories
        # =================================================================
        migrations.CreateModel(
            name='TicketCategoryModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('description', models.CharField(max_length=255, blank=True, default='')),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Categoria',
                'verbose_name_plural': 'Categorias',
                'db_table': 'ticket_categories',
                'ordering': ['id'],
            },
        ),
        # =================================================================
        # Tabela: tickets
        # =================================================================
        migrations.CreateModel(
            name='TicketModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('subject', models.CharField(
                    max_length=200,
                    db_index=True,
                    help_text='Assunto do ticket'
                )),
                ('description', models.TextField(
                    help_text='Descrição detalhada do problema'
                )),
                ('status', models.PositiveSmallIntegerField(
                    choices=[
                        (0, 'Open'),
                        (1, 'InProgress'),
                        (2, 'OnHold'),
                        (3, 'Resolved'),
                        (4, 'Closed'),
                    ],
                    default=0,
                    db_index=True,
                )),
                ('priority', models.PositiveSmallIntegerField(
                    choices=[
                        (0, 'Low'),
                        (1, 'Medium'),
                        (2, 'High'),
                        (3, 'Critical'),
                    ],
                    default=1,
                    db_index=True,
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                )),
                ('updated_at', models.DateTimeField(null=True, blank=True)),
                ('resolved_at', models.DateTimeField(null=True, blank=True)),
                ('customer', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='tickets',
                    to='customers.customermodel',
                    help_text='Cliente que abriu o ticket'
                )),
                ('agent', models.ForeignKey(
                    null=True,
                    blank=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='tickets',
                    to='agents.agentmodel',
                    help_text='Agente responsável'
                )),
                ('category', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='tickets',
                    to='tickets.ticketcategorymodel',
                )),
            ],
            options={
                'verbose_name': 'Ticket',
                'verbose_name_plural': 'Tickets',
                'db_table': 'tickets',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.AddIndex(
            model_name='ticketmodel',
            index=models.Index(fields=['status', 'created_at'], name='tickets_status_created_idx'),
        ),
        migrations.AddIndex(
            model_name='ticketmodel',
            index=models.Index(fields=['customer', 'created_at'], name='tickets_customer_created_idx'),
        ),
        migrations.AddIndex(
            model_name='ticketmodel',
            index=models.Index(fields=['agent', 'status'], name='tickets_agent_status_idx'),
        ),
    ]
