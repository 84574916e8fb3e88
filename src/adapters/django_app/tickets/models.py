"""
Django Models para o domínio de Tickets.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/tickets/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- TicketCategoryModel: Categorias de referência (semeadas na migration)
- TicketModel: Tabela principal de tickets
    - customer: PROTECT (clientes só são desativados)
    - agent: SET_NULL em exclusão física do agente
    - category: PROTECT
"""

from django.db import models
from django.utils import timezone


class TicketStatusChoices(models.IntegerChoices):
    """Choices para status de ticket (espelha TicketStatus do Core)."""
    OPEN = 0, 'Open'
    IN_PROGRESS = 1, 'InProgress'
    ON_HOLD = 2, 'OnHold'
    RESOLVED = 3, 'Resolved'
    CLOSED = 4, 'Closed'


class TicketPriorityChoices(models.IntegerChoices):
    """Choices para prioridade de ticket (espelha TicketPriority do Core)."""
    LOW = 0, 'Low'
    MEDIUM = 1, 'Medium'
    HIGH = 2, 'High'
    CRITICAL = 3, 'Critical'


class TicketCategoryModel(models.Model):
    """Categoria de ticket (dado de referência)."""

    id = models.BigAutoField(primary_key=True)

    name = models.CharField(max_length=100, unique=True)

    description = models.CharField(max_length=255, blank=True, default='')

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'ticket_categories'
        verbose_name = 'Categoria'
        verbose_name_plural = 'Categorias'
        ordering = ['id']

    def __str__(self):
        return self.name


class TicketModel(models.Model):
    """
    Model Django para persistência de Tickets.

    Fields:
        id: Inteiro auto-incrementado
        customer: Cliente que abriu o ticket
        agent: Agente responsável (opcional)
        category: Categoria
        subject: Assunto
        description: Descrição detalhada
        status: Ordinal do status (0-4)
        priority: Ordinal da prioridade (0-3)
        created_at: Timestamp de criação
        updated_at: Última mutação (nulo até a primeira)
        resolved_at: Entrada em Resolved/Closed
    """

    id = models.BigAutoField(primary_key=True)

    customer = models.ForeignKey(
        'customers.CustomerModel',
        on_delete=models.PROTECT,
        related_name='tickets',
        help_text="Cliente que abriu o ticket"
    )

    agent = models.ForeignKey(
        'agents.AgentModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tickets',
        help_text="Agente responsável"
    )

    category = models.ForeignKey(
        TicketCategoryModel,
        on_delete=models.PROTECT,
        related_name='tickets',
    )

    subject = models.CharField(
        max_length=200,
        db_index=True,
        help_text="Assunto do ticket"
    )

    description = models.TextField(
        help_text="Descrição detalhada do problema"
    )

    status = models.PositiveSmallIntegerField(
        choices=TicketStatusChoices.choices,
        default=TicketStatusChoices.OPEN,
        db_index=True,
    )

    priority = models.PositiveSmallIntegerField(
        choices=TicketPriorityChoices.choices,
        default=TicketPriorityChoices.MEDIUM,
        db_index=True,
    )

    # Timestamps (atribuídos pela entidade, nunca pelo ORM)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    updated_at = models.DateTimeField(null=True, blank=True)

    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'tickets'
        verbose_name = 'Ticket'
        verbose_name_plural = 'Tickets'
        ordering = ['-created_at', '-id']
        indexes = [
            # Índices compostos para queries frequentes
            models.Index(fields=['status', 'created_at'], name='tickets_status_created_idx'),
            models.Index(fields=['customer', 'created_at'], name='tickets_customer_created_idx'),
            models.Index(fields=['agent', 'status'], name='tickets_agent_status_idx'),
        ]

    def __str__(self):
        return f"[{self.id}] {self.subject}"

    def __repr__(self):
        return f"<TicketModel id={self.id} status={self.status}>"
