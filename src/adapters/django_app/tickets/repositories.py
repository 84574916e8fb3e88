"""
Repositórios Django para persistência de Tickets.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar TicketRepository e CategoryRepository
- Mapear entities para models e vice-versa
- Executar filtros, busca e agregações no banco via ORM

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from datetime import datetime
from typing import Dict, List

from django.db.models import Count, F, Q

from src.core.tickets.entities import (
    CategoryEntity,
    OPEN_STATUSES,
    RESOLVED_STATUSES,
    TicketEntity,
    TicketPriority,
    TicketStatus,
)
from src.core.tickets.ports import AgentWorkload
from src.core.shared.clock import utc_now

from ..shared.repository import BaseRepository
from .models import TicketCategoryModel, TicketModel
from .mappers import CategoryMapper, TicketMapper

_RESOLVED = [int(s) for s in RESOLVED_STATUSES]
_OPEN = [int(s) for s in OPEN_STATUSES]


class DjangoTicketRepository(BaseRepository[TicketEntity, TicketModel]):
    """
    Implementação Django do TicketRepository.

    Implementa a interface definida em src/core/tickets/ports.py.
    Listas saem por created_at decrescente, salvo indicação.

    Example:
        repo = DjangoTicketRepository()
        ticket = repo.add(ticket_entity)
        tickets = repo.list_by_status(TicketStatus.OPEN)
    """

    model_class = TicketModel
    mapper = TicketMapper
    default_order_fields = ["-created_at", "-id"]

    def _list(self, qs) -> List[TicketEntity]:
        return self._to_entities(qs.order_by(*self.default_order_fields))

    def list_by_customer(self, customer_id: int) -> List[TicketEntity]:
        return self._list(self._get_base_queryset().filter(customer_id=customer_id))

    def list_by_agent(self, agent_id: int) -> List[TicketEntity]:
        return self._list(self._get_base_queryset().filter(agent_id=agent_id))

    def list_by_status(self, status: TicketStatus) -> List[TicketEntity]:
        return self._list(self._get_base_queryset().filter(status=int(status)))

    def list_by_priority(self, priority: TicketPriority) -> List[TicketEntity]:
        return self._list(self._get_base_queryset().filter(priority=int(priority)))

    def list_by_date_range(self, start: datetime, end: datetime) -> List[TicketEntity]:
        return self._list(
            self._get_base_queryset().filter(created_at__gte=start, created_at__lte=end)
        )

    def list_open(self) -> List[TicketEntity]:
        return self._list(self._get_base_queryset().filter(status__in=_OPEN))

    def list_resolved(self) -> List[TicketEntity]:
        return self._to_entities(
            self._get_base_queryset()
            .filter(status__in=_RESOLVED)
            .order_by(F("resolved_at").desc(nulls_last=True), "-created_at", "-id")
        )

    def list_sla_candidates(self) -> List[TicketEntity]:
        return self._to_entities(
            self._get_base_queryset()
            .exclude(status__in=_RESOLVED)
            .order_by("created_at", "id")
        )

    def search(self, term: str) -> List[TicketEntity]:
        term = (term or "").strip()
        if not term:
            return []
        return self._list(
            self._get_base_queryset().filter(
                Q(subject__icontains=term)
                | Q(description__icontains=term)
                | Q(customer__full_name__icontains=term)
            )
        )

    def is_duplicate(self, customer_id: int, subject: str, since: datetime) -> bool:
        qs = (
            self.model_class.objects
            .filter(
                customer_id=customer_id,
                subject__icontains=subject,
                created_at__gte=since,
            )
            .exclude(status__in=_RESOLVED)
        )
        with self._db_errors("is_duplicate"):
            return qs.exists()

    def count_by_status(self, status: TicketStatus) -> int:
        with self._db_errors("count_by_status"):
            return self.model_class.objects.filter(status=int(status)).count()

    def status_summary(self) -> Dict[TicketStatus, int]:
        summary = {status: 0 for status in TicketStatus}
        with self._db_errors("status_summary"):
            rows = list(
                self.model_class.objects
                .order_by()
                .values("status")
                .annotate(total=Count("id"))
            )
        for row in rows:
            summary[TicketStatus(row["status"])] = row["total"]
        return summary

    def count_by_customer(self) -> Dict[int, int]:
        with self._db_errors("count_by_customer"):
            rows = list(
                self.model_class.objects
                .order_by()
                .values("customer_id")
                .annotate(total=Count("id"))
            )
        return {row["customer_id"]: row["total"] for row in rows}

    def workload_by_agent(self) -> Dict[int, AgentWorkload]:
        with self._db_errors("workload_by_agent"):
            rows = list(
                self.model_class.objects
                .filter(agent__isnull=False)
                .order_by()
                .values("agent_id")
                .annotate(
                    assigned=Count("id", filter=~Q(status__in=_RESOLVED)),
                    resolved=Count("id", filter=Q(status__in=_RESOLVED)),
                )
            )
        return {
            row["agent_id"]: AgentWorkload(assigned=row["assigned"], resolved=row["resolved"])
            for row in rows
        }

    def update(self, ticket: TicketEntity) -> None:
        if ticket.updated_at is None:
            ticket.updated_at = utc_now()
        super().update(ticket)


class DjangoCategoryRepository(BaseRepository[CategoryEntity, TicketCategoryModel]):
    """Leitura das categorias de referência."""

    model_class = TicketCategoryModel
    mapper = CategoryMapper
    default_order_fields = ["id"]
