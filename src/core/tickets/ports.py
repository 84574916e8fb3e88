"""
Ports (Interfaces) do Domínio de Tickets.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência e consulta de tickets e categorias.

Tipos de Ports:
- TicketRepository: leitura/escrita de tickets, filtros, busca,
  detecção de duplicidade e agregações por status
- CategoryRepository: leitura das categorias de referência

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Ordenação padrão das listas: created_at decrescente.
"""

from datetime import datetime
from typing import (
    Callable,
    Dict,
    Iterable,
    List,
    NamedTuple,
    Optional,
    Protocol,
    runtime_checkable,
)

from src.core.shared.clock import utc_now

from .entities import (
    CategoryEntity,
    DEFAULT_CATEGORIES,
    OPEN_STATUSES,
    RESOLVED_STATUSES,
    TicketEntity,
    TicketPriority,
    TicketStatus,
)


class AgentWorkload(NamedTuple):
    """Carga de um agente: tickets ainda abertos (assigned) e resolvidos."""

    assigned: int = 0
    resolved: int = 0


@runtime_checkable
class TicketRepository(Protocol):
    """
    Interface para persistência de Tickets.

    Implementações:
    - DjangoTicketRepository (ORM)
    - InMemoryTicketRepository (para testes)

    Falhas de persistência propagam (RepositoryError); nada é
    repetido automaticamente.
    """

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        """Busca ticket por ID (None se não existir)."""
        ...

    def exists(self, ticket_id: int) -> bool:
        ...

    def list_all(self) -> List[TicketEntity]:
        ...

    def list_by_customer(self, customer_id: int) -> List[TicketEntity]:
        ...

    def list_by_agent(self, agent_id: int) -> List[TicketEntity]:
        ...

    def list_by_status(self, status: TicketStatus) -> List[TicketEntity]:
        ...

    def list_by_priority(self, priority: TicketPriority) -> List[TicketEntity]:
        ...

    def list_by_date_range(self, start: datetime, end: datetime) -> List[TicketEntity]:
        """Tickets com start <= created_at <= end."""
        ...

    def list_open(self) -> List[TicketEntity]:
        """Tickets em Open, InProgress ou OnHold."""
        ...

    def list_resolved(self) -> List[TicketEntity]:
        """
        Tickets em Resolved ou Closed.

        Ordenados por resolved_at decrescente; resolved_at nulo por último.
        """
        ...

    def list_sla_candidates(self) -> List[TicketEntity]:
        """Tickets fora de Resolved/Closed, do mais antigo ao mais novo."""
        ...

    def search(self, term: str) -> List[TicketEntity]:
        """
        Busca textual (case-insensitive) em assunto, descrição e
        nome do cliente. Termo em branco retorna lista vazia.
        """
        ...

    def is_duplicate(self, customer_id: int, subject: str, since: datetime) -> bool:
        """
        Verifica se o cliente já tem ticket não resolvido, criado a
        partir de `since`, cujo assunto contém `subject`.
        """
        ...

    def count(self) -> int:
        ...

    def count_by_status(self, status: TicketStatus) -> int:
        ...

    def status_summary(self) -> Dict[TicketStatus, int]:
        """Contagem por status, com os cinco status sempre presentes."""
        ...

    def count_by_customer(self) -> Dict[int, int]:
        """Total de tickets por cliente (clientes sem ticket omitidos)."""
        ...

    def workload_by_agent(self) -> Dict[int, AgentWorkload]:
        """Tickets em aberto e resolvidos por agente."""
        ...

    def add(self, ticket: TicketEntity) -> TicketEntity:
        """Persiste novo ticket e retorna-o com ID atribuído."""
        ...

    def update(self, ticket: TicketEntity) -> None:
        """Persiste estado completo do ticket (carimba updated_at se nulo)."""
        ...


@runtime_checkable
class CategoryRepository(Protocol):
    """Interface de leitura das categorias de referência."""

    def get_by_id(self, category_id: int) -> Optional[CategoryEntity]:
        ...

    def exists(self, category_id: int) -> bool:
        ...

    def list_all(self) -> List[CategoryEntity]:
        ...

    def get_many(self, category_ids: Iterable[int]) -> Dict[int, CategoryEntity]:
        ...


# =============================================================================
# Implementações em memória (testes)
# =============================================================================

def _newest_first(tickets: Iterable[TicketEntity]) -> List[TicketEntity]:
    return sorted(
        tickets,
        key=lambda t: (t.created_at, t.id or 0),
        reverse=True,
    )


class InMemoryTicketRepository:
    """
    Implementação em memória do TicketRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!

    Args:
        customer_name_lookup: Função id -> nome do cliente, usada pela
            busca textual (o repositório em memória não faz join)

    Example:
        repo = InMemoryTicketRepository()
        ticket = repo.add(ticket)
        found = repo.get_by_id(ticket.id)
    """

    def __init__(self, customer_name_lookup: Optional[Callable[[int], Optional[str]]] = None):
        self._tickets: Dict[int, TicketEntity] = {}
        self._next_id = 1
        self._customer_name_lookup = customer_name_lookup

    def get_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        return self._tickets.get(ticket_id)

    def exists(self, ticket_id: int) -> bool:
        return ticket_id in self._tickets

    def list_all(self) -> List[TicketEntity]:
        return _newest_first(self._tickets.values())

    def list_by_customer(self, customer_id: int) -> List[TicketEntity]:
        return [t for t in self.list_all() if t.customer_id == customer_id]

    def list_by_agent(self, agent_id: int) -> List[TicketEntity]:
        return [t for t in self.list_all() if t.agent_id == agent_id]

    def list_by_status(self, status: TicketStatus) -> List[TicketEntity]:
        return [t for t in self.list_all() if t.status == status]

    def list_by_priority(self, priority: TicketPriority) -> List[TicketEntity]:
        return [t for t in self.list_all() if t.priority == priority]

    def list_by_date_range(self, start: datetime, end: datetime) -> List[TicketEntity]:
        return [t for t in self.list_all() if start <= t.created_at <= end]

    def list_open(self) -> List[TicketEntity]:
        return [t for t in self.list_all() if t.status in OPEN_STATUSES]

    def list_resolved(self) -> List[TicketEntity]:
        resolved = [t for t in self._tickets.values() if t.status in RESOLVED_STATUSES]
        stamped = sorted(
            (t for t in resolved if t.resolved_at is not None),
            key=lambda t: t.resolved_at,
            reverse=True,
        )
        unstamped = _newest_first(t for t in resolved if t.resolved_at is None)
        return stamped + unstamped

    def list_sla_candidates(self) -> List[TicketEntity]:
        return sorted(
            (t for t in self._tickets.values() if t.status not in RESOLVED_STATUSES),
            key=lambda t: (t.created_at, t.id or 0),
        )

    def search(self, term: str) -> List[TicketEntity]:
        needle = (term or "").strip().lower()
        if not needle:
            return []

        def matches(ticket: TicketEntity) -> bool:
            if needle in ticket.subject.lower() or needle in ticket.description.lower():
                return True
            if self._customer_name_lookup:
                name = self._customer_name_lookup(ticket.customer_id) or ""
                return needle in name.lower()
            return False

        return [t for t in self.list_all() if matches(t)]

    def is_duplicate(self, customer_id: int, subject: str, since: datetime) -> bool:
        needle = (subject or "").lower()
        return any(
            t.customer_id == customer_id
            and needle in t.subject.lower()
            and t.created_at >= since
            and t.status not in RESOLVED_STATUSES
            for t in self._tickets.values()
        )

    def count(self) -> int:
        return len(self._tickets)

    def count_by_status(self, status: TicketStatus) -> int:
        return sum(1 for t in self._tickets.values() if t.status == status)

    def status_summary(self) -> Dict[TicketStatus, int]:
        summary = {status: 0 for status in TicketStatus}
        for ticket in self._tickets.values():
            summary[ticket.status] += 1
        return summary

    def count_by_customer(self) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for ticket in self._tickets.values():
            counts[ticket.customer_id] = counts.get(ticket.customer_id, 0) + 1
        return counts

    def workload_by_agent(self) -> Dict[int, AgentWorkload]:
        workload: Dict[int, AgentWorkload] = {}
        for ticket in self._tickets.values():
            if ticket.agent_id is None:
                continue
            current = workload.get(ticket.agent_id, AgentWorkload())
            if ticket.status in RESOLVED_STATUSES:
                current = current._replace(resolved=current.resolved + 1)
            else:
                current = current._replace(assigned=current.assigned + 1)
            workload[ticket.agent_id] = current
        return workload

    def add(self, ticket: TicketEntity) -> TicketEntity:
        ticket.id = self._next_id
        self._next_id += 1
        self._tickets[ticket.id] = ticket
        return ticket

    def update(self, ticket: TicketEntity) -> None:
        if ticket.updated_at is None:
            ticket.updated_at = utc_now()
        self._tickets[ticket.id] = ticket

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._tickets.clear()
        self._next_id = 1


class InMemoryCategoryRepository:
    """
    Categorias em memória.

    Por padrão já vem com as cinco categorias de referência.
    """

    def __init__(self, seed_defaults: bool = True):
        self._categories: Dict[int, CategoryEntity] = {}
        if seed_defaults:
            for category_id, name, description in DEFAULT_CATEGORIES:
                self.add(CategoryEntity(id=category_id, name=name, description=description))

    def add(self, category: CategoryEntity) -> CategoryEntity:
        if category.id is None:
            category.id = max(self._categories, default=0) + 1
        self._categories[category.id] = category
        return category

    def get_by_id(self, category_id: int) -> Optional[CategoryEntity]:
        return self._categories.get(category_id)

    def exists(self, category_id: int) -> bool:
        return category_id in self._categories

    def list_all(self) -> List[CategoryEntity]:
        return sorted(self._categories.values(), key=lambda c: c.id)

    def get_many(self, category_ids: Iterable[int]) -> Dict[int, CategoryEntity]:
        return {
            cid: self._categories[cid]
            for cid in set(category_ids)
            if cid in self._categories
        }
