"""
Use Cases (Application Services) do Domínio de Tickets.

Este módulo contém os casos de uso que orquestram a lógica de
negócio coordenando entidades, repositórios e eventos.

Use Cases de escrita (com UoW):
- CreateTicketService: Abre ticket (duplicidade, existência de refs)
- UpdateTicketStatusService: Move ticket na máquina de estados
- AssignTicketService: Atribui agente (Open avança para InProgress)

Use Cases de leitura (sem UoW):
- GetTicketService, ListTicketsService
- ListTicketsByCustomerService, ListTicketsByAgentService
- ListTicketsByStatusService, ListTicketsByPriorityService
- ListTicketsByDateRangeService, SearchTicketsService
- ListOpenTicketsService, ListResolvedTicketsService
- ListCategoriesService

Toda leitura devolve TicketOutputDTO com os campos de exibição de
cliente, agente e categoria, montados a partir de uma busca em lote
por tipo de entidade (sem N+1).
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from src.core.shared.clock import utc_now
from src.core.shared.validators import clean_text
from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.customers.ports import CustomerRepository
from src.core.agents.ports import AgentRepository

from .ports import CategoryRepository, TicketRepository
from .entities import TicketEntity, TicketPriority, TicketStatus
from .dtos import (
    AssignTicketInputDTO,
    CategoryOutputDTO,
    CreateTicketInputDTO,
    TicketOutputDTO,
    UpdateTicketStatusInputDTO,
)
from .events import (
    TicketAssignedEvent,
    TicketCreatedEvent,
    TicketStatusChangedEvent,
)


DEFAULT_DUPLICATE_WINDOW_HOURS = 24


def _not_found(entity_type: str, label: str, entity_id) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"{label} {entity_id} não encontrado",
        entity_type=entity_type,
        entity_id=entity_id,
    )


class TicketViewBuilder:
    """
    Monta TicketOutputDTO juntando cliente, agente e categoria.

    Para listas, faz uma busca em lote por tipo de entidade, mantendo
    o custo linear no número de tickets.
    """

    def __init__(
        self,
        customer_repo: CustomerRepository,
        agent_repo: AgentRepository,
        category_repo: CategoryRepository,
    ):
        self.customer_repo = customer_repo
        self.agent_repo = agent_repo
        self.category_repo = category_repo

    def build(self, ticket: TicketEntity) -> TicketOutputDTO:
        return self.build_many([ticket])[0]

    def build_many(self, tickets: Iterable[TicketEntity]) -> List[TicketOutputDTO]:
        tickets = list(tickets)
        if not tickets:
            return []

        customers = self.customer_repo.get_many({t.customer_id for t in tickets})
        agents = self.agent_repo.get_many(
            {t.agent_id for t in tickets if t.agent_id is not None}
        )
        categories = self.category_repo.get_many({t.category_id for t in tickets})

        return [
            TicketOutputDTO.from_entity(
                ticket,
                customer=customers.get(ticket.customer_id),
                agent=agents.get(ticket.agent_id) if ticket.agent_id is not None else None,
                category=categories.get(ticket.category_id),
            )
            for ticket in tickets
        ]


# =============================================================================
# Escrita
# =============================================================================

class CreateTicketService:
    """
    Use Case: Abrir um novo ticket.

    Fluxo:
    1. Cliente deve existir
    2. Rejeitar duplicado (mesmo cliente, assunto contido em ticket não
       resolvido aberto dentro da janela de supressão)
    3. Agente (se informado) e categoria devem existir
    4. Criar entidade (status sempre Open) e persistir
    5. Disparar TicketCreatedEvent
    6. Retornar view completa

    Example:
        service = CreateTicketService(ticket_repo, customer_repo,
                                      agent_repo, category_repo, uow)
        output = service.execute(CreateTicketInputDTO(
            customer_id=1,
            category_id=2,
            subject="Cobrança em dobro",
            description="Fatura de março veio duplicada",
            priority="High",
        ))
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        agent_repo: AgentRepository,
        category_repo: CategoryRepository,
        uow: UnitOfWork,
        duplicate_window_hours: float = DEFAULT_DUPLICATE_WINDOW_HOURS,
    ):
        self.ticket_repo = ticket_repo
        self.customer_repo = customer_repo
        self.agent_repo = agent_repo
        self.category_repo = category_repo
        self.uow = uow
        self.duplicate_window = timedelta(hours=duplicate_window_hours)
        self._views = TicketViewBuilder(customer_repo, agent_repo, category_repo)

    def execute(self, input_dto: CreateTicketInputDTO) -> TicketOutputDTO:
        """
        Executa abertura de ticket em transação atômica.

        Raises:
            EntityNotFoundError: Cliente, agente ou categoria inexistente
            ConflictError: Ticket duplicado dentro da janela
            ValidationError: Dados inválidos
        """
        now = utc_now()

        with self.uow:
            if not self.customer_repo.exists(input_dto.customer_id):
                raise _not_found("Customer", "Cliente", input_dto.customer_id)

            subject = clean_text(input_dto.subject, "subject")
            if subject and self.ticket_repo.is_duplicate(
                input_dto.customer_id,
                subject,
                since=now - self.duplicate_window,
            ):
                raise ConflictError(
                    "Ticket duplicado: o cliente já tem um ticket em aberto "
                    "com assunto semelhante nas últimas "
                    f"{self._window_hours()} horas",
                    rule="duplicate_ticket",
                )

            if input_dto.agent_id is not None and not self.agent_repo.exists(input_dto.agent_id):
                raise _not_found("Agent", "Agente", input_dto.agent_id)

            if not self.category_repo.exists(input_dto.category_id):
                raise _not_found("Category", "Categoria", input_dto.category_id)

            ticket = TicketEntity.create(
                customer_id=input_dto.customer_id,
                category_id=input_dto.category_id,
                subject=input_dto.subject,
                description=input_dto.description,
                priority=TicketPriority.from_string(input_dto.priority),
                agent_id=input_dto.agent_id,
                now=now,
            )
            ticket = self.ticket_repo.add(ticket)

            self.uow.publish_event(
                TicketCreatedEvent(
                    aggregate_id=ticket.id,
                    customer_id=ticket.customer_id,
                    category_id=ticket.category_id,
                    subject=ticket.subject,
                    priority=ticket.priority.display_name,
                    agent_id=ticket.agent_id,
                )
            )

        return self._views.build(ticket)

    def _window_hours(self) -> str:
        hours = self.duplicate_window.total_seconds() / 3600
        return f"{hours:g}"


class UpdateTicketStatusService:
    """
    Use Case: Alterar status de um ticket.

    Regras (na entidade):
    - Mesmo status sempre permitido (a escrita ainda acontece)
    - Demais transições conforme STATUS_TRANSITIONS
    - Resolved/Closed carimbam resolved_at; toda mudança carimba updated_at

    As notas não são gravadas no ticket; seguem no evento
    TicketStatusChangedEvent.
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        agent_repo: AgentRepository,
        category_repo: CategoryRepository,
        uow: UnitOfWork,
    ):
        self.ticket_repo = ticket_repo
        self.uow = uow
        self._views = TicketViewBuilder(customer_repo, agent_repo, category_repo)

    def execute(self, input_dto: UpdateTicketStatusInputDTO) -> TicketOutputDTO:
        """
        Executa mudança de status.

        Raises:
            EntityNotFoundError: Se ticket não existe
            ValidationError: Se status malformado
            InvalidStatusTransitionError: Se transição não permitida
        """
        new_status = TicketStatus.from_string(input_dto.status)

        with self.uow:
            ticket = self.ticket_repo.get_by_id(input_dto.ticket_id)
            if not ticket:
                raise _not_found("Ticket", "Ticket", input_dto.ticket_id)

            previous = ticket.change_status(new_status)
            self.ticket_repo.update(ticket)

            self.uow.publish_event(
                TicketStatusChangedEvent(
                    aggregate_id=ticket.id,
                    previous_status=previous.display_name,
                    new_status=new_status.display_name,
                    notes=input_dto.notes,
                )
            )

        return self._views.build(ticket)


class AssignTicketService:
    """
    Use Case: Atribuir ticket a um agente.

    Fluxo:
    1. Ticket e agente devem existir
    2. Definir agente; Open avança para InProgress
    3. Persistir e disparar TicketAssignedEvent
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        agent_repo: AgentRepository,
        category_repo: CategoryRepository,
        uow: UnitOfWork,
    ):
        self.ticket_repo = ticket_repo
        self.agent_repo = agent_repo
        self.uow = uow
        self._views = TicketViewBuilder(customer_repo, agent_repo, category_repo)

    def execute(self, input_dto: AssignTicketInputDTO) -> TicketOutputDTO:
        """
        Executa atribuição.

        Raises:
            EntityNotFoundError: Se ticket ou agente não existe
        """
        with self.uow:
            ticket = self.ticket_repo.get_by_id(input_dto.ticket_id)
            if not ticket:
                raise _not_found("Ticket", "Ticket", input_dto.ticket_id)

            if not self.agent_repo.exists(input_dto.agent_id):
                raise _not_found("Agent", "Agente", input_dto.agent_id)

            previous_agent_id = ticket.agent_id
            advanced = ticket.assign_to(input_dto.agent_id)
            self.ticket_repo.update(ticket)

            self.uow.publish_event(
                TicketAssignedEvent(
                    aggregate_id=ticket.id,
                    agent_id=input_dto.agent_id,
                    previous_agent_id=previous_agent_id,
                    status_advanced=advanced,
                )
            )

        return self._views.build(ticket)


# =============================================================================
# Leitura
# =============================================================================

class _TicketQueryService:
    """Base dos use cases de leitura (não usam UoW)."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        agent_repo: AgentRepository,
        category_repo: CategoryRepository,
    ):
        self.ticket_repo = ticket_repo
        self.customer_repo = customer_repo
        self.agent_repo = agent_repo
        self._views = TicketViewBuilder(customer_repo, agent_repo, category_repo)

    def _present(self, tickets: Iterable[TicketEntity]) -> List[TicketOutputDTO]:
        return self._views.build_many(tickets)


class GetTicketService(_TicketQueryService):
    """Use Case: Obter um ticket pelo ID."""

    def execute(self, ticket_id: int) -> TicketOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se ticket não existe
        """
        ticket = self.ticket_repo.get_by_id(ticket_id)
        if not ticket:
            raise _not_found("Ticket", "Ticket", ticket_id)
        return self._views.build(ticket)


class ListTicketsService(_TicketQueryService):
    """Use Case: Listar todos os tickets (mais recentes primeiro)."""

    def execute(self) -> List[TicketOutputDTO]:
        return self._present(self.ticket_repo.list_all())


class ListTicketsByCustomerService(_TicketQueryService):
    """Use Case: Tickets de um cliente."""

    def execute(self, customer_id: int) -> List[TicketOutputDTO]:
        """
        Raises:
            EntityNotFoundError: Se cliente não existe
        """
        if not self.customer_repo.exists(customer_id):
            raise _not_found("Customer", "Cliente", customer_id)
        return self._present(self.ticket_repo.list_by_customer(customer_id))


class ListTicketsByAgentService(_TicketQueryService):
    """Use Case: Tickets atribuídos a um agente."""

    def execute(self, agent_id: int) -> List[TicketOutputDTO]:
        """
        Raises:
            EntityNotFoundError: Se agente não existe
        """
        if not self.agent_repo.exists(agent_id):
            raise _not_found("Agent", "Agente", agent_id)
        return self._present(self.ticket_repo.list_by_agent(agent_id))


class ListTicketsByStatusService(_TicketQueryService):
    """Use Case: Tickets em um status (nome ou ordinal)."""

    def execute(self, status) -> List[TicketOutputDTO]:
        ticket_status = TicketStatus.from_string(status)
        return self._present(self.ticket_repo.list_by_status(ticket_status))


class ListTicketsByPriorityService(_TicketQueryService):
    """Use Case: Tickets com uma prioridade (nome ou ordinal)."""

    def execute(self, priority) -> List[TicketOutputDTO]:
        ticket_priority = TicketPriority.from_string(priority)
        return self._present(self.ticket_repo.list_by_priority(ticket_priority))


class ListTicketsByDateRangeService(_TicketQueryService):
    """
    Use Case: Tickets criados em um intervalo (inclusivo nas duas pontas).

    Datas sem timezone são interpretadas como UTC.
    """

    def execute(self, start: datetime, end: datetime) -> List[TicketOutputDTO]:
        """
        Raises:
            ValidationError: Se datas ausentes ou início depois do fim
        """
        if start is None or end is None:
            raise ValidationError("Datas inicial e final são obrigatórias", field="date_range")

        start, end = self._as_utc(start), self._as_utc(end)
        if start > end:
            raise ValidationError(
                "Data inicial deve ser anterior ou igual à data final",
                field="date_range",
            )
        return self._present(self.ticket_repo.list_by_date_range(start, end))

    @staticmethod
    def _as_utc(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class SearchTicketsService(_TicketQueryService):
    """
    Use Case: Busca textual em assunto, descrição e nome do cliente.

    Termo vazio ou só espaços retorna lista vazia (não é erro).
    """

    def execute(self, term: Optional[str]) -> List[TicketOutputDTO]:
        if not term or not term.strip():
            return []
        return self._present(self.ticket_repo.search(term.strip()))


class ListOpenTicketsService(_TicketQueryService):
    """Use Case: Tickets em Open, InProgress ou OnHold."""

    def execute(self) -> List[TicketOutputDTO]:
        return self._present(self.ticket_repo.list_open())


class ListResolvedTicketsService(_TicketQueryService):
    """Use Case: Tickets em Resolved ou Closed (resolvidos mais recentes primeiro)."""

    def execute(self) -> List[TicketOutputDTO]:
        return self._present(self.ticket_repo.list_resolved())


class ListCategoriesService:
    """Use Case: Listar categorias de referência."""

    def __init__(self, category_repo: CategoryRepository):
        self.category_repo = category_repo

    def execute(self, active_only: bool = False) -> List[CategoryOutputDTO]:
        categories = self.category_repo.list_all()
        if active_only:
            categories = [c for c in categories if c.is_active]
        return [CategoryOutputDTO.from_entity(c) for c in categories]
