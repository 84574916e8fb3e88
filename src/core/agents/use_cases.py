"""
Use Cases do Domínio de Agentes.

- CreateAgentService, UpdateAgentService, DeactivateAgentService
- GetAgentService, ListAgentsService
- ListAgentsWithStatsService: ordenados por carga (tickets em aberto)

Toda saída inclui a carga do agente: tickets atribuídos ainda não
resolvidos e tickets já resolvidos.
"""

from typing import List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import ConflictError, EntityNotFoundError
from src.core.shared.validators import normalize_email
from src.core.tickets.ports import AgentWorkload, TicketRepository

from .ports import AgentRepository
from .entities import AgentEntity
from .dtos import AgentOutputDTO, CreateAgentInputDTO, UpdateAgentInputDTO


def _agent_not_found(agent_id) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"Agente {agent_id} não encontrado",
        entity_type="Agent",
        entity_id=agent_id,
    )


def _email_conflict(email: str) -> ConflictError:
    return ConflictError(
        f"Agente com email {email} já existe",
        rule="unique_email",
    )


def _present(agent: AgentEntity, workload: AgentWorkload) -> AgentOutputDTO:
    return AgentOutputDTO.from_entity(
        agent,
        assigned_tickets=workload.assigned,
        resolved_tickets=workload.resolved,
    )


class CreateAgentService:
    """
    Use Case: Cadastrar agente.

    Raises:
        ConflictError: Email já cadastrado
        ValidationError: Dados inválidos
    """

    def __init__(self, agent_repo: AgentRepository, uow: UnitOfWork):
        self.agent_repo = agent_repo
        self.uow = uow

    def execute(self, input_dto: CreateAgentInputDTO) -> AgentOutputDTO:
        with self.uow:
            agent = AgentEntity.create(
                full_name=input_dto.full_name,
                email=input_dto.email,
                department=input_dto.department,
                role=input_dto.role,
            )
            if self.agent_repo.email_exists(agent.email):
                raise _email_conflict(agent.email)

            agent = self.agent_repo.add(agent)

        return _present(agent, AgentWorkload())


class UpdateAgentService:
    """Use Case: Atualização parcial de agente."""

    def __init__(
        self,
        agent_repo: AgentRepository,
        ticket_repo: TicketRepository,
        uow: UnitOfWork,
    ):
        self.agent_repo = agent_repo
        self.ticket_repo = ticket_repo
        self.uow = uow

    def execute(self, input_dto: UpdateAgentInputDTO) -> AgentOutputDTO:
        """
        Raises:
            EntityNotFoundError: Agente inexistente
            ConflictError: Novo email já pertence a outro agente
        """
        with self.uow:
            agent = self.agent_repo.get_by_id(input_dto.agent_id)
            if not agent:
                raise _agent_not_found(input_dto.agent_id)

            if input_dto.email is not None:
                new_email = normalize_email(input_dto.email)
                if new_email != agent.email and self.agent_repo.email_exists(
                    new_email, exclude_id=agent.id
                ):
                    raise _email_conflict(new_email)

            agent.apply_changes(
                full_name=input_dto.full_name,
                email=input_dto.email,
                department=input_dto.department,
                role=input_dto.role,
                is_active=input_dto.is_active,
            )
            self.agent_repo.update(agent)

        workload = self.ticket_repo.workload_by_agent().get(agent.id, AgentWorkload())
        return _present(agent, workload)


class DeactivateAgentService:
    """Use Case: Desativar agente (soft delete)."""

    def __init__(self, agent_repo: AgentRepository, uow: UnitOfWork):
        self.agent_repo = agent_repo
        self.uow = uow

    def execute(self, agent_id: int) -> None:
        with self.uow:
            agent = self.agent_repo.get_by_id(agent_id)
            if not agent:
                raise _agent_not_found(agent_id)

            agent.deactivate()
            self.agent_repo.update(agent)


class GetAgentService:
    """Use Case: Obter agente com carga de trabalho."""

    def __init__(self, agent_repo: AgentRepository, ticket_repo: TicketRepository):
        self.agent_repo = agent_repo
        self.ticket_repo = ticket_repo

    def execute(self, agent_id: int) -> AgentOutputDTO:
        agent = self.agent_repo.get_by_id(agent_id)
        if not agent:
            raise _agent_not_found(agent_id)
        workload = self.ticket_repo.workload_by_agent().get(agent.id, AgentWorkload())
        return _present(agent, workload)


class ListAgentsService:
    """Use Case: Listar agentes por nome (todos ou só ativos)."""

    def __init__(self, agent_repo: AgentRepository, ticket_repo: TicketRepository):
        self.agent_repo = agent_repo
        self.ticket_repo = ticket_repo

    def execute(self, active_only: bool = False) -> List[AgentOutputDTO]:
        agents = self.agent_repo.list_active() if active_only else self.agent_repo.list_all()
        if not agents:
            return []
        workload = self.ticket_repo.workload_by_agent()
        return [_present(a, workload.get(a.id, AgentWorkload())) for a in agents]


class ListAgentsWithStatsService(ListAgentsService):
    """Use Case: Agentes ordenados por tickets em aberto (maior carga primeiro)."""

    def execute(self, active_only: bool = False) -> List[AgentOutputDTO]:
        agents = super().execute(active_only=active_only)
        return sorted(agents, key=lambda a: a.assigned_tickets, reverse=True)
