"""
Testes Unitários para Use Cases do Domínio de Agentes.
"""

import pytest

from src.core.agents.dtos import CreateAgentInputDTO, UpdateAgentInputDTO
from src.core.agents.entities import AgentEntity, DEFAULT_ROLE
from src.core.agents.use_cases import (
    CreateAgentService,
    DeactivateAgentService,
    GetAgentService,
    ListAgentsService,
    ListAgentsWithStatsService,
    UpdateAgentService,
)
from src.core.tickets.entities import TicketStatus
from src.core.shared.exceptions import ConflictError, EntityNotFoundError, ValidationError


class TestAgentEntity:

    def test_papel_padrao(self):
        agent = AgentEntity.create("Bob Smith", "bob@support.com", role="  ")

        assert agent.role == DEFAULT_ROLE
        assert agent.department is None

    def test_papel_muito_longo_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            AgentEntity.create("Bob Smith", "bob@support.com", role="x" * 51)

        assert exc_info.value.field == "role"


class TestCreateAgentService:

    def test_cadastrar_agente(self, agent_repo, uow):
        output = CreateAgentService(agent_repo, uow).execute(
            CreateAgentInputDTO("Carol White", "Carol@Support.com", department="Support", role="Supervisor")
        )

        assert output.email == "carol@support.com"
        assert output.role == "Supervisor"
        assert output.assigned_tickets == 0
        assert output.resolved_tickets == 0

    def test_email_duplicado_erro(self, agent_repo, uow, agent):
        with pytest.raises(ConflictError):
            CreateAgentService(agent_repo, uow).execute(
                CreateAgentInputDTO("Alice Clone", "ALICE@support.com")
            )


class TestUpdateAgentService:

    def test_atualizar_departamento(self, agent_repo, ticket_repo, uow, agent, make_ticket):
        make_ticket(agent_id=agent.id, status=TicketStatus.IN_PROGRESS)
        make_ticket(agent_id=agent.id, status=TicketStatus.RESOLVED)

        output = UpdateAgentService(agent_repo, ticket_repo, uow).execute(
            UpdateAgentInputDTO(agent.id, department="Billing")
        )

        assert output.department == "Billing"
        assert output.assigned_tickets == 1
        assert output.resolved_tickets == 1

    def test_agente_inexistente_erro(self, agent_repo, ticket_repo, uow):
        with pytest.raises(EntityNotFoundError):
            UpdateAgentService(agent_repo, ticket_repo, uow).execute(UpdateAgentInputDTO(9, role="Lead"))

    def test_email_de_outro_agente_erro(self, agent_repo, ticket_repo, uow, agent):
        agent_repo.add(AgentEntity.create("Bob Smith", "bob@support.com"))

        with pytest.raises(ConflictError):
            UpdateAgentService(agent_repo, ticket_repo, uow).execute(
                UpdateAgentInputDTO(agent.id, email="bob@support.com")
            )


class TestDeactivateAgentService:

    def test_desativar_mantem_tickets(self, agent_repo, ticket_repo, uow, agent, make_ticket):
        ticket = make_ticket(agent_id=agent.id)

        DeactivateAgentService(agent_repo, uow).execute(agent.id)

        assert agent_repo.get_by_id(agent.id).is_active is False
        assert ticket_repo.get_by_id(ticket.id).agent_id == agent.id

    def test_agente_inexistente_erro(self, agent_repo, uow):
        with pytest.raises(EntityNotFoundError):
            DeactivateAgentService(agent_repo, uow).execute(3)


class TestConsultasDeAgentes:

    @pytest.fixture
    def bob(self, agent_repo):
        return agent_repo.add(AgentEntity.create("Bob Smith", "bob@support.com"))

    def test_obter_agente(self, agent_repo, ticket_repo, agent):
        output = GetAgentService(agent_repo, ticket_repo).execute(agent.id)

        assert output.full_name == "Alice Johnson"

    def test_obter_inexistente_erro(self, agent_repo, ticket_repo):
        with pytest.raises(EntityNotFoundError):
            GetAgentService(agent_repo, ticket_repo).execute(8)

    def test_listar_apenas_ativos(self, agent_repo, ticket_repo, agent, bob):
        bob.deactivate()
        service = ListAgentsService(agent_repo, ticket_repo)

        assert [a.full_name for a in service.execute()] == ["Alice Johnson", "Bob Smith"]
        assert [a.full_name for a in service.execute(active_only=True)] == ["Alice Johnson"]

    def test_listar_por_carga(self, agent_repo, ticket_repo, agent, bob, make_ticket):
        make_ticket(agent_id=bob.id)
        make_ticket(agent_id=bob.id, subject="Outro")
        make_ticket(agent_id=agent.id, status=TicketStatus.CLOSED)

        output = ListAgentsWithStatsService(agent_repo, ticket_repo).execute()

        assert [(a.full_name, a.assigned_tickets, a.resolved_tickets) for a in output] == [
            ("Bob Smith", 2, 0),
            ("Alice Johnson", 0, 1),
        ]
