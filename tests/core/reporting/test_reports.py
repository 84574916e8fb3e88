"""
Testes Unitários para Relatórios.

Coverage:
- SLAPolicy.classify()
- GetTicketSummaryService (cinco chaves sempre)
- GetSLAReportService
- Distribuições por prioridade e categoria
- GetResolutionStatisticsService
- GetAgentPerformanceService
- GetDashboardStatsService
"""

import pytest

from src.core.agents.entities import AgentEntity
from src.core.reporting.policies import SLAPolicy, SLAStatus
from src.core.reporting.use_cases import (
    GetAgentPerformanceService,
    GetCategoryDistributionService,
    GetDashboardStatsService,
    GetPriorityDistributionService,
    GetResolutionStatisticsService,
    GetSLAReportService,
    GetTicketSummaryService,
)
from src.core.tickets.entities import TicketPriority, TicketStatus
from src.core.shared.exceptions import ValidationError


class TestSLAPolicy:

    @pytest.mark.parametrize("hours,expected", [
        (0.0, SLAStatus.OK),
        (10.0, SLAStatus.OK),
        (48.0, SLAStatus.OK),
        (48.01, SLAStatus.BREACHED),
        (50.0, SLAStatus.BREACHED),
    ])
    def test_classificacao_binaria(self, hours, expected):
        assert SLAPolicy(breach_hours=48).classify(hours) is expected

    def test_faixa_de_risco(self):
        policy = SLAPolicy(breach_hours=48, at_risk_hours=40)

        assert policy.classify(39) is SLAStatus.OK
        assert policy.classify(45) is SLAStatus.AT_RISK
        assert policy.classify(49) is SLAStatus.BREACHED

    @pytest.mark.parametrize("breach,at_risk", [(0, None), (-1, None), (48, 48), (48, 0)])
    def test_limiares_invalidos(self, breach, at_risk):
        with pytest.raises(ValidationError):
            SLAPolicy(breach_hours=breach, at_risk_hours=at_risk)


class TestTicketSummary:

    def test_resumo_vazio_tem_cinco_chaves(self, ticket_repo):
        summary = GetTicketSummaryService(ticket_repo).execute()

        assert summary == {"Open": 0, "InProgress": 0, "OnHold": 0, "Resolved": 0, "Closed": 0}
        assert list(summary) == ["Open", "InProgress", "OnHold", "Resolved", "Closed"]

    def test_resumo_conta_por_status(self, ticket_repo, make_ticket):
        make_ticket()
        make_ticket(status=TicketStatus.CLOSED)
        make_ticket(status=TicketStatus.CLOSED)

        summary = GetTicketSummaryService(ticket_repo).execute()

        assert summary["Open"] == 1
        assert summary["Closed"] == 2
        assert summary["OnHold"] == 0


class TestSLAReport:

    @pytest.fixture
    def service(self, ticket_repo, customer_repo, agent_repo):
        return GetSLAReportService(ticket_repo, customer_repo, agent_repo, SLAPolicy(breach_hours=48))

    def test_classifica_por_idade(self, service, make_ticket, hours_ago, now, agent):
        old = make_ticket(subject="Antigo", created_at=hours_ago(50), agent_id=agent.id)
        recent = make_ticket(subject="Recente", created_at=hours_ago(10))

        report = service.execute(now=now)

        assert [item.ticket_id for item in report] == [old.id, recent.id]
        assert report[0].sla_status == "BREACHED"
        assert report[0].resolution_hours == 50.0
        assert report[0].agent_name == "Alice Johnson"
        assert report[0].customer_name == "John Doe"
        assert report[1].sla_status == "OK"
        assert report[1].agent_name is None

    def test_viola_sla_segundos_apos_o_limite(self, service, make_ticket, hours_ago, now):
        make_ticket(created_at=hours_ago(48 + 10 / 3600))

        item = service.execute(now=now)[0]

        assert item.resolution_hours == 48.0
        assert item.sla_status == "BREACHED"

    def test_ignora_resolvidos(self, service, make_ticket, hours_ago, now):
        make_ticket(status=TicketStatus.RESOLVED, created_at=hours_ago(100))
        make_ticket(status=TicketStatus.CLOSED, created_at=hours_ago(100))
        on_hold = make_ticket(status=TicketStatus.ON_HOLD, created_at=hours_ago(100))

        report = service.execute(now=now)

        assert [item.ticket_id for item in report] == [on_hold.id]

    def test_sem_tickets(self, service, now):
        assert service.execute(now=now) == []

    def test_to_dict(self, service, make_ticket, hours_ago, now):
        make_ticket(created_at=hours_ago(1), priority=TicketPriority.HIGH)

        data = service.execute(now=now)[0].to_dict()

        assert data["status"] == "Open"
        assert data["priority"] == "High"
        assert data["sla_status"] == "OK"
        assert data["created_at"].startswith("2024-03-10T11:00:00")


class TestDistribuicoes:

    def test_prioridade_omite_zeros(self, ticket_repo, make_ticket):
        make_ticket(priority=TicketPriority.HIGH)
        make_ticket(priority=TicketPriority.HIGH)
        make_ticket(priority=TicketPriority.LOW)

        distribution = GetPriorityDistributionService(ticket_repo).execute()

        assert distribution == {"Low": 1, "High": 2}

    def test_categoria_por_nome(self, ticket_repo, category_repo, make_ticket):
        make_ticket(category_id=2)
        make_ticket(category_id=2)
        make_ticket(category_id=4)

        distribution = GetCategoryDistributionService(ticket_repo, category_repo).execute()

        assert distribution == {"Billing": 2, "Complaint": 1}

    def test_categoria_desconhecida(self, ticket_repo, category_repo, make_ticket):
        make_ticket(category_id=42)

        distribution = GetCategoryDistributionService(ticket_repo, category_repo).execute()

        assert distribution == {"Category 42": 1}

    def test_sem_tickets(self, ticket_repo, category_repo):
        assert GetPriorityDistributionService(ticket_repo).execute() == {}
        assert GetCategoryDistributionService(ticket_repo, category_repo).execute() == {}


class TestResolutionStatistics:

    def test_sem_resolvidos(self, ticket_repo, make_ticket):
        make_ticket()

        stats = GetResolutionStatisticsService(ticket_repo).execute()

        assert stats.resolved_count == 0
        assert stats.average_hours is None
        assert stats.within_target_percent == 100.0

    def test_media_e_meta(self, ticket_repo, make_ticket, hours_ago, now):
        make_ticket(status=TicketStatus.RESOLVED, created_at=hours_ago(10), resolved_at=now)
        make_ticket(status=TicketStatus.CLOSED, created_at=hours_ago(30), resolved_at=now)
        make_ticket(status=TicketStatus.CLOSED, created_at=hours_ago(5), resolved_at=now)

        stats = GetResolutionStatisticsService(ticket_repo, target_hours=24).execute()

        assert stats.resolved_count == 3
        assert stats.average_hours == 15.0
        assert stats.min_hours == 5.0
        assert stats.max_hours == 30.0
        assert stats.within_target_percent == 66.67

    def test_reaberto_nao_conta_como_resolvido(self, ticket_repo, make_ticket, hours_ago, now):
        make_ticket(status=TicketStatus.RESOLVED, created_at=hours_ago(2), resolved_at=now)
        make_ticket(status=TicketStatus.IN_PROGRESS, created_at=hours_ago(100), resolved_at=hours_ago(5))

        stats = GetResolutionStatisticsService(ticket_repo).execute()
        dashboard = GetDashboardStatsService(ticket_repo).execute(now=now)

        assert stats.resolved_count == 1
        assert stats.average_hours == 2.0
        assert dashboard.resolution == stats


class TestAgentPerformance:

    def test_desempenho_ordenado_por_resolvidos(self, ticket_repo, agent_repo, agent, make_ticket, hours_ago, now):
        bob = agent_repo.add(AgentEntity.create("Bob Smith", "bob@support.com"))
        carol = agent_repo.add(AgentEntity.create("Carol White", "carol@support.com"))
        inactive = agent_repo.add(AgentEntity.create("Dave Gone", "dave@support.com"))
        inactive.deactivate()

        make_ticket(agent_id=bob.id, status=TicketStatus.RESOLVED, created_at=hours_ago(4), resolved_at=now)
        make_ticket(agent_id=bob.id, status=TicketStatus.CLOSED, created_at=hours_ago(2), resolved_at=now)
        make_ticket(agent_id=bob.id)
        make_ticket(agent_id=agent.id)
        make_ticket(agent_id=inactive.id, status=TicketStatus.CLOSED, resolved_at=now)

        report = GetAgentPerformanceService(ticket_repo, agent_repo).execute()

        assert [p.agent_name for p in report] == ["Bob Smith", "Alice Johnson", "Carol White"]
        bob_row = report[0]
        assert (bob_row.assigned, bob_row.resolved, bob_row.pending) == (3, 2, 1)
        assert bob_row.average_resolution_hours == 3.0
        assert report[1].average_resolution_hours is None
        assert carol.id == report[2].agent_id
        assert report[2].assigned == 0

    def test_reaberto_fica_fora_da_media(self, ticket_repo, agent_repo, agent, make_ticket, hours_ago, now):
        make_ticket(agent_id=agent.id, status=TicketStatus.CLOSED, created_at=hours_ago(4), resolved_at=now)
        make_ticket(agent_id=agent.id, status=TicketStatus.IN_PROGRESS, created_at=hours_ago(50), resolved_at=hours_ago(2))

        row = GetAgentPerformanceService(ticket_repo, agent_repo).execute()[0]

        assert (row.assigned, row.resolved, row.pending) == (2, 1, 1)
        assert row.average_resolution_hours == 4.0


class TestDashboard:

    def test_consolidado(self, ticket_repo, make_ticket, hours_ago, now):
        make_ticket(created_at=hours_ago(60))
        make_ticket(status=TicketStatus.ON_HOLD, created_at=hours_ago(45))
        make_ticket(created_at=hours_ago(1))
        make_ticket(status=TicketStatus.RESOLVED, created_at=hours_ago(80), resolved_at=hours_ago(70))

        service = GetDashboardStatsService(ticket_repo, SLAPolicy(breach_hours=48, at_risk_hours=40))
        stats = service.execute(now=now)

        assert stats.total_tickets == 4
        assert stats.open_tickets == 3
        assert stats.breached_tickets == 1
        assert stats.at_risk_tickets == 1
        assert stats.status_summary["Open"] == 2
        assert stats.status_summary["Closed"] == 0
        assert stats.resolution.resolved_count == 1
        assert stats.to_dict()["resolution"]["average_hours"] == 10.0

    def test_viola_sla_segundos_apos_o_limite(self, ticket_repo, make_ticket, hours_ago, now):
        make_ticket(created_at=hours_ago(48 + 10 / 3600))

        stats = GetDashboardStatsService(ticket_repo, SLAPolicy(breach_hours=48)).execute(now=now)

        assert stats.breached_tickets == 1
