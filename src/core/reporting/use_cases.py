"""
Use Cases de Relatórios e Agregações.

Todos são leituras (sem UoW). Cada relatório faz uma única busca em
lote no repositório e agrega em memória com custo linear.

Relatórios:
- GetTicketSummaryService: contagem por status (cinco chaves sempre)
- GetSLAReportService: tickets não resolvidos classificados por idade
- GetPriorityDistributionService: contagem por prioridade (sem zeros)
- GetCategoryDistributionService: contagem por categoria (sem zeros)
- GetResolutionStatisticsService: média/mín/máx e % dentro da meta
- GetAgentPerformanceService: atribuídos/resolvidos/pendentes por agente
- GetDashboardStatsService: consolidado do painel
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional

from src.core.shared.clock import utc_now
from src.core.agents.ports import AgentRepository
from src.core.customers.ports import CustomerRepository
from src.core.tickets.entities import TicketEntity, TicketPriority, TicketStatus
from src.core.tickets.ports import CategoryRepository, TicketRepository

from .dtos import (
    AgentPerformanceDTO,
    DashboardStatsDTO,
    ResolutionStatisticsDTO,
    SLAReportItemDTO,
)
from .policies import DEFAULT_RESOLUTION_TARGET_HOURS, SLAPolicy, SLAStatus


def _average(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return round(sum(values) / len(values), 2)


def summarize_statuses(counts: Dict[TicketStatus, int]) -> Dict[str, int]:
    """Mapa nome do status -> total, na ordem do enum, com zeros."""
    return {status.display_name: counts.get(status, 0) for status in TicketStatus}


def resolution_statistics(
    tickets: Iterable[TicketEntity],
    target_hours: float = DEFAULT_RESOLUTION_TARGET_HOURS,
) -> ResolutionStatisticsDTO:
    """
    Calcula estatísticas de resolução sobre tickets Resolved/Closed.

    Tickets reabertos mantêm resolved_at mas ficam fora da conta.

    Args:
        tickets: Tickets a considerar (os não resolvidos são ignorados)
        target_hours: Meta de resolução em horas
    """
    hours = [
        t.resolution_hours
        for t in tickets
        if t.is_resolved and t.resolution_hours is not None
    ]
    if hours:
        within = sum(1 for h in hours if h <= target_hours)
        within_percent = round(within * 100 / len(hours), 2)
    else:
        within_percent = 100.0

    return ResolutionStatisticsDTO(
        resolved_count=len(hours),
        average_hours=_average(hours),
        min_hours=min(hours) if hours else None,
        max_hours=max(hours) if hours else None,
        target_hours=target_hours,
        within_target_percent=within_percent,
    )


class GetTicketSummaryService:
    """
    Use Case: Resumo de tickets por status.

    Returns sempre as cinco chaves (Open, InProgress, OnHold,
    Resolved, Closed), nessa ordem, com zero quando não há tickets.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self) -> Dict[str, int]:
        return summarize_statuses(self.ticket_repo.status_summary())


class GetSLAReportService:
    """
    Use Case: Relatório de SLA.

    Seleciona tickets fora de Resolved/Closed, do mais antigo ao mais
    novo, e classifica cada um pela idade em horas conforme SLAPolicy.

    Example:
        service = GetSLAReportService(ticket_repo, customer_repo,
                                      agent_repo, SLAPolicy(breach_hours=48))
        for item in service.execute():
            print(item.ticket_id, item.sla_status)
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        customer_repo: CustomerRepository,
        agent_repo: AgentRepository,
        policy: Optional[SLAPolicy] = None,
    ):
        self.ticket_repo = ticket_repo
        self.customer_repo = customer_repo
        self.agent_repo = agent_repo
        self.policy = policy or SLAPolicy()

    def execute(self, now: Optional[datetime] = None) -> List[SLAReportItemDTO]:
        """
        Args:
            now: Instante de referência (default: agora UTC)
        """
        now = now or utc_now()
        tickets = self.ticket_repo.list_sla_candidates()
        if not tickets:
            return []

        customers = self.customer_repo.get_many({t.customer_id for t in tickets})
        agents = self.agent_repo.get_many(
            {t.agent_id for t in tickets if t.agent_id is not None}
        )

        report = []
        for ticket in tickets:
            elapsed = ticket.age_hours(now)
            sla_status = self.policy.classify(ticket.open_hours(now))
            customer = customers.get(ticket.customer_id)
            agent = agents.get(ticket.agent_id) if ticket.agent_id is not None else None
            report.append(
                SLAReportItemDTO(
                    ticket_id=ticket.id,
                    subject=ticket.subject,
                    customer_name=customer.full_name if customer else None,
                    agent_name=agent.full_name if agent else None,
                    status=ticket.status.display_name,
                    priority=ticket.priority.display_name,
                    created_at=ticket.created_at,
                    resolution_hours=elapsed,
                    sla_status=sla_status.value,
                )
            )
        return report


class GetPriorityDistributionService:
    """
    Use Case: Distribuição por prioridade.

    Prioridades sem tickets são omitidas (ao contrário do resumo por
    status). Chaves na ordem do enum.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self) -> Dict[str, int]:
        counts: Dict[TicketPriority, int] = {}
        for ticket in self.ticket_repo.list_all():
            counts[ticket.priority] = counts.get(ticket.priority, 0) + 1
        return {
            priority.display_name: counts[priority]
            for priority in TicketPriority
            if counts.get(priority)
        }


class GetCategoryDistributionService:
    """
    Use Case: Distribuição por categoria.

    Categorias sem tickets são omitidas. Chaves na ordem das categorias.
    """

    def __init__(self, ticket_repo: TicketRepository, category_repo: CategoryRepository):
        self.ticket_repo = ticket_repo
        self.category_repo = category_repo

    def execute(self) -> Dict[str, int]:
        counts: Dict[int, int] = {}
        for ticket in self.ticket_repo.list_all():
            counts[ticket.category_id] = counts.get(ticket.category_id, 0) + 1
        if not counts:
            return {}

        distribution: Dict[str, int] = {}
        for category in self.category_repo.list_all():
            total = counts.pop(category.id, 0)
            if total:
                distribution[category.name] = total
        # Tickets apontando para categoria fora da lista de referência
        for category_id, total in sorted(counts.items()):
            distribution[f"Category {category_id}"] = total
        return distribution


class GetResolutionStatisticsService:
    """Use Case: Estatísticas de tempo de resolução."""

    def __init__(
        self,
        ticket_repo: TicketRepository,
        target_hours: float = DEFAULT_RESOLUTION_TARGET_HOURS,
    ):
        self.ticket_repo = ticket_repo
        self.target_hours = target_hours

    def execute(self) -> ResolutionStatisticsDTO:
        return resolution_statistics(self.ticket_repo.list_resolved(), self.target_hours)


class GetAgentPerformanceService:
    """
    Use Case: Desempenho por agente ativo.

    assigned = tickets atribuídos; resolved = desses, em Resolved/Closed;
    pending = assigned - resolved; média sobre resolution_hours dos
    resolvidos (reabertos não entram).
    Ordenado por resolvidos (maior primeiro) e depois por nome.
    """

    def __init__(self, ticket_repo: TicketRepository, agent_repo: AgentRepository):
        self.ticket_repo = ticket_repo
        self.agent_repo = agent_repo

    def execute(self) -> List[AgentPerformanceDTO]:
        agents = self.agent_repo.list_active()
        if not agents:
            return []

        assigned: Dict[int, int] = {}
        resolved: Dict[int, int] = {}
        hours: Dict[int, List[float]] = {}
        for ticket in self.ticket_repo.list_all():
            if ticket.agent_id is None:
                continue
            assigned[ticket.agent_id] = assigned.get(ticket.agent_id, 0) + 1
            if not ticket.is_resolved:
                continue
            resolved[ticket.agent_id] = resolved.get(ticket.agent_id, 0) + 1
            if ticket.resolution_hours is not None:
                hours.setdefault(ticket.agent_id, []).append(ticket.resolution_hours)

        performance = [
            AgentPerformanceDTO(
                agent_id=agent.id,
                agent_name=agent.full_name,
                department=agent.department,
                assigned=assigned.get(agent.id, 0),
                resolved=resolved.get(agent.id, 0),
                pending=assigned.get(agent.id, 0) - resolved.get(agent.id, 0),
                average_resolution_hours=_average(hours.get(agent.id, [])),
            )
            for agent in agents
        ]
        return sorted(performance, key=lambda p: (-p.resolved, p.agent_name))


class GetDashboardStatsService:
    """
    Use Case: Consolidado do painel.

    Uma única leitura de todos os tickets alimenta contagens por status,
    tickets em aberto, violações/riscos de SLA e estatísticas de resolução.
    """

    def __init__(
        self,
        ticket_repo: TicketRepository,
        policy: Optional[SLAPolicy] = None,
        target_hours: float = DEFAULT_RESOLUTION_TARGET_HOURS,
    ):
        self.ticket_repo = ticket_repo
        self.policy = policy or SLAPolicy()
        self.target_hours = target_hours

    def execute(self, now: Optional[datetime] = None) -> DashboardStatsDTO:
        now = now or utc_now()
        tickets = self.ticket_repo.list_all()

        counts: Dict[TicketStatus, int] = {}
        open_count = breached = at_risk = 0
        for ticket in tickets:
            counts[ticket.status] = counts.get(ticket.status, 0) + 1
            if ticket.is_resolved:
                continue
            open_count += 1
            sla_status = self.policy.classify(ticket.open_hours(now))
            if sla_status is SLAStatus.BREACHED:
                breached += 1
            elif sla_status is SLAStatus.AT_RISK:
                at_risk += 1

        return DashboardStatsDTO(
            total_tickets=len(tickets),
            open_tickets=open_count,
            breached_tickets=breached,
            at_risk_tickets=at_risk,
            status_summary=summarize_statuses(counts),
            resolution=resolution_statistics(tickets, self.target_hours),
        )
