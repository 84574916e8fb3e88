"""
DTOs de saída dos relatórios.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional


@dataclass
class SLAReportItemDTO:
    """
    Linha do relatório de SLA.

    Attributes:
        resolution_hours: Horas desde a abertura até o momento do relatório
        sla_status: "OK", "At Risk" ou "BREACHED"
    """

    ticket_id: int
    subject: str
    customer_name: Optional[str]
    agent_name: Optional[str]
    status: str
    priority: str
    created_at: datetime
    resolution_hours: float
    sla_status: str

    def to_dict(self) -> dict:
        return {
            "ticket_id": self.ticket_id,
            "subject": self.subject,
            "customer_name": self.customer_name,
            "agent_name": self.agent_name,
            "status": self.status,
            "priority": self.priority,
            "created_at": self.created_at.isoformat(),
            "resolution_hours": self.resolution_hours,
            "sla_status": self.sla_status,
        }


@dataclass
class ResolutionStatisticsDTO:
    """
    Estatísticas de tempo de resolução.

    Attributes:
        resolved_count: Tickets com resolved_at
        average_hours: Média de horas de resolução (None sem dados)
        min_hours / max_hours: Extremos (None sem dados)
        target_hours: Meta de resolução usada no cálculo
        within_target_percent: % de resolvidos dentro da meta
            (100.0 quando nada foi resolvido)
    """

    resolved_count: int
    average_hours: Optional[float]
    min_hours: Optional[float]
    max_hours: Optional[float]
    target_hours: float
    within_target_percent: float

    def to_dict(self) -> dict:
        return {
            "resolved_count": self.resolved_count,
            "average_hours": self.average_hours,
            "min_hours": self.min_hours,
            "max_hours": self.max_hours,
            "target_hours": self.target_hours,
            "within_target_percent": self.within_target_percent,
        }


@dataclass
class AgentPerformanceDTO:
    """Desempenho de um agente."""

    agent_id: int
    agent_name: str
    department: Optional[str]
    assigned: int
    resolved: int
    pending: int
    average_resolution_hours: Optional[float]

    def to_dict(self) -> dict:
        return {
            "agent_id": self.agent_id,
            "agent_name": self.agent_name,
            "department": self.department,
            "assigned": self.assigned,
            "resolved": self.resolved,
            "pending": self.pending,
            "average_resolution_hours": self.average_resolution_hours,
        }


@dataclass
class DashboardStatsDTO:
    """Números consolidados do painel."""

    total_tickets: int
    open_tickets: int
    breached_tickets: int
    at_risk_tickets: int
    status_summary: Dict[str, int] = field(default_factory=dict)
    resolution: Optional[ResolutionStatisticsDTO] = None

    def to_dict(self) -> dict:
        return {
            "total_tickets": self.total_tickets,
            "open_tickets": self.open_tickets,
            "breached_tickets": self.breached_tickets,
            "at_risk_tickets": self.at_risk_tickets,
            "status_summary": dict(self.status_summary),
            "resolution": self.resolution.to_dict() if self.resolution else None,
        }
