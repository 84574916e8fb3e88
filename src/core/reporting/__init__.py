"""
Relatórios e agregações somente-leitura sobre tickets.

- Resumo por status, distribuição por prioridade e por categoria
- Relatório de SLA (OK / At Risk / BREACHED)
- Estatísticas de resolução, desempenho por agente e painel
"""

from .policies import SLAPolicy, SLAStatus
from .dtos import (
    SLAReportItemDTO,
    ResolutionStatisticsDTO,
    AgentPerformanceDTO,
    DashboardStatsDTO,
)

__all__ = [
    "SLAPolicy",
    "SLAStatus",
    "SLAReportItemDTO",
    "ResolutionStatisticsDTO",
    "AgentPerformanceDTO",
    "DashboardStatsDTO",
]
