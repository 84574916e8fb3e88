"""
Políticas de SLA e de meta de resolução.

Os limiares são pontos de configuração nomeados (settings
SLA_BREACH_HOURS, SLA_AT_RISK_HOURS e RESOLUTION_TARGET_HOURS),
injetados pelo container.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.shared.exceptions import ValidationError


DEFAULT_SLA_BREACH_HOURS = 48.0
DEFAULT_RESOLUTION_TARGET_HOURS = 24.0


class SLAStatus(str, Enum):
    """Classificação de um ticket em aberto frente ao SLA."""

    OK = "OK"
    AT_RISK = "At Risk"
    BREACHED = "BREACHED"


@dataclass(frozen=True)
class SLAPolicy:
    """
    Limiares de classificação de SLA por idade do ticket.

    - idade > breach_hours → BREACHED
    - idade > at_risk_hours (se configurado) → AT_RISK
    - caso contrário → OK

    Sem at_risk_hours, a classificação é binária (OK/BREACHED).

    Example:
        policy = SLAPolicy(breach_hours=48, at_risk_hours=40)
        policy.classify(45.0)  # SLAStatus.AT_RISK
    """

    breach_hours: float = DEFAULT_SLA_BREACH_HOURS
    at_risk_hours: Optional[float] = None

    def __post_init__(self):
        if self.breach_hours <= 0:
            raise ValidationError(
                "Limiar de violação de SLA deve ser positivo",
                field="breach_hours",
            )
        if self.at_risk_hours is not None and not 0 < self.at_risk_hours < self.breach_hours:
            raise ValidationError(
                "Limiar de risco deve ser positivo e menor que o de violação",
                field="at_risk_hours",
            )

    def classify(self, elapsed_hours: float) -> SLAStatus:
        if elapsed_hours > self.breach_hours:
            return SLAStatus.BREACHED
        if self.at_risk_hours is not None and elapsed_hours > self.at_risk_hours:
            return SLAStatus.AT_RISK
        return SLAStatus.OK
