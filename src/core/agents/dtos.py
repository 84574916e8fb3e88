"""
Data Transfer Objects (DTOs) do Domínio de Agentes.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import AgentEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateAgentInputDTO:
    """
    DTO de entrada para criar agente.

    Attributes:
        full_name: Nome completo
        email: Email (único, case-insensitive)
        department: Departamento opcional
        role: Papel (default "Agent")
    """

    full_name: str
    email: str
    department: Optional[str] = None
    role: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
            "role": self.role,
        }


@dataclass(frozen=True)
class UpdateAgentInputDTO:
    """DTO de entrada para atualização parcial de agente."""

    agent_id: int
    full_name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None

    def to_dict(self) -> dict:
        return {
            "agent_id": self.agent_id,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
            "role": self.role,
            "is_active": self.is_active,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class AgentOutputDTO:
    """
    DTO de saída de agente com carga de trabalho.

    Attributes:
        assigned_tickets: Tickets atribuídos ainda não resolvidos
        resolved_tickets: Tickets atribuídos em Resolved/Closed
    """

    id: int
    full_name: str
    email: str
    department: Optional[str]
    role: str
    is_active: bool
    created_at: datetime
    assigned_tickets: int = 0
    resolved_tickets: int = 0

    @classmethod
    def from_entity(
        cls,
        entity: AgentEntity,
        assigned_tickets: int = 0,
        resolved_tickets: int = 0,
    ) -> "AgentOutputDTO":
        return cls(
            id=entity.id,
            full_name=entity.full_name,
            email=entity.email,
            department=entity.department,
            role=entity.role,
            is_active=entity.is_active,
            created_at=entity.created_at,
            assigned_tickets=assigned_tickets,
            resolved_tickets=resolved_tickets,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
            "role": self.role,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "assigned_tickets": self.assigned_tickets,
            "resolved_tickets": self.resolved_tickets,
        }
