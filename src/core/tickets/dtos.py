"""
Data Transfer Objects (DTOs) do Domínio de Tickets.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de modelos internos (entidades) para camadas externas.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (de APIs)
- Output DTOs: Formatam dados para resposta, já com os campos de
  exibição de cliente, agente e categoria (view desnormalizada)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from src.core.customers.entities import CustomerEntity
from src.core.agents.entities import AgentEntity

from .entities import CategoryEntity, TicketEntity, TicketPriority


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateTicketInputDTO:
    """
    DTO de entrada para abrir ticket.

    Não há campo de status: todo ticket nasce Open.

    Attributes:
        customer_id: Cliente que abre o ticket
        category_id: Categoria
        subject: Assunto
        description: Descrição
        priority: Prioridade (nome, ex: "High", ou ordinal)
        agent_id: Agente já definido (opcional)
    """

    customer_id: int
    category_id: int
    subject: str
    description: str
    priority: Union[str, int, TicketPriority] = "Medium"
    agent_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "customer_id": self.customer_id,
            "category_id": self.category_id,
            "subject": self.subject,
            "description": self.description,
            "priority": self.priority,
            "agent_id": self.agent_id,
        }


@dataclass(frozen=True)
class UpdateTicketStatusInputDTO:
    """
    DTO de entrada para mudança de status.

    Attributes:
        ticket_id: ID do ticket
        status: Novo status (nome ou ordinal)
        notes: Notas do operador (não persistidas, vão para o log)
    """

    ticket_id: int
    status: Union[str, int]
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "ticket_id": self.ticket_id,
            "status": self.status,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AssignTicketInputDTO:
    """
    DTO de entrada para atribuir ticket.

    Attributes:
        ticket_id: ID do ticket
        agent_id: ID do agente
    """

    ticket_id: int
    agent_id: int

    def to_dict(self) -> dict:
        return {
            "ticket_id": self.ticket_id,
            "agent_id": self.agent_id,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class TicketOutputDTO:
    """
    View completa do ticket.

    Junta os campos do ticket com os campos de exibição de cliente,
    agente e categoria. resolution_hours é derivado na montagem, a
    partir de created_at/resolved_at.
    """

    id: int
    customer_id: int
    customer_name: Optional[str]
    customer_email: Optional[str]
    agent_id: Optional[int]
    agent_name: Optional[str]
    agent_department: Optional[str]
    category_id: int
    category_name: Optional[str]
    subject: str
    description: str
    status: str
    status_value: int
    priority: str
    priority_value: int
    created_at: datetime
    updated_at: Optional[datetime]
    resolved_at: Optional[datetime]
    resolution_hours: Optional[float]

    @classmethod
    def from_entity(
        cls,
        entity: TicketEntity,
        customer: Optional[CustomerEntity] = None,
        agent: Optional[AgentEntity] = None,
        category: Optional[CategoryEntity] = None,
    ) -> "TicketOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Ticket
            customer: Cliente referenciado (para nome/email)
            agent: Agente atribuído (para nome/departamento)
            category: Categoria (para nome)
        """
        return cls(
            id=entity.id,
            customer_id=entity.customer_id,
            customer_name=customer.full_name if customer else None,
            customer_email=customer.email if customer else None,
            agent_id=entity.agent_id,
            agent_name=agent.full_name if agent else None,
            agent_department=agent.department if agent else None,
            category_id=entity.category_id,
            category_name=category.name if category else None,
            subject=entity.subject,
            description=entity.description,
            status=entity.status.display_name,
            status_value=int(entity.status),
            priority=entity.priority.display_name,
            priority_value=int(entity.priority),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            resolved_at=entity.resolved_at,
            resolution_hours=entity.resolution_hours,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "agent_id": self.agent_id,
            "agent_name": self.agent_name,
            "agent_department": self.agent_department,
            "category_id": self.category_id,
            "category_name": self.category_name,
            "subject": self.subject,
            "description": self.description,
            "status": self.status,
            "status_value": self.status_value,
            "priority": self.priority,
            "priority_value": self.priority_value,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
            "resolved_at": _iso(self.resolved_at),
            "resolution_hours": self.resolution_hours,
        }


@dataclass
class CategoryOutputDTO:
    """DTO de saída de categoria."""

    id: int
    name: str
    description: str
    is_active: bool

    @classmethod
    def from_entity(cls, entity: CategoryEntity) -> "CategoryOutputDTO":
        return cls(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
        }
