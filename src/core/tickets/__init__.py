"""
Domínio de Tickets - Ciclo de vida de chamados de suporte.

Este módulo contém toda a lógica de negócio relacionada a tickets
de atendimento ao cliente, incluindo:
- Entidades (TicketEntity, TicketStatus, TicketPriority, CategoryEntity)
- Use Cases (criação, mudança de status, atribuição e consultas)
- Domain Events (TicketCreated, TicketStatusChanged, TicketAssigned)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interfaces para repositórios)

Características do Domínio:
- Máquina de estados fixa entre os cinco status
- resolved_at carimbado ao entrar em Resolved/Closed
- Bloqueio de tickets duplicados por cliente em janela configurável
- Atribuição de ticket Open avança para InProgress
"""

from .entities import (
    CategoryEntity,
    TicketEntity,
    TicketStatus,
    TicketPriority,
    is_valid_transition,
)
from .events import (
    TicketCreatedEvent,
    TicketStatusChangedEvent,
    TicketAssignedEvent,
)
from .dtos import (
    CreateTicketInputDTO,
    UpdateTicketStatusInputDTO,
    AssignTicketInputDTO,
    TicketOutputDTO,
    CategoryOutputDTO,
)
from .ports import AgentWorkload, CategoryRepository, TicketRepository
from .use_cases import (
    CreateTicketService,
    UpdateTicketStatusService,
    AssignTicketService,
    GetTicketService,
    ListTicketsService,
    SearchTicketsService,
)

__all__ = [
    # Entities
    "CategoryEntity",
    "TicketEntity",
    "TicketStatus",
    "TicketPriority",
    "is_valid_transition",
    # Events
    "TicketCreatedEvent",
    "TicketStatusChangedEvent",
    "TicketAssignedEvent",
    # DTOs
    "CreateTicketInputDTO",
    "UpdateTicketStatusInputDTO",
    "AssignTicketInputDTO",
    "TicketOutputDTO",
    "CategoryOutputDTO",
    # Ports
    "AgentWorkload",
    "CategoryRepository",
    "TicketRepository",
    # Use Cases
    "CreateTicketService",
    "UpdateTicketStatusService",
    "AssignTicketService",
    "GetTicketService",
    "ListTicketsService",
    "SearchTicketsService",
]
