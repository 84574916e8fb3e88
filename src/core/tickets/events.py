"""
Domain Events do Domínio de Tickets.

Eventos:
- TicketCreatedEvent: Novo ticket foi aberto
- TicketStatusChangedEvent: Status mudou (carrega as notas do operador)
- TicketAssignedEvent: Ticket foi atribuído a agente

Uso:
    Eventos são criados nos use cases e publicados através do
    UnitOfWork após commit bem-sucedido.

    with uow:
        ticket = ticket_repo.add(ticket)
        uow.publish_event(TicketCreatedEvent(aggregate_id=ticket.id, ...))
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.shared.events import DomainEvent


@dataclass
class TicketCreatedEvent(DomainEvent):
    """
    Evento: Ticket foi criado.

    Attributes:
        customer_id: Cliente que abriu o ticket
        category_id: Categoria
        subject: Assunto
        priority: Nome da prioridade
        agent_id: Agente já definido na abertura (opcional)
    """

    customer_id: int = 0
    category_id: int = 0
    subject: str = ""
    priority: str = ""
    agent_id: Optional[int] = None

    @property
    def aggregate_type(self) -> str:
        return "Ticket"


@dataclass
class TicketStatusChangedEvent(DomainEvent):
    """
    Evento: Status do ticket foi alterado.

    As notas não são gravadas no ticket; seguem apenas no evento,
    que o LoggingEventPublisher registra no log da aplicação.

    Attributes:
        previous_status: Nome do status anterior
        new_status: Nome do novo status
        notes: Notas informadas na alteração
    """

    previous_status: str = ""
    new_status: str = ""
    notes: Optional[str] = None

    @property
    def aggregate_type(self) -> str:
        return "Ticket"

    def _get_event_data(self) -> Dict[str, Any]:
        data = {
            "previous_status": self.previous_status,
            "new_status": self.new_status,
        }
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass
class TicketAssignedEvent(DomainEvent):
    """
    Evento: Ticket foi atribuído a agente.

    Attributes:
        agent_id: Agente atribuído
        previous_agent_id: Agente anterior (se houver)
        status_advanced: Se a atribuição moveu Open -> InProgress
    """

    agent_id: int = 0
    previous_agent_id: Optional[int] = None
    status_advanced: bool = False

    @property
    def aggregate_type(self) -> str:
        return "Ticket"
