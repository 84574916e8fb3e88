"""
Entidades do Domínio de Tickets.

Este módulo define as entidades de domínio que encapsulam
regras de negócio relacionadas a tickets de suporte.

Entidades:
- TicketEntity: Agregado principal do domínio
- TicketStatus: Estados possíveis de um ticket (ordinais 0-4)
- TicketPriority: Níveis de prioridade (ordinais 0-3)
- CategoryEntity: Categoria (dado de referência)

Regras de Negócio Encapsuladas:
- Validação de dados na criação (status sempre Open)
- Transições de status controladas pela tabela STATUS_TRANSITIONS
- Carimbo de resolved_at ao entrar em Resolved/Closed
- Atribuição avança Open para InProgress
- Horas de resolução derivadas a cada leitura

Os ordinais de status e prioridade fazem parte do contrato externo
(persistidos como inteiro e devolvidos aos clientes).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Dict, FrozenSet, Optional

from src.core.shared.clock import utc_now, elapsed_hours, hours_between
from src.core.shared.exceptions import (
    ValidationError,
    InvalidStatusTransitionError,
)
from src.core.shared.validators import clean_text


class _NamedIntEnum(IntEnum):
    """IntEnum com nome de exibição e parsing tolerante."""

    @property
    def display_name(self) -> str:
        """Nome em PascalCase (ex: IN_PROGRESS -> "InProgress")."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def from_string(cls, value):
        """
        Converte string/inteiro para enum.

        Aceita o nome de exibição ("InProgress"), o nome do membro
        ("IN_PROGRESS"), variações com espaço ("in progress") e o
        ordinal ("1" ou 1).

        Raises:
            ValidationError: Se valor inválido
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                try:
                    return cls(int(text))
                except ValueError:
                    pass
            else:
                key = text.replace(" ", "").replace("_", "").replace("-", "").upper()
                for member in cls:
                    if member.name.replace("_", "") == key:
                        return member

        raise ValidationError(
            f"{cls._label()} inválido: {value}",
            field=cls._field_name(),
        )

    @classmethod
    def _label(cls) -> str:
        return cls.__name__

    @classmethod
    def _field_name(cls) -> str:
        return cls.__name__.lower()


class TicketStatus(_NamedIntEnum):
    """
    Estados possíveis de um ticket.

    Fluxo de Estados:
        OPEN → IN_PROGRESS ⇄ ON_HOLD → RESOLVED → CLOSED
          └──────────┴─────────┴──────────┘
        RESOLVED/CLOSED → IN_PROGRESS (reabrir)
    """

    OPEN = 0
    IN_PROGRESS = 1
    ON_HOLD = 2
    RESOLVED = 3
    CLOSED = 4

    @classmethod
    def _label(cls) -> str:
        return "Status"

    @classmethod
    def _field_name(cls) -> str:
        return "status"

    @property
    def is_terminal(self) -> bool:
        """Resolved e Closed contam como resolvidos."""
        return self in RESOLVED_STATUSES


class TicketPriority(_NamedIntEnum):
    """Níveis de prioridade."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3

    @classmethod
    def _label(cls) -> str:
        return "Prioridade"

    @classmethod
    def _field_name(cls) -> str:
        return "priority"


OPEN_STATUSES: FrozenSet[TicketStatus] = frozenset({
    TicketStatus.OPEN,
    TicketStatus.IN_PROGRESS,
    TicketStatus.ON_HOLD,
})

RESOLVED_STATUSES: FrozenSet[TicketStatus] = frozenset({
    TicketStatus.RESOLVED,
    TicketStatus.CLOSED,
})

# Origem -> destinos permitidos (mesmo status é sempre aceito)
STATUS_TRANSITIONS: Dict[TicketStatus, FrozenSet[TicketStatus]] = {
    TicketStatus.OPEN: frozenset({
        TicketStatus.IN_PROGRESS,
        TicketStatus.ON_HOLD,
        TicketStatus.RESOLVED,
        TicketStatus.CLOSED,
    }),
    TicketStatus.IN_PROGRESS: frozenset({
        TicketStatus.ON_HOLD,
        TicketStatus.RESOLVED,
        TicketStatus.CLOSED,
    }),
    TicketStatus.ON_HOLD: frozenset({
        TicketStatus.IN_PROGRESS,
        TicketStatus.RESOLVED,
        TicketStatus.CLOSED,
    }),
    TicketStatus.RESOLVED: frozenset({
        TicketStatus.CLOSED,
        TicketStatus.IN_PROGRESS,
    }),
    TicketStatus.CLOSED: frozenset({
        TicketStatus.IN_PROGRESS,
    }),
}


def is_valid_transition(current: TicketStatus, target: TicketStatus) -> bool:
    """Verifica se a transição current -> target é permitida."""
    if current == target:
        return True
    return target in STATUS_TRANSITIONS.get(current, frozenset())


@dataclass
class CategoryEntity:
    """
    Categoria de ticket (dado de referência, sem CRUD).

    Attributes:
        id: Identificador
        name: Nome exibido
        description: Descrição curta
        is_active: Se aceita novos tickets
    """

    id: Optional[int] = None
    name: str = ""
    description: str = ""
    is_active: bool = True


# Categorias semeadas na instalação (id, nome, descrição)
DEFAULT_CATEGORIES = (
    (1, "Technical Support", "Hardware, software, network issues"),
    (2, "Billing", "Invoice, payment, subscription queries"),
    (3, "General Enquiry", "General questions and information"),
    (4, "Complaint", "Customer complaints and escalations"),
    (5, "Service Request", "New service setup or changes"),
)


@dataclass
class TicketEntity:
    """
    Entidade de Domínio: Ticket.

    Agregado principal do domínio de suporte.

    Invariantes:
    - Criado sempre em OPEN, com updated_at e resolved_at nulos
    - Transições obedecem STATUS_TRANSITIONS
    - resolved_at é carimbado ao entrar em RESOLVED/CLOSED e não é
      limpo ao reabrir
    - updated_at é carimbado em toda mutação, nunca na criação

    Attributes:
        id: Identificador atribuído pelo repositório
        customer_id: Cliente que abriu o ticket
        category_id: Categoria do ticket
        subject: Assunto (até 200 caracteres)
        description: Descrição detalhada
        status: Estado atual
        priority: Prioridade
        agent_id: Agente responsável (opcional)
        created_at: Criação (UTC)
        updated_at: Última atualização (UTC, opcional)
        resolved_at: Resolução (UTC, opcional)

    Example:
        ticket = TicketEntity.create(
            customer_id=1,
            category_id=1,
            subject="Internet lenta",
            description="Conexão caindo desde ontem",
            priority=TicketPriority.HIGH,
        )
        ticket.change_status(TicketStatus.RESOLVED)
        ticket.resolution_hours  # 0.0
    """

    id: Optional[int] = None
    customer_id: int = 0
    category_id: int = 0
    subject: str = ""
    description: str = ""
    status: TicketStatus = TicketStatus.OPEN
    priority: TicketPriority = TicketPriority.MEDIUM
    agent_id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None

    SUBJECT_MAX_LENGTH = 200

    @classmethod
    def create(
        cls,
        customer_id: int,
        category_id: int,
        subject: str,
        description: str,
        priority: TicketPriority = TicketPriority.MEDIUM,
        agent_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> "TicketEntity":
        """
        Factory method para criar ticket com validações.

        O status é sempre OPEN, independente do que o caller pretendia.

        Raises:
            ValidationError: Se assunto/descrição inválidos
        """
        subject = cls._validate_subject(subject)
        description = cls._validate_description(description)

        return cls(
            customer_id=customer_id,
            category_id=category_id,
            subject=subject,
            description=description,
            status=TicketStatus.OPEN,
            priority=TicketPriority.from_string(priority),
            agent_id=agent_id,
            created_at=now or utc_now(),
            updated_at=None,
            resolved_at=None,
        )

    @classmethod
    def _validate_subject(cls, subject: str) -> str:
        cleaned = clean_text(subject, "subject")
        if not cleaned:
            raise ValidationError("Assunto é obrigatório", field="subject")
        if len(cleaned) > cls.SUBJECT_MAX_LENGTH:
            raise ValidationError(
                f"Assunto deve ter no máximo {cls.SUBJECT_MAX_LENGTH} caracteres",
                field="subject",
            )
        return cleaned

    @classmethod
    def _validate_description(cls, description: str) -> str:
        cleaned = clean_text(description, "description")
        if not cleaned:
            raise ValidationError("Descrição é obrigatória", field="description")
        return cleaned

    def can_transition_to(self, target: TicketStatus) -> bool:
        return is_valid_transition(self.status, target)

    def change_status(
        self,
        new_status: TicketStatus,
        now: Optional[datetime] = None,
    ) -> TicketStatus:
        """
        Altera status validando a transição.

        Mesmo status é aceito (a escrita ainda acontece e updated_at
        é carimbado). Entrar em RESOLVED/CLOSED sobrescreve resolved_at.

        Args:
            new_status: Status pretendido
            now: Instante da operação (default: agora UTC)

        Returns:
            Status anterior

        Raises:
            InvalidStatusTransitionError: Se transição não permitida
        """
        if not self.can_transition_to(new_status):
            raise InvalidStatusTransitionError(
                self.status.display_name,
                new_status.display_name,
            )

        now = now or utc_now()
        previous = self.status
        self.status = new_status
        if new_status.is_terminal:
            self.resolved_at = now
        self.updated_at = now
        return previous

    def assign_to(self, agent_id: int, now: Optional[datetime] = None) -> bool:
        """
        Atribui ticket a um agente.

        Se o ticket está OPEN, avança para IN_PROGRESS; nenhum outro
        status muda.

        Returns:
            True se o status foi avançado
        """
        if not agent_id:
            raise ValidationError("Agente é obrigatório", field="agent_id")

        now = now or utc_now()
        self.agent_id = agent_id
        advanced = self.status == TicketStatus.OPEN
        if advanced:
            self.status = TicketStatus.IN_PROGRESS
        self.updated_at = now
        return advanced

    @property
    def resolution_hours(self) -> Optional[float]:
        """Horas entre criação e resolução (2 casas) ou None."""
        if self.resolved_at is None:
            return None
        return hours_between(self.created_at, self.resolved_at)

    def age_hours(self, now: Optional[datetime] = None) -> float:
        """Horas desde a criação até `now` (2 casas)."""
        return hours_between(self.created_at, now or utc_now())

    def open_hours(self, now: Optional[datetime] = None) -> float:
        """Horas exatas desde a criação até `now`; base da classificação de SLA."""
        return elapsed_hours(self.created_at, now or utc_now())

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES

    @property
    def is_resolved(self) -> bool:
        return self.status in RESOLVED_STATUSES

    @property
    def is_assigned(self) -> bool:
        return self.agent_id is not None

    def __repr__(self) -> str:
        return (
            f"TicketEntity("
            f"id={self.id}, "
            f"subject='{self.subject[:20]}', "
            f"status={self.status.display_name}, "
            f"priority={self.priority.display_name}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, TicketEntity):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
