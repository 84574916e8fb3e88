"""
Testes Unitários para Entidades do Domínio de Tickets.

Testa as regras de negócio encapsuladas nas entidades,
incluindo validações, transições de estado e cálculos.

Coverage:
- TicketEntity.create(): Validações de criação
- TicketEntity.change_status(): Máquina de estados
- TicketEntity.assign_to(): Atribuição a agente
- Parsing tolerante de status/prioridade
- Horas de resolução e idade
"""

import pytest
from datetime import datetime, timedelta, timezone

from src.core.tickets.entities import (
    STATUS_TRANSITIONS,
    TicketEntity,
    TicketPriority,
    TicketStatus,
    is_valid_transition,
)
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    InvalidStatusTransitionError,
    ValidationError,
)


def _ticket(**kwargs) -> TicketEntity:
    defaults = dict(
        customer_id=1,
        category_id=1,
        subject="Internet lenta",
        description="Conexão caindo desde ontem",
    )
    defaults.update(kwargs)
    return TicketEntity.create(**defaults)


class TestTicketEntityCriacao:
    """Testes para criação de tickets."""

    def test_criar_ticket_valido(self):
        """Deve criar ticket Open, sem updated_at nem resolved_at."""
        ticket = _ticket(priority=TicketPriority.HIGH, agent_id=7)

        assert ticket.id is None
        assert ticket.status == TicketStatus.OPEN
        assert ticket.priority == TicketPriority.HIGH
        assert ticket.agent_id == 7
        assert ticket.updated_at is None
        assert ticket.resolved_at is None
        assert ticket.created_at.tzinfo is not None

    def test_criar_ticket_prioridade_default(self):
        assert _ticket().priority == TicketPriority.MEDIUM

    def test_criar_ticket_aceita_prioridade_por_nome(self):
        assert _ticket(priority="Critical").priority == TicketPriority.CRITICAL

    def test_criar_ticket_remove_espacos(self):
        ticket = _ticket(subject="  VPN fora  ", description="  sem acesso  ")

        assert ticket.subject == "VPN fora"
        assert ticket.description == "sem acesso"

    @pytest.mark.parametrize("subject", ["", "   ", None])
    def test_criar_ticket_assunto_vazio_erro(self, subject):
        with pytest.raises(ValidationError) as exc_info:
            _ticket(subject=subject)

        assert exc_info.value.field == "subject"

    def test_criar_ticket_assunto_muito_longo_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            _ticket(subject="x" * 201)

        assert exc_info.value.field == "subject"

    def test_criar_ticket_assunto_no_limite(self):
        assert len(_ticket(subject="x" * 200).subject) == 200

    @pytest.mark.parametrize("field,value", [("subject", 42), ("description", {"texto": "x"})])
    def test_criar_ticket_texto_nao_string_erro(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            _ticket(**{field: value})

        assert exc_info.value.field == field

    def test_criar_ticket_descricao_vazia_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            _ticket(description=" ")

        assert exc_info.value.field == "description"

    def test_criar_ticket_prioridade_invalida_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            _ticket(priority="Urgentissimo")

        assert exc_info.value.field == "priority"


class TestEnumParsing:
    """Testes para conversão de nomes/ordinais em enums."""

    @pytest.mark.parametrize("value,expected", [
        ("InProgress", TicketStatus.IN_PROGRESS),
        ("in progress", TicketStatus.IN_PROGRESS),
        ("IN_PROGRESS", TicketStatus.IN_PROGRESS),
        ("onhold", TicketStatus.ON_HOLD),
        ("3", TicketStatus.RESOLVED),
        (4, TicketStatus.CLOSED),
        (TicketStatus.OPEN, TicketStatus.OPEN),
    ])
    def test_status_from_string(self, value, expected):
        assert TicketStatus.from_string(value) is expected

    @pytest.mark.parametrize("value", ["Pending", "7", -1, True, None, ""])
    def test_status_invalido_erro(self, value):
        with pytest.raises(ValidationError) as exc_info:
            TicketStatus.from_string(value)

        assert exc_info.value.field == "status"

    def test_ordinais_fazem_parte_do_contrato(self):
        assert [int(s) for s in TicketStatus] == [0, 1, 2, 3, 4]
        assert [int(p) for p in TicketPriority] == [0, 1, 2, 3]

    def test_display_name(self):
        assert TicketStatus.IN_PROGRESS.display_name == "InProgress"
        assert TicketStatus.ON_HOLD.display_name == "OnHold"
        assert TicketPriority.CRITICAL.display_name == "Critical"


class TestMaquinaDeEstados:
    """Testes para a tabela de transições."""

    ALLOWED = {
        (TicketStatus.OPEN, TicketStatus.IN_PROGRESS),
        (TicketStatus.OPEN, TicketStatus.ON_HOLD),
        (TicketStatus.OPEN, TicketStatus.RESOLVED),
        (TicketStatus.OPEN, TicketStatus.CLOSED),
        (TicketStatus.IN_PROGRESS, TicketStatus.ON_HOLD),
        (TicketStatus.IN_PROGRESS, TicketStatus.RESOLVED),
        (TicketStatus.IN_PROGRESS, TicketStatus.CLOSED),
        (TicketStatus.ON_HOLD, TicketStatus.IN_PROGRESS),
        (TicketStatus.ON_HOLD, TicketStatus.RESOLVED),
        (TicketStatus.ON_HOLD, TicketStatus.CLOSED),
        (TicketStatus.RESOLVED, TicketStatus.CLOSED),
        (TicketStatus.RESOLVED, TicketStatus.IN_PROGRESS),
        (TicketStatus.CLOSED, TicketStatus.IN_PROGRESS),
    }

    def test_matriz_completa(self):
        """Cada par (origem, destino) segue exatamente a tabela."""
        for current in TicketStatus:
            for target in TicketStatus:
                expected = current == target or (current, target) in self.ALLOWED
                assert is_valid_transition(current, target) is expected, (current, target)

    def test_tabela_cobre_todos_os_status(self):
        assert set(STATUS_TRANSITIONS) == set(TicketStatus)

    @pytest.mark.parametrize("current,target", [
        (TicketStatus.IN_PROGRESS, TicketStatus.OPEN),
        (TicketStatus.ON_HOLD, TicketStatus.OPEN),
        (TicketStatus.RESOLVED, TicketStatus.OPEN),
        (TicketStatus.RESOLVED, TicketStatus.ON_HOLD),
        (TicketStatus.CLOSED, TicketStatus.OPEN),
        (TicketStatus.CLOSED, TicketStatus.ON_HOLD),
        (TicketStatus.CLOSED, TicketStatus.RESOLVED),
    ])
    def test_transicao_invalida_erro(self, current, target):
        ticket = TicketEntity(status=current, subject="s", description="d")

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            ticket.change_status(target)

        assert isinstance(exc_info.value, BusinessRuleViolationError)
        assert exc_info.value.current_status == current.display_name
        assert exc_info.value.target_status == target.display_name
        assert ticket.status == current
        assert ticket.updated_at is None


class TestChangeStatus:
    """Testes para carimbos de tempo nas mudanças de status."""

    def test_resolver_carimba_resolved_at(self):
        created = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
        ticket = _ticket(now=created)
        when = created + timedelta(hours=5)

        previous = ticket.change_status(TicketStatus.RESOLVED, now=when)

        assert previous == TicketStatus.OPEN
        assert ticket.status == TicketStatus.RESOLVED
        assert ticket.resolved_at == when
        assert ticket.updated_at == when
        assert ticket.resolution_hours == 5.0

    def test_fechar_sobrescreve_resolved_at(self):
        created = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
        ticket = _ticket(now=created)
        ticket.change_status(TicketStatus.RESOLVED, now=created + timedelta(hours=1))

        ticket.change_status(TicketStatus.CLOSED, now=created + timedelta(hours=3))

        assert ticket.resolved_at == created + timedelta(hours=3)

    def test_reabrir_mantem_resolved_at(self):
        created = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
        ticket = _ticket(now=created)
        resolved = created + timedelta(hours=2)
        ticket.change_status(TicketStatus.RESOLVED, now=resolved)

        ticket.change_status(TicketStatus.IN_PROGRESS, now=created + timedelta(hours=4))

        assert ticket.status == TicketStatus.IN_PROGRESS
        assert ticket.resolved_at == resolved
        assert ticket.updated_at == created + timedelta(hours=4)

    def test_mesmo_status_ainda_carimba_updated_at(self):
        ticket = _ticket()
        when = datetime(2024, 3, 2, tzinfo=timezone.utc)

        previous = ticket.change_status(TicketStatus.OPEN, now=when)

        assert previous == TicketStatus.OPEN
        assert ticket.updated_at == when
        assert ticket.resolved_at is None

    def test_on_hold_nao_carimba_resolved_at(self):
        ticket = _ticket()
        ticket.change_status(TicketStatus.ON_HOLD)

        assert ticket.resolved_at is None
        assert ticket.is_open


class TestAssignTo:
    """Testes para atribuição."""

    def test_atribuir_ticket_open_avanca_para_in_progress(self):
        ticket = _ticket()

        advanced = ticket.assign_to(3)

        assert advanced is True
        assert ticket.agent_id == 3
        assert ticket.status == TicketStatus.IN_PROGRESS
        assert ticket.updated_at is not None

    @pytest.mark.parametrize("status", [
        TicketStatus.IN_PROGRESS,
        TicketStatus.ON_HOLD,
        TicketStatus.RESOLVED,
        TicketStatus.CLOSED,
    ])
    def test_atribuir_nao_muda_outros_status(self, status):
        ticket = TicketEntity(status=status, subject="s", description="d", agent_id=1)

        advanced = ticket.assign_to(2)

        assert advanced is False
        assert ticket.status == status
        assert ticket.agent_id == 2

    def test_atribuir_sem_agente_erro(self):
        with pytest.raises(ValidationError):
            _ticket().assign_to(None)


class TestPropriedadesComputadas:
    """Testes para horas derivadas e flags."""

    def test_resolution_hours_arredonda_duas_casas(self):
        created = datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)
        ticket = TicketEntity(
            created_at=created,
            resolved_at=created + timedelta(hours=3.456),
        )

        assert ticket.resolution_hours == 3.46

    def test_resolution_hours_none_sem_resolucao(self):
        assert _ticket().resolution_hours is None

    def test_age_hours(self):
        created = datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)
        ticket = TicketEntity(created_at=created)

        assert ticket.age_hours(created + timedelta(minutes=90)) == 1.5

    def test_flags(self):
        ticket = TicketEntity(status=TicketStatus.CLOSED)

        assert ticket.is_resolved
        assert not ticket.is_open
        assert not ticket.is_assigned

    def test_igualdade_por_id(self):
        assert TicketEntity(id=1) == TicketEntity(id=1, subject="outro")
        assert TicketEntity() != TicketEntity()
