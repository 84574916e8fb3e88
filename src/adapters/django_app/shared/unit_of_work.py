"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre múltiplos repositórios,
garantindo que uma mutação de ticket (status + timestamps) seja
aplicada por inteiro ou não seja aplicada.

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado
- Publicar eventos após commit bem-sucedido

A transação usa transaction.atomic(), portanto aninha corretamente
dentro de outro bloco atômico (request com ATOMIC_REQUESTS, testes).
"""

from typing import List, Optional
import logging

from django.db import DatabaseError, transaction

from src.core.shared.interfaces import EventPublisher, UnitOfWork
from src.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Eventos são publicados apenas após commit bem-sucedido.

    Features:
    - Context manager (with statement)
    - Auto-commit/rollback
    - Event buffering
    - Event Publisher integration (opcional)

    A mesma instância pode ser reutilizada: cada `with` abre uma
    nova transação.

    Example:
        with DjangoUnitOfWork() as uow:
            repo.update(ticket)
            uow.publish_event(TicketStatusChangedEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.update(ticket)
            raise ValidationError("Erro!")
        # Rollback automático, eventos descartados
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None, using: Optional[str] = None):
        """
        Args:
            event_publisher: Publicador de eventos (log, memória)
            using: Alias do banco (default: "default")
        """
        super().__init__()
        self._event_publisher = event_publisher
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        if self._atomic is not None:
            raise RuntimeError("Unit of Work já possui transação em andamento")
        self._committed = False
        self._rolled_back = False
        self.clear_events()
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Persiste todas as mudanças e publica eventos.

        Ordem de execução:
        1. Commit da transação no banco
        2. Publicar eventos (após commit)

        Raises:
            DatabaseError: Se commit falhar (eventos descartados)
        """
        if self._committed or self._rolled_back:
            logger.warning("Transaction already finalized")
            return

        atomic, self._atomic = self._atomic, None
        try:
            if atomic is not None:
                atomic.__exit__(None, None, None)
                logger.debug("Transaction committed")
        except DatabaseError as e:
            logger.error(f"Commit failed: {e}")
            self._rolled_back = True
            self.clear_events()
            raise

        self._committed = True
        if self._events:
            self._publish_events()

    def rollback(self) -> None:
        """
        Desfaz todas as mudanças e descarta eventos.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._committed or self._rolled_back:
            return

        atomic, self._atomic = self._atomic, None
        try:
            if atomic is not None:
                # atomic só reverte quando recebe uma exceção
                atomic.__exit__(DatabaseError, DatabaseError("rollback"), None)
                logger.debug("Transaction rolled back")
        finally:
            self._rolled_back = True
            self.clear_events()

    def _publish_events(self) -> None:
        """
        Publica eventos enfileirados.

        Falha de publicação é logada e não desfaz o commit.
        """
        events, self._events = list(self._events), []
        for event in events:
            logger.debug(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )
            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event {event.event_type}: {e}")

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas simula comportamento
    para testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        """Simula commit."""
        self._committed = True
        self._published_events.extend(self._events)
        if self._event_publisher:
            self._event_publisher.publish_batch(self._events)
        self.clear_events()

    def rollback(self) -> None:
        """Simula rollback."""
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna eventos que foram 'publicados'."""
        return self._published_events

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
