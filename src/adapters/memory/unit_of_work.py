"""
Unit of Work em memória.

Como as entidades vivem apenas no processo, não há transação de
banco para abrir ou confirmar: o UoW garante somente que eventos
enfileirados durante uma operação sejam publicados após o sucesso
e descartados em caso de erro.

Example:
    uow = InMemoryUnitOfWork(event_publisher=LoggingEventPublisher())
    with uow:
        formacao.matricular(usuario)
        uow.publish_event(evento)
    # Evento publicado aqui, após commit
"""

from typing import List, Optional
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher, UnitOfWork

logger = logging.getLogger(__name__)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória.

    Attributes:
        event_publisher: Destino dos eventos após commit (opcional)
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self.event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        """Publica eventos enfileirados e limpa a fila."""
        events = self.collect_events()
        self.clear_events()
        self._committed = True
        self._published_events.extend(events)

        if events and self.event_publisher is not None:
            self.event_publisher.publish_batch(events)

    def rollback(self) -> None:
        """Descarta eventos enfileirados."""
        if self._events:
            logger.debug(f"Rollback descartou {len(self._events)} evento(s)")
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
        """Eventos publicados por este UoW desde a criação."""
        return list(self._published_events)
