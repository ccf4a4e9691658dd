"""
Testes para os Event Publishers em memória e de log.
"""

import logging

import pytest

from src.adapters.memory.publishers import (
    InMemoryEventPublisher,
    LoggingEventPublisher,
    get_event_publisher,
)
from src.core.formacoes.events import (
    FormacaoCriadaEvent,
    UsuariosMatriculadosEvent,
)


@pytest.fixture
def evento_matricula():
    return UsuariosMatriculadosEvent(
        aggregate_id="formacao-1",
        usuarios=["Hugo", "Ana"],
        total_inscritos=2,
    )


class TestDomainEvent:

    def test_aggregate_id_obrigatorio(self):
        with pytest.raises(ValueError):
            UsuariosMatriculadosEvent(usuarios=["Hugo"])

    def test_to_dict(self, evento_matricula):
        data = evento_matricula.to_dict()

        assert data["event_type"] == "UsuariosMatriculadosEvent"
        assert data["aggregate_type"] == "Formacao"
        assert data["aggregate_id"] == "formacao-1"
        assert data["data"] == {"usuarios": ["Hugo", "Ana"], "total_inscritos": 2}


class TestInMemoryEventPublisher:

    def test_armazena_eventos(self, evento_matricula):
        publisher = InMemoryEventPublisher()
        criado = FormacaoCriadaEvent(aggregate_id="formacao-1", nome="Android")

        publisher.publish_batch([criado, evento_matricula])

        assert publisher.published_events == [criado, evento_matricula]
        assert publisher.get_events_by_type("FormacaoCriadaEvent") == [criado]

        publisher.clear()
        assert publisher.published_events == []

    def test_handlers(self, evento_matricula):
        publisher = InMemoryEventPublisher()
        recebidos = []
        publisher.register_handler("UsuariosMatriculadosEvent", recebidos.append)

        publisher.publish(evento_matricula)

        assert recebidos == [evento_matricula]

    def test_handler_com_erro_nao_interrompe(self, evento_matricula, caplog):
        publisher = InMemoryEventPublisher()
        recebidos = []

        def handler_com_erro(event):
            raise RuntimeError("falhou")

        publisher.register_handler("UsuariosMatriculadosEvent", handler_com_erro)
        publisher.register_handler("UsuariosMatriculadosEvent", recebidos.append)

        with caplog.at_level(logging.ERROR):
            publisher.publish(evento_matricula)

        assert recebidos == [evento_matricula]
        assert "falhou" in caplog.text


class TestLoggingEventPublisher:

    def test_loga_evento(self, evento_matricula, caplog):
        publisher = LoggingEventPublisher()

        with caplog.at_level(logging.INFO, logger="src.adapters.memory.publishers"):
            publisher.publish(evento_matricula)

        assert "[EVENT] UsuariosMatriculadosEvent" in caplog.text
        assert "formacao-1" in caplog.text


class TestGetEventPublisher:

    def test_modos(self):
        assert isinstance(get_event_publisher("logging"), LoggingEventPublisher)
        assert isinstance(get_event_publisher("memory"), InMemoryEventPublisher)

    def test_modo_desconhecido(self):
        with pytest.raises(ValueError):
            get_event_publisher("kafka")
