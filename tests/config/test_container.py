"""
Testes para o container de injeção de dependências e settings.
"""

import logging

from src.adapters.memory.publishers import (
    InMemoryEventPublisher,
    LoggingEventPublisher,
)
from src.adapters.memory.unit_of_work import InMemoryUnitOfWork
from src.config import settings
from src.config.container import Container, get_container, reset_container
from src.core.formacoes.dtos import (
    ConteudoEducacionalInputDTO,
    CriarFormacaoInputDTO,
    MatricularUsuariosInputDTO,
)
from src.core.formacoes.use_cases import (
    CriarFormacaoService,
    MatricularUsuariosService,
)


def _container(mode="memory"):
    container = Container()
    container.config.from_dict({"event_publisher_mode": mode})
    return container


class TestContainer:

    def test_singletons_e_factories(self):
        container = _container()

        assert container.formacao_repository() is container.formacao_repository()
        assert container.event_publisher() is container.event_publisher()
        assert container.unit_of_work() is not container.unit_of_work()
        assert isinstance(container.unit_of_work(), InMemoryUnitOfWork)
        assert isinstance(container.criar_formacao_service(), CriarFormacaoService)
        assert isinstance(
            container.matricular_usuarios_service(), MatricularUsuariosService
        )

    def test_modo_do_publisher(self):
        assert isinstance(_container("memory").event_publisher(), InMemoryEventPublisher)
        assert isinstance(_container("logging").event_publisher(), LoggingEventPublisher)

    def test_fluxo_completo(self):
        container = _container()

        formacao = container.criar_formacao_service().execute(
            CriarFormacaoInputDTO(
                nome="Android Dev",
                nivel="INTERMEDIARIO",
                conteudos=(ConteudoEducacionalInputDTO("Kotlin Intro"),),
            )
        )
        container.matricular_usuarios_service().execute(
            MatricularUsuariosInputDTO(formacao.id, ("Hugo", "Ana"))
        )

        output = container.obter_formacao_service().execute(formacao.id)
        assert output.inscritos == ["Ana", "Hugo"]
        assert [f.id for f in container.listar_formacoes_service().execute()] == [
            formacao.id
        ]

        tipos = [e.event_type for e in container.event_publisher().published_events]
        assert tipos == ["FormacaoCriadaEvent", "UsuariosMatriculadosEvent"]


class TestGetContainer:

    def test_global_configurado_por_settings(self):
        container = get_container()

        assert get_container() is container
        assert container.config.event_publisher_mode() == settings.EVENT_PUBLISHER_MODE

    def test_reset(self):
        primeiro = get_container()
        reset_container()

        assert get_container() is not primeiro


class TestSettings:

    def test_as_dict(self):
        assert settings.as_dict() == {
            "event_publisher_mode": settings.EVENT_PUBLISHER_MODE,
        }

    def test_configure_logging_com_nivel(self):
        settings.configure_logging("WARNING")

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("src.adapters").level == logging.WARNING

        settings.configure_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG
