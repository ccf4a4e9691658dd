"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação
usando dependency-injector.

Padrões:
- Singleton: Uma instância para toda app (repositório, publisher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Valores vindos de src.config.settings
"""

from typing import Optional

from dependency_injector import containers, providers

from src.adapters.memory.publishers import get_event_publisher
from src.adapters.memory.unit_of_work import InMemoryUnitOfWork
from src.config import settings
from src.core.formacoes.ports import InMemoryFormacaoRepository
from src.core.formacoes.use_cases import (
    CriarFormacaoService,
    MatricularUsuariosService,
    ObterFormacaoService,
    ListarFormacoesService,
)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Example:
        container = Container()
        container.config.from_dict(settings.as_dict())

        service = container.criar_formacao_service()
        output = service.execute(input_dto)
    """

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    event_publisher = providers.Singleton(
        get_event_publisher,
        mode=config.event_publisher_mode,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    formacao_repository = providers.Singleton(InMemoryFormacaoRepository)

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        InMemoryUnitOfWork,
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    criar_formacao_service = providers.Factory(
        CriarFormacaoService,
        formacao_repo=formacao_repository,
        uow=unit_of_work,
    )

    matricular_usuarios_service = providers.Factory(
        MatricularUsuariosService,
        formacao_repo=formacao_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    obter_formacao_service = providers.Factory(
        ObterFormacaoService,
        formacao_repo=formacao_repository,
    )

    listar_formacoes_service = providers.Factory(
        ListarFormacoesService,
        formacao_repo=formacao_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria e configura a partir de settings se não existir.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(settings.as_dict())

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None
