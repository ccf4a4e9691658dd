"""
Configurações globais do Pytest para Formações Manager.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

import pytest
import sys
from pathlib import Path

# Adicionar raiz do projeto ao path para imports `src.*`
project_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_path))

from src.adapters.memory.publishers import InMemoryEventPublisher  # noqa: E402
from src.adapters.memory.unit_of_work import InMemoryUnitOfWork  # noqa: E402
from src.config.container import reset_container  # noqa: E402
from src.core.formacoes.entities import (  # noqa: E402
    ConteudoEducacional,
    Formacao,
    Nivel,
    Usuario,
)
from src.core.formacoes.ports import InMemoryFormacaoRepository  # noqa: E402


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return project_path


@pytest.fixture(autouse=True)
def reset_singletons():
    """Garante container global limpo entre testes."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def conteudos_android():
    """Conteúdos da formação de Android, na ordem do currículo."""
    return [
        ConteudoEducacional(nome="Introdução a linguagem Kotlin"),
        ConteudoEducacional(nome="Programação Orientada a Objetos", duracao=240),
        ConteudoEducacional(
            nome="Apresentação do Android Studio e Jetpack compose", duracao=120
        ),
    ]


@pytest.fixture
def formacao_android(conteudos_android):
    return Formacao(
        nome="Desenvolvimento Android com Kotlin e Jetpack Compose",
        nivel=Nivel.INTERMEDIARIO,
        conteudos_educacionais=conteudos_android,
    )


@pytest.fixture
def hugo():
    return Usuario("Hugo Lacerda")


@pytest.fixture
def ana():
    return Usuario("Ana Maia")


@pytest.fixture
def emilia():
    return Usuario("Emilia Lins")


@pytest.fixture
def formacao_repo():
    return InMemoryFormacaoRepository()


@pytest.fixture
def event_publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def uow(event_publisher):
    return InMemoryUnitOfWork(event_publisher=event_publisher)


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
