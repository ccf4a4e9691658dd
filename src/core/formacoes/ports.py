"""
Ports (Interfaces) do Domínio de Formações.

Define o contrato de acesso às formações usado pelos use cases.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core
"""

from typing import List, Optional, Protocol, runtime_checkable

from .entities import Formacao, Nivel


@runtime_checkable
class FormacaoRepository(Protocol):
    """
    Interface para acesso a Formações.

    Usando Protocol para duck typing: implementações não
    precisam herdar explicitamente.

    Implementações:
    - InMemoryFormacaoRepository (registro no processo)
    """

    def save(self, formacao: Formacao) -> None:
        """
        Registra formação (create ou update).

        Args:
            formacao: Entidade a ser registrada
        """
        ...

    def get_by_id(self, formacao_id: str) -> Optional[Formacao]:
        """
        Busca formação por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def list_all(self) -> List[Formacao]:
        ...

    def list_by_nivel(self, nivel: Nivel) -> List[Formacao]:
        ...

    def exists(self, formacao_id: str) -> bool:
        ...

    def count(self) -> int:
        ...


class InMemoryFormacaoRepository:
    """
    Implementação em memória do FormacaoRepository.

    Mantém as entidades vivas durante o processo; nada é
    gravado fora dele.

    Example:
        repo = InMemoryFormacaoRepository()
        repo.save(formacao)
        found = repo.get_by_id(formacao.id)
    """

    def __init__(self):
        self._formacoes: dict[str, Formacao] = {}

    def save(self, formacao: Formacao) -> None:
        self._formacoes[formacao.id] = formacao

    def get_by_id(self, formacao_id: str) -> Optional[Formacao]:
        return self._formacoes.get(formacao_id)

    def list_all(self) -> List[Formacao]:
        """Lista todas as formações, na ordem de registro."""
        return list(self._formacoes.values())

    def list_by_nivel(self, nivel: Nivel) -> List[Formacao]:
        return [f for f in self._formacoes.values() if f.nivel == nivel]

    def exists(self, formacao_id: str) -> bool:
        return formacao_id in self._formacoes

    def count(self) -> int:
        return len(self._formacoes)
