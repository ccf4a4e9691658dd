"""
Domain Events do Domínio de Formações.

Eventos:
- FormacaoCriadaEvent: Nova formação foi criada
- UsuariosMatriculadosEvent: Um lote de usuários foi matriculado

Uso:
    Eventos são criados nos use cases e publicados através do
    UnitOfWork após commit bem-sucedido.

    with uow:
        formacao.matricular(*usuarios)
        uow.publish_event(UsuariosMatriculadosEvent(...))
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from src.core.shared.events import DomainEvent


@dataclass
class FormacaoCriadaEvent(DomainEvent):
    """
    Evento: Formação foi criada.

    Attributes:
        nome: Nome da formação
        nivel: Nível (valor de exibição)
        total_conteudos: Quantidade de conteúdos educacionais
        duracao_total: Soma das durações em minutos
    """

    nome: str = ""
    nivel: str = ""
    total_conteudos: int = 0
    duracao_total: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Formacao"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "nome": self.nome,
            "nivel": self.nivel,
            "total_conteudos": self.total_conteudos,
            "duracao_total": self.duracao_total,
        }


@dataclass
class UsuariosMatriculadosEvent(DomainEvent):
    """
    Evento: Usuários foram matriculados em uma formação.

    Disparado apenas quando o lote inteiro é aceito.

    Attributes:
        usuarios: Nomes dos usuários do lote, na ordem recebida
        total_inscritos: Total de inscritos após a matrícula
    """

    usuarios: List[str] = field(default_factory=list)
    total_inscritos: int = 0

    @property
    def aggregate_type(self) -> str:
        return "Formacao"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "usuarios": list(self.usuarios),
            "total_inscritos": self.total_inscritos,
        }
