"""
Data Transfer Objects (DTOs) do Domínio de Formações.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para quem consome os use cases.

Tipos de DTOs:
- Input DTOs: Dados brutos recebidos do chamador
- Output DTOs: Dados formatados para exibição
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .entities import Formacao


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class ConteudoEducacionalInputDTO:
    """
    DTO de entrada para um conteúdo educacional.

    Attributes:
        nome: Nome do conteúdo
        duracao: Minutos; None aplica a duração padrão da entidade
    """

    nome: str
    duracao: Optional[int] = None


@dataclass(frozen=True)
class CriarFormacaoInputDTO:
    """
    DTO de entrada para criar formação.

    Imutável (frozen=True) para garantir que os dados
    não sejam alterados acidentalmente.

    Attributes:
        nome: Nome da formação
        nivel: Nível (nome ou valor do enum, ex: "INTERMEDIARIO")
        conteudos: Conteúdos na ordem do currículo
    """

    nome: str
    nivel: str = "BASICO"
    conteudos: tuple = field(default_factory=tuple)  # tuple para ser hashable


@dataclass(frozen=True)
class MatricularUsuariosInputDTO:
    """
    DTO de entrada para matricular usuários em uma formação.

    Attributes:
        formacao_id: ID da formação
        nomes_usuarios: Nomes dos usuários, na ordem de verificação
    """

    formacao_id: str
    nomes_usuarios: tuple = field(default_factory=tuple)


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ConteudoEducacionalOutputDTO:
    nome: str
    duracao: int


@dataclass
class FormacaoOutputDTO:
    """
    DTO de saída com dados completos da formação.

    Inscritos são listados em ordem alfabética; a ordem
    de matrícula não é significativa.
    """

    id: str
    nome: str
    nivel: str
    nivel_display: str
    conteudos: List[ConteudoEducacionalOutputDTO]
    duracao_total: int
    inscritos: List[str]

    @classmethod
    def from_entity(cls, formacao: Formacao) -> "FormacaoOutputDTO":
        """
        Cria DTO a partir da entidade.

        Args:
            formacao: Entidade de domínio

        Returns:
            DTO com dados formatados
        """
        return cls(
            id=formacao.id,
            nome=formacao.nome,
            nivel=formacao.nivel.name,
            nivel_display=formacao.nivel.value,
            conteudos=[
                ConteudoEducacionalOutputDTO(nome=c.nome, duracao=c.duracao)
                for c in formacao.conteudos_educacionais
            ],
            duracao_total=formacao.duracao_total,
            inscritos=sorted(usuario.nome for usuario in formacao.inscritos),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nome": self.nome,
            "nivel": self.nivel,
            "nivel_display": self.nivel_display,
            "conteudos": [
                {"nome": c.nome, "duracao": c.duracao} for c in self.conteudos
            ],
            "duracao_total": self.duracao_total,
            "inscritos": list(self.inscritos),
        }
