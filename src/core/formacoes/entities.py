"""
Entidades do Domínio de Formações.

Este módulo define as entidades de domínio que encapsulam
as regras de negócio de formações, conteúdos e matrículas.

Entidades:
- Usuario: Valor imutável identificado pelo nome
- ConteudoEducacional: Unidade de material com duração em minutos
- Nivel: Níveis de dificuldade de uma formação
- Formacao: Agregado principal, com conteúdos e inscritos

Regras de Negócio Encapsuladas:
- Nomes nunca em branco
- Duração de conteúdo sempre positiva (padrão de 60 minutos)
- Matrícula repetida é rejeitada e o lote inteiro é descartado
"""

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import FrozenSet, Sequence
import threading
import uuid

from src.core.shared.exceptions import ValidationError

from .validacoes import (
    validar_nome,
    validar_duracao_conteudo,
    validar_matricula,
)


DURACAO_PADRAO_MINUTOS = 60

_CAMPOS_FIXOS = frozenset({"id", "nome", "nivel", "conteudos_educacionais"})


class Nivel(Enum):
    """Níveis de dificuldade possíveis de uma Formacao."""

    BASICO = "Básico"
    INTERMEDIARIO = "Intermediário"
    AVANCADO = "Avançado"

    @classmethod
    def from_string(cls, value: str) -> "Nivel":
        """
        Converte string para enum.

        Args:
            value: Valor string (nome ou valor do enum)

        Returns:
            Nivel correspondente

        Raises:
            ValueError: Se valor inválido
        """
        # Tenta pelo nome (INTERMEDIARIO)
        try:
            return cls[value.strip().upper()]
        except KeyError:
            pass

        # Tenta pelo valor ("Intermediário")
        for nivel in cls:
            if nivel.value.lower() == value.strip().lower():
                return nivel

        raise ValueError(f"Nível inválido: {value}")


@dataclass(frozen=True)
class Usuario:
    """
    Valor imutável representando um usuário.

    Igualdade e hash são pelo nome, então duas instâncias com o
    mesmo nome contam como a mesma matrícula.

    Raises:
        NomeInvalidoError: Se nome em branco
    """

    nome: str

    def __post_init__(self):
        validar_nome(self.nome, "O nome do usuário")

    def __str__(self) -> str:
        return self.nome


@dataclass(frozen=True)
class ConteudoEducacional:
    """
    Unidade de material educacional.

    A duração é informada em minutos e deve ser maior que zero.
    Quando omitida, vale DURACAO_PADRAO_MINUTOS antes da validação,
    então apenas um zero explícito é rejeitado.

    Raises:
        NomeInvalidoError: Se nome em branco
        DuracaoInvalidaError: Se duracao não é inteiro ou é <= 0
    """

    nome: str
    duracao: int = DURACAO_PADRAO_MINUTOS

    def __post_init__(self):
        validar_nome(self.nome, "O nome do conteúdo educacional")
        validar_duracao_conteudo(self.duracao)

    def __str__(self) -> str:
        return f"{self.nome} ({self.duracao} min)"


@dataclass(eq=False)
class Formacao:
    """
    Entidade de Domínio: Formação.

    Currículo nomeado em um nível de dificuldade, composto por uma
    lista ordenada de conteúdos e por um conjunto crescente de inscritos.

    Invariantes:
    - Nome não pode estar em branco
    - Conteúdos ficam na ordem recebida e não mudam após a criação
    - Nenhum usuário aparece duas vezes entre os inscritos
    - Inscritos só crescem, e apenas via matricular()
    - Nome, nível, conteúdos e id não podem ser reatribuídos

    Attributes:
        nome: Nome da formação
        nivel: Nível de dificuldade
        conteudos_educacionais: Conteúdos na ordem do currículo
        id: Identificador único (UUID)

    Example:
        formacao = Formacao(
            nome="Desenvolvimento Android",
            nivel=Nivel.INTERMEDIARIO,
            conteudos_educacionais=[ConteudoEducacional("Kotlin")],
        )
        formacao.matricular(Usuario("Hugo"), Usuario("Ana"))
    """

    nome: str
    nivel: Nivel
    conteudos_educacionais: Sequence[ConteudoEducacional]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    _inscritos: set = field(default_factory=set, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def __post_init__(self):
        validar_nome(self.nome, "O nome da formação")
        if not isinstance(self.nivel, Nivel):
            raise ValidationError(
                f"Nível inválido: {self.nivel!r}",
                field="nivel",
            )
        self.conteudos_educacionais = tuple(self.conteudos_educacionais)
        object.__setattr__(self, "_inicializada", True)

    def __setattr__(self, name, value):
        if name in _CAMPOS_FIXOS and getattr(self, "_inicializada", False):
            raise FrozenInstanceError(f"Não é possível alterar '{name}' da formação")
        super().__setattr__(name, value)

    def matricular(self, *usuarios: Usuario) -> None:
        """
        Matricula um ou mais usuários na formação.

        O lote é atômico: se qualquer usuário já estiver inscrito,
        nenhum do lote é matriculado. Repetições dentro do mesmo lote
        não são erro e resultam em uma única inscrição.

        Args:
            usuarios: Usuários a matricular, na ordem de verificação

        Raises:
            MatriculaDuplicadaError: No primeiro usuário já inscrito
        """
        with self._lock:
            validar_matricula(usuarios, frozenset(self._inscritos))
            self._inscritos.update(usuarios)

    def esta_inscrito(self, usuario: Usuario) -> bool:
        return usuario in self._inscritos

    @property
    def inscritos(self) -> FrozenSet[Usuario]:
        """Snapshot imutável dos usuários inscritos."""
        return frozenset(self._inscritos)

    @property
    def duracao_total(self) -> int:
        """Soma, em minutos, da duração de todos os conteúdos."""
        return sum(conteudo.duracao for conteudo in self.conteudos_educacionais)

    def __repr__(self) -> str:
        return (
            f"Formacao("
            f"id={self.id[:8]}..., "
            f"nome='{self.nome}', "
            f"nivel={self.nivel.value}, "
            f"conteudos={len(self.conteudos_educacionais)}, "
            f"inscritos={len(self._inscritos)}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Formacao):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
