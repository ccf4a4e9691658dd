"""
Validações do Domínio de Formações.

Funções puras e sem estado usadas pelas entidades para garantir
uma inicialização consistente de Usuario, ConteudoEducacional e
Formacao. Em caso de entrada inválida lançam exceções tipadas;
em caso de sucesso retornam None.
"""

from typing import TYPE_CHECKING, AbstractSet, Iterable, Optional

from src.core.shared.exceptions import (
    NomeInvalidoError,
    DuracaoInvalidaError,
    MatriculaDuplicadaError,
)

if TYPE_CHECKING:
    from .entities import Usuario


def validar_nome(nome: Optional[str], rotulo: str = "O nome") -> None:
    """
    Valida que um nome não está em branco.

    O valor é apenas inspecionado; quem chama guarda o nome original,
    sem remover espaços.

    Args:
        nome: Nome a validar
        rotulo: Contexto usado na mensagem (ex: "O nome do usuário")

    Raises:
        NomeInvalidoError: Se nome é None, vazio ou só espaços
    """
    if nome is None or not nome.strip():
        raise NomeInvalidoError(f"{rotulo} não pode estar em branco")


def validar_duracao_conteudo(duracao: int) -> None:
    """
    Valida a duração, em minutos, de um conteúdo educacional.

    Raises:
        DuracaoInvalidaError: Se duracao não é inteiro ou é <= 0
    """
    if not isinstance(duracao, int) or isinstance(duracao, bool):
        raise DuracaoInvalidaError(
            "A duração do conteúdo educacional deve ser um número inteiro de minutos",
            duracao=duracao,
        )
    if duracao <= 0:
        raise DuracaoInvalidaError(
            "A duração do conteúdo educacional deve ser maior que zero",
            duracao=duracao,
        )


def validar_matricula(
    usuarios: Iterable["Usuario"],
    inscritos: AbstractSet["Usuario"],
) -> None:
    """
    Verifica se algum dos usuários já está inscrito.

    Percorre `usuarios` na ordem recebida e falha no primeiro que
    pertence a `inscritos`. Não altera `inscritos`, e duplicatas
    dentro do próprio lote não são verificadas aqui.

    Args:
        usuarios: Candidatos à matrícula
        inscritos: Snapshot dos inscritos antes do lote

    Raises:
        MatriculaDuplicadaError: No primeiro usuário já inscrito
    """
    for usuario in usuarios:
        if usuario in inscritos:
            raise MatriculaDuplicadaError(
                f"Usuário {usuario.nome} já está cadastrado",
                usuario=usuario,
            )
