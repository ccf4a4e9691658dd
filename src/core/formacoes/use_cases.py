"""
Use Cases (Application Services) do Domínio de Formações.

Este módulo contém os casos de uso da aplicação, que orquestram
entidades, repositório e eventos.

Use Cases implementados:
- CriarFormacaoService: Cria nova formação com seus conteúdos
- MatricularUsuariosService: Matricula um lote de usuários
- ObterFormacaoService: Obtém formação específica
- ListarFormacoesService: Lista formações, opcionalmente por nível

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Validações de negócio ficam nas entidades
"""

from typing import List, Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    EntityNotFoundError,
    ValidationError,
)

from .ports import FormacaoRepository
from .entities import ConteudoEducacional, Formacao, Nivel, Usuario
from .dtos import (
    ConteudoEducacionalInputDTO,
    CriarFormacaoInputDTO,
    MatricularUsuariosInputDTO,
    FormacaoOutputDTO,
)
from .events import FormacaoCriadaEvent, UsuariosMatriculadosEvent


def _parse_nivel(valor: str) -> Nivel:
    try:
        return Nivel.from_string(valor)
    except (ValueError, AttributeError):
        raise ValidationError(f"Nível inválido: {valor}", field="nivel")


def _criar_conteudo(dto: ConteudoEducacionalInputDTO) -> ConteudoEducacional:
    if dto.duracao is None:
        return ConteudoEducacional(nome=dto.nome)
    return ConteudoEducacional(nome=dto.nome, duracao=dto.duracao)


class CriarFormacaoService:
    """
    Use Case: Criar uma nova formação.

    Fluxo:
    1. Converter nível de string para enum
    2. Criar conteúdos e entidade Formacao (validações nas entidades)
    3. Registrar via repositório
    4. Disparar evento FormacaoCriada
    5. Retornar DTO de saída

    Example:
        service = CriarFormacaoService(formacao_repo, uow)
        output = service.execute(CriarFormacaoInputDTO(
            nome="Desenvolvimento Android",
            nivel="INTERMEDIARIO",
            conteudos=(ConteudoEducacionalInputDTO("Kotlin"),),
        ))
    """

    def __init__(self, formacao_repo: FormacaoRepository, uow: UnitOfWork):
        self.formacao_repo = formacao_repo
        self.uow = uow

    def execute(self, input_dto: CriarFormacaoInputDTO) -> FormacaoOutputDTO:
        """
        Executa criação de formação.

        Raises:
            ValidationError: Se nível inválido
            NomeInvalidoError: Se nome da formação ou de conteúdo em branco
            DuracaoInvalidaError: Se duração de conteúdo <= 0
        """
        with self.uow:
            nivel = _parse_nivel(input_dto.nivel)
            conteudos = [_criar_conteudo(c) for c in input_dto.conteudos]

            formacao = Formacao(
                nome=input_dto.nome,
                nivel=nivel,
                conteudos_educacionais=conteudos,
            )

            self.formacao_repo.save(formacao)

            self.uow.publish_event(
                FormacaoCriadaEvent(
                    aggregate_id=formacao.id,
                    nome=formacao.nome,
                    nivel=formacao.nivel.value,
                    total_conteudos=len(formacao.conteudos_educacionais),
                    duracao_total=formacao.duracao_total,
                )
            )

        return FormacaoOutputDTO.from_entity(formacao)


class MatricularUsuariosService:
    """
    Use Case: Matricular usuários em uma formação.

    Fluxo:
    1. Buscar formação existente
    2. Criar usuários (validação de nome)
    3. Matricular o lote (atômico na entidade)
    4. Disparar evento UsuariosMatriculados

    Se qualquer passo falhar, nenhum usuário do lote é
    matriculado e nenhum evento é publicado.
    """

    def __init__(self, formacao_repo: FormacaoRepository, uow: UnitOfWork):
        self.formacao_repo = formacao_repo
        self.uow = uow

    def execute(self, input_dto: MatricularUsuariosInputDTO) -> FormacaoOutputDTO:
        """
        Executa matrícula do lote.

        Raises:
            EntityNotFoundError: Se formação não existe
            NomeInvalidoError: Se algum nome em branco
            MatriculaDuplicadaError: Se algum usuário já inscrito
        """
        with self.uow:
            formacao = self.formacao_repo.get_by_id(input_dto.formacao_id)

            if not formacao:
                raise EntityNotFoundError(
                    f"Formação {input_dto.formacao_id} não encontrada",
                    entity_type="Formacao",
                    entity_id=input_dto.formacao_id,
                )

            usuarios = [Usuario(nome) for nome in input_dto.nomes_usuarios]
            formacao.matricular(*usuarios)

            self.formacao_repo.save(formacao)

            self.uow.publish_event(
                UsuariosMatriculadosEvent(
                    aggregate_id=formacao.id,
                    usuarios=[usuario.nome for usuario in usuarios],
                    total_inscritos=len(formacao.inscritos),
                )
            )

        return FormacaoOutputDTO.from_entity(formacao)


class ObterFormacaoService:
    """Use Case: Obter uma formação pelo ID."""

    def __init__(self, formacao_repo: FormacaoRepository):
        self.formacao_repo = formacao_repo

    def execute(self, formacao_id: str) -> FormacaoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se formação não existe
        """
        formacao = self.formacao_repo.get_by_id(formacao_id)

        if not formacao:
            raise EntityNotFoundError(
                f"Formação {formacao_id} não encontrada",
                entity_type="Formacao",
                entity_id=formacao_id,
            )

        return FormacaoOutputDTO.from_entity(formacao)


class ListarFormacoesService:
    """Use Case: Listar formações, com filtro opcional por nível."""

    def __init__(self, formacao_repo: FormacaoRepository):
        self.formacao_repo = formacao_repo

    def execute(self, nivel: Optional[str] = None) -> List[FormacaoOutputDTO]:
        if nivel:
            formacoes = self.formacao_repo.list_by_nivel(_parse_nivel(nivel))
        else:
            formacoes = self.formacao_repo.list_all()

        return [FormacaoOutputDTO.from_entity(f) for f in formacoes]
