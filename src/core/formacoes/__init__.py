"""
Domínio de Formações - Conteúdos Educacionais e Matrículas.

Este módulo contém toda a lógica de negócio relacionada a
formações, incluindo:
- Validações (nome, duração, matrícula)
- Entidades (Usuario, ConteudoEducacional, Formacao, Nivel)
- Use Cases (CriarFormacao, MatricularUsuarios, ObterFormacao, ListarFormacoes)
- Domain Events (FormacaoCriada, UsuariosMatriculados)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interface para o repositório)

Características do Domínio:
- Validações executadas na construção das entidades
- Matrícula em lote atômica: ou todos entram ou nenhum
- Conteúdos na ordem do currículo, fixos após a criação
"""

from .validacoes import (
    validar_nome,
    validar_duracao_conteudo,
    validar_matricula,
)
from .entities import (
    DURACAO_PADRAO_MINUTOS,
    Nivel,
    Usuario,
    ConteudoEducacional,
    Formacao,
)
from .events import FormacaoCriadaEvent, UsuariosMatriculadosEvent
from .dtos import (
    ConteudoEducacionalInputDTO,
    CriarFormacaoInputDTO,
    MatricularUsuariosInputDTO,
    FormacaoOutputDTO,
)
from .ports import FormacaoRepository, InMemoryFormacaoRepository
from .use_cases import (
    CriarFormacaoService,
    MatricularUsuariosService,
    ObterFormacaoService,
    ListarFormacoesService,
)

__all__ = [
    # Validações
    "validar_nome",
    "validar_duracao_conteudo",
    "validar_matricula",
    # Entities
    "DURACAO_PADRAO_MINUTOS",
    "Nivel",
    "Usuario",
    "ConteudoEducacional",
    "Formacao",
    # Events
    "FormacaoCriadaEvent",
    "UsuariosMatriculadosEvent",
    # DTOs
    "ConteudoEducacionalInputDTO",
    "CriarFormacaoInputDTO",
    "MatricularUsuariosInputDTO",
    "FormacaoOutputDTO",
    # Ports
    "FormacaoRepository",
    "InMemoryFormacaoRepository",
    # Use Cases
    "CriarFormacaoService",
    "MatricularUsuariosService",
    "ObterFormacaoService",
    "ListarFormacoesService",
]
