"""
Exceções de Domínio do Formações Manager.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    │   ├── NomeInvalidoError (nome em branco)
    │   └── DuracaoInvalidaError (duração menor ou igual a zero)
    ├── EntityNotFoundError (entidade não existe)
    └── BusinessRuleViolationError (regra de negócio violada)
        └── MatriculaDuplicadaError (usuário já inscrito)
"""

from typing import Any, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            formacao.matricular(usuario)
        except DomainException as e:
            print(e.message)
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para exibição)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para construir uma entidade.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class NomeInvalidoError(ValidationError):
    """
    Lançada quando um nome em branco (vazio ou só espaços) é informado.

    Example:
        Usuario("   ")  # NomeInvalidoError
    """

    def __init__(self, message: str, field: str = "nome"):
        super().__init__(message, field=field)


class DuracaoInvalidaError(ValidationError):
    """
    Lançada quando a duração de um conteúdo educacional não é um inteiro positivo.

    Attributes:
        duracao: Valor rejeitado
    """

    def __init__(self, message: str, duracao: Any = None):
        self.duracao = duracao
        super().__init__(message, field="duracao")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["duracao"] = self.duracao
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.

    Example:
        formacao = repo.get_by_id(formacao_id)
        if not formacao:
            raise EntityNotFoundError(f"Formação {formacao_id} não encontrada")
    """

    def __init__(
        self,
        message: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Lançada quando uma operação viola uma regra de negócio
    estabelecida no domínio.
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result


class MatriculaDuplicadaError(BusinessRuleViolationError):
    """
    Lançada ao tentar matricular um usuário que já está inscrito na formação.

    Attributes:
        usuario: Primeiro usuário do lote encontrado entre os inscritos
    """

    def __init__(self, message: str, usuario: Any = None):
        self.usuario = usuario
        super().__init__(message, rule="usuario_ja_matriculado")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.usuario is not None:
            result["usuario"] = getattr(self.usuario, "nome", str(self.usuario))
        return result
