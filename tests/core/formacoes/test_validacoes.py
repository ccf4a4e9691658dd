"""
Testes Unitários para as Validações do Domínio de Formações.

Coverage:
- validar_nome(): nomes em branco e mensagens com contexto
- validar_duracao_conteudo(): limite estrito em zero e tipo inteiro
- validar_matricula(): ordem de verificação e ausência de efeitos
"""

import pytest

from src.core.formacoes.entities import Usuario
from src.core.formacoes.validacoes import (
    validar_nome,
    validar_duracao_conteudo,
    validar_matricula,
)
from src.core.shared.exceptions import (
    NomeInvalidoError,
    DuracaoInvalidaError,
    MatriculaDuplicadaError,
    ValidationError,
)


class TestValidarNome:
    """Testes para validação de nomes."""

    @pytest.mark.parametrize("nome", ["", " ", "   ", "\t", "\n", " \t\n "])
    def test_nome_em_branco_erro(self, nome):
        """Deve rejeitar nome vazio ou só com espaços."""
        with pytest.raises(NomeInvalidoError):
            validar_nome(nome)

    def test_nome_none_erro(self):
        with pytest.raises(NomeInvalidoError):
            validar_nome(None)

    @pytest.mark.parametrize("nome", ["a", "Hugo", "  Ana  ", "Kotlin 2.0"])
    def test_nome_valido(self, nome):
        assert validar_nome(nome) is None

    def test_mensagem_generica(self):
        with pytest.raises(NomeInvalidoError) as exc_info:
            validar_nome("")

        assert exc_info.value.message == "O nome não pode estar em branco"
        assert exc_info.value.field == "nome"

    def test_mensagem_com_rotulo(self):
        """Deve identificar o contexto do campo na mensagem."""
        with pytest.raises(NomeInvalidoError) as exc_info:
            validar_nome("  ", "O nome da formação")

        assert exc_info.value.message == "O nome da formação não pode estar em branco"

    def test_erro_e_validation_error(self):
        with pytest.raises(ValidationError):
            validar_nome("")


class TestValidarDuracaoConteudo:
    """Testes para validação de duração."""

    @pytest.mark.parametrize("duracao", [0, -1, -60])
    def test_duracao_nao_positiva_erro(self, duracao):
        with pytest.raises(DuracaoInvalidaError) as exc_info:
            validar_duracao_conteudo(duracao)

        assert exc_info.value.duracao == duracao
        assert exc_info.value.field == "duracao"
        assert "maior que zero" in exc_info.value.message

    @pytest.mark.parametrize("duracao", [1, 60, 240])
    def test_duracao_positiva(self, duracao):
        assert validar_duracao_conteudo(duracao) is None

    @pytest.mark.parametrize("duracao", [True, False, 0.5, 60.0, "60", None])
    def test_duracao_nao_inteira_erro(self, duracao):
        """Booleanos, floats e strings não são minutos válidos."""
        with pytest.raises(DuracaoInvalidaError) as exc_info:
            validar_duracao_conteudo(duracao)

        assert exc_info.value.duracao == duracao
        assert "número inteiro" in exc_info.value.message


class TestValidarMatricula:
    """Testes para validação de matrícula."""

    def test_sem_inscritos_aceita(self, hugo, ana):
        assert validar_matricula([hugo, ana], frozenset()) is None

    def test_usuario_ja_inscrito_erro(self, hugo, ana):
        with pytest.raises(MatriculaDuplicadaError) as exc_info:
            validar_matricula([ana], {hugo, ana})

        assert exc_info.value.usuario == ana
        assert "Ana Maia" in exc_info.value.message

    def test_falha_no_primeiro_duplicado_na_ordem(self, hugo, ana, emilia):
        """Deve reportar o primeiro duplicado na ordem recebida."""
        inscritos = {hugo, ana}

        with pytest.raises(MatriculaDuplicadaError) as exc_info:
            validar_matricula([emilia, ana, hugo], inscritos)

        assert exc_info.value.usuario == ana

    def test_igualdade_por_valor(self, hugo):
        """Usuário reconstruído com o mesmo nome conta como inscrito."""
        with pytest.raises(MatriculaDuplicadaError):
            validar_matricula([Usuario("Hugo Lacerda")], {hugo})

    def test_nao_altera_inscritos(self, hugo, ana, emilia):
        inscritos = {hugo, ana}

        with pytest.raises(MatriculaDuplicadaError):
            validar_matricula([emilia, ana], inscritos)

        assert inscritos == {hugo, ana}

    def test_duplicata_dentro_do_lote_nao_e_erro(self, hugo):
        assert validar_matricula([hugo, hugo], set()) is None

    def test_lote_vazio(self, hugo):
        assert validar_matricula([], {hugo}) is None
