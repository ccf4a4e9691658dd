#!/usr/bin/env python
"""
Demonstração das validações do domínio de formações.

Este script:
1. Tenta criar usuário, formação e conteúdos inválidos
2. Mostra a duração padrão de um conteúdo educacional
3. Cria a formação de Android e matricula usuários,
   incluindo um lote rejeitado por conter aluno repetido

Uso:
    python scripts/demonstracao.py
    python scripts/demonstracao.py --log-level DEBUG
    python scripts/demonstracao.py --json
"""

import os
import sys
import json
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def demonstrar_validacoes():
    """Exercita cada caminho de validação das entidades."""
    from src.core.formacoes.entities import (
        ConteudoEducacional,
        Formacao,
        Nivel,
        Usuario,
    )
    from src.core.shared.exceptions import (
        DuracaoInvalidaError,
        NomeInvalidoError,
    )

    try:
        Usuario("")
    except NomeInvalidoError as e:
        print(f"⚠️  Nome de usuário inválido: {e.message}")

    try:
        Formacao(
            nome="  ",
            nivel=Nivel.BASICO,
            conteudos_educacionais=[
                ConteudoEducacional(nome="Introdução a linguagem Kotlin")
            ],
        )
    except NomeInvalidoError as e:
        print(f"⚠️  Nome de formação inválido: {e.message}")

    try:
        ConteudoEducacional(nome="     ")
    except NomeInvalidoError as e:
        print(f"⚠️  Nome de conteúdo educacional inválido: {e.message}")

    try:
        ConteudoEducacional(nome="Kotlin", duracao=0)
    except DuracaoInvalidaError as e:
        print(f"⚠️  Duração de conteúdo educacional inválida: {e.message}")

    conteudo = ConteudoEducacional(nome="Kotlin")
    print(
        f"⏱️  A duração padrão do conteúdo {conteudo.nome} "
        f"é {conteudo.duracao} min"
    )


def demonstrar_matriculas(como_json=False):
    """Cria a formação de Android e matricula usuários via use cases."""
    from src.config.container import get_container
    from src.core.formacoes.dtos import (
        ConteudoEducacionalInputDTO,
        CriarFormacaoInputDTO,
        MatricularUsuariosInputDTO,
    )
    from src.core.shared.exceptions import MatriculaDuplicadaError

    container = get_container()

    formacao = container.criar_formacao_service().execute(
        CriarFormacaoInputDTO(
            nome="Desenvolvimento Android com Kotlin e Jetpack Compose",
            nivel="INTERMEDIARIO",
            conteudos=(
                ConteudoEducacionalInputDTO("Introdução a linguagem Kotlin"),
                ConteudoEducacionalInputDTO("Programação Orientada a Objetos", 240),
                ConteudoEducacionalInputDTO(
                    "Apresentação do Android Studio e Jetpack compose", 120
                ),
            ),
        )
    )

    matricular = container.matricular_usuarios_service
    matricular().execute(
        MatricularUsuariosInputDTO(formacao.id, ("Hugo Lacerda", "Ana Maia"))
    )

    try:
        matricular().execute(
            MatricularUsuariosInputDTO(formacao.id, ("Ana Maia", "Emilia Lins"))
        )
    except MatriculaDuplicadaError as e:
        print(f"⚠️  Matrícula inválida por aluno repetido: {e.message}")

    formacao = matricular().execute(
        MatricularUsuariosInputDTO(formacao.id, ("Emilia Lins",))
    )

    print(f"🎓 Inscritos na formação {formacao.nome}: {', '.join(formacao.inscritos)}")
    print(f"📚 Conteúdos ({formacao.duracao_total} min no total):")
    for conteudo in formacao.conteudos:
        print(f"   - {conteudo.nome} ({conteudo.duracao} min)")

    if como_json:
        print(json.dumps(formacao.to_dict(), ensure_ascii=False, indent=2))


def main(argv=None):
    parser = argparse.ArgumentParser(description='Demonstração do Formações Manager')
    parser.add_argument(
        '--log-level',
        default=None,
        help='Nível de log (ex: DEBUG, INFO, WARNING)',
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Imprime a formação final em JSON',
    )
    args = parser.parse_args(argv)

    from src.config.settings import configure_logging
    configure_logging(args.log_level)

    print("=" * 50)
    print("🚀 Formações Manager - Demonstração")
    print("=" * 50)

    demonstrar_validacoes()
    demonstrar_matriculas(como_json=args.json)

    print("✅ Demonstração concluída!")


if __name__ == '__main__':
    main()
