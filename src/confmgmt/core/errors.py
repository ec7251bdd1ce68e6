# src/confmgmt/core/errors.py
"""
Exceções canônicas do confmgmt.

Este módulo define a hierarquia oficial de exceções utilizadas pelo
núcleo de resolução de configuração e pelas fontes de valores que o
acompanham.

As exceções aqui definidas representam **falhas acionáveis**. Falhas
individuais de candidatos (conversão, validação, transformação) nunca
viram exceção: são absorvidas pelo pipeline da entidade.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Uso indevido da API falha imediatamente (construção)
    - Valor obrigatório ausente é a única falha de resolução exposta

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""

from __future__ import annotations

from typing import List, Sequence


class ConfigError(Exception):
    """
    Exceção base para erros do confmgmt.

    Permite captura genérica de falhas de configuração, distinguindo-as
    de erros de execução da aplicação.
    """


class EntityConstructionError(ConfigError):
    """
    Exceção levantada quando uma entidade é criada fora do registry.

    Entidades só podem ser obtidas via fábricas do `ConfigRegistry`
    (`as_string`, `as_integer`, ...). Construção direta é erro de
    programação e não é recuperável.
    """


class RequiredValueMissingError(ConfigError):
    """
    Exceção levantada quando uma chave obrigatória não recebeu nenhum candidato.

    Usada pelo modo estrito de `ConfigRegistry.validate_all`, que
    interrompe a validação na primeira chave ausente.
    """

    def __init__(self, key: str) -> None:
        super().__init__(f"configuration key '{key}' is required, but missing.")
        self.key = key


class MissingRequiredValuesError(ConfigError):
    """
    Exceção agregada: todas as chaves obrigatórias ausentes de uma vez.
    """

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys: List[str] = list(keys)
        joined = ", ".join(f"'{k}'" for k in self.keys)
        super().__init__(f"configuration keys are required, but missing: {joined}.")


class SourceError(ConfigError):
    """
    Exceção base para falhas estruturais de fontes baseadas em arquivo.

    Levantada apenas na construção da fonte; uma fonte já construída
    nunca levanta exceção em `try_get`.
    """


class SourceFileNotFoundError(SourceError):
    """
    Exceção levantada quando um arquivo de fonte obrigatório não existe.

    Fontes marcadas como opcionais tratam arquivo ausente como fonte vazia.
    """


class UnsupportedSourceFormatError(SourceError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidSourceRootTypeError(SourceError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo não é um mapa chave-valor.
    """
