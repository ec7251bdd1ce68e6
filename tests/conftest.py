# tests/conftest.py
"""
Fixtures compartilhados para testes do confmgmt.

Este módulo define fixtures reutilizáveis que fornecem:
- registry vazio e registry com fontes em memória
- enum de exemplo para entidades `as_enum`
- conversor instrumentado (contador de chamadas) para testes de cache
- conteúdo YAML/JSON semelhante ao uso real de arquivos de configuração

Decisões arquiteturais:
    - Fontes em memória evitam dependência de variáveis de ambiente reais
    - Factories retornam *classes*, não instâncias, quando o teste precisa
      configurar o comportamento
    - Imports do pacote são feitos de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture altera o ambiente do processo
    - Nenhuma fixture realiza I/O (arquivos ficam a cargo de `tmp_path`)
"""

import enum

import pytest


@pytest.fixture
def Colors():
    """
    Enum de exemplo (mesmo papel do enum de cores da aplicação de amostra).

    Returns:
        type: Enum com membros RED, GREEN e BLUE.
    """

    class Colors(enum.Enum):
        RED = 1
        GREEN = 2
        BLUE = 3

    return Colors


@pytest.fixture
def registry():
    from confmgmt.core.registry import ConfigRegistry

    return ConfigRegistry()


@pytest.fixture
def primary_source():
    from confmgmt.sources.memory import MappingSource

    return MappingSource(
        {
            "STRING_EXAMPLE": "hello",
            "INTEGER_EXAMPLE": "not-a-number",
            "BOOLEAN_EXAMPLE": "enabled",
        }
    )


@pytest.fixture
def secondary_source():
    from confmgmt.sources.memory import MappingSource

    return MappingSource(
        {
            "STRING_EXAMPLE": "from-secondary",
            "INTEGER_EXAMPLE": "42",
            "DECIMAL_EXAMPLE": "3.14",
        }
    )


@pytest.fixture
def layered_registry(primary_source, secondary_source):
    """Registry com duas fontes: `primary_source` tem precedência sobre `secondary_source`."""
    from confmgmt.core.registry import ConfigRegistry

    return ConfigRegistry(sources=[primary_source, secondary_source])


@pytest.fixture
def CountingConverter():
    """
    Fixture factory de conversor instrumentado.

    O conversor delega para `convert_integer` e conta quantas vezes foi
    chamado, permitindo verificar que leituras repetidas usam o cache.

    Returns:
        type: Classe `_CountingConverter` (instâncias são chamáveis).
    """
    from confmgmt.core.converters import convert_integer

    class _CountingConverter:
        def __init__(self):
            self.calls = 0

        def __call__(self, raw):
            self.calls += 1
            return convert_integer(raw)

    return _CountingConverter


@pytest.fixture
def project_like_settings_yaml() -> str:
    """
    YAML semelhante a um `appsettings.yaml` real.

    Returns:
        str: Conteúdo YAML com seções aninhadas, lista e valor `uri`.
    """
    return """\
app:
  name: confmgmt-sample
  retries: 3
  debug: true
  hosts:
    - alpha
    - beta
database:
  host: db.local
  port: 5432
  password: '{"uri": "secret://db-password"}'
empty_value: ""
"""
