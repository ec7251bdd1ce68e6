# src/confmgmt/core/interfaces.py
"""
Contratos de capacidade consumidos e expostos pelo núcleo.

Este módulo define os protocolos formais que colaboradores externos
devem satisfazer para serem plugados no registry:

    - `ValueSource`: produz zero ou um candidato bruto (string) por chave
    - `SecondaryResolver`: mapeia um valor já tipado em outro do mesmo tipo
      (ex.: referência de segredo → valor do segredo)

E a faceta comum das entidades, pela qual o registry as enxerga:

    - `EntityFacet`: chave, presença de candidato e obrigatoriedade

Princípios fundamentais:
    - Conformidade por duck typing (@runtime_checkable), sem herança
    - O núcleo nunca conhece a origem de uma string
    - "Não encontrado" é `Result.fail`, nunca exceção

Limites explícitos:
    - Não define timeouts ou retry (responsabilidade do colaborador)
    - Não define cache de dados de fonte
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .result import Result
from .types import ValueKind


@runtime_checkable
class ValueSource(Protocol):
    """
    Contrato mínimo de uma fonte de valores.

    Invariantes:
        - Chave vazia ou em branco retorna falha
        - Chave não encontrada retorna falha
        - Pode ser consultada repetidamente com chaves diferentes
    """

    def try_get(self, key: str) -> Result[str]:
        """Tenta obter o candidato bruto associado a `key`."""
        ...


@runtime_checkable
class SecondaryResolver(Protocol):
    """
    Contrato mínimo de um resolver secundário.

    Atributos obrigatórios:
        - kind: formato de valor que o resolver sabe tratar

    Uma falha em `resolve` descarta o candidato (estágio estrito).
    """

    kind: ValueKind

    def resolve(self, value: Any) -> Result[Any]:
        """Resolve `value` em outro valor do mesmo formato."""
        ...


@runtime_checkable
class EntityFacet(Protocol):
    """Faceta não tipada de uma entidade, usada pelo registry."""

    @property
    def key(self) -> str: ...

    @property
    def has_value(self) -> bool: ...

    @property
    def is_required(self) -> bool: ...
