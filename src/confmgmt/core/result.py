# src/confmgmt/core/result.py
"""
Resultado canônico de operações tolerantes a falha.

Este módulo define o `Result`, a estrutura usada por todos os contratos
de capacidade do confmgmt (fontes de valores, resolvers secundários,
conversores) para expressar sucesso ou falha sem recorrer a exceções.

Princípios fundamentais:
    - Ausência de valor não é exceção
    - Falhas carregam um motivo textual curto
    - O objeto é imutável após criado

Invariantes:
    - `success=True` implica `reason is None`
    - `success=False` implica `value is None`

Limites explícitos:
    - Não encadeia operações (não é monad completa)
    - Não registra eventos nem logs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Resultado imutável de uma tentativa (busca, conversão, resolução).

    Campos:
        - success: indica se a operação produziu um valor
        - value: valor produzido (apenas em caso de sucesso)
        - reason: motivo da falha (apenas em caso de falha)
    """

    success: bool
    value: Optional[T] = None
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and self.reason is not None:
            raise ValueError("a successful Result cannot carry a reason")
        if not self.success and self.value is not None:
            raise ValueError("a failed Result cannot carry a value")

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, reason: str) -> "Result[T]":
        return cls(success=False, reason=reason)

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def is_failure(self) -> bool:
        return not self.success
