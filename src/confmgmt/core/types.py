# src/confmgmt/core/types.py
"""
Tipos canônicos do núcleo de resolução.

Este módulo define:
    - `ValueKind`: o formato (shape) de valor que uma entidade produz
    - `MissingValuePayload`: payload serializável de chave obrigatória ausente
    - `ValidationResult`: resultado agregado da validação do registry

Decisões arquiteturais:
    - O formato é escolhido uma única vez, na fábrica do registry
    - Resultados de validação são imutáveis e serializáveis
    - Falhas agregadas só viram exceção quando o chamador pede

Limites explícitos:
    - Não contém lógica de conversão
    - Não interage com fontes de valores
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import MissingRequiredValuesError


class ValueKind(str, Enum):
    """
    Formatos de valor suportados pelas entidades.

    Os valores são strings para facilitar serialização e relatórios.

    Tipos definidos:
        - STRING: texto não vazio
        - INTEGER: inteiro
        - DECIMAL: decimal de ponto fixo (`decimal.Decimal`)
        - BOOLEAN: booleano com vocabulário estendido
        - STRINGS: lista de textos delimitada por vírgula
        - ENUM: membro de um `enum.Enum` declarado

    Invariantes:
        - Toda entidade possui exatamente um `kind`
        - O `kind` não muda após a construção da entidade
    """

    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    STRINGS = "strings"
    ENUM = "enum"


CONFIG_REQUIRED_VALUE_MISSING = "CONFIG_REQUIRED_VALUE_MISSING"


@dataclass(frozen=True)
class MissingValuePayload:
    """
    Payload canônico de chave obrigatória ausente.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados (chave afetada)
    - hint: ação sugerida ao operador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def required_value_missing(
    *,
    key: str,
    hint: str = "Defina a chave em alguma fonte configurada ou remova require() da entidade.",
) -> MissingValuePayload:
    return MissingValuePayload(
        type=CONFIG_REQUIRED_VALUE_MISSING,
        message=f"configuration key '{key}' is required, but missing.",
        details={"key": key},
        hint=hint,
    )


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado imutável de `ConfigRegistry.validate_all`.

    Campos:
        - missing: chaves obrigatórias sem candidato, na ordem do registry
        - errors: payloads serializáveis, um por chave ausente
        - warnings: avisos não fatais agrupados por chave

    Invariantes:
        - `ok` é verdadeiro sse `missing` está vazio
        - Warnings não afetam `ok`
    """

    missing: List[str] = field(default_factory=list)
    errors: List[MissingValuePayload] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.missing

    def raise_for_missing(self) -> None:
        if self.missing:
            raise MissingRequiredValuesError(self.missing)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "missing": list(self.missing),
            "errors": [e.to_dict() for e in self.errors],
            "warnings": {k: list(v) for k, v in self.warnings.items()},
        }
