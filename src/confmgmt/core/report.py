# src/confmgmt/core/report.py
"""
Apresentação de valores resolvidos.

O núcleo de resolução nunca registra logs por conta própria. Este módulo
oferece ao chamador duas formas explícitas de reportar o valor de uma
entidade:

    - `ResolutionLog`: log estruturado em memória (lista de eventos)
    - `Entity.print`: linha `KEY = 'value'` no stdout

Regras de formatação (`format_value`):
    - segredo com candidato → "(set)"; segredo sem candidato → "(not set)"
    - lista de strings → elementos unidos por ", "
    - enum sem candidato → "(not set)"
    - membro de enum → nome do membro
    - None → string vazia
    - demais valores → `str(value)` (o default, se nada sobreviveu)

Invariantes:
    - Eventos sempre incluem `key`, `level`, `message` e `timestamp`
    - A lista de eventos é append-only
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from .types import ValueKind

NOT_SET = "(not set)"
SET = "(set)"


def format_value(entity: Any, secret: bool = False) -> str:
    has_value = bool(getattr(entity, "has_value", False))

    if secret:
        return SET if has_value else NOT_SET

    kind = getattr(entity, "kind", None)
    if kind == ValueKind.ENUM and not has_value:
        return NOT_SET

    value = entity.value
    if value is None:
        return ""
    if kind == ValueKind.STRINGS and isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    if isinstance(value, Enum):
        return value.name
    return str(value)


@dataclass
class ResolutionLog:
    """
    Log estruturado de valores resolvidos.

    Cada chamada a `record` acrescenta um evento (dict) serializável.
    O log não persiste nada e não depende do módulo `logging`; o chamador
    decide como e onde apresentar os eventos.
    """

    events: List[Dict[str, Any]] = field(default_factory=list)

    def record(self, *, key: str, value: str, level: str = "INFO", **extra: Any) -> None:
        event = {
            "key": key,
            "level": level,
            "message": f"{key} = '{value}'",
            "value": value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def messages(self) -> List[str]:
        return [e["message"] for e in self.events]
