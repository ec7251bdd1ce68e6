# src/confmgmt/core/__init__.py
"""
Core do confmgmt.

Este pacote contém o pipeline de resolução por entidade e o registry
que cria as entidades e verifica valores obrigatórios.

Componentes:
    - result      → `Result` (sucesso/falha sem exceção)
    - types       → `ValueKind`, `ValidationResult`, payload de erro
    - errors      → hierarquia `ConfigError`
    - interfaces  → `ValueSource`, `SecondaryResolver`, `EntityFacet`
    - converters  → estratégias embutidas string → valor tipado
    - entity      → `Entity`, `NumericEntity`, `SealedEntity`
    - registry    → `ConfigRegistry`
    - report      → `ResolutionLog`, `format_value`

Limites explícitos:
    - Não contém fontes concretas (ver `confmgmt.sources`)
    - Não contém resolvers concretos (ver `confmgmt.resolvers`)
"""

from .entity import Entity, NumericEntity, SealedEntity
from .errors import (
    ConfigError,
    EntityConstructionError,
    MissingRequiredValuesError,
    RequiredValueMissingError,
)
from .interfaces import EntityFacet, SecondaryResolver, ValueSource
from .registry import ConfigRegistry
from .report import ResolutionLog, format_value
from .result import Result
from .types import MissingValuePayload, ValidationResult, ValueKind

__all__ = [
    "ConfigError",
    "ConfigRegistry",
    "Entity",
    "EntityConstructionError",
    "EntityFacet",
    "MissingRequiredValuesError",
    "MissingValuePayload",
    "NumericEntity",
    "RequiredValueMissingError",
    "ResolutionLog",
    "Result",
    "SealedEntity",
    "SecondaryResolver",
    "ValidationResult",
    "ValueKind",
    "ValueSource",
    "format_value",
]
