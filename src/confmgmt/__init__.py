# src/confmgmt/__init__.py
"""
confmgmt — resolução tipada de configuração a partir de fontes plugáveis.

A aplicação declara o que precisa ("um inteiro na chave X, obrigatório,
limitado a [1, 10]") e recebe o valor resolvido, sem escrever código de
parsing e validação para cada configuração.

Princípios centrais:
    - Fontes são injetadas explicitamente e consultadas em ordem
    - O primeiro candidato válido vence
    - Falhas de conversão/validação nunca interrompem a resolução
    - Apenas a ausência de valor obrigatório é reportada como falha

Arquitetura em alto nível:
    - core       → entidades, registry, conversores e contratos
    - sources    → fontes concretas (ambiente, .env, YAML/JSON, memória)
    - resolvers  → resolvers secundários de segredos
    - wiring     → montagem explícita do registry
"""

from .core import (
    ConfigError,
    ConfigRegistry,
    Entity,
    EntityConstructionError,
    MissingRequiredValuesError,
    NumericEntity,
    RequiredValueMissingError,
    ResolutionLog,
    Result,
    SealedEntity,
    SecondaryResolver,
    ValidationResult,
    ValueKind,
    ValueSource,
)
from .wiring import create_registry

__all__ = [
    "ConfigError",
    "ConfigRegistry",
    "Entity",
    "EntityConstructionError",
    "MissingRequiredValuesError",
    "NumericEntity",
    "RequiredValueMissingError",
    "ResolutionLog",
    "Result",
    "SealedEntity",
    "SecondaryResolver",
    "ValidationResult",
    "ValueKind",
    "ValueSource",
    "create_registry",
]
