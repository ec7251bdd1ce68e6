# src/confmgmt/core/registry.py
"""
Registro de entidades de configuração.

Este módulo define o `ConfigRegistry`, responsável por:
    - criar entidades tipadas (uma fábrica por formato de valor)
    - injetar explicitamente fontes de valores e resolvers secundários
    - manter a ordem de criação de todas as entidades do processo
    - executar a verificação agregada de valores obrigatórios

Decisões arquiteturais:
    - Não existe service locator global: fontes e resolvers são
      passados ao registry e repassados às entidades
    - O registry enxerga entidades apenas pela faceta `EntityFacet`
      (key, has_value, is_required); o valor tipado fica na entidade
    - A estratégia de conversão é escolhida pela fábrica, não por
      inspeção de tipo em runtime

Invariantes:
    - A lista de entidades cresce monotonicamente e preserva a ordem
    - `validate_all` é idempotente e reflete o estado atual de cada entidade

Limites explícitos:
    - Não deduplica chaves (duas entidades podem observar a mesma chave)
    - Não resolve valores por conta própria
    - Não registra logs
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Type, TypeVar

from .converters import (
    convert_boolean,
    convert_decimal,
    convert_integer,
    convert_string,
    convert_strings,
    enum_converter,
)
from .entity import _REGISTRY_TOKEN, Entity, NumericEntity
from .errors import RequiredValueMissingError
from .interfaces import EntityFacet, SecondaryResolver, ValueSource
from .types import MissingValuePayload, ValidationResult, ValueKind, required_value_missing

E = TypeVar("E", bound=Enum)


@dataclass
class ConfigRegistry:
    """
    Registro canônico de entidades de configuração.

    Uso:
        registry = ConfigRegistry(sources=[EnvSource(), FileSource("app.yaml")])
        port = registry.as_integer("PORT").fetch().fit(1, 65535).with_default(8080).value
        registry.validate_all().raise_for_missing()

    A ordem das fontes define a precedência: a primeira fonte cujo
    candidato sobrevive ao pipeline vence.
    """

    sources: List[ValueSource] = field(default_factory=list)
    resolvers: List[SecondaryResolver] = field(default_factory=list)
    _entities: List[EntityFacet] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.sources = list(self.sources)
        self.resolvers = list(self.resolvers)

    def add_source(self, source: ValueSource) -> "ConfigRegistry":
        self.sources.append(source)
        return self

    def add_resolver(self, resolver: SecondaryResolver) -> "ConfigRegistry":
        self.resolvers.append(resolver)
        return self

    # -----------------------------
    # Fábricas
    # -----------------------------

    def as_string(self, key: str) -> Entity[Optional[str]]:
        return self._create(Entity, key, ValueKind.STRING, convert_string, None)

    def as_integer(self, key: str) -> NumericEntity[int]:
        return self._create(NumericEntity, key, ValueKind.INTEGER, convert_integer, 0)

    def as_decimal(self, key: str) -> NumericEntity[Decimal]:
        return self._create(NumericEntity, key, ValueKind.DECIMAL, convert_decimal, Decimal("0"))

    def as_boolean(self, key: str) -> Entity[bool]:
        return self._create(Entity, key, ValueKind.BOOLEAN, convert_boolean, False)

    def as_strings(self, key: str) -> Entity[Optional[List[str]]]:
        return self._create(Entity, key, ValueKind.STRINGS, convert_strings, None)

    def as_enum(self, key: str, enum_type: Type[E]) -> Entity[Optional[E]]:
        return self._create(Entity, key, ValueKind.ENUM, enum_converter(enum_type), None)

    def _create(self, cls, key, kind, converter, default):
        entity = cls(
            key,
            kind,
            converter,
            default,
            self.sources,
            self.resolvers,
            _token=_REGISTRY_TOKEN,
        )
        self._entities.append(entity)
        return entity

    # -----------------------------
    # Consulta e validação
    # -----------------------------

    def entities(self) -> List[EntityFacet]:
        return list(self._entities)

    def keys(self) -> List[str]:
        return [e.key for e in self._entities]

    def validate_all(self, strict: bool = False) -> ValidationResult:
        """
        Verifica se toda entidade obrigatória recebeu ao menos um candidato.

        Modo padrão: todas as chaves ausentes são reportadas juntas em um
        `ValidationResult`. Modo estrito: levanta `RequiredValueMissingError`
        na primeira chave ausente.

        Warnings das entidades (ex.: default + require) são coletados no
        resultado e não afetam `ok`.
        """
        missing: List[str] = []
        errors: List[MissingValuePayload] = []
        warnings: Dict[str, List[str]] = {}

        for entity in self._entities:
            entity_warnings = list(getattr(entity, "warnings", []) or [])
            if entity_warnings:
                warnings.setdefault(entity.key, []).extend(entity_warnings)

            if entity.is_required and not entity.has_value:
                if strict:
                    raise RequiredValueMissingError(entity.key)
                missing.append(entity.key)
                errors.append(required_value_missing(key=entity.key))

        return ValidationResult(missing=missing, errors=errors, warnings=warnings)
