# tests/resolvers/test_secret_resolvers.py
"""
Testes dos resolvers secundários de segredos e do estágio `Entity.resolve()`.

Decisões arquiteturais:
    - Resolução é estrita: falha descarta o candidato
    - Apenas resolvers cujo `kind` corresponde ao formato da entidade são usados
"""

from pathlib import Path

from confmgmt.core.registry import ConfigRegistry
from confmgmt.core.result import Result
from confmgmt.core.types import ValueKind
from confmgmt.resolvers.secrets import (
    FileSecretResolver,
    MappingSecretResolver,
    decompose_reference,
)
from confmgmt.sources.memory import MappingSource


def test_decompose_reference_with_and_without_version():
    assert decompose_reference("secret://db", "secret://").value == ("db", None)
    assert decompose_reference("secret://db/v2", "secret://").value == ("db", "v2")
    assert decompose_reference("secret://db/v2/extra", "secret://").is_failure
    assert decompose_reference("https://db", "secret://").is_failure
    assert decompose_reference("", "secret://").is_failure


def test_mapping_secret_resolver():
    resolver = MappingSecretResolver({"db": "latest", "db/v1": "old"})

    assert resolver.kind == ValueKind.STRING
    assert resolver.resolve("secret://db").value == "latest"
    assert resolver.resolve("secret://db/v1").value == "old"
    assert resolver.resolve("secret://unknown").is_failure
    assert resolver.resolve("plain-text").is_failure


def test_file_secret_resolver(tmp_path: Path):
    secret_file = tmp_path / "db_password"
    secret_file.write_text("  p4ss\n", encoding="utf-8")
    resolver = FileSecretResolver()

    assert resolver.resolve(f"file://{secret_file}").value == "p4ss"
    assert resolver.resolve(f"file://{tmp_path / 'missing'}").is_failure
    assert resolver.resolve("secret://db").is_failure


def test_file_secret_resolver_relative_to_base_dir(tmp_path: Path):
    (tmp_path / "token").write_text("abc", encoding="utf-8")

    resolver = FileSecretResolver(base_dir=tmp_path)

    assert resolver.resolve("file://token").value == "abc"


def test_entity_resolve_dereferences_candidate():
    registry = ConfigRegistry(
        sources=[MappingSource({"KEY_VAULT_EXAMPLE": "secret://api-key"})],
        resolvers=[MappingSecretResolver({"api-key": "resolved-value"})],
    )

    entity = registry.as_string("KEY_VAULT_EXAMPLE").fetch().resolve()

    assert entity.value == "resolved-value"


def test_unresolvable_candidate_is_dropped_and_next_wins():
    registry = ConfigRegistry(resolvers=[MappingSecretResolver({"good": "ok"})])

    entity = (
        registry.as_string("S")
        .set_literal("secret://missing")
        .set_literal("secret://good")
        .resolve()
        .with_default("fallback")
    )

    assert entity.value == "ok"


def test_without_resolve_reference_is_kept_verbatim():
    registry = ConfigRegistry(resolvers=[MappingSecretResolver({"api-key": "x"})])

    entity = registry.as_string("S").set_literal("secret://api-key")

    assert entity.value == "secret://api-key"


def test_resolvers_of_other_kinds_are_ignored():
    class DoublingResolver:
        kind = ValueKind.INTEGER

        def resolve(self, value):
            return Result.ok(value * 2)

    registry = ConfigRegistry(resolvers=[DoublingResolver(), MappingSecretResolver({})])

    number = registry.as_integer("N").set_literal("21").resolve()
    text = registry.as_string("S").set_literal("plain").resolve().with_default("d")

    assert number.value == 42
    assert text.value == "d"


def test_resolvers_are_chained_in_registration_order():
    registry = ConfigRegistry(
        resolvers=[
            MappingSecretResolver({"outer": "secret://inner"}),
            MappingSecretResolver({"inner": "final"}),
        ]
    )

    entity = registry.as_string("S").set_literal("secret://outer").resolve()

    assert entity.value == "final"


def test_resolution_runs_before_validation():
    registry = ConfigRegistry(resolvers=[MappingSecretResolver({"pw": "short"})])

    entity = (
        registry.as_string("PASSWORD")
        .set_literal("secret://pw")
        .resolve()
        .add_validator(lambda v: len(v) >= 8)
        .with_default("default-password")
    )

    assert entity.value == "default-password"


def test_resolvers_added_after_resolve_are_applied():
    registry = ConfigRegistry()
    entity = registry.as_string("S").set_literal("secret://a").resolve()

    registry.add_resolver(MappingSecretResolver({"a": "A"}))

    assert entity.value == "A"


def test_resolver_added_after_read_invalidates_cache():
    registry = ConfigRegistry()
    entity = registry.as_string("S").set_literal("secret://a").resolve()
    assert entity.value == "secret://a"

    registry.add_resolver(MappingSecretResolver({"a": "A"}))

    assert entity.dirty is True
    assert entity.value == "A"
