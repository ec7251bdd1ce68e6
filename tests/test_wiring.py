# tests/test_wiring.py
"""
Testes de montagem explícita do registry (`create_registry`).
"""

import pytest

from confmgmt import create_registry
from confmgmt.resolvers.secrets import MappingSecretResolver
from confmgmt.sources.env import EnvSource
from confmgmt.sources.memory import MappingSource


def test_sources_keep_declared_order():
    first = MappingSource({"K": "first"})
    second = MappingSource({"K": "second"})

    registry = create_registry(first, second)

    assert registry.sources == [first, second]
    assert registry.as_string("K").fetch().value == "first"


def test_source_classes_are_instantiated():
    registry = create_registry(EnvSource)

    assert isinstance(registry.sources[0], EnvSource)


def test_non_source_is_rejected():
    with pytest.raises(TypeError, match="does not implement ValueSource"):
        create_registry(object())


def test_resolvers_are_validated_and_registered():
    resolver = MappingSecretResolver({"a": "b"})

    registry = create_registry(resolvers=[resolver])

    assert registry.resolvers == [resolver]
    with pytest.raises(TypeError, match="does not implement SecondaryResolver"):
        create_registry(resolvers=["not-a-resolver"])
