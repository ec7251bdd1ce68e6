# src/confmgmt/wiring.py
"""
Montagem explícita do registry.

`create_registry` substitui a descoberta implícita de serviços: fontes e
resolvers são passados diretamente, na ordem de precedência desejada.
Classes também são aceitas e instanciadas sem argumentos.

Decisões arquiteturais:
    - Objetos que não satisfazem os protocolos são rejeitados imediatamente
    - Nenhum estado global é mantido
"""

from __future__ import annotations

from typing import Any, Iterable

from .core.interfaces import SecondaryResolver, ValueSource
from .core.registry import ConfigRegistry


def _instantiate(candidate: Any) -> Any:
    if isinstance(candidate, type):
        return candidate()
    return candidate


def create_registry(*sources: Any, resolvers: Iterable[Any] = ()) -> ConfigRegistry:
    """
    Cria um `ConfigRegistry` com as fontes e resolvers informados.

    Raises:
        TypeError: Se uma fonte não implementar `ValueSource` ou um resolver
            não implementar `SecondaryResolver`.
    """
    registry = ConfigRegistry()

    for candidate in sources:
        source = _instantiate(candidate)
        if not isinstance(source, ValueSource):
            raise TypeError(f"Type {type(source).__name__} does not implement ValueSource.")
        registry.add_source(source)

    for candidate in resolvers:
        resolver = _instantiate(candidate)
        if not isinstance(resolver, SecondaryResolver):
            raise TypeError(f"Type {type(resolver).__name__} does not implement SecondaryResolver.")
        registry.add_resolver(resolver)

    return registry
