# src/confmgmt/sources/memory.py
from __future__ import annotations

from typing import Dict, Mapping

from ..core.result import Result


class MappingSource:
    """Fonte em memória sobre um mapa chave → string (testes, overrides programáticos)."""

    def __init__(self, values: Mapping[str, str], case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive
        self._values: Dict[str, str] = {
            (k if case_sensitive else k.lower()): v for k, v in values.items()
        }

    def try_get(self, key: str) -> Result[str]:
        if not isinstance(key, str) or not key.strip():
            return Result.fail("The key was null or empty.")

        lookup = key if self.case_sensitive else key.lower()
        value = self._values.get(lookup)
        if value is None:
            return Result.fail("The key was not found.")
        if not isinstance(value, str):
            value = str(value)
        if not value.strip():
            return Result.fail("The key was not found.")
        return Result.ok(value)
