# src/confmgmt/sources/env.py
"""Fontes de valores baseadas em variáveis de ambiente e arquivos `.env`."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..core.result import Result


def parse_env_lines(text: str) -> Dict[str, str]:
    """Interpreta linhas `KEY=VALUE`; ignora comentários, linhas vazias e linhas sem `=`."""
    data: Dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


class EnvSource:
    """
    Lê variáveis de ambiente no momento da consulta.

    `environ` permite injetar um mapa alternativo (por padrão, `os.environ`).
    Valores vazios ou em branco contam como não encontrados.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def try_get(self, key: str) -> Result[str]:
        if not isinstance(key, str) or not key.strip():
            return Result.fail("The key was null or empty.")

        environ = os.environ if self._environ is None else self._environ
        value = environ.get(key)
        if value is not None and value.strip():
            return Result.ok(value)

        return Result.fail("The key was not found.")


class DotEnvSource:
    """
    Lê um arquivo `.env` uma única vez, na construção.

    Arquivo ausente equivale a fonte vazia. O ambiente do processo não é
    alterado; combine com `EnvSource` na ordem de precedência desejada.
    """

    def __init__(self, path: Union[str, Path] = ".env", encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self._values: Dict[str, str] = {}
        if self.path.is_file():
            self._values = parse_env_lines(self.path.read_text(encoding=encoding))

    def __repr__(self) -> str:
        return f"DotEnvSource(path={str(self.path)!r}, values={len(self._values)})"

    def try_get(self, key: str) -> Result[str]:
        if not isinstance(key, str) or not key.strip():
            return Result.fail("The key was null or empty.")

        value = self._values.get(key)
        if value is not None and value.strip():
            return Result.ok(value)

        return Result.fail("The key was not found.")
