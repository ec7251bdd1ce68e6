# src/confmgmt/sources/file.py
"""
Fonte de valores baseada em arquivo estruturado (YAML ou JSON).

O arquivo é carregado uma única vez, na construção da fonte, e achatado
em um índice chave → string:

    database:
      host: db.local        →  "database:host" = "db.local"
      ports: [5432, 5433]   →  "database:ports" = "5432,5433"
    debug: true             →  "debug" = "true"

Política de busca (`try_get`):
    1. chave completa, sem distinção de caixa (`.` e `/` equivalem a `:`)
    2. último segmento de uma chave armazenada (split em `/ \\ : . ,`)

Valores no formato JSON com propriedade `uri` (ex.: `{"uri": "https://..."}`)
são reduzidos à URI, permitindo apontar para segredos externos.

Invariantes:
    - O conteúdo raiz do arquivo deve ser um mapa
    - Arquivo vazio equivale a mapa vazio
    - `try_get` nunca levanta exceção

Limites explícitos:
    - Não recarrega o arquivo após a construção
    - Não faz merge entre arquivos; use várias fontes em ordem de precedência
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Tuple, Union
import json
import re

import yaml  # PyYAML

from ..core.errors import (
    InvalidSourceRootTypeError,
    SourceFileNotFoundError,
    UnsupportedSourceFormatError,
)
from ..core.result import Result

_SEGMENT_SPLIT = re.compile(r"[/\\:.,]")


def load_source_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Args:
        path (Path): Caminho para o arquivo.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo como dicionário.

    Raises:
        SourceFileNotFoundError: Se o arquivo não existir.
        UnsupportedSourceFormatError: Se o formato do arquivo não for suportado.
        InvalidSourceRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SourceFileNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
        data = json.loads(text) if text.strip() else None

    else:
        raise UnsupportedSourceFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidSourceRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _scalar_to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(data: Dict[str, Any], prefix: str = "") -> Iterator[Tuple[str, str]]:
    for key, value in data.items():
        path = f"{prefix}:{key}" if prefix else str(key)

        if isinstance(value, dict):
            yield from _flatten(value, path)
        elif isinstance(value, list):
            # lista de escalares vira texto delimitado por vírgula (formato STRINGS)
            items = [_scalar_to_text(v) for v in value if v is not None and not isinstance(v, (dict, list))]
            if items:
                yield path, ",".join(items)
        elif value is None:
            continue
        else:
            yield path, _scalar_to_text(value)


def _unwrap_uri(text: str) -> str:
    stripped = text.strip()
    if not (stripped.startswith("{") and stripped.endswith("}")):
        return text
    try:
        parsed = json.loads(stripped)
    except ValueError:
        return text
    if isinstance(parsed, dict) and isinstance(parsed.get("uri"), str):
        return parsed["uri"]
    return text


def _normalize(key: str) -> str:
    return key.strip().replace(".", ":").replace("/", ":").lower()


class FileSource:
    """
    Fonte de valores lida de um arquivo YAML/JSON.

    Args:
        path: caminho do arquivo.
        optional: quando verdadeiro, arquivo ausente equivale a fonte vazia;
            quando falso, levanta `SourceFileNotFoundError` na construção.
    """

    def __init__(self, path: Union[str, Path], optional: bool = True) -> None:
        self.path = Path(path)
        self.optional = optional
        self._settings: Dict[str, str] = {}
        self._index: Dict[str, str] = {}

        if not self.path.exists() and optional:
            return

        data = load_source_file(self.path)
        for key, text in _flatten(data):
            if not text.strip():
                continue
            value = _unwrap_uri(text)
            self._settings[key] = value
            self._index.setdefault(_normalize(key), value)

    def __repr__(self) -> str:
        return f"FileSource(path={str(self.path)!r}, settings={len(self._settings)})"

    @property
    def settings(self) -> Dict[str, str]:
        return dict(self._settings)

    def try_get(self, key: str) -> Result[str]:
        if not isinstance(key, str) or not key.strip():
            return Result.fail("The key was null or empty.")

        value = self._index.get(_normalize(key))
        if value is not None:
            return Result.ok(value)

        wanted = key.strip().lower()
        for stored_key, stored_value in self._settings.items():
            last_part = _SEGMENT_SPLIT.split(stored_key)[-1]
            if last_part.lower() == wanted:
                return Result.ok(stored_value)

        return Result.fail("The key was not found.")
