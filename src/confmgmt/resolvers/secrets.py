# src/confmgmt/resolvers/secrets.py
"""
Resolvers secundários de segredos.

Um resolver recebe um valor já convertido que é, na verdade, uma
referência (ponteiro) e devolve o valor apontado. Ambos os resolvers
deste módulo operam sobre entidades `ValueKind.STRING`.

    - FileSecretResolver:    "file:///run/secrets/db_password" → conteúdo do arquivo
    - MappingSecretResolver: "secret://db-password/v2"         → segredos[...]

Política:
    - Valor que não é uma referência reconhecida → `Result.fail`
    - Referência que não pode ser resolvida → `Result.fail`
    - No pipeline da entidade, falha descarta o candidato
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

from ..core.result import Result
from ..core.types import ValueKind

FILE_SCHEME = "file://"
SECRET_SCHEME = "secret://"


def decompose_reference(reference: str, scheme: str) -> Result[Tuple[str, Optional[str]]]:
    """
    Decompõe `<scheme><nome>[/<versão>]` em (nome, versão).

    Returns:
        Result com a tupla (nome, versão); versão é None quando ausente.
    """
    if not isinstance(reference, str) or not reference.strip():
        return Result.fail("The reference is null or empty.")

    if not reference.lower().startswith(scheme.lower()):
        return Result.fail(f"The reference must start with '{scheme}'")

    parts = reference[len(scheme):].split("/")
    if len(parts) == 1 and parts[0]:
        return Result.ok((parts[0], None))
    if len(parts) == 2 and parts[0] and parts[1]:
        return Result.ok((parts[0], parts[1]))

    return Result.fail(f"The reference format does not appear to be '{scheme}<name>/<version>'.")


class FileSecretResolver:
    """
    Resolve referências `file://<caminho>` para o conteúdo do arquivo (sem espaços nas bordas).

    Caminhos relativos são resolvidos a partir de `base_dir`, quando informado.
    """

    kind = ValueKind.STRING

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resolve(self, value: str) -> Result[str]:
        if not isinstance(value, str) or not value.lower().startswith(FILE_SCHEME):
            return Result.fail(f"The value must start with '{FILE_SCHEME}'")

        path = Path(value[len(FILE_SCHEME):])
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path

        if not path.is_file():
            return Result.fail(f"Secret file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            return Result.fail(f"Secret file could not be read: {exc}")

        if not content:
            return Result.fail(f"Secret file is empty: {path}")
        return Result.ok(content)


class MappingSecretResolver:
    """
    Resolve referências `secret://<nome>[/<versão>]` a partir de um mapa.

    Com versão, busca a chave `"<nome>/<versão>"`; sem versão, busca `"<nome>"`.
    """

    kind = ValueKind.STRING

    def __init__(self, secrets: Mapping[str, str], scheme: str = SECRET_SCHEME) -> None:
        self._secrets = dict(secrets)
        self.scheme = scheme

    def resolve(self, value: str) -> Result[str]:
        decomposed = decompose_reference(value, self.scheme)
        if decomposed.is_failure:
            return Result.fail(decomposed.reason or "invalid reference")

        name, version = decomposed.value  # type: ignore[misc]
        lookup = name if version is None else f"{name}/{version}"

        secret = self._secrets.get(lookup)
        if secret is None:
            return Result.fail(f"Secret '{lookup}' was not found.")
        return Result.ok(secret)
