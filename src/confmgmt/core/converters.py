# src/confmgmt/core/converters.py
"""
Conversores embutidos: string bruta → valor tipado.

Cada formato suportado (`ValueKind`) possui exatamente uma estratégia de
conversão, escolhida pelo registry no momento da construção da entidade.
Não existe despacho em runtime por tipo.

Regras (v1):
    - string: qualquer texto não vazio passa inalterado; vazio é descartado
    - integer: sinal opcional + dígitos ASCII (espaços nas bordas ignorados)
    - decimal: `decimal.Decimal` em ponto fixo; expoente e NaN/Infinity são descartados
    - boolean: vocabulário estendido, sem distinção de caixa
    - strings: split por vírgula, trim, elementos vazios removidos;
      resultado totalmente vazio é descartado ("sem valor", não lista vazia)
    - enum: nome de membro, sem distinção de caixa

Invariantes:
    - Conversores nunca levantam exceção; falha é `Result.fail`
    - A mesma entrada sempre produz o mesmo resultado
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, FrozenSet, List, Optional, Type

from .result import Result

TRUTHY: FrozenSet[str] = frozenset(
    {"true", "t", "yes", "y", "1", "active", "enabled", "activated"}
)
FALSY: FrozenSet[str] = frozenset(
    {"false", "f", "no", "n", "0", "inactive", "disabled", "deactivated"}
)


# -----------------------------
# Helpers
# -----------------------------

def _is_blank(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, str) and v.strip() == "":
        return True
    return False


def parse_bool(text: Any) -> Optional[bool]:
    """Interpreta `text` com o vocabulário estendido; None quando não reconhecido."""
    if _is_blank(text):
        return None
    s = str(text).strip().lower()
    if s in TRUTHY:
        return True
    if s in FALSY:
        return False
    return None


# -----------------------------
# Estratégias
# -----------------------------

def convert_string(raw: str) -> Result[str]:
    if _is_blank(raw):
        return Result.fail("blank value")
    return Result.ok(raw)


def convert_integer(raw: str) -> Result[int]:
    if _is_blank(raw):
        return Result.fail("blank value")

    s = raw.strip()
    digits = s[1:] if s.startswith(("+", "-")) else s

    # isdigit aceita dígitos unicode (ex.: "²"), por isso isascii
    if not digits.isdigit() or not digits.isascii():
        return Result.fail(f"not an integer: {raw!r}")

    return Result.ok(int(s))


def convert_decimal(raw: str) -> Result[Decimal]:
    if _is_blank(raw):
        return Result.fail("blank value")

    s = raw.strip()
    # ponto fixo: sem separador "_" e sem notação exponencial
    if "_" in s or "e" in s.lower():
        return Result.fail(f"not a decimal: {raw!r}")

    try:
        value = Decimal(s)
    except InvalidOperation:
        return Result.fail(f"not a decimal: {raw!r}")

    if not value.is_finite():
        return Result.fail(f"not a finite decimal: {raw!r}")

    return Result.ok(value)


def convert_boolean(raw: str) -> Result[bool]:
    parsed = parse_bool(raw)
    if parsed is None:
        return Result.fail(f"not a boolean: {raw!r}")
    return Result.ok(parsed)


def convert_strings(raw: str) -> Result[List[str]]:
    if _is_blank(raw):
        return Result.fail("blank value")

    items = [part.strip() for part in raw.split(",")]
    items = [item for item in items if item]

    if not items:
        return Result.fail("no elements")

    return Result.ok(items)


def enum_converter(enum_type: Type[Enum]) -> Callable[[str], Result[Enum]]:
    """
    Cria a estratégia de conversão para um `enum.Enum` específico.

    A correspondência é feita pelo nome do membro (não pelo valor),
    sem distinção de caixa. Aliases declarados no enum também são aceitos.
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"enum_type must be an Enum subclass, got: {enum_type!r}")

    by_name = {name.lower(): member for name, member in enum_type.__members__.items()}

    def convert(raw: str) -> Result[Enum]:
        if _is_blank(raw):
            return Result.fail("blank value")
        member = by_name.get(raw.strip().lower())
        if member is None:
            return Result.fail(f"not a member of {enum_type.__name__}: {raw!r}")
        return Result.ok(member)

    convert.__name__ = f"convert_{enum_type.__name__.lower()}"
    return convert
