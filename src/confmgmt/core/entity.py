# src/confmgmt/core/entity.py
"""
Entidade de configuração: pipeline de resolução de uma única chave.

Uma `Entity` acumula candidatos brutos (strings) vindos de fontes ou de
literais explícitos e, sob demanda, os converte, filtra, transforma e
seleciona até chegar a um único valor tipado.

Pipeline (executado de forma lazy na leitura de `value`):
    1. Conversão    → conversor customizado ou estratégia embutida do formato
    2. Resolução    → resolvers secundários (opcional, estrito)
    3. Validação    → filtro estrito: todos os validadores devem passar
    4. Transformação → best-effort: falha mantém o valor como está
    5. Seleção      → primeiro sobrevivente na ordem de inserção, senão default

Política de precedência:
    - "primeiro válido vence", não "último registrado vence"
    - Um candidato anterior que falha em qualquer estágio cede lugar
      ao próximo candidato, mesmo que de fonte de menor prioridade

Cache:
    - Toda mutação de candidatos, conversor, validadores, transformações,
      resolução ou default marca a entidade como suja (`dirty`)
    - A leitura de `value` recalcula apenas quando suja
    - Resolvers acrescentados ao registry após `resolve()` também sujam a entidade
    - `value` e `default` nunca expõem a lista interna do cache

Invariantes:
    - `key` é não vazia e imutável
    - `has_value` é verdadeiro sse existe ao menos um candidato bruto,
      independentemente de ele sobreviver ao pipeline
    - Nenhum estágio levanta exceção
    - A mesma entrada sempre produz o mesmo valor resolvido

Limites explícitos:
    - Não busca nem armazena dados de fonte além dos candidatos
    - Não é thread-safe (configuração e leitura na mesma fase)
    - Não expõe o motivo do descarte de cada candidato
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar, Union

from .errors import EntityConstructionError
from .interfaces import SecondaryResolver, ValueSource
from .report import ResolutionLog, format_value
from .result import Result
from .types import ValueKind

T = TypeVar("T")

Converter = Callable[[str], Union[Result[T], T]]
Validator = Callable[[T], Union[Result[Any], bool]]
Transform = Callable[[T], Union[Result[T], T]]

# apenas o ConfigRegistry conhece este token
_REGISTRY_TOKEN = object()


# -----------------------------
# Helpers: normalização de retornos
# -----------------------------

def _as_result(fn: Callable[[Any], Any], arg: Any) -> Result[Any]:
    """Executa `fn(arg)` e normaliza o retorno em `Result`.

    - `Result` é usado como está
    - `None` conta como falha (sem valor)
    - qualquer outro retorno é sucesso
    - exceção conta como falha
    """
    try:
        returned = fn(arg)
    except Exception as exc:  # noqa: BLE001
        return Result.fail(f"{exc.__class__.__name__}: {exc}")

    if isinstance(returned, Result):
        return returned
    if returned is None:
        return Result.fail("no value")
    return Result.ok(returned)


def _detached(value: Any) -> Any:
    # listas (formato STRINGS) nunca são compartilhadas com o chamador
    if isinstance(value, list):
        return list(value)
    return value


def _frozen(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    return value


def _passes(validator: Validator, value: Any) -> bool:
    try:
        returned = validator(value)
    except Exception:  # noqa: BLE001
        return False

    if isinstance(returned, Result):
        return returned.is_success
    return bool(returned)


@dataclass(frozen=True)
class SealedEntity(Generic[T]):
    """
    Snapshot imutável de uma entidade já resolvida.

    Produzido por `Entity.seal()`; representa a segunda fase da API
    (configurar → selar → ler). Não recalcula nada.

    Valores lista (formato STRINGS) são congelados em tupla.
    """

    key: str
    kind: ValueKind
    value: T
    has_value: bool
    is_required: bool


class Entity(Generic[T]):
    """
    Pipeline de resolução tipada para uma única chave de configuração.

    Instâncias são criadas exclusivamente pelas fábricas do
    `ConfigRegistry` (`as_string`, `as_integer`, `as_decimal`,
    `as_boolean`, `as_strings`, `as_enum`). Construção direta levanta
    `EntityConstructionError`.

    Todos os métodos de configuração retornam a própria entidade,
    permitindo encadeamento fluente:

        timeout = (
            registry.as_integer("TIMEOUT")
            .fetch()
            .add_validator(lambda v: v > 0)
            .with_default(30)
            .value
        )
    """

    def __init__(
        self,
        key: str,
        kind: ValueKind,
        converter: Callable[[str], Result[T]],
        default: Optional[T],
        sources: Sequence[ValueSource] = (),
        resolvers: Sequence[SecondaryResolver] = (),
        *,
        _token: object = None,
    ) -> None:
        if _token is not _REGISTRY_TOKEN:
            raise EntityConstructionError(
                "Entity must be created from ConfigRegistry (use registry.as_<kind>(key))."
            )
        if not isinstance(key, str) or not key.strip():
            raise ValueError("entity key must be a non-empty string")

        self._key = key
        self._kind = kind
        self._builtin = converter
        self._sources = sources
        self._available_resolvers = resolvers

        self._raw: List[str] = []
        self._converter: Optional[Converter] = None
        self._validators: List[Validator] = []
        self._transforms: List[Transform] = []
        self._resolve_enabled = False
        self._resolvers_seen: Tuple[SecondaryResolver, ...] = ()
        self._default: Optional[T] = default
        self._has_default = False
        self._required = False
        self._warned = False

        self._dirty = True
        self._cached: Optional[T] = default

        self.warnings: List[str] = []

    def __repr__(self) -> str:
        return f"Entity(key={self._key!r}, kind={self._kind.value}, candidates={len(self._raw)})"

    # -----------------------------
    # Faceta pública
    # -----------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def has_value(self) -> bool:
        return len(self._raw) > 0

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def dirty(self) -> bool:
        return self._dirty or self._active_resolvers() != self._resolvers_seen

    @property
    def candidates(self) -> Tuple[str, ...]:
        return tuple(self._raw)

    @property
    def default(self) -> Optional[T]:
        return _detached(self._default)

    @property
    def value(self) -> T:
        """Valor resolvido; recalcula apenas se a entidade estiver suja."""
        if self.dirty:
            self._cached = self._compute()
            self._dirty = False
        return _detached(self._cached)  # type: ignore[return-value]

    # -----------------------------
    # Acúmulo de candidatos
    # -----------------------------

    def fetch(self, key: Optional[str] = None) -> "Entity[T]":
        """
        Consulta todas as fontes do registry, em ordem, pela chave da entidade.

        Cada fonte que responde com sucesso contribui um candidato; todos
        os sucessos são mantidos. `key` permite consultar uma chave
        diferente da chave da entidade (override).
        """
        return self.fetch_from(*self._sources, key=key)

    def fetch_from(self, *sources: ValueSource, key: Optional[str] = None) -> "Entity[T]":
        lookup = self._key if key is None else key

        for source in sources:
            result = source.try_get(lookup)
            if result.is_success and result.value is not None:
                self._raw.append(result.value)
                self._dirty = True

        return self

    def set_literal(self, value: Any) -> "Entity[T]":
        """Acrescenta um candidato bruto explícito (override inline)."""
        if value is None:
            return self
        self._raw.append(value if isinstance(value, str) else str(value))
        self._dirty = True
        return self

    # -----------------------------
    # Política
    # -----------------------------

    def with_default(self, value: T) -> "Entity[T]":
        self._default = _detached(value)
        self._has_default = True
        self._dirty = True
        if self._required:
            self._warn_default_and_required()
        return self

    def with_converter(self, fn: Converter) -> "Entity[T]":
        self._converter = fn
        self._dirty = True
        return self

    def add_validator(self, fn: Validator) -> "Entity[T]":
        self._validators.append(fn)
        self._dirty = True
        return self

    def add_transform(self, fn: Transform) -> "Entity[T]":
        self._transforms.append(fn)
        self._dirty = True
        return self

    def require(self) -> "Entity[T]":
        """
        Marca a entidade como obrigatória.

        `ConfigRegistry.validate_all` reporta a chave quando nenhum candidato
        foi acumulado. Defaults não satisfazem a obrigatoriedade; combinar
        `with_default` e `require` gera um warning na entidade.
        """
        if not self._required and self._has_default:
            self._warn_default_and_required()
        self._required = True
        return self

    def resolve(self) -> "Entity[T]":
        """
        Ativa o estágio de resolução secundária.

        Usa os resolvers do registry cujo `kind` corresponde ao formato da
        entidade, encadeados na ordem de registro. Falha de qualquer
        resolver descarta o candidato.

        A lista de resolvers é lida a cada recálculo: resolvers acrescentados
        ao registry depois desta chamada também são aplicados.
        """
        self._resolve_enabled = True
        self._dirty = True
        return self

    # -----------------------------
    # Saída
    # -----------------------------

    def print(self, secret: bool = False) -> "Entity[T]":
        print(f"{self._key} = '{format_value(self, secret)}'")
        return self

    def log(self, log: ResolutionLog, secret: bool = False, level: str = "INFO") -> "Entity[T]":
        log.record(key=self._key, value=format_value(self, secret), level=level)
        return self

    def seal(self) -> SealedEntity[T]:
        return SealedEntity(
            key=self._key,
            kind=self._kind,
            value=_frozen(self.value),
            has_value=self.has_value,
            is_required=self._required,
        )

    # -----------------------------
    # Pipeline
    # -----------------------------

    def _active_resolvers(self) -> Tuple[SecondaryResolver, ...]:
        if not self._resolve_enabled:
            return ()
        return tuple(r for r in self._available_resolvers if r.kind == self._kind)

    def _compute(self) -> Optional[T]:
        convert = self._converter or self._builtin
        self._resolvers_seen = self._active_resolvers()

        converted: List[Any] = []
        for raw in self._raw:
            outcome = _as_result(convert, raw)
            if outcome.is_success:
                converted.append(outcome.value)

        resolved: List[Any] = []
        for value in converted:
            outcome = self._resolve_one(value)
            if outcome.is_success:
                resolved.append(outcome.value)

        valid = [v for v in resolved if all(_passes(fn, v) for fn in self._validators)]

        transformed: List[Any] = []
        for value in valid:
            current = value
            for fn in self._transforms:
                outcome = _as_result(fn, current)
                if outcome.is_success:
                    current = outcome.value
            transformed.append(current)

        if transformed:
            return transformed[0]
        return self._default

    def _resolve_one(self, value: Any) -> Result[Any]:
        current = value
        for resolver in self._resolvers_seen:
            outcome = _as_result(resolver.resolve, current)
            if outcome.is_failure:
                return outcome
            current = outcome.value
        return Result.ok(current)

    def _warn_default_and_required(self) -> None:
        if self._warned:
            return
        self._warned = True
        self.warnings.append(
            f"'{self._key}' sets both a default and require(); "
            "the default never satisfies the required check"
        )


class NumericEntity(Entity[T]):
    """Entidade numérica (integer/decimal); acrescenta `fit`."""

    def fit(self, minimum: T, maximum: T) -> "NumericEntity[T]":
        """
        Limita o valor resolvido ao intervalo [minimum, maximum].

        Implementado como transformação: valores fora do intervalo são
        ajustados ao limite mais próximo, nunca descartados.
        """
        if maximum < minimum:  # type: ignore[operator]
            raise ValueError("The min value cannot be greater than the max value.")

        def clamp(value: T) -> T:
            if value < minimum:  # type: ignore[operator]
                return minimum
            if value > maximum:  # type: ignore[operator]
                return maximum
            return value

        self.add_transform(clamp)
        return self
