"""
Typed parameter access for similarity definitions, and helpers that turn raw index settings
(nested JSON objects or flat dotted keys) into one flat section per declared similarity.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from similarity_service.services.similarity.errors import (
    MissingParameterError,
    ParameterRangeError,
    ParameterTypeError,
    SimilarityConfigError,
)

T = TypeVar("T")

SIMILARITY_SETTINGS_PREFIX = "index.similarity."

# Lax pydantic coercion: "3" reads as 3.0; "true"/"off"/1/0 read as booleans
_ADAPTERS: dict[type, TypeAdapter] = {t: TypeAdapter(t) for t in (bool, int, float, str)}

_RANGE_BOUNDS = {
    "greater_than": ("gt", ">"),
    "greater_than_equal": ("ge", ">="),
    "less_than": ("lt", "<"),
    "less_than_equal": ("le", "<="),
}


def flatten_settings(settings: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested settings into dotted keys: {"index": {"similarity": {"a": {"type": "BM25"}}}}
    becomes {"index.similarity.a.type": "BM25"}. Keys that are already dotted pass through, so
    flat and nested input may be mixed.
    """
    flat: dict[str, Any] = {}
    for key, value in settings.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_settings(value, prefix=f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


def group_settings(
    settings: Mapping[str, Any],
    prefix: str = SIMILARITY_SETTINGS_PREFIX,
) -> dict[str, dict[str, Any]]:
    """
    Split settings under `prefix` into one section per name, keyed relative to that name:
    "index.similarity.my_sim.k1" lands in result["my_sim"]["k1"]. Keys outside the prefix are
    ignored. Raises SimilarityConfigError for a value set directly on a name with no sub-key.
    """
    groups: dict[str, dict[str, Any]] = {}
    for key, value in flatten_settings(settings).items():
        if not key.startswith(prefix):
            continue
        name, dot, sub_key = key[len(prefix):].partition(".")
        if not name or not dot or not sub_key:
            raise SimilarityConfigError(
                f"Setting [{key}] must name a similarity and a parameter, e.g. [{prefix}<name>.type]"
            )
        groups.setdefault(name, {})[sub_key] = value
    return groups


def parameter_error(
    scope: str,
    error: ValidationError,
    expected_types: Mapping[str, type],
    key: str | None = None,
) -> SimilarityConfigError:
    """
    Translate the first pydantic error into MissingParameterError, ParameterRangeError or
    ParameterTypeError. `key` names the parameter when the error carries no location (TypeAdapter).
    """
    detail = error.errors()[0]
    loc = detail["loc"]
    name = str(loc[0]) if loc else key or scope
    value = detail.get("input")
    kind = detail["type"]
    if kind == "missing":
        return MissingParameterError(scope, name)
    if kind == "finite_number":
        return ParameterRangeError(scope, name, value, "a finite number")
    if kind in _RANGE_BOUNDS:
        bound, symbol = _RANGE_BOUNDS[kind]
        return ParameterRangeError(scope, name, value, f"{symbol} {detail['ctx'][bound]}")
    return ParameterTypeError(scope, name, value, expected_types.get(name, object))


class ParameterBag:
    """
    Read-only, typed view over the flat parameters of one similarity or sub-model.

    Keys are relative to the owner ("k1", "normalization", "normalization.h2.c"). A missing key,
    or one explicitly set to None, yields the caller's default; a present value that cannot be
    read as the requested type raises ParameterTypeError.
    """

    def __init__(self, scope: str, values: Mapping[str, Any] | None = None) -> None:
        self.scope = scope
        self._values = MappingProxyType(dict(values or {}))

    def __contains__(self, key: object) -> bool:
        return self._values.get(key) is not None  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f"ParameterBag({self.scope!r}, {dict(self._values)!r})"

    def keys(self) -> list[str]:
        return [k for k, v in self._values.items() if v is not None]

    def as_dict(self) -> dict[str, Any]:
        return {k: v for k, v in self._values.items() if v is not None}

    def pick(self, *keys: str) -> dict[str, Any]:
        """Raw values of the given keys that are present; absent keys are left to model defaults."""
        return {k: self._values[k] for k in keys if self._values.get(k) is not None}

    def get(self, key: str, expected_type: type[T], default: T | None = None) -> T | None:
        """Return the value for key read as expected_type (bool, int, float or str), or default when absent."""
        value = self._values.get(key)
        if value is None:
            return default
        return self._coerce(key, value, expected_type)

    def require(self, key: str, expected_type: type[T]) -> T:
        """Like get(), but an absent key raises MissingParameterError."""
        value = self._values.get(key)
        if value is None:
            raise MissingParameterError(self.scope, key)
        return self._coerce(key, value, expected_type)

    def section(self, prefix: str) -> "ParameterBag":
        """Return the bag of keys under `prefix.` with the prefix stripped."""
        start = f"{prefix}."
        scoped = {k[len(start):]: v for k, v in self._values.items() if k.startswith(start)}
        return ParameterBag(f"{self.scope}.{prefix}", scoped)

    def _coerce(self, key: str, value: Any, expected_type: type) -> Any:
        adapter = _ADAPTERS.get(expected_type)
        if adapter is None:
            raise TypeError(f"Unsupported parameter type: {expected_type!r}")
        try:
            return adapter.validate_python(value)
        except ValidationError as e:
            raise parameter_error(self.scope, e, {key: expected_type}, key=key) from e
