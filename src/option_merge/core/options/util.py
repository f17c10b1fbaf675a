# src/option_merge/core/options/util.py
"""Utilitários puros de texto e de inspeção de valores usados pelo merge."""

from __future__ import annotations

import inspect
import re
from functools import lru_cache
from typing import Any, Callable, Iterable, List, Mapping, MutableMapping, Optional, Tuple


_CAMELIZE_RE = re.compile(r"-(\w)")


@lru_cache(maxsize=None)
def camelize(name: str) -> str:
    """Converte `dash-case` em `camelCase` (ex.: `my-prop` → `myProp`)."""
    return _CAMELIZE_RE.sub(lambda m: m.group(1).upper(), name)


@lru_cache(maxsize=None)
def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def has_own(obj: Any, key: str) -> bool:
    """Verifica se `key` é uma entrada local de `obj` (sem ancestrais)."""
    own = getattr(obj, "has_own", None)
    if callable(own):
        return bool(own(key))
    if isinstance(obj, Mapping):
        return key in obj
    return False


def to_raw_type(value: Any) -> str:
    if value is None:
        return "None"
    return type(value).__name__


def entries(source: Mapping[str, Any]) -> Iterable[Tuple[str, Any]]:
    """Entradas visíveis de `source`, incluindo as herdadas de registries."""
    flatten = getattr(source, "flatten", None)
    if callable(flatten):
        return flatten().items()
    return source.items()


def extend(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> MutableMapping[str, Any]:
    for key, value in entries(source):
        target[key] = value
    return target


def as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def positional_arity(fn: Callable[..., Any]) -> Optional[int]:
    """
    Quantidade de parâmetros posicionais aceitos por `fn`.

    Retorna None quando `fn` aceita `*args` ou quando a assinatura não pode
    ser inspecionada (ex.: alguns builtins).
    """
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return None
    count = 0
    for param in params:
        if param.kind is param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count
