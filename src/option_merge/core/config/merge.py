# src/option_merge/core/config/merge.py
"""
Deep-merge tipado de settings.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total
    - escalar → sobrescrita direta
    - conflito de tipos → `ConfigTypeConflictError`

Esta política vale apenas para settings e arquivos de configuração. O
merge de opções de componentes segue as estratégias por campo de
`option_merge.core.options.strategies`.
"""

from copy import deepcopy
from typing import Any, Dict, List

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` sem mutar nenhum dos dois.

    Args:
        base (Dict[str, Any]): Settings base (ex.: defaults embutidos).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novo dicionário resolvido.

    Raises:
        ConfigTypeConflictError: Se uma chave mudar de tipo entre base e override.
    """
    return _merge(base, override, [])


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: List[str]) -> Dict[str, Any]:
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requires dicts at '{_dotted(path)}', got: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        if key not in result:
            result[key] = deepcopy(value)
            continue

        current = result[key]

        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = _merge(current, value, path + [key])
            continue

        if isinstance(value, list) and isinstance(current, list):
            result[key] = deepcopy(value)
            continue

        # None em qualquer lado não conta como conflito
        if current is not None and value is not None and type(current) is not type(value):
            raise ConfigTypeConflictError(
                f"Type conflict at '{_dotted(path + [key])}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )

        result[key] = deepcopy(value)

    return result


def _dotted(path: List[str]) -> str:
    return ".".join(path) or "<root>"
