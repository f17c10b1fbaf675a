# src/option_merge/core/options/__init__.py
"""
# Options Core — merge de opções por estratégia

Este pacote implementa o motor de merge de objetos de opções:

- **strategies** — `StrategyRegistry` e as estratégias por campo
- **normalize** — normalização de props / inject / directives
- **merge** — `OptionMerger` / `merge_options` (extends, mixins, despacho)
- **assets** — `resolve_asset` e validação de nomes de componentes
- **registry** — `AssetRegistry` (mapeamento local + pai)
- **context** — `MergeContext` (avisos tipados, eventos, setter reativo)

Nenhuma anomalia de formato interrompe um merge: tudo vira aviso no
`MergeContext`.
"""

from .assets import check_components, resolve_asset, validate_component_name
from .context import MergeContext, describe_context, plain_set
from .merge import OptionMerger, is_component_type, merge_options
from .normalize import normalize_directives, normalize_inject, normalize_props
from .registry import AssetRegistry
from .strategies import (
    StrategyRegistry,
    default_strategy,
    merge_data,
    merge_data_or_fn,
)

__all__ = [
    "AssetRegistry",
    "MergeContext",
    "OptionMerger",
    "StrategyRegistry",
    "check_components",
    "default_strategy",
    "describe_context",
    "is_component_type",
    "merge_data",
    "merge_data_or_fn",
    "merge_options",
    "normalize_directives",
    "normalize_inject",
    "normalize_props",
    "plain_set",
    "resolve_asset",
    "validate_component_name",
]
