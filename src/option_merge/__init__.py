"""
option_merge — motor declarativo de merge de opções por estratégia.

Dado um objeto de opções pai e um filho, produz um objeto mesclado
aplicando uma estratégia por campo (hooks, assets, watchers, data,
hashes simples), resolvendo `extends`/`mixins` e normalizando sintaxes
abreviadas antes do merge. Assets mesclados ficam em registries
encadeados, consultados por `resolve_asset`.

Arquitetura em alto nível:
    - core.options   → estratégias, normalizadores, driver e resolver
    - core.component → tipos de componente (extend / mixin / instância)
    - core.config    → settings do motor e loaders YAML/JSON
    - core.errors    → catálogo tipado de avisos

Limites explícitos:
    - Não executa nem interpreta as opções mescladas
    - Não implementa reatividade (o setter é um colaborador externo)
"""

from .core.component import Component
from .core.config import MergeSettings, load_options_file, load_settings
from .core.constants import ASSET_TYPES, LIFECYCLE_HOOKS
from .core.errors import MergeWarning
from .core.options import (
    AssetRegistry,
    MergeContext,
    OptionMerger,
    StrategyRegistry,
    merge_options,
    resolve_asset,
)

__all__ = [
    "ASSET_TYPES",
    "LIFECYCLE_HOOKS",
    "AssetRegistry",
    "Component",
    "MergeContext",
    "MergeSettings",
    "MergeWarning",
    "OptionMerger",
    "StrategyRegistry",
    "load_options_file",
    "load_settings",
    "merge_options",
    "resolve_asset",
]
__version__ = "0.1.0"
