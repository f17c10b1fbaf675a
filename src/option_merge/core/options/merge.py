# src/option_merge/core/options/merge.py
"""
Driver do merge de opções.

Este módulo define o `OptionMerger`, responsável por combinar um objeto de
opções pai com um objeto de opções filho, e a função `merge_options`,
atalho para um merger com registry e contexto padrão.

Algoritmo (v1):
    1. Um tipo de componente no lugar do filho é trocado por seu `options`
    2. Nomes em `child["components"]` são validados (apenas avisos)
    3. props / inject / directives do filho são normalizados in place
    4. `extends` é mesclado sob o pai
    5. cada item de `mixins` é mesclado sob o pai, da esquerda para a direita
    6. cada chave do pai, e depois cada chave só do filho, passa pela
       estratégia registrada (ou pela default)

A ordem efetiva de aplicação é: pai → extends → mixins[0] → ... → filho.

Invariantes:
    - Cada campo é processado exatamente uma vez
    - O resultado é sempre um dict novo
    - O pai nunca é mutado; o filho só é mutado pelos normalizadores

Limites explícitos:
    - Não executa nem interpreta as opções mescladas
    - Não detecta ciclos em `extends`/`mixins`
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, MutableMapping, Optional

from .assets import check_components, resolve_asset
from .context import MergeContext
from .normalize import normalize_directives, normalize_inject, normalize_props
from .strategies import StrategyRegistry


def is_component_type(value: Any) -> bool:
    return isinstance(value, type) and isinstance(getattr(value, "options", None), Mapping)


def _ancestor_sources(child: Mapping[str, Any]) -> List[Any]:
    sources: List[Any] = []
    extends_from = child.get("extends")
    if extends_from is not None:
        sources.append(extends_from)
    mixins: Iterable[Any] = child.get("mixins") or ()
    sources.extend(mixins)
    return sources


class OptionMerger:
    """Merge de opções com registry de estratégias e contexto explícitos."""

    def __init__(
        self,
        *,
        strategies: Optional[StrategyRegistry] = None,
        ctx: Optional[MergeContext] = None,
    ):
        self.strategies: StrategyRegistry = strategies if strategies is not None else StrategyRegistry.default()
        self.ctx: MergeContext = ctx if ctx is not None else MergeContext()

    def merge(
        self,
        parent: Mapping[str, Any],
        child: Any,
        vm: Any = None,
    ) -> Dict[str, Any]:
        if is_component_type(child):
            child = child.options

        if self.ctx.settings.validate_component_names:
            check_components(child, self.ctx)

        self.normalize(child, vm)

        for source in _ancestor_sources(child):
            parent = self.merge(parent, source, vm)

        options: Dict[str, Any] = {}
        for key in parent:
            options[key] = self._merge_field(key, parent, child, vm)
        for key in child:
            if key not in parent:
                options[key] = self._merge_field(key, parent, child, vm)
        return options

    def normalize(self, options: MutableMapping[str, Any], vm: Any = None) -> MutableMapping[str, Any]:
        normalize_props(options, vm, self.ctx)
        normalize_inject(options, vm, self.ctx)
        normalize_directives(options)
        return options

    def resolve_asset(
        self,
        options: Mapping[str, Any],
        category: str,
        name: Any,
        warn_missing: bool = False,
    ) -> Any:
        return resolve_asset(options, category, name, warn_missing, ctx=self.ctx)

    def _merge_field(self, key: str, parent: Mapping[str, Any], child: Mapping[str, Any], vm: Any) -> Any:
        strategy = self.strategies.resolve(key)
        return strategy(parent.get(key), child.get(key), vm, key, self.ctx)


def merge_options(
    parent: Mapping[str, Any],
    child: Any,
    vm: Any = None,
    *,
    merger: Optional[OptionMerger] = None,
) -> Dict[str, Any]:
    """Mescla `child` sobre `parent`; sem `merger`, usa registry e contexto padrão."""
    return (merger or OptionMerger()).merge(parent, child, vm)
