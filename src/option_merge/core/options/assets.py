# src/option_merge/core/options/assets.py
"""
Resolução e validação de assets nomeados.

`resolve_asset` procura um asset (component, directive, filter) em um
objeto de opções já mesclado, tentando três grafias do nome:

    1. exata            (`my-button`)
    2. camelCase        (`myButton`)
    3. PascalCase       (`MyButton`)

Registros locais em qualquer grafia vencem registros herdados; só então
a cadeia de ancestrais do `AssetRegistry` é consultada, na mesma ordem.

`validate_component_name` aplica as regras de nome de componente e
apenas avisa quando são violadas.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from option_merge.core.errors import asset_unresolved, component_invalid_name, component_reserved_name

from .context import MergeContext
from .util import camelize, capitalize, has_own, is_plain_object


_COMPONENT_NAME_RE = re.compile(r"[a-zA-Z][\w-]*", re.ASCII)


def validate_component_name(name: str, ctx: MergeContext) -> bool:
    valid = True
    if not isinstance(name, str) or not _COMPONENT_NAME_RE.fullmatch(name):
        ctx.report(component_invalid_name(name=str(name)))
        valid = False
    if isinstance(name, str) and (ctx.settings.is_built_in_tag(name) or ctx.settings.is_reserved_tag(name)):
        ctx.report(component_reserved_name(name=name))
        valid = False
    return valid


def check_components(options: Mapping[str, Any], ctx: MergeContext) -> None:
    components = options.get("components")
    if not is_plain_object(components):
        return
    for name in components:
        validate_component_name(name, ctx)


def resolve_asset(
    options: Mapping[str, Any],
    category: str,
    name: Any,
    warn_missing: bool = False,
    *,
    ctx: Optional[MergeContext] = None,
) -> Any:
    """
    Resolve `name` na categoria `category` de um objeto de opções mesclado.

    Retorna o asset encontrado ou None. Ids que não são `str` resolvem
    sempre para None, sem aviso.

    Avisos:
        `warn_missing=True` só produz `ASSET_UNRESOLVED` quando um `ctx` é
        informado; sem `ctx` não há sink e a ausência apenas retorna None.
        `OptionMerger.resolve_asset` e `Component.resolve_asset` repassam
        o contexto do merger automaticamente.
    """
    if not isinstance(name, str):
        return None

    assets = options.get(category)
    if not is_plain_object(assets):
        assets = {}

    camelized = camelize(name)
    pascal = capitalize(camelized)

    for candidate in (name, camelized, pascal):
        if has_own(assets, candidate):
            return assets[candidate]

    for candidate in (name, camelized, pascal):
        found = assets.get(candidate)
        if found is not None:
            return found

    if warn_missing and ctx is not None:
        ctx.report(asset_unresolved(category=category, name=name), options)
    return None
